from pathlib import Path

from duetblog.lib.config import (
    DEFAULT_IMPORT_MAP,
    POSTS_DIR_ENV,
    BlogConfig,
    load_config,
    resolve_posts_dir,
)


def test_missing_file_gives_defaults(tmp_path):
    config = BlogConfig.load(tmp_path / "duetblog.yaml")
    assert config.title == "My blog"
    assert config.author == "Jae Doe"
    assert config.port == 3000
    assert config.import_map == DEFAULT_IMPORT_MAP
    assert config.client_script is None


def test_load_yaml(tmp_path):
    path = tmp_path / "duetblog.yaml"
    path.write_text("title: Notes\nport: 8080\nposts_dir: content\n")
    config = BlogConfig.load(path)
    assert config.title == "Notes"
    assert config.port == 8080
    assert config.posts_dir == Path("content")


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "duetblog.yaml"
    path.write_text("")
    assert BlogConfig.load(path) == BlogConfig()


def test_override_wins(monkeypatch):
    monkeypatch.setenv(POSTS_DIR_ENV, "/from/env")
    config = BlogConfig(posts_dir=Path("from-config"))
    assert resolve_posts_dir(config, "/explicit") == Path("/explicit")


def test_config_value_beats_env(monkeypatch):
    monkeypatch.setenv(POSTS_DIR_ENV, "/from/env")
    config = BlogConfig(posts_dir=Path("from-config"))
    assert resolve_posts_dir(config) == Path("from-config")


def test_env_beats_default(monkeypatch):
    monkeypatch.setenv(POSTS_DIR_ENV, "/from/env")
    assert resolve_posts_dir(BlogConfig()) == Path("/from/env")


def test_default(monkeypatch):
    monkeypatch.delenv(POSTS_DIR_ENV, raising=False)
    assert resolve_posts_dir(BlogConfig()) == Path("posts")


def test_load_config_applies_resolution(tmp_path, monkeypatch):
    monkeypatch.setenv(POSTS_DIR_ENV, str(tmp_path / "env-posts"))
    config = load_config(tmp_path / "missing.yaml")
    assert config.posts_dir == tmp_path / "env-posts"

    config = load_config(tmp_path / "missing.yaml", posts_dir=tmp_path / "cli-posts")
    assert config.posts_dir == tmp_path / "cli-posts"
