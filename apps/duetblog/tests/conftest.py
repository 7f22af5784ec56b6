import pytest

from duetblog.lib.config import BlogConfig
from duetblog.lib.store import ContentStore


@pytest.fixture
def posts_dir(tmp_path):
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "hello-world.txt").write_text("Hello <b>world</b>", encoding="utf-8")
    (posts / "second-post.txt").write_text("$5 well spent", encoding="utf-8")
    (posts / "notes.md").write_text("not a post", encoding="utf-8")
    return posts


@pytest.fixture
def store(posts_dir):
    return ContentStore(posts_dir)


@pytest.fixture
def config(posts_dir):
    return BlogConfig(posts_dir=posts_dir)
