"""Configuration for duetblog.

Settings come from an optional duetblog.yaml:
- title, author: shown by the layout and footer
- posts_dir, post_suffix: where the content store reads posts
- host, port: where `duetblog serve` listens
- client_script, import_map: what the bootstrap shell loads on the client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

log = logging.getLogger(__name__)

CONFIG_FILE = "duetblog.yaml"
POSTS_DIR_ENV = "DUETBLOG_POSTS_DIR"

DEFAULT_IMPORT_MAP = {
    "react": "https://esm.sh/react@canary",
    "react-dom/client": "https://esm.sh/react-dom@canary/client",
}


class BlogConfig(BaseModel):
    """Full duetblog.yaml configuration"""

    title: str = "My blog"
    author: str = "Jae Doe"
    posts_dir: Path = Path("posts")
    post_suffix: str = ".txt"
    host: str = "127.0.0.1"
    port: int = 3000
    client_script: Path | None = None
    import_map: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_IMPORT_MAP))

    @classmethod
    def load(cls, path: Path) -> "BlogConfig":
        """Load config from yaml file, or defaults if it does not exist"""
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)


def resolve_posts_dir(config: BlogConfig, override: str | Path | None = None) -> Path:
    """
    Resolve the posts directory.

    Priority:
    1. Explicit override (e.g., --posts-dir)
    2. posts_dir set in duetblog.yaml
    3. DUETBLOG_POSTS_DIR environment variable
    4. ./posts (default)
    """
    if override:
        root = Path(override).expanduser()
        log.debug(f"Using posts dir override: {root}")
        return root

    if "posts_dir" in config.model_fields_set:
        root = config.posts_dir.expanduser()
        log.debug(f"Using config posts dir: {root}")
        return root

    env_dir = os.environ.get(POSTS_DIR_ENV)
    if env_dir:
        root = Path(env_dir).expanduser()
        log.debug(f"Using {POSTS_DIR_ENV} from env: {root}")
        return root

    log.debug(f"Using default posts dir: {config.posts_dir}")
    return config.posts_dir


def load_config(
    path: Path | None = None,
    posts_dir: str | Path | None = None,
) -> BlogConfig:
    """Load config and apply the posts dir resolution order.

    Args:
        path: Config file. Defaults to ./duetblog.yaml.
        posts_dir: Explicit posts directory, overriding everything else.
    """
    config = BlogConfig.load(path or Path.cwd() / CONFIG_FILE)
    resolved = resolve_posts_dir(config, posts_dir)
    return config.model_copy(update={"posts_dir": resolved})
