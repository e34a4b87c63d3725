import os
from functools import lru_cache
from pathlib import Path


@lru_cache
def _resolve_share_dir() -> Path:
    """Resolve the base directory for diffrender configuration and logs."""
    env_dir = os.getenv("DIFFRENDER_SHARE_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".diffrender"


def get_share_dir() -> Path:
    """Get the share directory path, without creating it."""
    return _resolve_share_dir()


def get_config_file() -> Path:
    return get_share_dir() / "config.toml"
