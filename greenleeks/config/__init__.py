"""Configuration: run settings and git identity."""

from greenleeks.config.gitconfig import AuthorInfo, expand_config_path, load_author_info
from greenleeks.config.settings import LogFormat, Settings

__all__ = ["AuthorInfo", "LogFormat", "Settings", "expand_config_path", "load_author_info"]
