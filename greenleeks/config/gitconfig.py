"""
Author identity lookup from a git configuration file.
"""

import configparser
from pathlib import Path

from git import Actor, GitConfigParser
from loguru import logger
from pydantic import BaseModel, ConfigDict

from greenleeks.errors import ConfigExpandError, ConfigReadError

DEFAULT_AUTHOR_NAME = "Your Name"
DEFAULT_AUTHOR_EMAIL = "your.email@example.com"
USER_SECTION = "user"


class AuthorInfo(BaseModel):
    """Name and email stamped on the commit signature."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_AUTHOR_NAME
    email: str = DEFAULT_AUTHOR_EMAIL

    def as_actor(self) -> Actor:
        return Actor(self.name, self.email)

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


def expand_config_path(raw_path: str) -> Path:
    """Expand a leading ``~`` into an absolute path."""
    try:
        return Path(raw_path).expanduser().absolute()
    except RuntimeError as e:
        raise ConfigExpandError(f"cannot expand {raw_path!r}: {e}") from e


def _lookup(parser: GitConfigParser, option: str) -> str:
    if not parser.has_option(USER_SECTION, option):
        return ""
    return str(parser.get(USER_SECTION, option)).strip()


def load_author_info(config_path: Path) -> AuthorInfo:
    """
    Read ``user.name`` and ``user.email`` from a git configuration file.

    Keys that are missing or empty keep their placeholder values. The file
    itself must exist and parse.
    """
    try:
        with open(config_path, "rb"):
            pass
    except OSError as e:
        raise ConfigReadError(f"cannot read {config_path}: {e}") from e

    parser = GitConfigParser(str(config_path), read_only=True)
    try:
        parser.read()
        name = _lookup(parser, "name")
        email = _lookup(parser, "email")
    except configparser.Error as e:
        raise ConfigReadError(f"cannot parse {config_path}: {e}") from e
    finally:
        parser.release()

    author = AuthorInfo(
        name=name or DEFAULT_AUTHOR_NAME,
        email=email or DEFAULT_AUTHOR_EMAIL,
    )
    logger.debug(f"Resolved author {author} from {config_path}")
    return author
