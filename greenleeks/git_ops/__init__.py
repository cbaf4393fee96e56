"""Version control operations backed by GitPython."""

from greenleeks.git_ops.repository import (
    BOILERPLATE_MESSAGE,
    GitRepository,
    initialize_repository,
    is_under_version_control,
    stage_and_commit,
)

__all__ = [
    "BOILERPLATE_MESSAGE",
    "GitRepository",
    "initialize_repository",
    "is_under_version_control",
    "stage_and_commit",
]
