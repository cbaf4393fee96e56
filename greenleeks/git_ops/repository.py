"""
Git repository operations: detection, initialization, staging and committing.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from git import GitCommandError, InvalidGitRepositoryError, Repo
from git.exc import GitError
from loguru import logger

from greenleeks.config.gitconfig import AuthorInfo
from greenleeks.errors import CommitError, RepoInitError, RepoOpenError, StageError

BOILERPLATE_MESSAGE = "Boilerplate"


def nearest_existing_directory(path: Path) -> Path:
    """Return ``path`` or its closest ancestor that exists on disk."""
    current = Path(path).absolute()
    while not current.exists() and current != current.parent:
        current = current.parent
    return current


def is_under_version_control(path: Path) -> bool:
    """
    Check whether ``path`` or one of its parents holds a git repository.

    A ``path`` that does not exist yet is searched from its closest existing
    ancestor. Absence of a repository and bare repositories (no worktree)
    both count as "not under control"; any other failure is raised.
    """
    search_from = nearest_existing_directory(path)
    try:
        repo = Repo(search_from, search_parent_directories=True)
    except InvalidGitRepositoryError:
        logger.debug(f"No git repository found for {path}")
        return False
    except (GitError, OSError) as e:
        raise RepoOpenError(f"failed to open repository at {path}: {e}") from e

    try:
        if repo.bare:
            logger.debug(f"Repository at {repo.git_dir} is bare, no worktree")
            return False
        logger.debug(f"Found git repository at {repo.working_dir}")
        return True
    finally:
        repo.close()


def initialize_repository(path: Path) -> None:
    """Create a new non-bare repository at ``path``, creating missing directories."""
    try:
        repo = Repo.init(path, bare=False)
    except (GitError, OSError) as e:
        raise RepoInitError(f"failed to initialize git repository at {path}: {e}") from e
    logger.info(f"Initialized empty git repository in {repo.git_dir}")
    repo.close()


class GitRepository:
    """An existing repository with a worktree."""

    def __init__(self, repo_path: Path, search_parent_directories: bool = False):
        self.repo_path = repo_path
        open_path = nearest_existing_directory(repo_path) if search_parent_directories else repo_path
        try:
            self.repo = Repo(open_path, search_parent_directories=search_parent_directories)
        except (GitError, OSError) as e:
            raise RepoOpenError(f"failed to open repository at {repo_path}: {e}") from e
        if self.repo.bare:
            self.repo.close()
            raise RepoOpenError(f"repository at {repo_path} has no worktree")

    @property
    def has_commits(self) -> bool:
        return self.repo.head.is_valid()

    def stage_all(self) -> None:
        """Stage every path in the worktree."""
        try:
            self.repo.git.add(".")
        except GitCommandError as e:
            raise StageError(f"failed to add all files: {e}") from e
        logger.info(f"Staged {len(self.repo.index.entries)} files")

    def commit(self, message: str, author: AuthorInfo, when: Optional[datetime] = None) -> str:
        """
        Commit the index, signing as ``author`` for both author and committer.

        Returns the hex SHA of the new commit.
        """
        index = self.repo.index
        if not index.entries:
            raise CommitError("nothing to commit, no files staged")

        when = when or datetime.now(timezone.utc).astimezone()
        actor = author.as_actor()
        try:
            commit = index.commit(
                message,
                author=actor,
                committer=actor,
                author_date=when,
                commit_date=when,
            )
        except (GitError, ValueError, OSError) as e:
            raise CommitError(f"failed to commit: {e}") from e

        logger.info(f"Created commit {commit.hexsha[:8]}: {message}")
        return commit.hexsha

    def close(self) -> None:
        self.repo.close()

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def stage_and_commit(repo_path: Path, author: AuthorInfo, message: str = BOILERPLATE_MESSAGE) -> str:
    """Stage everything under ``repo_path`` and create a single commit."""
    with GitRepository(repo_path) as repository:
        repository.stage_all()
        return repository.commit(message, author)
