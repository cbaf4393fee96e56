"""
Core Greenleeks engine that sequences a single run.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional

from loguru import logger

from .config.gitconfig import AuthorInfo, expand_config_path, load_author_info
from .config.settings import Settings
from .errors import FileCountLimitExceeded, GreenleeksError
from .git_ops.repository import (
    BOILERPLATE_MESSAGE,
    GitRepository,
    initialize_repository,
    is_under_version_control,
    stage_and_commit,
)
from .utils.file_counter import count_files


class RunState(str, Enum):
    """Stages a run passes through."""

    IDLE = "idle"
    CONFIG_LOADED = "config_loaded"
    CHECKED = "checked"
    ALREADY_TRACKED = "already_tracked"
    INITIALIZED = "initialized"
    COUNTED = "counted"
    COMMITTED = "committed"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunResult:
    """Outcome of a successful run."""

    root: Path
    final_state: RunState
    author: Optional[AuthorInfo] = None
    file_count: Optional[int] = None
    commit_sha: Optional[str] = None

    @property
    def already_tracked(self) -> bool:
        return self.final_state == RunState.ALREADY_TRACKED

    @property
    def committed(self) -> bool:
        return self.commit_sha is not None


@dataclass
class Greenleeks:
    """Puts a directory under git control with one initial commit."""

    settings: Settings = field(default_factory=Settings)
    state: RunState = RunState.IDLE
    history: List[RunState] = field(default_factory=list)

    def __post_init__(self):
        self.history.append(self.state)

    def _transition(self, state: RunState) -> None:
        logger.debug(f"{self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)

    @contextmanager
    def _step(self, description: str) -> Iterator[None]:
        try:
            yield
        except GreenleeksError as e:
            self._transition(RunState.FAILED)
            raise e.with_step(description)

    def run(self) -> RunResult:
        """Run every step in order, stopping at the first failure."""
        if self.state != RunState.IDLE:
            raise RuntimeError(f"run already finished in state {self.state.value}")

        root = self.settings.root_dir
        result = RunResult(root=root, final_state=self.state)

        with self._step("configure git user info"):
            result.author = load_author_info(expand_config_path(self.settings.gitconfig))
        self._transition(RunState.CONFIG_LOADED)

        with self._step("check if directory is under git control"):
            tracked = is_under_version_control(root)
        self._transition(RunState.CHECKED)

        if tracked:
            logger.info("Directory is already under git control.")
            self._warn_if_uncommitted(root)
            self._transition(RunState.ALREADY_TRACKED)
            result.final_state = self.state
            return result

        logger.info("Initializing git repository...")
        with self._step("initialize git repository"):
            initialize_repository(root)
        self._transition(RunState.INITIALIZED)

        with self._step("count files"):
            try:
                result.file_count = count_files(root, self.settings.max_files)
            except FileCountLimitExceeded as e:
                result.file_count = e.count
                raise
        self._transition(RunState.COUNTED)

        with self._step("commit"):
            result.commit_sha = stage_and_commit(root, result.author, BOILERPLATE_MESSAGE)
        self._transition(RunState.COMMITTED)

        logger.info("Git initialization successful.")
        self._transition(RunState.DONE)
        result.final_state = self.state
        return result

    def _warn_if_uncommitted(self, root: Path) -> None:
        try:
            with GitRepository(root, search_parent_directories=True) as repository:
                if not repository.has_commits:
                    logger.warning(
                        f"Repository at {root} has no commits yet; an earlier run may have been "
                        "interrupted before committing. Leaving it untouched."
                    )
        except GreenleeksError as e:
            logger.debug(f"Skipped commit check: {e}")
