"""
Exception types raised by Greenleeks.

Each step of a run raises its own error class so the CLI can report
which step failed without parsing messages.
"""

from typing import Optional


class GreenleeksError(Exception):
    """Base class for all Greenleeks errors."""

    step: Optional[str] = None

    def with_step(self, step: str) -> "GreenleeksError":
        """Record the orchestrator step this error was raised in."""
        self.step = step
        return self

    def describe(self) -> str:
        if self.step:
            return f"failed to {self.step}: {self}"
        return str(self)


class LogSetupError(GreenleeksError):
    """Raised when the logging sink cannot be configured."""


class ConfigExpandError(GreenleeksError):
    """Raised when the git configuration path cannot be expanded."""


class ConfigReadError(GreenleeksError):
    """Raised when the git configuration file cannot be read or parsed."""


class RepoOpenError(GreenleeksError):
    """Raised when a repository cannot be opened for a reason other than absence."""


class RepoInitError(GreenleeksError):
    """Raised when a new repository cannot be created."""


class FileCountLimitExceeded(GreenleeksError):
    """Raised when the directory holds more files than allowed."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"too many files ({count}), limit is {limit}")


class WalkIOError(GreenleeksError):
    """Raised when the directory walk fails."""


class StageError(GreenleeksError):
    """Raised when files cannot be staged."""


class CommitError(GreenleeksError):
    """Raised when the commit cannot be created."""
