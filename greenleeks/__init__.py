"""
Greenleeks - put a directory under git control with a single initial commit.

Detects whether a directory is already tracked; if not, initializes a
repository, checks the file count against a safety limit and commits
everything as the author configured in ``~/.gitconfig``.
"""

__version__ = "0.1.0"

from greenleeks.core import Greenleeks, RunResult, RunState
from greenleeks.config.settings import Settings

__all__ = ["Greenleeks", "RunResult", "RunState", "Settings"]
