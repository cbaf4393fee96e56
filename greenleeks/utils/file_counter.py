"""
Bounded file counting for the directory about to be committed.
"""

import os
from pathlib import Path

from loguru import logger

from greenleeks.errors import FileCountLimitExceeded, WalkIOError

CONTROL_DIR_NAME = ".git"


def count_files(root: Path, max_files: int) -> int:
    """
    Count non-directory entries below ``root``, stopping once ``max_files`` is exceeded.

    Symlinks are counted as files and never followed. Every directory named
    ``.git`` is skipped, the top-level control directory as well as nested ones
    such as vendored checkouts.
    """
    count = 0
    pending = [os.fspath(root)]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=False):
                        if entry.name != CONTROL_DIR_NAME:
                            pending.append(entry.path)
                        continue

                    count += 1
                    if count > max_files:
                        logger.debug(f"Stopped walk at {entry.path}: {count} files exceeds {max_files}")
                        raise FileCountLimitExceeded(count, max_files)
        except OSError as e:
            raise WalkIOError(f"failed to walk {current}: {e}") from e

    logger.debug(f"Counted {count} files under {root}")
    return count
