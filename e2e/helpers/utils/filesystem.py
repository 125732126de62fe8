"""
Directory setup and cleanup for test workspaces
"""

import os
import shutil
from pathlib import Path
from typing import Union

from helpers.logging_config import log_directory_cleared, log_directory_created

PathLike = Union[str, os.PathLike]


def ensure_directory(path: PathLike) -> Path:
    """
    Create path if it does not exist yet.
    Parents are not created; a missing parent raises FileNotFoundError.
    """
    target = Path(path)
    if not target.exists():
        os.mkdir(target)
        log_directory_created(str(target))
    return target


def clear_directory(path: PathLike) -> None:
    """
    Delete everything inside path but keep path itself.

    Symlinks are unlinked rather than followed. Subdirectories go through
    shutil.rmtree, which works on file descriptors where the platform
    supports it (see shutil.rmtree.avoids_symlink_attacks).
    """
    target = Path(path)
    if not target.is_dir():
        return

    removed = 0
    with os.scandir(target) as entries:
        for entry in list(entries):
            if entry.is_dir(follow_symlinks=False):
                shutil.rmtree(entry.path)
            else:
                os.unlink(entry.path)
            removed += 1

    log_directory_cleared(str(target), removed)
