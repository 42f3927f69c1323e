"""Directory traversal that yields the sizes of regular files."""
from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterator

from sizeplot.utils.constants import MIN_FILE_SIZE
from sizeplot.utils.exceptions import ScanException
from sizeplot.utils.pretty.color_logger import RichLog


def iter_file_sizes(root: str | Path, min_size: int = MIN_FILE_SIZE) -> Iterator[int]:
    """
    Lazily yield the size of every regular file under ``root`` larger than ``min_size``.

    Symbolic links are neither followed nor counted. Directories and files that cannot
    be read are skipped.

    Raises:
        ScanException: if ``root`` does not exist or is not a directory.
    """
    root = Path(root).expanduser()
    if not (root.exists() and root.is_dir()):
        raise ScanException(root)

    def _on_error(error: OSError) -> None:
        RichLog.debug(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    for dirpath, _, filenames in os.walk(root, onerror=_on_error, followlinks=False):
        for name in filenames:
            path = os.path.join(dirpath, name)
            try:
                info = os.lstat(path)
            except OSError as e:
                RichLog.debug(f"Skipping unreadable entry {path}: {e}")
                continue
            if not stat.S_ISREG(info.st_mode):
                continue
            if info.st_size > min_size:
                yield info.st_size
