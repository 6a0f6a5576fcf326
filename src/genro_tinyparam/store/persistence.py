# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Atomic replacement of the backing file.

The new content is written to ``<path>.tmp`` next to the target, flushed,
optionally fsynced, and renamed over the target with ``os.replace``. The
rename is the atomicity boundary: other readers of the file see either the
old or the new content, never a partial write.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..exceptions import StoreIOError

logger = logging.getLogger(__name__)

TMP_SUFFIX = '.tmp'


def tmp_path_for(path: Path) -> Path:
    """Return the temporary file path colocated with path."""
    return path.with_name(path.name + TMP_SUFFIX)


def atomic_write(path: Path, data: bytes, fsync: bool = True) -> None:
    """Replace the content of path with data, atomically.

    The permission bits of an existing path are carried over to the new
    file. On failure the temporary file is removed and path is left
    untouched.

    Raises:
        StoreIOError: If writing the temporary file or renaming it fails.
    """
    tmp = tmp_path_for(path)
    try:
        with open(tmp, 'wb') as fh:
            fh.write(data)
            fh.flush()
            if fsync:
                os.fsync(fh.fileno())
        _copy_mode(path, tmp)
    except OSError as exc:
        _discard(tmp)
        logger.error("Failed to write temporary file %s: %s", tmp, exc)
        raise StoreIOError(f"Failed to write temporary file {tmp}: {exc}", str(tmp)) from exc

    try:
        os.replace(tmp, path)
    except OSError as exc:
        _discard(tmp)
        logger.error("Failed to rename %s to %s: %s", tmp, path, exc)
        raise StoreIOError(f"Failed to rename {tmp} to {path}: {exc}", str(path)) from exc
    logger.debug("Replaced %s (%d bytes)", path, len(data))


def _copy_mode(path: Path, tmp: Path) -> None:
    try:
        st = os.stat(path)
    except FileNotFoundError:
        return
    os.chmod(tmp, stat.S_IMODE(st.st_mode))


def _discard(tmp: Path) -> None:
    try:
        tmp.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary file %s: %s", tmp, exc)
