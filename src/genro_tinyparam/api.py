# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Handle-based functions over ParamStore.

These mirror the open/get/set/close surface of the store for callers that
prefer passing a handle around. A None handle is rejected by get() and
set() and ignored by close().

Example:
    >>> import genro_tinyparam as tp
    >>> h = tp.open('params.json')
    >>> tp.get(h, 'system.audio.volume')
    '50'
    >>> tp.set(h, 'system.audio.volume', '75')
    >>> tp.close(h)
"""

from __future__ import annotations

import os
from typing import Any

from .exceptions import InvalidArgumentError
from .store import ParamStore


def open(path: str | os.PathLike, **options: Any) -> ParamStore:
    """Open a parameter file. Options are passed to ParamStore.open()."""
    return ParamStore.open(path, **options)


def get(handle: ParamStore | None, key: str) -> str:
    """Return the string at a dotted key."""
    return _require_handle(handle).get(key)


def set(handle: ParamStore | None, key: str, value: str) -> None:
    """Replace the string at an existing dotted key and persist it."""
    _require_handle(handle).set(key, value)


def close(handle: ParamStore | None) -> None:
    """Close a handle. None is a no-op."""
    if handle is not None:
        handle.close()


def _require_handle(handle: ParamStore | None) -> ParamStore:
    if not isinstance(handle, ParamStore):
        raise InvalidArgumentError(f"Invalid handle: {handle!r}")
    return handle
