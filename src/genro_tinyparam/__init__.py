# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TinyParam - A small file-backed parameter store.

Parameters live in a JSON file of nested objects with string leaves and are
addressed by dotted keys such as 'system.audio.volume'. Every set is written
back to disk atomically before it returns.
"""

__version__ = "0.1.0"

from .api import close, get, open, set
from .exceptions import (
    InvalidArgumentError,
    NotALeafError,
    NotFoundError,
    ParseError,
    PathNotFoundError,
    SerializationError,
    StoreClosedError,
    StoreFileNotFoundError,
    StoreIOError,
    TinyParamError,
)
from .node import ParamNode
from .resolver import resolve
from .store import ParamStore
from .tree import ParamTree

__all__ = [
    # Core classes
    "ParamStore",
    "ParamTree",
    "ParamNode",
    "resolve",
    # Handle functions
    "open",
    "get",
    "set",
    "close",
    # Exceptions
    "TinyParamError",
    "InvalidArgumentError",
    "StoreClosedError",
    "NotFoundError",
    "PathNotFoundError",
    "NotALeafError",
    "StoreFileNotFoundError",
    "ParseError",
    "SerializationError",
    "StoreIOError",
]
