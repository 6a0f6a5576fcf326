# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TinyParam exceptions."""

from __future__ import annotations


class TinyParamError(Exception):
    """Base exception for TinyParam errors."""

    pass


class InvalidArgumentError(TinyParamError, ValueError):
    """Raised when a handle, key or value is missing or malformed."""

    pass


class StoreClosedError(InvalidArgumentError):
    """Raised when an operation is attempted on a closed store."""

    pass


class NotFoundError(TinyParamError, LookupError):
    """Raised when a file or a dotted key cannot be found."""

    pass


class PathNotFoundError(NotFoundError):
    """Raised when a segment of a dotted key has no matching child."""

    def __init__(self, key: str, segment: str) -> None:
        self.key = key
        self.segment = segment
        super().__init__(f"Path segment '{segment}' not found in '{key}'")


class NotALeafError(NotFoundError):
    """Raised when a dotted key crosses a leaf or ends on an object."""

    def __init__(self, key: str, segment: str, reason: str) -> None:
        self.key = key
        self.segment = segment
        super().__init__(f"'{segment}' {reason} in '{key}'")


class StoreFileNotFoundError(NotFoundError):
    """Raised when the backing file does not exist."""

    pass


class ParseError(TinyParamError, ValueError):
    """Raised when file content is not a well-formed parameter tree."""

    def __init__(
        self, message: str, lineno: int | None = None, colno: int | None = None
    ) -> None:
        self.lineno = lineno
        self.colno = colno
        if lineno is not None:
            message = f"{message} (line {lineno}, column {colno})"
        super().__init__(message)


class SerializationError(TinyParamError):
    """Raised when the tree cannot be serialized back to text."""

    pass


class StoreIOError(TinyParamError):
    """Raised when reading, writing, renaming or reopening a file fails.

    The originating OSError is available as ``__cause__``.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)
