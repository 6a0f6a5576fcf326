# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ParamStore - a JSON file of string parameters behind one lock.

This module provides the ParamStore class, the handle returned by opening a
parameter file. The file is read and parsed once; afterwards every get and
set works against the in-memory ParamTree, and every set persists the full
tree back to disk before it returns.

Key Features:
    - **Dotted keys**: 'system.audio.volume' addresses a leaf string
    - **Fixed shape**: set only replaces existing leaves, never adds keys
    - **Atomic persistence**: write '<path>.tmp', then rename over the file
    - **Thread safety**: a single exclusive lock serializes gets and sets

Write protocol:
    set() resolves the key against a copy of the live tree, assigns the new
    value in the copy, serializes it and atomically replaces the backing
    file. The copy becomes the live tree only once the rename succeeded, so
    a failed set leaves both the tree and the file as they were, and no
    concurrent get can see a value that is not on disk.

    After the rename the kept-open file object is reopened against the new
    file. A failure at that point does not fail the set: the new content is
    already durable. The failure is logged and the file object is reopened
    on the next access to ``ParamStore.resource``.

Closing:
    close() must only be called once every other thread is done with the
    handle. The store does not guard against a close racing an in-flight
    get or set beyond taking the lock.

Example:
    Basic usage::

        with ParamStore.open('params.json') as store:
            store.get('system.audio.volume')   # '50'
            store.set('system.audio.volume', '75')
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, BinaryIO

from ..exceptions import (
    InvalidArgumentError,
    NotFoundError,
    ParseError,
    SerializationError,
    StoreClosedError,
    StoreFileNotFoundError,
    StoreIOError,
)
from ..parsers import parse_json, serialize_json
from ..parsers.jsontree import DEFAULT_INDENT
from ..resolver import resolve
from ..tree import ParamTree
from .persistence import atomic_write

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8'


def _open_file(path: Path) -> BinaryIO:
    return open(path, 'rb')


class ParamStore:
    """Handle on an open parameter file.

    Use ParamStore.open() to create one; the constructor expects an already
    parsed tree and an open file object.

    Example:
        >>> store = ParamStore.open('params.json')
        >>> store.get('system.audio.volume')
        '50'
        >>> store.set('system.audio.volume', '75')
        >>> store.close()
    """

    def __init__(
        self,
        path: Path,
        tree: ParamTree,
        resource: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
        indent: int | None = DEFAULT_INDENT,
        fsync: bool = True,
    ) -> None:
        self._path = path
        self._tree: ParamTree | None = tree
        self._resource: BinaryIO | None = resource
        self._lock = threading.Lock()
        self._encoding = encoding
        self._indent = indent
        self._fsync = fsync

    @classmethod
    def open(
        cls,
        path: str | os.PathLike,
        encoding: str = DEFAULT_ENCODING,
        indent: int | None = DEFAULT_INDENT,
        fsync: bool = True,
    ) -> ParamStore:
        """Open and parse a parameter file.

        Args:
            path: Location of the JSON file.
            encoding: Text encoding used to read and write the file.
            indent: Indentation of the JSON written by set(). None writes
                a single line.
            fsync: If True, fsync the temporary file before renaming it.

        Returns:
            An open ParamStore.

        Raises:
            InvalidArgumentError: If path is empty or not path-like.
            StoreFileNotFoundError: If the file does not exist.
            StoreIOError: If the file cannot be opened or read.
            ParseError: If the content is not a tree of string parameters.
        """
        if not isinstance(path, (str, os.PathLike)) or not os.fspath(path):
            raise InvalidArgumentError(f"Path must be a non-empty path, got {path!r}")
        file_path = Path(path)

        try:
            resource = _open_file(file_path)
        except FileNotFoundError as exc:
            logger.error("File %s does not exist", file_path)
            raise StoreFileNotFoundError(f"File {file_path} does not exist") from exc
        except OSError as exc:
            logger.error("Failed to open file %s: %s", file_path, exc)
            raise StoreIOError(f"Failed to open file {file_path}: {exc}", str(file_path)) from exc

        try:
            tree = _read_tree(resource, file_path, encoding)
        except BaseException:
            resource.close()
            raise

        logger.debug("Opened %s with %d top-level keys", file_path, len(tree))
        return cls(file_path, tree, resource, encoding=encoding, indent=indent, fsync=fsync)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        state = 'closed' if self.closed else 'open'
        return f"ParamStore({str(self._path)!r}, {state})"

    def __enter__(self) -> ParamStore:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __contains__(self, key: str) -> bool:
        """True if key resolves to a leaf."""
        with self._lock:
            tree = self._require_open()
            try:
                resolve(tree, key)
            except (NotFoundError, InvalidArgumentError):
                return False
            return True

    # ==================== Properties ====================

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._tree is None

    @property
    def resource(self) -> BinaryIO:
        """The file object kept open on the backing file.

        Reopened here if the reopen after the last set() failed.

        Raises:
            StoreClosedError: If the store is closed.
            StoreIOError: If the file cannot be reopened.
        """
        with self._lock:
            self._require_open()
            if self._resource is None:
                try:
                    self._resource = _open_file(self._path)
                except OSError as exc:
                    raise StoreIOError(
                        f"Failed to reopen file {self._path}: {exc}", str(self._path)
                    ) from exc
                logger.debug("Reopened %s", self._path)
            return self._resource

    # ==================== Core API ====================

    def get(self, key: str) -> str:
        """Return the string stored at a dotted key.

        Raises:
            StoreClosedError: If the store is closed.
            InvalidArgumentError: If key is not a non-empty string.
            NotFoundError: If key does not resolve to a leaf.
        """
        with self._lock:
            tree = self._require_open()
            try:
                node = resolve(tree, key)
            except NotFoundError as exc:
                logger.debug("get %r: %s", key, exc)
                raise
            return node.value

    def set(self, key: str, value: str) -> None:
        """Replace the string at an existing dotted key and persist the file.

        Returns only after the backing file has been replaced. On failure the
        in-memory tree and the file are both left unchanged.

        Raises:
            StoreClosedError: If the store is closed.
            InvalidArgumentError: If key or value is invalid.
            NotFoundError: If key does not resolve to an existing leaf.
            SerializationError: If the tree cannot be serialized.
            StoreIOError: If writing or renaming the file fails.
        """
        if not isinstance(value, str):
            raise InvalidArgumentError(f"Value must be a string, got {type(value).__name__}")

        with self._lock:
            tree = self._require_open()
            resolve(tree, key)

            working = tree.copy()
            resolve(working, key).value = value
            text = serialize_json(working, indent=self._indent)
            try:
                data = text.encode(self._encoding)
            except UnicodeEncodeError as exc:
                raise SerializationError(
                    f"Cannot encode value for '{key}' as {self._encoding}: {exc.reason}"
                ) from exc
            atomic_write(self._path, data, fsync=self._fsync)

            self._tree = working
            logger.debug("set %r persisted to %s", key, self._path)
            self._reopen_resource()

    def as_dict(self) -> dict[str, Any]:
        """Return a nested dict snapshot of all parameters."""
        with self._lock:
            return self._require_open().as_dict()

    def leaves(self) -> list[tuple[str, str]]:
        """Return (dotted_key, value) for every parameter in document order."""
        with self._lock:
            return list(self._require_open().walk())

    def close(self) -> None:
        """Release the file object and drop the tree. Safe to call twice."""
        with self._lock:
            if self._tree is None:
                return
            self._close_resource()
            self._tree = None
        logger.debug("Closed %s", self._path)

    # ==================== Internals ====================

    def _require_open(self) -> ParamTree:
        if self._tree is None:
            raise StoreClosedError(f"Store for {self._path} is closed")
        return self._tree

    def _close_resource(self) -> None:
        if self._resource is not None:
            self._resource.close()
            self._resource = None

    def _reopen_resource(self) -> None:
        self._close_resource()
        try:
            self._resource = _open_file(self._path)
        except OSError as exc:
            logger.warning(
                "Failed to reopen %s after write, will retry on next access: %s",
                self._path, exc,
            )


def _read_tree(resource: BinaryIO, path: Path, encoding: str) -> ParamTree:
    try:
        data = resource.read()
    except OSError as exc:
        logger.error("Failed to read file %s: %s", path, exc)
        raise StoreIOError(f"Failed to read file {path}: {exc}", str(path)) from exc

    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        logger.error("File %s is not valid %s: %s", path, encoding, exc)
        raise ParseError(f"File is not valid {encoding}: {exc.reason}") from exc

    try:
        return parse_json(text)
    except ParseError as exc:
        logger.error("Failed to parse %s: %s", path, exc)
        raise
