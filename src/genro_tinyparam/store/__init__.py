# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - file-backed parameter handle.

The package is organized into:
- core: ParamStore with open/get/set/close and the locking discipline
- persistence: atomic replacement of the backing file

Example:
    >>> from genro_tinyparam import ParamStore
    >>> with ParamStore.open('params.json') as store:
    ...     store.set('system.audio.volume', '75')
"""

from .core import ParamStore
from .persistence import atomic_write

__all__ = ["ParamStore", "atomic_write"]
