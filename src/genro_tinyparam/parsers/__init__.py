# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating ParamTree from the backing file format.

Available parsers:
- jsontree: JSON objects with string leaves

Example:
    >>> from genro_tinyparam.parsers import parse_json, serialize_json
    >>> tree = parse_json('{"system": {"audio": {"volume": "50"}}}')
    >>> serialize_json(tree, indent=None)
    '{"system": {"audio": {"volume": "50"}}}'
"""

from .jsontree import parse_json, serialize_json

__all__ = [
    'parse_json',
    'serialize_json',
]
