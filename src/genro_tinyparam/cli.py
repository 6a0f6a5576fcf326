# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line access to a parameter file.

Usage:
    tinyparam get FILE KEY
    tinyparam set FILE KEY VALUE
    tinyparam dump FILE
    tinyparam keys FILE

Exit codes:
    0  success
    1  file or key not found
    2  invalid arguments
    3  parse, serialization or I/O failure
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .exceptions import InvalidArgumentError, NotFoundError, TinyParamError
from .store import ParamStore

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2
EXIT_FAILURE = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinyparam',
        description='Read and write string parameters in a JSON file',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    get_cmd = sub.add_parser('get', help='Print the value at a dotted key')
    get_cmd.add_argument('file')
    get_cmd.add_argument('key')

    set_cmd = sub.add_parser('set', help='Replace the value at an existing dotted key')
    set_cmd.add_argument('file')
    set_cmd.add_argument('key')
    set_cmd.add_argument('value')

    dump_cmd = sub.add_parser('dump', help='Print the whole file as JSON')
    dump_cmd.add_argument('file')

    keys_cmd = sub.add_parser('keys', help='List every dotted key with its value')
    keys_cmd.add_argument('file')
    return parser


def run(args: argparse.Namespace) -> int:
    with ParamStore.open(args.file) as store:
        if args.command == 'get':
            print(store.get(args.key))
        elif args.command == 'set':
            store.set(args.key, args.value)
        elif args.command == 'dump':
            print(json.dumps(store.as_dict(), indent=2, ensure_ascii=False))
        elif args.command == 'keys':
            for path, value in store.leaves():
                print(f"{path}={value}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    try:
        return run(args)
    except NotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except TinyParamError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == '__main__':
    sys.exit(main())
