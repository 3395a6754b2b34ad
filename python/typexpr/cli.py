# Copyright Rand Arete @ Ananke 2025
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""
Command line front end for type-expression resolution.

Usage:
    typexpr [--tree] [--json] [--verbose] [--strict] [--max-depth N] EXPR [EXPR ...]

Examples:
    typexpr "Array.<string>"
    typexpr --tree "{a: string, b: Object.<string, number>}"
    typexpr --json "Promise.<number, Error>" "module:foo/bar~Baz"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import ResolverConfig
from .diagnostics import Diagnostics, TypeExpressionError
from .parsing.builder import TreeBuilder
from .resolution.names import NameResolver

# Logger of the --tree re-parse; main() silences its warnings, which the
# resolver has already reported once.
TREE_LOGGER_NAME = f"{__name__}.tree"


def resolve_expression(expression: str, config: ResolverConfig, show_tree: bool = False) -> Dict[str, Any]:
    """Resolve one expression and collect everything worth printing."""
    diagnostics = Diagnostics.from_config(config)
    result: Dict[str, Any] = {"input": expression}

    if show_tree:
        tree_diagnostics = Diagnostics(strict=config.strict, log=logging.getLogger(TREE_LOGGER_NAME))
        root = TreeBuilder(tree_diagnostics, config).build(expression)
        result["tree"] = root.dumps()

    result["type"] = str(NameResolver(diagnostics, config).resolve_type_name(expression))
    result["warnings"] = diagnostics.messages()
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typexpr",
        description="Resolve documentation type expressions into TypeScript types",
    )
    parser.add_argument(
        "expressions",
        nargs="+",
        metavar="EXPR",
        help="Type expression, e.g. 'Array.<string>'",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Also print the intermediate tree",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output one JSON record per expression",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log the offending fragment alongside each warning",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on malformed expressions instead of degrading to any",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=64,
        help="Maximum bracket nesting depth (default: 64)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger(TREE_LOGGER_NAME).setLevel(logging.ERROR)

    config = ResolverConfig(verbose=args.verbose, strict=args.strict, max_depth=args.max_depth)

    exit_code = 0
    for expression in args.expressions:
        try:
            result = resolve_expression(expression, config, show_tree=args.tree)
        except TypeExpressionError as e:
            print(f"error: {e}", file=sys.stderr)
            exit_code = 1
            continue

        if args.json:
            print(json.dumps(result))
            continue

        if args.tree:
            print(result["tree"])
        print(result["type"])

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
