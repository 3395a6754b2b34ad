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
"""Unit tests for the typexpr command line front end."""

from __future__ import annotations

import importlib
import json
import logging

import typexpr.cli
from typexpr.cli import TREE_LOGGER_NAME, build_parser, main, resolve_expression
from typexpr.config import ResolverConfig


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["Array.<string>"])
        assert args.expressions == ["Array.<string>"]
        assert args.tree is False
        assert args.json is False
        assert args.strict is False
        assert args.max_depth == 64

    def test_flags(self) -> None:
        args = build_parser().parse_args(["--tree", "--strict", "--max-depth", "4", "a", "b"])
        assert args.expressions == ["a", "b"]
        assert args.tree is True
        assert args.strict is True
        assert args.max_depth == 4


class TestResolveExpression:
    def test_result(self) -> None:
        result = resolve_expression("Array.<string>", ResolverConfig())
        assert result == {"input": "Array.<string>", "type": "string[]", "warnings": []}

    def test_tree_and_warnings(self) -> None:
        result = resolve_expression("Object.<Foo, number>", ResolverConfig(), show_tree=True)
        assert result["tree"].splitlines()[0] == "name: Object, type:GENERIC"
        assert result["type"] == "{ [key: string]: number }"
        assert len(result["warnings"]) == 1


class TestMain:
    def test_prints_types(self, capsys) -> None:
        assert main(["Array.<string>", "module:foo/bar~Baz"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["string[]", 'import("foo/bar").Baz']

    def test_tree(self, capsys) -> None:
        assert main(["--tree", "(number|string)"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "name: Union, type:UNION",
            "  name: number, type:TYPE",
            "  name: string, type:TYPE",
            "number | string",
        ]

    def test_json(self, capsys) -> None:
        assert main(["--json", "Promise.<number, Error>"]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record["input"] == "Promise.<number, Error>"
        assert record["type"] == "Promise<number>"
        assert record["warnings"] == []

    def test_malformed_degrades(self, capsys) -> None:
        assert main(["Array.<string"]) == 0
        assert capsys.readouterr().out.strip() == "any"

    def test_strict_failure(self, capsys) -> None:
        assert main(["--strict", "Array.<string", "number"]) == 1
        captured = capsys.readouterr()
        assert captured.out.strip() == "number"
        assert "error: Failed to resolve type 'Array.<string'" in captured.err

    def test_max_depth(self, capsys) -> None:
        assert main(["--max-depth", "1", "Array.<Array.<Array.<string>>>"]) == 0
        assert capsys.readouterr().out.strip() == "any[][]"


class TestLogging:
    def test_import_leaves_loggers_alone(self) -> None:
        tree_logger = logging.getLogger(TREE_LOGGER_NAME)
        previous = tree_logger.level
        tree_logger.setLevel(logging.NOTSET)
        try:
            importlib.reload(typexpr.cli)
            assert tree_logger.level == logging.NOTSET
        finally:
            tree_logger.setLevel(previous)

    def test_tree_warnings_reported_once(self, caplog, capsys) -> None:
        with caplog.at_level(logging.WARNING):
            assert main(["--tree", "Object.<Foo, number>"]) == 0
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Foo" in warnings[0].getMessage()
        assert capsys.readouterr().out.splitlines()[-1] == "{ [key: string]: number }"
