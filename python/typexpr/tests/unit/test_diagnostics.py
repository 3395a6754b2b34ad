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
"""Unit tests for diagnostics, logging and resolver configuration."""

from __future__ import annotations

import logging

import pytest

from typexpr.config import DEFAULT_CONFIG, ResolverConfig
from typexpr.diagnostics import (
    HEADER,
    Diagnostic,
    DiagnosticKind,
    Diagnostics,
    TypeExpressionError,
)
from typexpr.parsing.builder import TreeBuilder
from typexpr.parsing.tree import GenericNode, TreeNode, TypeNode
from typexpr.resolution.doclet import Doclet
from typexpr.resolution.names import NameResolver


class TestResolverConfig:
    """Tests for ResolverConfig."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.verbose is False
        assert DEFAULT_CONFIG.strict is False
        assert DEFAULT_CONFIG.max_depth == 64

    def test_round_trip(self) -> None:
        config = ResolverConfig(verbose=True, strict=True, max_depth=8)
        assert ResolverConfig.from_dict(config.to_dict()) == config

    def test_from_partial_dict(self) -> None:
        assert ResolverConfig.from_dict({"strict": True}) == ResolverConfig(strict=True)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.strict = True  # type: ignore[misc]


class TestDiagnostics:
    """Tests for the Diagnostics sink."""

    def test_records_in_order(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.warn(DiagnosticKind.UNBALANCED_BRACKET, "first")
        diagnostics.warn(DiagnosticKind.INVALID_MAP_KEY, "second")
        assert diagnostics.kinds() == [
            DiagnosticKind.UNBALANCED_BRACKET,
            DiagnosticKind.INVALID_MAP_KEY,
        ]
        assert diagnostics.messages() == ["first", "second"]
        assert len(diagnostics) == 2

    def test_empty_sink_is_truthy(self) -> None:
        diagnostics = Diagnostics()
        assert len(diagnostics) == 0
        assert diagnostics

    def test_clear(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.warn(DiagnosticKind.UNKNOWN_TYPE_NAME, "x")
        diagnostics.clear()
        assert len(diagnostics) == 0

    def test_diagnostic_equality_ignores_context(self) -> None:
        a = Diagnostic(DiagnosticKind.UNKNOWN_TYPE_NAME, "m", context="one")
        b = Diagnostic(DiagnosticKind.UNKNOWN_TYPE_NAME, "m", context="two")
        assert a == b
        assert str(a) == "UNKNOWN_TYPE_NAME: m"

    def test_logs_warning_with_header(self, caplog) -> None:
        diagnostics = Diagnostics()
        with caplog.at_level(logging.WARNING, logger="typexpr"):
            diagnostics.warn(DiagnosticKind.UNBALANCED_BRACKET, "missing '>'", "Array.<string")
        assert f"{HEADER} missing '>'" in caplog.text
        # Context is only logged in verbose mode.
        assert len(caplog.records) == 1

    def test_verbose_logs_string_context(self, caplog) -> None:
        diagnostics = Diagnostics(verbose=True)
        with caplog.at_level(logging.WARNING, logger="typexpr"):
            diagnostics.warn(DiagnosticKind.UNBALANCED_BRACKET, "missing '>'", "Array.<string")
        assert len(caplog.records) == 2
        assert caplog.records[1].getMessage() == f"{HEADER} Array.<string"

    def test_verbose_logs_node_dump(self, caplog) -> None:
        diagnostics = Diagnostics(verbose=True)
        node = GenericNode("Array", [TypeNode("string")])
        with caplog.at_level(logging.WARNING, logger="typexpr"):
            diagnostics.warn(DiagnosticKind.UNRESOLVED_MEMBER, "bad", node)
        assert "name: Array, type:GENERIC" in caplog.text
        assert "  name: string, type:TYPE" in caplog.text

    def test_verbose_logs_doclet_as_json(self, caplog) -> None:
        diagnostics = Diagnostics(verbose=True)
        with caplog.at_level(logging.WARNING, logger="typexpr"):
            diagnostics.warn(DiagnosticKind.UNKNOWN_TYPE_NAME, "bad", Doclet(name="thing", kind="typedef"))
        assert '"name": "thing"' in caplog.text
        assert '"kind": "typedef"' in caplog.text

    def test_strict_raises_without_recording(self) -> None:
        diagnostics = Diagnostics(strict=True)
        with pytest.raises(TypeExpressionError) as exc_info:
            diagnostics.warn(DiagnosticKind.UNKNOWN_TYPE_NAME, "nothing here", expression="??")
        assert exc_info.value.expression == "??"
        assert exc_info.value.message == "nothing here"
        assert str(exc_info.value) == "Failed to resolve type '??': nothing here"
        assert len(diagnostics) == 0

    def test_from_config(self) -> None:
        diagnostics = Diagnostics.from_config(ResolverConfig(verbose=True, strict=True))
        assert diagnostics.verbose is True
        assert diagnostics.strict is True

    def test_custom_logger(self, caplog) -> None:
        custom = logging.getLogger("typexpr.tests.custom")
        diagnostics = Diagnostics(log=custom)
        with caplog.at_level(logging.WARNING, logger="typexpr.tests.custom"):
            diagnostics.warn(DiagnosticKind.UNKNOWN_TYPE_NAME, "routed")
        assert [r.name for r in caplog.records] == ["typexpr.tests.custom"]

    def test_debug_dump_of_built_tree(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="typexpr"):
            TreeBuilder().build("Array.<string>")
        assert "name: Array, type:GENERIC" in caplog.text

    def test_tree_dump_skipped_without_debug(self, caplog, monkeypatch) -> None:
        dumped = []
        monkeypatch.setattr(TreeNode, "dumps", lambda self, *a, **kw: dumped.append(self) or "")
        with caplog.at_level(logging.WARNING, logger="typexpr"):
            TreeBuilder().build("Array.<string>")
        assert dumped == []

    def test_shared_sink(self) -> None:
        diagnostics = Diagnostics()
        resolver = NameResolver(diagnostics)
        resolver.resolve_type_name("Array.<string")
        resolver.resolve_type_name("Object.<Foo, number>")
        assert diagnostics.kinds() == [
            DiagnosticKind.UNBALANCED_BRACKET,
            DiagnosticKind.INVALID_MAP_KEY,
        ]
