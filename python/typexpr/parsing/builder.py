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
"""Recursive-descent tree builder for documentation type expressions.

The builder scans the token stream left to right and dispatches on shape:

- ``Foo.<A, B>`` / ``Foo<A, B>``    generic, children are the type arguments
- ``(A|B)``                        union group
- ``{a: A, b: B}``                 object literal, alternating key and value
- ``function(A, B): R``            function, parameters then return type
- ``module:path~Name.<A>``         module reference
- anything else                    basic type leaf

Malformed input never raises (unless strict mode is configured). A missing
closing bracket abandons the rest of the span, reports a warning naming the
fragment and the full source string, and puts an ``any`` leaf in its place.

Example:
    >>> root = TreeBuilder().build("Object.<string, Array.<number>>")
    >>> print(root.dumps())
    name: Object, type:GENERIC
      name: string, type:TYPE
      name: Array, type:GENERIC
        name: number, type:TYPE
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, ResolverConfig
from ..diagnostics import DiagnosticKind, Diagnostics
from .brackets import (
    ANGLE,
    BRACE,
    CLOSING,
    NOT_FOUND,
    OPENING,
    PAREN,
    find_matching_bracket,
    split_top_level,
)
from .tokenizer import tokenize
from .tree import (
    FunctionNode,
    GenericNode,
    ModuleNode,
    ObjectNode,
    TreeNode,
    TypeNode,
    UnionNode,
)

SEPARATORS = frozenset({"|", ",", ":"})
DELIMITERS = SEPARATORS | OPENING | CLOSING

# Basic type names rewritten on sight (compared upper-cased).
_BASIC_ALIASES = {
    "*": "any",
    "OBJECT": "object",
    "ARRAY": "any[]",
    "FUNCTION": "Function",
}


def _any_leaf() -> TypeNode:
    return TypeNode("any")


class TreeBuilder:
    """Builds intermediate trees from type-expression strings.

    A builder holds no per-expression state; one instance can build any
    number of trees. Diagnostics go to the injected sink.

    Attributes:
        diagnostics: Sink receiving warnings about malformed input
        config: Resolver options (nesting limit, strictness)
    """

    def __init__(
        self,
        diagnostics: Optional[Diagnostics] = None,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics.from_config(self.config)

    def build(self, text: str) -> TreeNode:
        """Parse ``text`` and return the root of its tree.

        Several top-level nodes (``string|number`` without parentheses)
        are grouped under a UNION root. Empty input yields an ``any`` leaf.
        """
        text = text or ""
        tokens = tokenize(text)
        if not tokens:
            self.diagnostics.warn(
                DiagnosticKind.UNKNOWN_TYPE_NAME,
                f"Empty type expression '{text}', defaulting to `any`.",
                text,
                expression=text,
            )
            return _any_leaf()

        root = self._parse_unit(tokens, text, 0)
        if self.diagnostics.log.isEnabledFor(logging.DEBUG):
            self.diagnostics.debug(f"built tree for '{text}':\n{root.dumps()}")
        return root

    def parse_into(
        self,
        tokens: Sequence[str],
        parent: TreeNode,
        source: str,
        depth: int = 0,
    ) -> None:
        """Parse a token span, appending the resulting nodes to ``parent``.

        Args:
            tokens: Token span to parse
            parent: Node receiving the parsed nodes as children
            source: Full expression, for diagnostics
            depth: Bracket nesting depth of the span
        """
        if depth > self.config.max_depth:
            self._degrade(
                parent,
                DiagnosticKind.DEPTH_EXCEEDED,
                f"Type expression '{source}' is nested deeper than {self.config.max_depth} levels, defaulting to `any`.",
                source,
            )
            return

        count = len(tokens)
        i = 0
        while i < count:
            token = tokens[i]
            upper = token.upper()
            next_token = tokens[i + 1] if i + 1 < count else None

            if token not in DELIMITERS and (token.endswith(".") or next_token == "<"):
                i = self._parse_generic(tokens, i, parent, source, depth)
            elif token == "(":
                i = self._parse_group(tokens, i, parent, source, depth, UnionNode("Union"))
            elif token == "{":
                i = self._parse_group(tokens, i, parent, source, depth, ObjectNode("Object"))
            elif upper == "FUNCTION" and next_token == "(":
                i = self._parse_function(tokens, i, parent, source, depth)
            elif upper == "MODULE" and next_token == ":":
                i = self._parse_module(tokens, i, parent, source, depth)
            elif token in SEPARATORS:
                i += 1
            elif token in DELIMITERS:
                self.diagnostics.warn(
                    DiagnosticKind.UNBALANCED_BRACKET,
                    f"Unexpected '{token}' in '{source}', ignoring it.",
                    source,
                    expression=source,
                )
                i += 1
            else:
                parent.add_child(TypeNode(_BASIC_ALIASES.get(upper, token)))
                i += 1

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _parse_generic(self, tokens: Sequence[str], i: int, parent: TreeNode, source: str, depth: int) -> int:
        token = tokens[i]
        name = token[:-1] if token.endswith(".") else token

        if i + 1 >= len(tokens) or tokens[i + 1] != "<":
            self._unbalanced(parent, token, ANGLE, source)
            return i + 1

        closing = find_matching_bracket(tokens, i + 1, *ANGLE)
        if closing == NOT_FOUND:
            self._unbalanced(parent, token, ANGLE, source)
            return len(tokens)

        node = parent.add_child(GenericNode(name))
        self.parse_into(tokens[i + 2:closing], node, source, depth + 1)
        return closing + 1

    def _parse_group(
        self,
        tokens: Sequence[str],
        i: int,
        parent: TreeNode,
        source: str,
        depth: int,
        node: TreeNode,
    ) -> int:
        brackets = BRACE if isinstance(node, ObjectNode) else PAREN
        closing = find_matching_bracket(tokens, i, *brackets)
        if closing == NOT_FOUND:
            self._unbalanced(parent, tokens[i], brackets, source)
            return len(tokens)

        parent.add_child(node)
        interior = tokens[i + 1:closing]
        if isinstance(node, ObjectNode):
            self._parse_object_fields(interior, node, source, depth + 1)
        else:
            self.parse_into(interior, node, source, depth + 1)
        return closing + 1

    def _parse_object_fields(self, tokens: Sequence[str], node: ObjectNode, source: str, depth: int) -> None:
        for field_tokens in split_top_level(tokens, ","):
            key = field_tokens[0]
            if key in DELIMITERS:
                self.diagnostics.warn(
                    DiagnosticKind.UNRESOLVED_MEMBER,
                    f"Object field without a name in '{source}', skipping it.",
                    source,
                    expression=source,
                )
                continue
            node.add_child(TypeNode(key))

            if len(field_tokens) < 3 or field_tokens[1] != ":":
                self.diagnostics.warn(
                    DiagnosticKind.UNRESOLVED_MEMBER,
                    f"Object field '{key}' in '{source}' has no type, defaulting to `any`.",
                    source,
                    expression=source,
                )
                node.add_child(_any_leaf())
                continue

            node.add_child(self._parse_unit(field_tokens[2:], source, depth))

    def _parse_function(self, tokens: Sequence[str], i: int, parent: TreeNode, source: str, depth: int) -> int:
        closing = find_matching_bracket(tokens, i + 1, *PAREN)
        if closing == NOT_FOUND:
            self._unbalanced(parent, tokens[i], PAREN, source)
            return len(tokens)

        node = parent.add_child(FunctionNode(tokens[i]))
        for param in split_top_level(tokens[i + 2:closing], ","):
            # Named parameter (`name: type`, `this: T`, `new: T`), keep the type.
            if len(param) >= 3 and param[1] == ":" and param[0] not in DELIMITERS and param[0].upper() != "MODULE":
                param = param[2:]
            node.add_child(self._parse_unit(param, source, depth + 1))

        after = closing + 1
        if after + 1 < len(tokens) and tokens[after] == ":":
            end = self._type_unit_end(tokens, after + 1)
            if end == NOT_FOUND:
                self._degrade(
                    node,
                    DiagnosticKind.UNBALANCED_BRACKET,
                    f"Unable to find the end of return type '{tokens[after + 1]}' of '{source}', defaulting to `any`.",
                    source,
                )
                return len(tokens)
            node.add_child(self._parse_unit(tokens[after + 1:end + 1], source, depth + 1))
            return end + 1

        node.add_child(TypeNode("void"))
        return after

    def _parse_module(self, tokens: Sequence[str], i: int, parent: TreeNode, source: str, depth: int) -> int:
        start = i + 2
        try:
            generic_start = tokens.index("<", start)
        except ValueError:
            generic_start = len(tokens)

        path = "".join(tokens[start:generic_start])
        module_path, tilde, qualifier = path.partition("~")
        if tilde:
            qualifier = qualifier[:-1] if qualifier.endswith(".") else qualifier
        elif module_path.endswith("."):
            module_path = module_path[:-1]

        if not module_path:
            self._degrade(
                parent,
                DiagnosticKind.UNKNOWN_TYPE_NAME,
                f"Module reference without a module path in '{source}', defaulting to `any`.",
                source,
            )
            return len(tokens)

        node = parent.add_child(ModuleNode(module_path, qualifier=qualifier or None))
        if generic_start < len(tokens):
            closing = find_matching_bracket(tokens, generic_start, *ANGLE)
            if closing == NOT_FOUND:
                self.diagnostics.warn(
                    DiagnosticKind.UNBALANCED_BRACKET,
                    f"Unable to find matching '<', '>' brackets for module '{module_path}' in '{source}', ignoring its type arguments.",
                    source,
                    expression=source,
                )
            else:
                self.parse_into(tokens[generic_start + 1:closing], node, source, depth + 1)

        # A module reference always runs to the end of its span.
        return len(tokens)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_unit(self, tokens: Sequence[str], source: str, depth: int) -> TreeNode:
        """Parse a span expected to hold one type.

        Several nodes are grouped under a UNION; none yields ``any``.
        """
        holder = UnionNode("Union")
        self.parse_into(tokens, holder, source, depth)

        if len(holder.children) == 1:
            node = holder.children[0]
            node.parent = None
            return node

        if not holder.children:
            self.diagnostics.warn(
                DiagnosticKind.UNRESOLVED_MEMBER,
                f"Unable to resolve a type from '{''.join(tokens)}' in '{source}', defaulting to `any`.",
                source,
                expression=source,
            )
            return _any_leaf()

        return holder

    def _type_unit_end(self, tokens: Sequence[str], j: int) -> int:
        """Index of the last token of the single type starting at ``j``.

        Chained function returns (``function(): function(): T``) are followed
        iteratively; their nesting is limited later, when the span is parsed.
        """
        while True:
            token = tokens[j]
            upper = token.upper()
            next_token = tokens[j + 1] if j + 1 < len(tokens) else None

            if token not in DELIMITERS and next_token == "<":
                return find_matching_bracket(tokens, j + 1, *ANGLE)
            if token == "(":
                return find_matching_bracket(tokens, j, *PAREN)
            if token == "{":
                return find_matching_bracket(tokens, j, *BRACE)
            if upper == "FUNCTION" and next_token == "(":
                closing = find_matching_bracket(tokens, j + 1, *PAREN)
                if closing != NOT_FOUND and closing + 2 < len(tokens) and tokens[closing + 1] == ":":
                    j = closing + 2
                    continue
                return closing
            if upper == "MODULE" and next_token == ":":
                return len(tokens) - 1
            return j

    def _unbalanced(self, parent: TreeNode, fragment: str, brackets: Sequence[str], source: str) -> None:
        open_bracket, close_bracket = brackets
        self._degrade(
            parent,
            DiagnosticKind.UNBALANCED_BRACKET,
            f"Unable to find matching '{open_bracket}', '{close_bracket}' brackets in '{fragment}' of '{source}', defaulting to `any`.",
            source,
        )

    def _degrade(self, parent: TreeNode, kind: DiagnosticKind, message: str, source: str) -> None:
        self.diagnostics.warn(kind, message, source, expression=source)
        parent.add_child(_any_leaf())


def generate_tree(
    text: str,
    diagnostics: Optional[Diagnostics] = None,
    config: Optional[ResolverConfig] = None,
) -> TreeNode:
    """Build the intermediate tree of a type expression."""
    return TreeBuilder(diagnostics=diagnostics, config=config).build(text)
