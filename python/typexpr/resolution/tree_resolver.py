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
"""Lowering of intermediate trees into TypeScript type nodes.

The walk is post-order: every child is resolved first, then the node's own
shape is built from the resolved children. Each shape has its own repair rule
for missing or invalid members, always paired with a warning:

    UNION     no members            -> single ``any`` member
    FUNCTION  zero or one child     -> ``(...params: any[])``, ``void`` return if empty
    OBJECT    key without a value   -> ``any`` value
    GENERIC   Object.<K, V>         -> K forced to ``string`` unless string/number
              no type arguments     -> single ``any`` argument
    TUPLE     never built           -> ``any``
"""

from __future__ import annotations

from typing import List, Optional

from ..diagnostics import DiagnosticKind, Diagnostics
from ..parsing.tree import ModuleNode, NodeKind, ObjectNode, TreeNode
from ..types import (
    ANY,
    STRING,
    VOID,
    TSArrayType,
    TSFunctionType,
    TSImportType,
    TSObjectType,
    TSTypeQuery,
    TSTypeReference,
    TSUnionType,
    Type,
)

# Names given to parameters of function types; documentation types carry none.
PARAM_PREFIX = "arg"
REST_PARAMETER = ("params", ANY)

_MAP_KEY_NAMES = frozenset({"string", "number"})


class TreeResolver:
    """Resolves intermediate trees into target type nodes.

    Attributes:
        diagnostics: Sink receiving warnings about repaired shapes
    """

    def __init__(self, diagnostics: Optional[Diagnostics] = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def resolve(self, node: TreeNode) -> Type:
        """Resolve ``node`` and its subtree into one target type."""
        child_types: List[Type] = []
        for child in node.children:
            self.resolve_into(child, child_types)

        kind = node.kind
        if kind is NodeKind.TYPE:
            return TSTypeReference(node.name)
        if kind is NodeKind.UNION:
            return self._resolve_union(node, child_types)
        if kind is NodeKind.FUNCTION:
            return self._resolve_function(child_types)
        if kind is NodeKind.OBJECT:
            return self._resolve_object(node, child_types)
        if kind is NodeKind.GENERIC:
            return self._resolve_generic(node, child_types)
        if kind is NodeKind.MODULE:
            return self._resolve_module(node, child_types)

        self.diagnostics.warn(
            DiagnosticKind.UNRESOLVED_MEMBER,
            f"Unsupported type shape {node.type_to_string()} for '{node.name}', defaulting to `any`.",
            node,
        )
        return ANY

    def resolve_into(self, node: TreeNode, out: List[Type]) -> None:
        """Resolve ``node`` and append the result to ``out``."""
        out.append(self.resolve(node))

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _resolve_union(self, node: TreeNode, child_types: List[Type]) -> Type:
        if not child_types:
            self.diagnostics.warn(
                DiagnosticKind.UNRESOLVED_MEMBER,
                "Unable to resolve any types for union, defaulting to `any`.",
                node,
            )
            child_types = [ANY]
        return TSUnionType(members=tuple(child_types))

    def _resolve_function(self, child_types: List[Type]) -> Type:
        if len(child_types) <= 1:
            return_type = child_types[0] if child_types else VOID
            return TSFunctionType(
                parameters=(),
                return_type=return_type,
                rest_parameter=REST_PARAMETER,
            )

        # Last child is the return type.
        parameters = tuple(
            (f"{PARAM_PREFIX}{i}", typ, False)
            for i, typ in enumerate(child_types[:-1])
        )
        return TSFunctionType(parameters=parameters, return_type=child_types[-1])

    def _resolve_object(self, node: ObjectNode, child_types: List[Type]) -> Type:
        properties = []
        # child_types holds one entry per child, so pair i has its value at 2 * i + 1.
        for i, (key, value) in enumerate(node.pairs()):
            if value is None:
                self.diagnostics.warn(
                    DiagnosticKind.UNRESOLVED_MEMBER,
                    f"Unable to resolve value type of '{key.path()}', this is likely due to invalid JSDoc. Defaulting to `any`.",
                    node,
                )
                value_type = ANY
            else:
                value_type = child_types[2 * i + 1]
            properties.append((key.name, value_type))

        return TSObjectType(properties=tuple(properties), single_line=True)

    def _resolve_generic(self, node: TreeNode, child_types: List[Type]) -> Type:
        upper_name = node.name.upper()

        if upper_name == "OBJECT":
            return self._resolve_map(node, child_types)

        if upper_name == "ARRAY":
            if not child_types:
                self.diagnostics.warn(
                    DiagnosticKind.UNRESOLVED_MEMBER,
                    "Unable to resolve array value type, defaulting to `any`.",
                    node,
                )
            return TSArrayType(element=child_types[0] if child_types else ANY)

        if upper_name == "CLASS":
            if not node.children:
                self.diagnostics.warn(
                    DiagnosticKind.UNRESOLVED_MEMBER,
                    "Unable to resolve class value type, defaulting to `any`.",
                    node,
                )
                return ANY
            # TODO: use the resolved argument (child_types[0]) instead of the raw name once
            # type queries can wrap arbitrary types; only plain names round-trip today.
            return TSTypeQuery(target=node.children[0].name)

        if not child_types:
            self.diagnostics.warn(
                DiagnosticKind.UNRESOLVED_MEMBER,
                "Unable to resolve generic type, defaulting to `any`.",
                node,
            )
            child_types = [ANY]

        # `Promise<Resolve, Reject>` is a common documentation idiom, but only the
        # resolved value type exists in the target grammar.
        if upper_name == "PROMISE":
            child_types = child_types[:1]

        return TSTypeReference(name=node.name, type_arguments=tuple(child_types))

    def _resolve_map(self, node: TreeNode, child_types: List[Type]) -> Type:
        if not child_types:
            self.diagnostics.warn(
                DiagnosticKind.UNRESOLVED_MEMBER,
                "Unable to resolve object key type, this is likely due to invalid JSDoc. Defaulting to `string`.",
                node,
            )
            key_type: Type = STRING
        else:
            key_node = node.children[0]
            if key_node.kind is not NodeKind.TYPE or key_node.name not in _MAP_KEY_NAMES:
                self.diagnostics.warn(
                    DiagnosticKind.INVALID_MAP_KEY,
                    f"Invalid object key type. It must be `string` or `number`, but got: {key_node.name}. Defaulting to `string`.",
                    node,
                )
                key_type = STRING
            else:
                key_type = child_types[0]

        if len(child_types) < 2:
            self.diagnostics.warn(
                DiagnosticKind.UNRESOLVED_MEMBER,
                "Unable to resolve object value type, this is likely due to invalid JSDoc. Defaulting to `any`.",
                node,
            )
            value_type = ANY
        else:
            value_type = child_types[1]

        return TSObjectType(index_signature=(key_type, value_type), single_line=True)

    def _resolve_module(self, node: TreeNode, child_types: List[Type]) -> Type:
        qualifier = node.qualifier if isinstance(node, ModuleNode) else None
        return TSImportType(
            module=node.name,
            qualifier=qualifier or "default",
            type_arguments=tuple(child_types),
        )


def resolve_tree(node: TreeNode, diagnostics: Optional[Diagnostics] = None) -> Type:
    """Resolve an intermediate tree into a target type."""
    return TreeResolver(diagnostics).resolve(node)
