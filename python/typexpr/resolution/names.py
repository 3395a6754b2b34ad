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
"""Name-level type resolution with doclet hints.

This is the entry point documentation tooling calls with a type name as
written in a comment. Keywords and a few special forms are mapped directly;
everything else goes through the tree builder and tree resolver.

Example:
    >>> resolver = NameResolver()
    >>> str(resolver.resolve_type_name("Array.<string>"))
    'string[]'
    >>> str(resolver.resolve_type(DocletType(["number", "null"])))
    'number | null'
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

from ..config import DEFAULT_CONFIG, ResolverConfig
from ..diagnostics import DiagnosticKind, Diagnostics
from ..parsing.builder import TreeBuilder
from ..types import (
    ANY,
    VOID,
    KeywordKind,
    TSArrayType,
    TSFunctionType,
    TSObjectType,
    TSUnionType,
    Type,
)
from .doclet import Doclet, DocletProp, DocletType, PropDesc, PropTree
from .keywords import keyword_type, to_keyword_kind
from .tree_resolver import REST_PARAMETER, TreeResolver

_FUNCTION_NAMES = frozenset({"FUNCTION", "FUNCTION()"})
_FUNCTION_DOCLET_KINDS = frozenset({"function", "typedef"})

# Parent prop types whose nested members describe the array element.
_OBJECT_ARRAY_NAMES = frozenset({"array.<object>", "array<object>", "object[]"})


class FunctionParams(NamedTuple):
    """Parameters of a function type built from a doclet."""
    parameters: Tuple[Tuple[str, Type, bool], ...]
    rest_parameter: Optional[Tuple[str, Type]] = None


def resolve_optional_parameter(prop: DocletProp) -> bool:
    """A parameter is optional when declared so or given a default value."""
    return bool(prop.defaultvalue is not None or prop.optional)


def resolve_variable_parameter(prop: DocletProp) -> bool:
    return bool(prop.variable)


def _property_doc(prop: DocletProp) -> str:
    """Doc comment text of a property: its description lines, then its default."""
    lines: List[str] = []
    if prop.description:
        lines.extend(line.strip() for line in prop.description.splitlines())
    if prop.defaultvalue:
        lines.append(f"@defaultValue {prop.defaultvalue}")
    return "\n".join(lines)


def resolve_optional_from_name(doclet: Doclet) -> Tuple[str, bool]:
    """Split a ``[name]`` optional marker off a doclet name.

    Returns:
        (name, optional)
    """
    name = doclet.name
    if name.startswith("[") and name.endswith("]"):
        return name[1:-1], True
    return name, bool(doclet.optional)


class NameResolver:
    """Resolves documented type names into target types.

    Attributes:
        diagnostics: Sink shared with the tree builder and tree resolver
        config: Resolver options
    """

    def __init__(
        self,
        diagnostics: Optional[Diagnostics] = None,
        config: Optional[ResolverConfig] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics.from_config(self.config)
        self._builder = TreeBuilder(self.diagnostics, self.config)
        self._tree_resolver = TreeResolver(self.diagnostics)

    def resolve_type(
        self,
        t: Optional[DocletType],
        doclet: Optional[Doclet] = None,
        name: Optional[str] = None,
    ) -> Type:
        """Resolve the type names of a doclet, prop or return value.

        Several names resolve to a union. With no names at all, declared
        properties on the doclet yield a record type, otherwise ``any``.

        Args:
            t: Declared type names
            doclet: Doclet the type belongs to, for properties and diagnostics
            name: Name of the documented item, for diagnostics
        """
        if t is None or not t.names:
            if doclet is not None and doclet.properties is not None:
                return self.resolve_type_name("object", doclet)

            if doclet is not None or name:
                label = name or doclet.debug_name()
                self.diagnostics.warn(
                    DiagnosticKind.UNKNOWN_TYPE_NAME,
                    f"Unable to resolve type for {label}, none specified in JSDoc. Defaulting to `any`.",
                    doclet,
                )
            else:
                self.diagnostics.warn(
                    DiagnosticKind.UNKNOWN_TYPE_NAME,
                    "Unable to resolve type for an unnamed item, this is likely due to invalid JSDoc."
                    " Often this is caused by invalid JSDoc on a parameter. Defaulting to `any`.",
                )
            return ANY

        if len(t.names) == 1:
            return self.resolve_type_name(t.names[0], doclet)

        return TSUnionType(members=tuple(self.resolve_type_name(n, doclet) for n in t.names))

    def resolve_type_name(self, name: Optional[str], doclet: Optional[Doclet] = None) -> Type:
        """Resolve a single documented type name.

        Keywords map to keyword types, ``this`` to the self type, ``object``
        with declared properties to a record, ``Function`` to a function
        type; anything else is parsed as a type expression.
        """
        if not name or not name.strip():
            self.diagnostics.warn(
                DiagnosticKind.UNKNOWN_TYPE_NAME,
                "Unable to resolve type name, it is null, undefined, or empty. Defaulting to `any`.",
                doclet,
                expression=name or "",
            )
            return ANY

        name = name.strip()
        if name == "*":
            return ANY

        kind = to_keyword_kind(name)
        if kind is not None:
            if kind is KeywordKind.OBJECT and doclet is not None and doclet.properties is not None:
                return self.resolve_type_literal(doclet.properties)
            return keyword_type(kind)

        if name.upper() in _FUNCTION_NAMES:
            if doclet is not None and doclet.kind == "typedef":
                params = self.create_function_params(doclet)
                return TSFunctionType(
                    parameters=params.parameters,
                    return_type=self.create_function_return_type(doclet),
                    rest_parameter=params.rest_parameter,
                )
            return TSFunctionType(parameters=(), return_type=ANY, rest_parameter=REST_PARAMETER)

        return self.resolve_complex_type_name(name)

    def resolve_complex_type_name(self, name: str) -> Type:
        """Parse a type expression and resolve its tree."""
        root = self._builder.build(name)
        return self._tree_resolver.resolve(root)

    def resolve_type_literal(self, props: Optional[Sequence[DocletProp]]) -> Type:
        """Record type of a list of declared (possibly dotted) properties."""
        if not props:
            return TSObjectType()

        tree = PropTree(props, self.diagnostics)
        return self.create_type_literal(tree.roots)

    def create_type_literal(self, children: Sequence[PropDesc], parent: Optional[PropDesc] = None) -> Type:
        """Record type of property tree nodes.

        Nested nodes become nested records. Members of a parent declared as
        ``Array.<Object>`` describe its elements, so the record is wrapped in
        an array. Top-level properties keep their description and default
        value as a doc comment.
        """
        properties: List[Tuple[str, Type]] = []
        docs: List[Tuple[str, str]] = []
        optional = set()

        for node in children:
            if node.children:
                typ = self.create_type_literal(node.children, node)
            else:
                typ = self.resolve_type(node.prop.type, name=node.prop.name)

            if node.prop.optional:
                optional.add(node.name)
            properties.append((node.name, typ))

            if parent is None:
                doc = _property_doc(node.prop)
                if doc:
                    docs.append((node.name, doc))

        result: Type = TSObjectType(
            properties=tuple(properties),
            optional_properties=frozenset(optional),
            property_docs=tuple(docs),
        )

        if parent is not None and parent.prop.type is not None:
            names = parent.prop.type.names
            if len(names) == 1 and names[0].lower() in _OBJECT_ARRAY_NAMES:
                result = TSArrayType(element=result)

        return result

    def create_function_params(self, doclet: Doclet) -> FunctionParams:
        """Parameters of a function or callback doclet.

        A ``@this`` override becomes a leading ``this`` parameter. Nested
        parameter properties (``opts.name``) become record types, variadic
        parameters the rest parameter.
        """
        parameters: List[Tuple[str, Type, bool]] = []
        rest_parameter: Optional[Tuple[str, Type]] = None

        if doclet.kind in _FUNCTION_DOCLET_KINDS and doclet.this:
            this_type = self.resolve_type(DocletType([doclet.this]), doclet)
            parameters.append(("this", this_type, False))

        if not doclet.params:
            return FunctionParams(tuple(parameters))

        tree = PropTree(doclet.params, self.diagnostics)
        for node in tree.roots:
            if node.children:
                typ = self.create_type_literal(node.children, node)
            else:
                typ = self.resolve_type(node.prop.type, name=node.prop.name)

            if resolve_variable_parameter(node.prop):
                if rest_parameter is not None:
                    self.diagnostics.warn(
                        DiagnosticKind.UNRESOLVED_MEMBER,
                        f"Only one variadic parameter is allowed, replacing '{rest_parameter[0]}' with '{node.name}'.",
                        doclet,
                    )
                rest_parameter = (node.name, typ)
                continue

            parameters.append((node.name, typ, resolve_optional_parameter(node.prop)))

        return FunctionParams(tuple(parameters), rest_parameter)

    def create_function_return_type(self, doclet: Doclet) -> Type:
        if doclet.returns and len(doclet.returns) == 1:
            return self.resolve_type(doclet.returns[0].type, doclet)
        return VOID


def resolve_type_name(
    name: Optional[str],
    doclet: Optional[Doclet] = None,
    diagnostics: Optional[Diagnostics] = None,
    config: Optional[ResolverConfig] = None,
) -> Type:
    """Resolve a documented type name with a fresh resolver."""
    return NameResolver(diagnostics, config).resolve_type_name(name, doclet)


def resolve_type(
    t: Optional[DocletType],
    doclet: Optional[Doclet] = None,
    diagnostics: Optional[Diagnostics] = None,
    config: Optional[ResolverConfig] = None,
) -> Type:
    return NameResolver(diagnostics, config).resolve_type(t, doclet)


def resolve_complex_type_name(
    name: str,
    diagnostics: Optional[Diagnostics] = None,
    config: Optional[ResolverConfig] = None,
) -> Type:
    """Parse and resolve a type expression, bypassing keyword handling."""
    return NameResolver(diagnostics, config).resolve_complex_type_name(name)
