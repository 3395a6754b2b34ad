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
"""TypeScript type nodes produced from documentation type expressions.

These are the declaration-level shapes a documentation type can lower to:

- Named references: Foo, Promise<T>, Map<K, V>
- Arrays: T[]
- Unions: A | B | C
- Function types: (arg0: T, ...params: any[]) => R
- Object types: { key: Type }, { [key: string]: Type }
- Type queries: typeof Foo
- Import types: import("module").Name<T>

``str()`` of any node yields its TypeScript source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple as PyTuple

from .base import Type


def _needs_parens(typ: Type) -> bool:
    return isinstance(typ, (TSUnionType, TSFunctionType))


@dataclass(frozen=True, slots=True)
class TSTypeReference(Type):
    """Reference to a named type: Foo, Promise<T>, Map<K, V>."""
    name: str
    type_arguments: PyTuple[Type, ...] = ()

    def __str__(self) -> str:
        if self.type_arguments:
            args = ", ".join(str(arg) for arg in self.type_arguments)
            return f"{self.name}<{args}>"
        return self.name


@dataclass(frozen=True, slots=True)
class TSArrayType(Type):
    """Array type: T[]."""
    element: Type

    def __str__(self) -> str:
        if _needs_parens(self.element):
            return f"({self.element})[]"
        return f"{self.element}[]"


@dataclass(frozen=True, slots=True)
class TSUnionType(Type):
    """Union type: A | B | C.

    Members keep their source order; documentation unions are emitted as
    written rather than normalized.
    """
    members: PyTuple[Type, ...]

    def __str__(self) -> str:
        parts = []
        for member in self.members:
            if isinstance(member, TSFunctionType):
                parts.append(f"({member})")
            else:
                parts.append(str(member))
        return " | ".join(parts)


@dataclass(frozen=True, slots=True)
class TSFunctionType(Type):
    """Function type: (x: T, y?: U, ...rest: V[]) => R.

    The rest parameter stores the element type; ``...params: any[]`` is
    ``rest_parameter=("params", ANY)``.
    """
    parameters: PyTuple[PyTuple[str, Type, bool], ...]  # (name, type, optional)
    return_type: Type
    rest_parameter: Optional[PyTuple[str, Type]] = None

    def __str__(self) -> str:
        params = []
        for name, typ, optional in self.parameters:
            opt_mark = "?" if optional else ""
            params.append(f"{name}{opt_mark}: {typ}")
        if self.rest_parameter:
            name, typ = self.rest_parameter
            element = f"({typ})" if _needs_parens(typ) else str(typ)
            params.append(f"...{name}: {element}[]")

        return f"({', '.join(params)}) => {self.return_type}"


@dataclass(frozen=True, slots=True)
class TSObjectType(Type):
    """Object type: { key: Type, ... } or { [key: K]: V }.

    Attributes:
        properties: (name, type) pairs in declaration order
        optional_properties: Names of properties declared optional
        index_signature: (key_type, value_type) for map-like objects
        single_line: Emit on one line; set for records built from inline
            type expressions
        property_docs: (name, text) doc comments of documented properties,
            emitted as ``/** ... */`` above the property in multi-line form
    """
    properties: PyTuple[PyTuple[str, Type], ...] = ()
    optional_properties: FrozenSet[str] = frozenset()
    index_signature: Optional[PyTuple[Type, Type]] = None
    single_line: bool = False
    property_docs: PyTuple[PyTuple[str, str], ...] = ()

    def __str__(self) -> str:
        members = []
        for name, typ in self.properties:
            optional = "?" if name in self.optional_properties else ""
            members.append((name, f"{name}{optional}: {typ}"))
        if self.index_signature:
            key_type, value_type = self.index_signature
            members.append((None, f"[key: {key_type}]: {value_type}"))
        if not members:
            return "{}"
        if self.single_line:
            return "{ " + ", ".join(text for _, text in members) + " }"

        docs = dict(self.property_docs)
        lines = ["{"]
        for name, text in members:
            doc = docs.get(name)
            if doc:
                lines.append("    /**")
                lines.extend(f"     * {line}" for line in doc.split("\n"))
                lines.append("     */")
            lines.append(f"    {text};")
        lines.append("}")
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class TSTypeQuery(Type):
    """Type query: typeof Foo."""
    target: str

    def __str__(self) -> str:
        return f"typeof {self.target}"


@dataclass(frozen=True, slots=True)
class TSImportType(Type):
    """Module-scoped import type: import("foo/bar").Baz<T>."""
    module: str
    qualifier: str = "default"
    type_arguments: PyTuple[Type, ...] = ()

    def __str__(self) -> str:
        result = f'import("{self.module}").{self.qualifier}'
        if self.type_arguments:
            result += "<" + ", ".join(str(arg) for arg in self.type_arguments) + ">"
        return result
