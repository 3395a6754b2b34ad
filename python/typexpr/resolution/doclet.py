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
"""Doclet records and the nested property tree built from them.

Doclets are produced upstream by the documentation parser; this module only
models the fields type resolution reads. ``Doclet.from_dict`` accepts the
JSON shape emitted by ``jsdoc -X`` (``{"type": {"names": [...]}}``).

PropTree nests dotted property names under their parents::

    opts            -> root
    opts.name       -> child of opts
    opts.items[].id -> child of opts.items
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..diagnostics import DiagnosticKind, Diagnostics


@dataclass
class DocletType:
    """Type names of a doclet, prop or return value; several names form a union."""

    names: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> Optional["DocletType"]:
        if d is None:
            return None
        return cls(names=list(d.get("names") or []))

    def to_dict(self) -> Dict[str, Any]:
        return {"names": list(self.names)}


@dataclass
class DocletProp:
    """A documented property or parameter.

    Attributes:
        name: Property name, possibly dotted (``opts.name``)
        type: Declared type names
        optional: Declared optional (``[name]``)
        variable: Declared variadic (``...type``)
        defaultvalue: Declared default value
        description: Free-form description
    """

    name: str
    type: Optional[DocletType] = None
    optional: bool = False
    variable: bool = False
    defaultvalue: Any = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DocletProp":
        return cls(
            name=d.get("name", ""),
            type=DocletType.from_dict(d.get("type")),
            optional=bool(d.get("optional", False)),
            variable=bool(d.get("variable", False)),
            defaultvalue=d.get("defaultvalue"),
            description=d.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name}
        if self.type is not None:
            d["type"] = self.type.to_dict()
        if self.optional:
            d["optional"] = True
        if self.variable:
            d["variable"] = True
        if self.defaultvalue is not None:
            d["defaultvalue"] = self.defaultvalue
        if self.description:
            d["description"] = self.description
        return d


@dataclass
class DocletReturn:
    """A documented return value."""

    type: Optional[DocletType] = None
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "DocletReturn":
        return cls(type=DocletType.from_dict(d.get("type")), description=d.get("description"))

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        if self.type is not None:
            d["type"] = self.type.to_dict()
        if self.description:
            d["description"] = self.description
        return d


@dataclass
class Doclet:
    """The parts of a documentation record that type resolution consults.

    Attributes:
        name: Short name
        longname: Fully qualified name, used in diagnostics
        kind: Doclet kind (``member``, ``function``, ``typedef``, ...)
        type: Declared type names
        properties: Declared nested properties (``@property``)
        params: Declared parameters (``@param``)
        returns: Declared return values (``@returns``)
        this: Declared ``this`` type override (``@this``)
        optional: Declared optional
    """

    name: str
    longname: Optional[str] = None
    kind: str = "member"
    type: Optional[DocletType] = None
    properties: Optional[List[DocletProp]] = None
    params: Optional[List[DocletProp]] = None
    returns: Optional[List[DocletReturn]] = None
    this: Optional[str] = None
    optional: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Doclet":
        """Create from a jsdoc JSON record."""
        def props(key: str) -> Optional[List[DocletProp]]:
            values = d.get(key)
            return None if values is None else [DocletProp.from_dict(v) for v in values]

        returns = d.get("returns")
        return cls(
            name=d.get("name", ""),
            longname=d.get("longname"),
            kind=d.get("kind", "member"),
            type=DocletType.from_dict(d.get("type")),
            properties=props("properties"),
            params=props("params"),
            returns=None if returns is None else [DocletReturn.from_dict(r) for r in returns],
            this=d.get("this"),
            optional=bool(d.get("optional", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"name": self.name, "kind": self.kind}
        if self.longname:
            d["longname"] = self.longname
        if self.type is not None:
            d["type"] = self.type.to_dict()
        if self.properties is not None:
            d["properties"] = [p.to_dict() for p in self.properties]
        if self.params is not None:
            d["params"] = [p.to_dict() for p in self.params]
        if self.returns is not None:
            d["returns"] = [r.to_dict() for r in self.returns]
        if self.this:
            d["this"] = self.this
        if self.optional:
            d["optional"] = True
        return d

    def debug_name(self) -> str:
        return self.longname or self.name


@dataclass
class PropDesc:
    """A node of the property tree."""

    name: str
    prop: DocletProp
    children: List["PropDesc"] = field(default_factory=list)


class PropTree:
    """Nests flat, dotted property declarations into a tree.

    Array element members (``items[].id``) nest under the array property.
    A property whose parent was never declared is kept as a root, with a
    warning.

    Attributes:
        roots: Top-level properties in declaration order
    """

    def __init__(self, props: Sequence[DocletProp], diagnostics: Optional[Diagnostics] = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.roots: List[PropDesc] = []
        self._nodes: Dict[str, PropDesc] = {}

        for prop in props:
            self._add(prop)

    def _add(self, prop: DocletProp) -> None:
        if not prop.name:
            self.diagnostics.warn(
                DiagnosticKind.UNKNOWN_TYPE_NAME,
                "Property without a name, this is likely due to invalid JSDoc. Skipping it.",
                prop,
            )
            return

        path = prop.name.replace("[]", "")
        parent_path, dot, leaf = path.rpartition(".")
        node = PropDesc(name=leaf if dot else path, prop=prop)
        self._nodes[path] = node

        if not dot:
            self.roots.append(node)
            return

        parent = self._nodes.get(parent_path)
        if parent is None:
            self.diagnostics.warn(
                DiagnosticKind.UNKNOWN_TYPE_NAME,
                f"Failed to find parent '{parent_path}' of property '{prop.name}', treating it as top-level.",
                prop,
            )
            self.roots.append(node)
            return

        parent.children.append(node)

    def find(self, path: str) -> Optional[PropDesc]:
        """Look up a node by its declared (dotted) name."""
        return self._nodes.get(path.replace("[]", ""))
