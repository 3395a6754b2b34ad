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
"""Intermediate tree built from documentation type expressions.

One node class per shape of the grammar:

    GENERIC   Foo.<X, Y>              children are the type arguments
    UNION     (a|b|c)                 children are the alternatives
    FUNCTION  function(a): ret        parameter types, then the return type
    TYPE      string, X               leaf
    OBJECT    {a: b, c: d}            alternating key and value nodes
    MODULE    module:foo/bar~Baz      children are applied type arguments

TUPLE is a reserved kind; no grammar rule produces it.

The parent link is a plain back-reference used for diagnostics only. It is
excluded from equality and repr, so two trees built from the same string
compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, ClassVar, Iterator, List, Optional, Tuple


class NodeKind(Enum):
    """Shape of an intermediate tree node."""

    GENERIC = auto()
    UNION = auto()
    FUNCTION = auto()
    TUPLE = auto()  # reserved, never built
    TYPE = auto()
    OBJECT = auto()
    MODULE = auto()


@dataclass
class TreeNode:
    """Base class of all intermediate tree nodes.

    Attributes:
        name: Display name; the type name for TYPE and GENERIC nodes
        children: Owned child nodes, in source order
        parent: Enclosing node, or None for the root
    """

    kind: ClassVar[NodeKind]

    name: str
    children: List["TreeNode"] = field(default_factory=list)
    parent: Optional["TreeNode"] = field(default=None, repr=False, compare=False)

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """Append ``child`` and make this node its parent."""
        child.parent = self
        self.children.append(child)
        return child

    def dump(self, output: Callable[[str], None] = print, indent: int = 0) -> None:
        """Write an indented listing of this subtree, one node per line."""
        output(f"{'  ' * indent}{self._describe()}")
        for child in self.children:
            child.dump(output, indent + 1)

    def dumps(self) -> str:
        lines: List[str] = []
        self.dump(lines.append)
        return "\n".join(lines)

    def path(self) -> str:
        """Names from the root down to this node, for diagnostics."""
        names: List[str] = []
        node: Optional[TreeNode] = self
        while node is not None:
            names.append(node.name)
            node = node.parent
        return " > ".join(reversed(names))

    def type_to_string(self) -> str:
        return self.kind.name

    def _describe(self) -> str:
        return f"name: {self.name}, type:{self.type_to_string()}"


@dataclass
class GenericNode(TreeNode):
    kind: ClassVar[NodeKind] = NodeKind.GENERIC


@dataclass
class UnionNode(TreeNode):
    kind: ClassVar[NodeKind] = NodeKind.UNION


@dataclass
class FunctionNode(TreeNode):
    """Function type; the last child is always the return type."""

    kind: ClassVar[NodeKind] = NodeKind.FUNCTION


@dataclass
class TypeNode(TreeNode):
    """Leaf naming a basic type."""

    kind: ClassVar[NodeKind] = NodeKind.TYPE


@dataclass
class ObjectNode(TreeNode):
    """Record literal; children alternate key node, value node."""

    kind: ClassVar[NodeKind] = NodeKind.OBJECT

    def pairs(self) -> Iterator[Tuple["TreeNode", Optional["TreeNode"]]]:
        for i in range(0, len(self.children), 2):
            value = self.children[i + 1] if i + 1 < len(self.children) else None
            yield self.children[i], value


@dataclass
class ModuleNode(TreeNode):
    """Reference into a module; ``name`` is the module path.

    Attributes:
        qualifier: Named export selected from the module, or None for the
            default export
    """

    kind: ClassVar[NodeKind] = NodeKind.MODULE

    qualifier: Optional[str] = None

    def _describe(self) -> str:
        return f"{super()._describe()}, qualifier:{self.qualifier or ''}"
