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
"""Root of the target type hierarchy and the keyword types.

Every node produced by the resolvers is an immutable ``Type``. Keyword types
(``any``, ``string``, ``void``, ...) are interned as module-level singletons.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Type(ABC):
    """Abstract base class for all target types.

    Note: Subclasses use @dataclass(frozen=True) and get __eq__ and __hash__
    automatically, so two independently resolved types compare structurally.
    """

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass


class KeywordKind(Enum):
    """Built-in keyword types of the target language."""

    ANY = "any"
    UNKNOWN = "unknown"
    NUMBER = "number"
    BIGINT = "bigint"
    OBJECT = "object"
    BOOLEAN = "boolean"
    STRING = "string"
    SYMBOL = "symbol"
    THIS = "this"
    VOID = "void"
    UNDEFINED = "undefined"
    NULL = "null"
    NEVER = "never"


@dataclass(frozen=True, slots=True)
class KeywordType(Type):
    """A keyword type such as ``string`` or ``void``."""

    kind: KeywordKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class TSThisType(Type):
    """The polymorphic ``this`` type."""

    def __str__(self) -> str:
        return "this"


ANY = KeywordType(KeywordKind.ANY)
UNKNOWN = KeywordType(KeywordKind.UNKNOWN)
NUMBER = KeywordType(KeywordKind.NUMBER)
BIGINT = KeywordType(KeywordKind.BIGINT)
OBJECT = KeywordType(KeywordKind.OBJECT)
BOOLEAN = KeywordType(KeywordKind.BOOLEAN)
STRING = KeywordType(KeywordKind.STRING)
SYMBOL = KeywordType(KeywordKind.SYMBOL)
VOID = KeywordType(KeywordKind.VOID)
UNDEFINED = KeywordType(KeywordKind.UNDEFINED)
NULL = KeywordType(KeywordKind.NULL)
NEVER = KeywordType(KeywordKind.NEVER)

# `this` has its own node type, so it is absent here.
KEYWORD_TYPES: Dict[KeywordKind, KeywordType] = {
    KeywordKind.ANY: ANY,
    KeywordKind.UNKNOWN: UNKNOWN,
    KeywordKind.NUMBER: NUMBER,
    KeywordKind.BIGINT: BIGINT,
    KeywordKind.OBJECT: OBJECT,
    KeywordKind.BOOLEAN: BOOLEAN,
    KeywordKind.STRING: STRING,
    KeywordKind.SYMBOL: SYMBOL,
    KeywordKind.VOID: VOID,
    KeywordKind.UNDEFINED: UNDEFINED,
    KeywordKind.NULL: NULL,
    KeywordKind.NEVER: NEVER,
}
