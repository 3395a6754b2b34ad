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
"""Target type AST for resolved documentation types."""

from .base import (
    ANY,
    BIGINT,
    BOOLEAN,
    KEYWORD_TYPES,
    NEVER,
    NULL,
    NUMBER,
    OBJECT,
    STRING,
    SYMBOL,
    UNDEFINED,
    UNKNOWN,
    VOID,
    KeywordKind,
    KeywordType,
    TSThisType,
    Type,
)
from .typescript import (
    TSArrayType,
    TSFunctionType,
    TSImportType,
    TSObjectType,
    TSTypeQuery,
    TSTypeReference,
    TSUnionType,
)

__all__ = [
    "ANY",
    "BIGINT",
    "BOOLEAN",
    "KEYWORD_TYPES",
    "NEVER",
    "NULL",
    "NUMBER",
    "OBJECT",
    "STRING",
    "SYMBOL",
    "UNDEFINED",
    "UNKNOWN",
    "VOID",
    "KeywordKind",
    "KeywordType",
    "TSArrayType",
    "TSFunctionType",
    "TSImportType",
    "TSObjectType",
    "TSThisType",
    "TSTypeQuery",
    "TSTypeReference",
    "TSUnionType",
    "Type",
]
