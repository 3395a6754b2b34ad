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
"""Keyword type names.

Documentation types use the same keyword names as TypeScript, matched
case-insensitively, plus ``bool`` as an alias of ``boolean``.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..types import KEYWORD_TYPES, KeywordKind, TSThisType, Type

_KEYWORDS: Dict[str, KeywordKind] = {kind.value.upper(): kind for kind in KeywordKind}
_KEYWORDS["BOOL"] = KeywordKind.BOOLEAN


def to_keyword_kind(name: Optional[str]) -> Optional[KeywordKind]:
    """Map a type name to its keyword kind.

    Returns:
        The keyword kind, or None when ``name`` is not a keyword

    Example:
        >>> to_keyword_kind("Bool")
        <KeywordKind.BOOLEAN: 'boolean'>
        >>> to_keyword_kind("Foo") is None
        True
    """
    if not name:
        return None
    return _KEYWORDS.get(name.upper())


def keyword_type(kind: KeywordKind) -> Type:
    """Target node of a keyword; ``this`` is a self-type, not a keyword node."""
    if kind is KeywordKind.THIS:
        return TSThisType()
    return KEYWORD_TYPES[kind]
