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
"""Tokenizer for documentation type expressions."""

from __future__ import annotations

import re
from typing import List

# Capturing group keeps the delimiters as tokens of their own.
_DELIMITERS = re.compile(r"(<|>|,|\(|\)|\||\{|\}|:)")


def tokenize(text: str) -> List[str]:
    """Split a type expression into significant tokens.

    Delimiters (``< > , ( ) | { } :``) are kept as separate tokens,
    surrounding whitespace is trimmed and empty fragments are dropped.

    Example:
        >>> tokenize("Object.<string, number>")
        ['Object.', '<', 'string', ',', 'number', '>']
    """
    tokens: List[str] = []
    for part in _DELIMITERS.split(text):
        part = part.strip()
        if part:
            tokens.append(part)
    return tokens
