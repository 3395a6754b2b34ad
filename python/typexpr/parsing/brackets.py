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
"""Bracket matching over token sequences."""

from __future__ import annotations

from typing import List, Sequence

NOT_FOUND = -1

# (open, close) for every bracket-delimited form of the grammar.
ANGLE = ("<", ">")
PAREN = ("(", ")")
BRACE = ("{", "}")

OPENING = frozenset(b[0] for b in (ANGLE, PAREN, BRACE))
CLOSING = frozenset(b[1] for b in (ANGLE, PAREN, BRACE))


def find_matching_bracket(
    tokens: Sequence[str],
    start: int,
    open_bracket: str,
    close_bracket: str,
) -> int:
    """Find the index of the token closing the bracket opened at or after ``start``.

    Same-kind brackets nest via a depth counter; other bracket kinds are
    ignored. Closing tokens seen before the first opening one are ignored too.

    Returns:
        Index of the matching close, or NOT_FOUND if the tokens run out first.
    """
    depth = 0
    for i in range(start, len(tokens)):
        token = tokens[i]
        if token == open_bracket:
            depth += 1
        elif token == close_bracket and depth > 0:
            depth -= 1
            if depth == 0:
                return i
    return NOT_FOUND


def split_top_level(tokens: Sequence[str], separator: str = ",") -> List[List[str]]:
    """Split tokens on ``separator`` occurrences outside of any bracket."""
    segments: List[List[str]] = [[]]
    depth = 0
    for token in tokens:
        if token in OPENING:
            depth += 1
        elif token in CLOSING and depth > 0:
            depth -= 1
        elif token == separator and depth == 0:
            segments.append([])
            continue
        segments[-1].append(token)
    return [segment for segment in segments if segment]
