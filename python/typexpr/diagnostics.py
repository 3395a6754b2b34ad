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
"""Diagnostics sink for type-expression resolution.

Malformed documentation types are never fatal: the builder and resolver
repair them locally (usually with ``any``) and report what happened through
a Diagnostics instance. Each instance records the diagnostics it received
and forwards them to the standard logging system.

Example:
    >>> diagnostics = Diagnostics(verbose=True)
    >>> diagnostics.warn(DiagnosticKind.UNBALANCED_BRACKET, "missing '>'", "Array.<string")
    >>> diagnostics.kinds()
    [<DiagnosticKind.UNBALANCED_BRACKET: 1>]
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .config import ResolverConfig

logger = logging.getLogger(__name__)

HEADER = "[typexpr]"


class TypeExpressionError(Exception):
    """Raised instead of degrading to ``any`` when strict mode is enabled."""

    def __init__(self, expression: str, message: str):
        self.expression = expression
        self.message = message
        super().__init__(f"Failed to resolve type '{expression}': {message}")


class DiagnosticKind(Enum):
    """Category of a recoverable resolution anomaly."""

    UNBALANCED_BRACKET = auto()  # closing bracket missing before end of input
    UNRESOLVED_MEMBER = auto()   # fewer resolved children than the shape requires
    INVALID_MAP_KEY = auto()     # Object.<K, V> with K other than string/number
    UNKNOWN_TYPE_NAME = auto()   # nothing to latch onto
    DEPTH_EXCEEDED = auto()      # nesting deeper than ResolverConfig.max_depth


@dataclass(frozen=True)
class Diagnostic:
    """A single reported anomaly.

    Attributes:
        kind: Category of the anomaly
        message: Human readable description
        context: The offending node, string or doclet, if any
    """

    kind: DiagnosticKind
    message: str
    context: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"


@dataclass
class Diagnostics:
    """Collects and logs diagnostics for one or more resolutions.

    Attributes:
        verbose: Also log the context attached to each warning
        strict: Raise TypeExpressionError instead of recording a warning
        records: Diagnostics received so far, in order
        log: Logger the diagnostics are forwarded to
    """

    verbose: bool = False
    strict: bool = False
    records: List[Diagnostic] = field(default_factory=list)
    log: logging.Logger = field(default=logger, repr=False)

    @classmethod
    def from_config(cls, config: "ResolverConfig") -> "Diagnostics":
        """Create a sink honoring the verbosity and strictness of a config."""
        return cls(verbose=config.verbose, strict=config.strict)

    def warn(
        self,
        kind: DiagnosticKind,
        message: str,
        context: Any = None,
        expression: Optional[str] = None,
    ) -> None:
        """Report a recoverable anomaly.

        Args:
            kind: Category of the anomaly
            message: Description of the anomaly and the substitution made
            context: Offending node, string or doclet
            expression: Full source expression, used for strict-mode errors

        Raises:
            TypeExpressionError: If strict mode is enabled
        """
        if self.strict:
            raise TypeExpressionError(
                expression if expression is not None else _describe(context),
                message,
            )

        self.records.append(Diagnostic(kind=kind, message=message, context=context))
        self.log.warning(f"{HEADER} {message}")

        if self.verbose and context is not None:
            self.log.warning(f"{HEADER} {_describe(context)}")

    def debug(self, message: str) -> None:
        self.log.debug(f"{HEADER} {message}")

    def kinds(self) -> List[DiagnosticKind]:
        """Return the kinds of all recorded diagnostics, in order."""
        return [record.kind for record in self.records]

    def messages(self) -> List[str]:
        return [record.message for record in self.records]

    def clear(self) -> None:
        self.records.clear()

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        # An empty sink is still a valid sink.
        return True


def _describe(context: Any) -> str:
    """Render diagnostic context for the log."""
    if isinstance(context, str):
        return context

    dump = getattr(context, "dump", None)
    if callable(dump):
        lines: List[str] = []
        dump(lines.append)
        return "\n".join(lines)

    try:
        return json.dumps(context, indent=4, default=_to_jsonable)
    except (TypeError, ValueError):
        return repr(context)


def _to_jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return str(value)
