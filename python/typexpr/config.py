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
"""Resolver configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ResolverConfig:
    """Options shared by the tree builder and the name resolvers.

    Attributes:
        verbose: Log the offending node, string or doclet alongside each
            warning.

        strict: Raise TypeExpressionError on the first malformed shape instead
            of substituting ``any``. Off by default; documentation tooling
            should keep going when one comment is broken.

        max_depth: Maximum bracket nesting depth. Deeper subtrees are replaced
            by ``any`` with a warning.

    Example:
        >>> config = ResolverConfig(verbose=True, max_depth=16)
        >>> builder = TreeBuilder(config=config)
    """

    verbose: bool = False
    strict: bool = False
    max_depth: int = 64

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "verbose": self.verbose,
            "strict": self.strict,
            "max_depth": self.max_depth,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ResolverConfig":
        """Create from dictionary."""
        return cls(
            verbose=bool(d.get("verbose", False)),
            strict=bool(d.get("strict", False)),
            max_depth=int(d.get("max_depth", 64)),
        )


# Default configuration singleton
DEFAULT_CONFIG = ResolverConfig()
