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
"""typexpr: documentation type expressions to TypeScript types.

Turns loosely structured type annotations from documentation comments
(``Array.<string>``, ``(number|string)``, ``function(a, b): boolean``,
``module:foo/bar~Baz``, ``{a: string, b: Object.<string, number>}``) into
an immutable TypeScript type tree.

Key Components:
    - parsing: Tokenizer, bracket matcher and recursive-descent tree builder
    - resolution: Tree resolver, keyword and name resolution, doclet helpers
    - types: Target TypeScript type nodes
    - diagnostics: Injected warning sink backed by logging
    - config: Resolver options

Usage:
    >>> from typexpr import resolve_type_name
    >>> str(resolve_type_name("Object.<string, Array.<number>>"))
    '{ [key: string]: number[] }'
"""

# Use lazy imports so that importing a submodule does not pull in the rest
# Full imports are done on first access via __getattr__

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy import of module attributes."""
    if name in ("Diagnostic", "DiagnosticKind", "Diagnostics", "TypeExpressionError"):
        from .diagnostics import (
            Diagnostic,
            DiagnosticKind,
            Diagnostics,
            TypeExpressionError,
        )

        return locals()[name]

    if name in ("DEFAULT_CONFIG", "ResolverConfig"):
        from .config import DEFAULT_CONFIG, ResolverConfig

        return locals()[name]

    if name in ("TreeBuilder", "generate_tree", "tokenize", "NodeKind", "TreeNode"):
        from .parsing import NodeKind, TreeBuilder, TreeNode, generate_tree, tokenize

        return locals()[name]

    if name in (
        "Doclet",
        "DocletProp",
        "DocletReturn",
        "DocletType",
        "NameResolver",
        "TreeResolver",
        "resolve_complex_type_name",
        "resolve_tree",
        "resolve_type",
        "resolve_type_name",
    ):
        from .resolution import (
            Doclet,
            DocletProp,
            DocletReturn,
            DocletType,
            NameResolver,
            TreeResolver,
            resolve_complex_type_name,
            resolve_tree,
            resolve_type,
            resolve_type_name,
        )

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "Doclet",
    "DocletProp",
    "DocletReturn",
    "DocletType",
    "NameResolver",
    "NodeKind",
    "ResolverConfig",
    "TreeBuilder",
    "TreeNode",
    "TreeResolver",
    "TypeExpressionError",
    "generate_tree",
    "resolve_complex_type_name",
    "resolve_tree",
    "resolve_type",
    "resolve_type_name",
    "tokenize",
]
