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
"""Resolution of intermediate trees and documented names into target types."""

from .doclet import Doclet, DocletProp, DocletReturn, DocletType, PropDesc, PropTree
from .keywords import keyword_type, to_keyword_kind
from .names import (
    FunctionParams,
    NameResolver,
    resolve_complex_type_name,
    resolve_optional_from_name,
    resolve_optional_parameter,
    resolve_type,
    resolve_type_name,
    resolve_variable_parameter,
)
from .tree_resolver import TreeResolver, resolve_tree

__all__ = [
    "Doclet",
    "DocletProp",
    "DocletReturn",
    "DocletType",
    "FunctionParams",
    "NameResolver",
    "PropDesc",
    "PropTree",
    "TreeResolver",
    "keyword_type",
    "resolve_complex_type_name",
    "resolve_optional_from_name",
    "resolve_optional_parameter",
    "resolve_tree",
    "resolve_type",
    "resolve_type_name",
    "resolve_variable_parameter",
    "to_keyword_kind",
]
