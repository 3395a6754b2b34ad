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
"""Tokenizer, bracket matcher and tree builder for type expressions."""

from .brackets import NOT_FOUND, find_matching_bracket, split_top_level
from .builder import TreeBuilder, generate_tree
from .tokenizer import tokenize
from .tree import (
    FunctionNode,
    GenericNode,
    ModuleNode,
    NodeKind,
    ObjectNode,
    TreeNode,
    TypeNode,
    UnionNode,
)

__all__ = [
    "NOT_FOUND",
    "FunctionNode",
    "GenericNode",
    "ModuleNode",
    "NodeKind",
    "ObjectNode",
    "TreeBuilder",
    "TreeNode",
    "TypeNode",
    "UnionNode",
    "find_matching_bracket",
    "generate_tree",
    "split_top_level",
    "tokenize",
]
