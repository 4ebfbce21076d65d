"""Folder tree construction, pruning and rendering.

This package holds the three pipeline stages and the node type they share:
the builder walks the filesystem, the pruner reduces a built tree to the
parts relevant to a selection, and the renderer turns any tree into text.
"""

from foldertree.tree.builder import TreeBuilder, build_tree
from foldertree.tree.node import PLACEHOLDER_NAME, TreeNode, tree_to_dict
from foldertree.tree.permission_action import PermissionAction
from foldertree.tree.pruner import is_relevant, prune, prune_subtree
from foldertree.tree.renderer import TreeCounts, count_nodes, render, stream_render

__all__ = [
    "PLACEHOLDER_NAME",
    "PermissionAction",
    "TreeBuilder",
    "TreeCounts",
    "TreeNode",
    "build_tree",
    "count_nodes",
    "is_relevant",
    "prune",
    "prune_subtree",
    "render",
    "stream_render",
    "tree_to_dict",
]
