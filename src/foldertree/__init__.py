"""Folder tree rendering utilities.

This package builds an in-memory tree of a directory hierarchy, optionally
prunes it down to one or more selected folders, and renders it as a
Unicode connector diagram suitable for pasting into documentation.
"""

from importlib.metadata import PackageNotFoundError, version

from foldertree.tree.builder import TreeBuilder, build_tree
from foldertree.tree.node import TreeNode
from foldertree.tree.pruner import prune, prune_subtree
from foldertree.tree.renderer import render, stream_render

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("foldertree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "TreeBuilder",
    "TreeNode",
    "build_tree",
    "prune",
    "prune_subtree",
    "render",
    "stream_render",
]
