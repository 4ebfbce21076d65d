"""Reduction of a folder tree to the parts relevant to selected folders.

A node is relevant to a selected folder when it lies on the way from the root
down to that folder, or anywhere beneath it. Pruning keeps the relevant nodes
and replaces each group of dropped siblings with a single ``...`` placeholder.

The input tree is never modified: every pruning call returns a new tree, so a
tree built once can be pruned repeatedly with different selections.
"""

import logging
import os
from typing import Iterable, List, Optional, Sequence, Tuple

from foldertree.exceptions import InvalidSelectionError, NoCommonAncestorError
from foldertree.paths import is_segment_prefix, path_parts
from foldertree.tree.node import TreeNode
from foldertree.types import PathType

logger = logging.getLogger(__name__)

Parts = Tuple[str, ...]


def prune(tree: TreeNode, selected_paths: Sequence[PathType]) -> TreeNode:
    """Prune ``tree`` down to the selected folders.

    With a single selection the result is rooted at the selected folder itself, so none
    of its ancestors are shown. With several selections the result is rooted at their
    lowest common ancestor: the deepest node found at the same depth on the path from
    the root to every selected folder.

    Args:
        tree: Root of a tree produced by the builder.
        selected_paths: Folders to highlight. Each must be present in ``tree``.

    Returns:
        A new tree; ``tree`` is left untouched.

    Raises:
        InvalidSelectionError: If no folders are selected, or a selected folder lies
            outside ``tree`` or was excluded from it.
        NoCommonAncestorError: If the selected folders share no node.

    Example:
        >>> root = TreeNode("root", full_path="/root", is_dir=True)
        >>> x = TreeNode("x", parent=root, full_path="/root/x", is_dir=True)
        >>> _ = TreeNode("p", parent=x, full_path="/root/x/p")
        >>> _ = TreeNode("y", parent=root, full_path="/root/y")
        >>> pruned = prune(root, ["/root/x"])
        >>> pruned.name, [child.name for child in pruned.children]
        ('x', ['p'])
    """
    targets = _selection_parts(selected_paths)
    node_paths = [_node_path(tree, target) for target in targets]

    if len(node_paths) == 1:
        new_root = node_paths[0][-1]
    else:
        new_root = _lowest_common_ancestor(node_paths)
    logger.debug("Pruning %d selection(s) below %s", len(targets), new_root.full_path)

    return _copy_relevant(new_root, targets, parent=None)


def prune_subtree(node: TreeNode, selected_paths: Sequence[PathType]) -> TreeNode:
    """Filter ``node`` and its descendants by relevance, keeping ``node`` as the root.

    Among each group of siblings, relevant nodes are copied in their original order and,
    if at least one sibling was dropped, one placeholder is appended after them.
    A placeholder already present counts as a dropped sibling, so each group still ends
    with at most one placeholder.

    Raises:
        InvalidSelectionError: If no folders are selected.

    Example:
        >>> root = TreeNode("root", full_path="/root", is_dir=True)
        >>> for name in ("x", "y", "z"):
        ...     _ = TreeNode(name, parent=root, full_path=f"/root/{name}", is_dir=True)
        >>> [child.name for child in prune_subtree(root, ["/root/x"]).children]
        ['x', '...']
    """
    return _copy_relevant(node, _selection_parts(selected_paths), parent=None)


def is_relevant(node: TreeNode, selected_paths: Iterable[PathType]) -> bool:
    """Check whether ``node`` is an ancestor-or-self or descendant-or-self of any selection.

    Placeholders carry no path and are never relevant.
    """
    return _is_relevant(node, [path_parts(p) for p in selected_paths])


def _selection_parts(selected_paths: Sequence[PathType]) -> List[Parts]:
    if not selected_paths:
        raise InvalidSelectionError("No folders selected")
    # Duplicates collapse, first occurrence keeps its position
    return list(dict.fromkeys(path_parts(p) for p in selected_paths))


def _is_relevant(node: TreeNode, targets: Sequence[Parts]) -> bool:
    if node.is_placeholder:
        return False
    parts = path_parts(node.full_path)
    return any(is_segment_prefix(parts, target) or is_segment_prefix(target, parts) for target in targets)


def _node_path(tree: TreeNode, target: Parts) -> List[TreeNode]:
    """Return the nodes from ``tree`` down to the node whose path is ``target``."""
    current = tree
    parts = path_parts(tree.full_path)
    if not is_segment_prefix(parts, target):
        raise InvalidSelectionError(f"Selected folder is outside the tree root: {_join(target)}")

    nodes = [current]
    for depth in range(len(parts), len(target)):
        segment = target[depth]
        current = next(
            (child for child in current.children if not child.is_placeholder and child.name == segment),
            None,
        )
        if current is None:
            raise InvalidSelectionError(f"Selected folder is not part of the tree (is it excluded?): {_join(target)}")
        nodes.append(current)
    return nodes


def _lowest_common_ancestor(node_paths: Sequence[Sequence[TreeNode]]) -> TreeNode:
    lca: Optional[TreeNode] = None
    for level in zip(*node_paths):
        first = level[0]
        if any(other.full_path != first.full_path for other in level[1:]):
            break
        lca = first
    if lca is None:
        raise NoCommonAncestorError("Selected folders have no common ancestor in the tree")
    return lca


def _copy_relevant(node: TreeNode, targets: Sequence[Parts], parent: Optional[TreeNode] = None) -> TreeNode:
    copy = node.copy(parent=parent)
    dropped = False
    for child in node.children:
        if _is_relevant(child, targets):
            _copy_relevant(child, targets, parent=copy)
        else:
            # Placeholders already present merge into the one appended below
            dropped = True
    if dropped:
        TreeNode.placeholder(parent=copy)
    return copy


def _join(parts: Parts) -> str:
    return os.path.join(*parts) if parts else ""
