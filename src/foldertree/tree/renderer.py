"""Text rendering of folder trees.

Each node becomes one line, ``<prefix><connector><name>``, in the style of
the Unix ``tree`` command. Rendering depends only on the tree's structure and
names, never on the filesystem.
"""

from dataclasses import dataclass
from typing import Iterator

from anytree import PreOrderIter

from foldertree.tree.node import TreeNode

LAST_CONNECTOR = "└── "
MIDDLE_CONNECTOR = "├── "
LAST_INDENT = "    "
MIDDLE_INDENT = "│   "


def stream_render(tree: TreeNode) -> Iterator[str]:
    """Generate the rendered tree one line at a time.

    The root is drawn as the last child of an invisible parent, so it carries the
    ``└── `` connector and its children are indented by four spaces. Every line ends
    with a newline.

    Yields:
        Lines of the tree representation, including the connecting lines.

    Example:
        >>> root = TreeNode("root", full_path="/root", is_dir=True)
        >>> _ = TreeNode("a", parent=root, full_path="/root/a")
        >>> _ = TreeNode("b", parent=root, full_path="/root/b")
        >>> for line in stream_render(root):
        ...     print(line, end="")
        └── root
            ├── a
            └── b
    """

    def write_node(node: TreeNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = LAST_CONNECTOR if is_last else MIDDLE_CONNECTOR
        yield f"{prefix}{connector}{node.name}\n"

        child_prefix = prefix + (LAST_INDENT if is_last else MIDDLE_INDENT)
        children = node.children
        for i, child in enumerate(children):
            yield from write_node(child, child_prefix, i == len(children) - 1)

    yield from write_node(tree, "", True)


def render(tree: TreeNode) -> str:
    """Render the complete tree as a single string.

    Example:
        >>> root = TreeNode("root", full_path="/root", is_dir=True)
        >>> render(root)
        '└── root\\n'
    """
    return "".join(stream_render(tree))


@dataclass(frozen=True)
class TreeCounts:
    """Number of directories (excluding the root), files and placeholders in a tree."""

    directories: int
    files: int
    placeholders: int


def count_nodes(tree: TreeNode) -> TreeCounts:
    """Count the directories, files and placeholders below the root of ``tree``.

    The root is not counted, matching the summary the CLI prints after a render.

    Example:
        >>> root = TreeNode("root", full_path="/root", is_dir=True)
        >>> _ = TreeNode("a", parent=root, full_path="/root/a", is_dir=True)
        >>> _ = TreeNode("b.txt", parent=root, full_path="/root/b.txt")
        >>> _ = TreeNode.placeholder(parent=root)
        >>> count_nodes(root)
        TreeCounts(directories=1, files=1, placeholders=1)
    """
    directories = files = placeholders = 0
    for node in PreOrderIter(tree):
        if node is tree:
            continue
        if node.is_placeholder:
            placeholders += 1
        elif node.is_dir:
            directories += 1
        else:
            files += 1
    return TreeCounts(directories, files, placeholders)
