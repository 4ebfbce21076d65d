"""Node representation for entries of a folder tree."""

from typing import Any, Dict, Optional

from anytree import Node
from anytree.exporter import DictExporter

PLACEHOLDER_NAME = "..."

_EXPORTED_ATTRS = ("name", "full_path", "is_dir")


class TreeNode(Node):  # type: ignore
    """Node class representing one filesystem entry, or a placeholder for omitted siblings.

    Extends anytree.Node, which supplies the parent/children bookkeeping. Children keep
    the order in which they were attached.

    Attributes:
        name (str): Display label, the base name of the path or ``"..."`` for a placeholder.
        full_path (str): Absolute path of the entry; empty for placeholders.
        is_dir (bool): True if the entry was listed as a directory.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("project", full_path="/srv/project", is_dir=True)
        >>> readme = TreeNode("README.md", parent=root, full_path="/srv/project/README.md")
        >>> [child.name for child in root.children]
        ['README.md']
        >>> TreeNode.placeholder(parent=root).is_placeholder
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        full_path: str = "",
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.full_path = full_path
        self.is_dir = is_dir

    @classmethod
    def placeholder(cls, parent: Optional["TreeNode"] = None) -> "TreeNode":
        """Create a placeholder node standing in for one or more omitted siblings."""
        return cls(PLACEHOLDER_NAME, parent=parent, full_path="", is_dir=False)

    @property
    def is_placeholder(self) -> bool:
        return self.name == PLACEHOLDER_NAME and not self.full_path

    def copy(self, parent: Optional["TreeNode"] = None) -> "TreeNode":
        """Return a childless copy of this node attached to ``parent``."""
        return TreeNode(self.name, parent=parent, full_path=self.full_path, is_dir=self.is_dir)


def tree_to_dict(node: TreeNode) -> Dict[str, Any]:
    """Export a tree as nested dictionaries holding only its structural values.

    Two trees describe the same structure exactly when their exports compare equal,
    whatever the identity of their node objects.

    Example:
        >>> root = TreeNode("a", full_path="/a", is_dir=True)
        >>> _ = TreeNode("b", parent=root, full_path="/a/b")
        >>> tree_to_dict(root)["children"][0]["name"]
        'b'
    """
    exporter = DictExporter(attriter=lambda attrs: [(k, v) for k, v in attrs if k in _EXPORTED_ATTRS])
    return exporter.export(node)
