"""Test configuration and fixtures for foldertree."""

import pytest

from foldertree.tree.node import TreeNode


@pytest.fixture
def project(tmp_path):
    """Create a small project directory.

    project/
        src/
            main.py
            utils/
                helpers.py
        docs/
            readme.md
        node_modules/
            module.js
        app.log
        app.txt
    """
    root = tmp_path / "project"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "node_modules").mkdir()
    (root / "src" / "main.py").write_text("def main(): pass\n")
    (root / "src" / "utils" / "helpers.py").write_text("def helper(): pass\n")
    (root / "docs" / "readme.md").write_text("# Docs\n")
    (root / "node_modules" / "module.js").write_text("export default {}\n")
    (root / "app.log").write_text("DEBUG: started\n")
    (root / "app.txt").write_text("notes\n")
    return root


def make_tree(layout, name="root", base="/root"):
    """Build an in-memory tree from nested dicts; ``None`` values are files.

    >>> tree = make_tree({"x": {"p": None}, "y": None})
    >>> [child.name for child in tree.children]
    ['x', 'y']
    """

    def attach(children, parent):
        for child_name, grandchildren in children.items():
            path = f"{parent.full_path}/{child_name}"
            node = TreeNode(child_name, parent=parent, full_path=path, is_dir=grandchildren is not None)
            if grandchildren:
                attach(grandchildren, node)

    root = TreeNode(name, full_path=base, is_dir=True)
    attach(layout, root)
    return root
