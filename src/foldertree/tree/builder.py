"""Folder tree construction with configurable exclusion rules.

This module walks a directory depth-first and produces a tree of
:class:`~foldertree.tree.node.TreeNode` objects. Entries rejected by the
exclusion rules are dropped together with everything beneath them; the
walker never lists an excluded directory.
"""

import errno
import logging
import os
import stat
from typing import List, Optional, Sequence, Set, Tuple

from foldertree.exceptions import FilesystemError, NotFoundError
from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.wildcard_rules import WildcardExclusionRules
from foldertree.paths import normalize_path
from foldertree.tree.file_identifier import FileIdentifier
from foldertree.tree.node import TreeNode
from foldertree.tree.permission_action import PermissionAction
from foldertree.types import PathType

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds folder trees from the live filesystem.

    A builder holds the traversal configuration and can be reused for any number of
    builds; each call to :meth:`build` reads the filesystem afresh and returns a new tree.

    Symbolic Link Behavior:
        By default links are followed the way ``os.stat`` follows them: a link to a
        directory is descended into. A link leading back to a directory already on the
        current branch is kept as a leaf, which stops the walk from looping. A broken link
        is a leaf as well. With ``follow_symlinks=False`` every link is a leaf.

    Read Error Handling:
        - RAISE (default): any failure to stat or list an entry aborts the build with
          FilesystemError
        - IGNORE: the unreadable entry stays in the tree without children and a warning
          is logged; an entry that cannot be stat'ed is drawn as a file

    Attributes:
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries.
        permission_action (PermissionAction): How to handle read errors below the root.
        follow_symlinks (bool): Whether to descend into symbolic links to directories.
        sort_entries (bool): Whether to sort entries by name instead of keeping the
            order the operating system lists them in.

    Example:
        >>> builder = TreeBuilder(WildcardExclusionRules(["node_modules"]))  # doctest: +SKIP
        >>> tree = builder.build("/srv/project")  # doctest: +SKIP
        >>> [child.name for child in tree.children]  # doctest: +SKIP
        ['src', 'package.json']
    """

    def __init__(
        self,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        permission_action: PermissionAction = PermissionAction.RAISE,
        follow_symlinks: bool = True,
        sort_entries: bool = False,
    ) -> None:
        self.exclusion_rules = exclusion_rules
        self.permission_action = permission_action
        self.follow_symlinks = follow_symlinks
        self.sort_entries = sort_entries

    def build(self, path: PathType) -> TreeNode:
        """Build the tree rooted at ``path``.

        The root itself is never subject to exclusion. A file root yields a single leaf.

        Args:
            path: Existing file or directory to start from.

        Returns:
            The root node of the new tree.

        Raises:
            NotFoundError: If ``path`` does not exist.
            FilesystemError: If the root cannot be read, or any entry below it cannot be
                read while permission_action is RAISE.
        """
        root_path = normalize_path(path)
        try:
            os.stat(root_path)
        except FileNotFoundError:
            raise NotFoundError(root_path)
        except OSError as e:
            raise FilesystemError(root_path, e.strerror or str(e)) from e

        name = os.path.basename(root_path) or root_path
        logger.debug("Building tree for %s", root_path)
        is_dir, file_id = self._inspect(root_path, is_root=True)
        return self._create_node(name, root_path, "", is_dir, file_id, set(), parent=None, is_root=True)

    def _inspect(self, path: str, is_root: bool = False) -> Tuple[bool, Optional[FileIdentifier]]:
        """Return whether ``path`` is drawn as a directory, and its identity when it is."""
        try:
            info = os.lstat(path)
            if stat.S_ISLNK(info.st_mode) and (self.follow_symlinks or is_root):
                try:
                    info = os.stat(path)
                except OSError as e:
                    if e.errno not in (errno.ENOENT, errno.ELOOP):
                        raise
                    logger.debug("Not following broken symlink %s", path)
                    return False, None
        except OSError as e:
            if is_root:
                raise FilesystemError(path, e.strerror or str(e)) from e
            self._handle_read_error(path, e)
            return False, None

        if not stat.S_ISDIR(info.st_mode):
            return False, None
        return True, FileIdentifier.from_stat(info)

    def _create_node(
        self,
        name: str,
        full_path: str,
        relative_path: str,
        is_dir: bool,
        file_id: Optional[FileIdentifier],
        branch: Set[FileIdentifier],
        parent: Optional[TreeNode],
        is_root: bool = False,
    ) -> TreeNode:
        """Recursively create the node for ``full_path`` and its kept descendants."""
        node = TreeNode(name, parent=parent, full_path=full_path, is_dir=is_dir)
        if file_id is None:
            return node

        if file_id in branch:
            # Symlink back into the current branch
            logger.debug("Not descending into %s: symlink loop", full_path)
            return node

        try:
            entries = self._list_entries(full_path)
        except OSError as e:
            if is_root:
                raise FilesystemError(full_path, e.strerror or str(e)) from e
            self._handle_read_error(full_path, e)
            return node

        branch.add(file_id)
        for entry in entries:
            child_path = os.path.join(full_path, entry)
            child_relative = f"{relative_path}/{entry}" if relative_path else entry
            child_is_dir, child_id = self._inspect(child_path)
            if self._is_excluded(entry, child_path, child_relative, child_is_dir):
                logger.debug("Excluded %s", child_path)
                continue
            self._create_node(entry, child_path, child_relative, child_is_dir, child_id, branch, parent=node)
        branch.discard(file_id)

        return node

    def _list_entries(self, path: str) -> List[str]:
        entries = os.listdir(path)
        if self.sort_entries:
            entries.sort()
        return entries

    def _is_excluded(self, name: str, full_path: str, relative_path: str, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        return self.exclusion_rules.exclude_entry(name, full_path, relative_path, is_dir)

    def _handle_read_error(self, path: str, error: OSError) -> None:
        if self.permission_action == PermissionAction.RAISE:
            raise FilesystemError(path, error.strerror or str(error)) from error
        logger.warning("Skipping contents of %s: %s", path, error.strerror or error)


def build_tree(
    path: PathType,
    exclude_patterns: Sequence[str] = (),
    *,
    exclusion_rules: Optional[BaseExclusionRules] = None,
    permission_action: PermissionAction = PermissionAction.RAISE,
    follow_symlinks: bool = True,
    sort_entries: bool = False,
) -> TreeNode:
    """Build the folder tree rooted at ``path``.

    Args:
        path: Existing file or directory to start from.
        exclude_patterns: Wildcard patterns tested against each entry's name and full
            path; only the first ``*`` of a pattern is a wildcard.
        exclusion_rules: Additional rules, combined with ``exclude_patterns``.
        permission_action: How to handle read errors below the root.
        follow_symlinks: Whether to descend into symbolic links to directories.
        sort_entries: Whether to sort entries by name.

    Returns:
        The root node of the new tree.

    Raises:
        NotFoundError: If ``path`` does not exist.
        FilesystemError: If reading the filesystem fails.
        InvalidPatternError: If an exclude pattern is not a valid expression.

    Example:
        >>> tree = build_tree("/srv/project", ["*.log", "node_modules"])  # doctest: +SKIP
    """
    rules: List[BaseExclusionRules] = []
    if exclude_patterns:
        rules.append(WildcardExclusionRules(exclude_patterns))
    if exclusion_rules is not None:
        rules.append(exclusion_rules)

    combined: Optional[BaseExclusionRules] = None
    if len(rules) == 1:
        combined = rules[0]
    elif rules:
        combined = CompositeExclusionRules(rules)

    builder = TreeBuilder(
        combined,
        permission_action=permission_action,
        follow_symlinks=follow_symlinks,
        sort_entries=sort_entries,
    )
    return builder.build(path)
