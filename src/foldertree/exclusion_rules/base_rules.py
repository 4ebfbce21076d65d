from abc import ABC, abstractmethod
from typing import Sequence, Union

from foldertree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory entry exclusion rules.

    Concrete rules decide whether an entry met during a directory walk is dropped from
    the tree. A dropped directory is never descended into. Rules are consulted through
    :meth:`exclude_entry`, which receives every representation of the entry the walker
    knows about; each rule type picks the representation its pattern syntax is defined
    against. File loading and individual rule addition are optional capabilities.

    Example:
        >>> from foldertree.exclusion_rules.wildcard_rules import WildcardExclusionRules
        >>> rules = WildcardExclusionRules(["*.log"])
        >>> rules.exclude_entry("app.log", "/srv/app.log", "app.log", is_dir=False)
        True
        >>> rules.exclude_entry("app.txt", "/srv/app.txt", "app.txt", is_dir=False)
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a single path string matches the loaded rules.

        Args:
            path (str): The path or name to check.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def exclude_entry(self, name: str, full_path: str, relative_path: str, is_dir: bool) -> bool:
        """
        Determine if a directory entry should be excluded from the tree.

        The default implementation tests the root-relative POSIX path, adding a trailing
        slash for directories so that directory-only patterns can match the directory
        itself.

        Args:
            name: Bare name of the entry.
            full_path: Absolute path of the entry.
            relative_path: Path of the entry relative to the tree root, using ``/``.
            is_dir: Whether the entry is a directory.

        Returns:
            bool: True if the entry should be excluded.
        """
        return self.exclude(relative_path + "/" if is_dir else relative_path)

    def has_rules(self) -> bool:
        """Check whether any rule is configured. Rule types without a notion of emptiness return True."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
