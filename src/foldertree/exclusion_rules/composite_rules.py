"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it. Each constituent
    sees the entry through its own :meth:`exclude_entry`, so wildcard rules keep testing
    names and full paths while gitignore rules keep testing root-relative paths.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from foldertree.exclusion_rules.wildcard_rules import WildcardExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("dist/")
        >>> composite = CompositeExclusionRules([WildcardExclusionRules(["*.log"]), git_rules])
        >>> composite.exclude_entry("dist", "/srv/dist", "dist", is_dir=True)
        True
        >>> composite.exclude_entry("app.log", "/srv/app.log", "app.log", is_dir=False)
        True
        >>> composite.exclude_entry("app.py", "/srv/app.py", "app.py", is_dir=False)
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine, evaluated in order.

        Raises:
            ValueError: If the rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

    def exclude_entry(self, name: str, full_path: str, relative_path: str, is_dir: bool) -> bool:
        return any(rule.exclude_entry(name, full_path, relative_path, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
