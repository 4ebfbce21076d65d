"""Exclusion rules built from simple single-wildcard patterns."""

import re
from os import PathLike
from pathlib import Path
from typing import List, Pattern, Sequence, Union

from foldertree.exceptions import InvalidPatternError
from foldertree.types import PathType

from .base_rules import BaseExclusionRules


def compile_wildcard(pattern: str) -> Pattern[str]:
    """Translate an exclude pattern into a compiled regular expression.

    Only the first ``*`` is turned into ``.*``; the rest of the pattern is handed to
    the regex engine untouched, so other regex metacharacters keep their meaning.

    Raises:
        InvalidPatternError: If the translated pattern is not a valid regular expression.

    Example:
        >>> compile_wildcard("*.log").pattern
        '.*.log'
        >>> compile_wildcard("a*b*").pattern
        'a.*b*'
    """
    try:
        return re.compile(pattern.replace("*", ".*", 1))
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


class WildcardExclusionRules(BaseExclusionRules):
    """Exclusion rules matching entry names and full paths against wildcard patterns.

    A pattern matches when its translated regular expression is found anywhere in the
    tested string (unanchored, case-sensitive). An entry is excluded when any pattern
    matches either its bare name or its full path.

    Attributes:
        patterns (List[str]): The patterns as supplied, in order.

    Example:
        >>> rules = WildcardExclusionRules(["node_modules"])
        >>> rules.add_rule("*.log")
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("server.log")
        True
        >>> rules.exclude("server.txt")
        False
    """

    def __init__(self, patterns: Sequence[str] = ()) -> None:
        self.patterns: List[str] = []
        self._compiled: List[Pattern[str]] = []
        for pattern in patterns:
            self.add_rule(pattern)

    def exclude(self, path: str) -> bool:
        return any(regex.search(path) for regex in self._compiled)

    def exclude_entry(self, name: str, full_path: str, relative_path: str, is_dir: bool) -> bool:
        return self.exclude(name) or self.exclude(full_path)

    def has_rules(self) -> bool:
        return bool(self._compiled)

    def add_rule(self, rule: str) -> None:
        self._compiled.append(compile_wildcard(rule))
        self.patterns.append(rule)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load patterns from one or more files, one pattern per line.

        Blank lines and lines starting with ``#`` are skipped. Surrounding whitespace
        is stripped from each pattern.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            InvalidPatternError: If a pattern in the file does not compile.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            for line in path.read_text(encoding="utf-8").splitlines():
                pattern = line.strip()
                if pattern and not pattern.startswith("#"):
                    self.add_rule(pattern)
