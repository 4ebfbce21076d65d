"""Unit tests for composite exclusion rules."""

import pytest

from foldertree.exclusion_rules.base_rules import BaseExclusionRules
from foldertree.exclusion_rules.composite_rules import CompositeExclusionRules
from foldertree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from foldertree.exclusion_rules.wildcard_rules import WildcardExclusionRules


class MockExclusionRules(BaseExclusionRules):
    """Mock exclusion rules for testing."""

    def __init__(self, exclude_patterns=None):
        self.exclude_patterns = exclude_patterns or []
        self.seen = []

    def exclude(self, path: str) -> bool:
        self.seen.append(path)
        return path in self.exclude_patterns


class TestCompositeExclusionRules:
    """Test the CompositeExclusionRules class."""

    def test_init_with_multiple_rules(self):
        rule1 = MockExclusionRules()
        rule2 = MockExclusionRules()
        composite = CompositeExclusionRules([rule1, rule2])

        assert composite.get_rules() == [rule1, rule2]

    def test_get_rules_returns_copy(self):
        composite = CompositeExclusionRules([MockExclusionRules()])
        composite.get_rules().clear()

        assert len(composite.get_rules()) == 1

    def test_init_empty_raises(self):
        with pytest.raises(ValueError, match="At least one exclusion rule"):
            CompositeExclusionRules([])

    def test_init_invalid_rule_raises(self):
        with pytest.raises(TypeError, match="Rule at index 1"):
            CompositeExclusionRules([MockExclusionRules(), "not a rule"])

    def test_exclude_any(self):
        composite = CompositeExclusionRules([MockExclusionRules(["a"]), MockExclusionRules(["b"])])

        assert composite.exclude("a")
        assert composite.exclude("b")
        assert not composite.exclude("c")

    def test_exclude_entry_delegates_with_each_rules_view(self):
        wildcard = WildcardExclusionRules(["^secret$"])
        git = GitIgnoreExclusionRules()
        git.add_rule("build/")
        composite = CompositeExclusionRules([wildcard, git])

        assert composite.exclude_entry("secret", "/srv/secret", "secret", is_dir=False)
        assert composite.exclude_entry("build", "/srv/build", "build", is_dir=True)
        # The gitignore rule never sees the bare name of a nested entry
        assert not composite.exclude_entry("lib", "/srv/pkg/lib", "pkg/lib", is_dir=True)

    def test_default_exclude_entry_passes_relative_path(self):
        rule = MockExclusionRules()
        CompositeExclusionRules([rule]).exclude_entry("lib", "/srv/pkg/lib", "pkg/lib", is_dir=True)

        assert rule.seen == ["pkg/lib/"]

    def test_has_rules(self):
        empty = CompositeExclusionRules([WildcardExclusionRules(), GitIgnoreExclusionRules()])
        assert not empty.has_rules()

        configured = CompositeExclusionRules([WildcardExclusionRules(["x"]), GitIgnoreExclusionRules()])
        assert configured.has_rules()


class TestBaseExclusionRules:
    """Test the optional capabilities of the base class."""

    def test_load_rules_not_supported(self):
        with pytest.raises(NotImplementedError, match="MockExclusionRules"):
            MockExclusionRules().load_rules("rules.txt")

    def test_add_rule_not_supported(self):
        with pytest.raises(NotImplementedError, match="MockExclusionRules"):
            MockExclusionRules().add_rule("*.tmp")

    def test_has_rules_defaults_true(self):
        assert MockExclusionRules().has_rules()
