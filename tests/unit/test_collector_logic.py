import logging

import pytest

from phaset_mcp.collector.collector import (
    BudgetedCollector,
    estimate_tokens,
    resolve_profile,
    truncate_content,
)
from phaset_mcp.collector.config import (
    DEEP_PATTERNS,
    DEFAULT_EXCLUDE_PATTERNS,
    DEPTH_PROFILES,
    MINIMAL_PATTERNS,
    STANDARD_PATTERNS,
)
from phaset_mcp.collector.schema import Budgets


class TestCollectorLogic:
    """
    Unit tests for BudgetedCollector internal logic.
    Focuses on ranking heuristics, truncation and token accounting.
    """

    def test_priority_heuristics(self):
        """
        Verifies that file paths are mapped to the expected priority ranks.
        """
        # We instantiate with specific path; no disk I/O occurs in this method.
        collector = BudgetedCollector("/dummy/path")

        assert collector._determine_priority("package.json") == 1
        assert collector._determine_priority("README.md") == 2
        assert collector._determine_priority("readme.md") == 2
        assert collector._determine_priority("go.mod") == 3
        assert collector._determine_priority("pyproject.toml") == 3
        assert collector._determine_priority("openapi.yaml") == 4
        assert collector._determine_priority("api-spec.yml") == 4
        assert collector._determine_priority("Dockerfile") == 5
        assert collector._determine_priority("docker-compose.yml") == 5
        assert collector._determine_priority(".github/workflows/ci.yml") == 6
        assert collector._determine_priority("Jenkinsfile") == 6
        assert collector._determine_priority("Makefile") == 7
        assert collector._determine_priority("LICENSE") == 7
        assert collector._determine_priority("terraform/main.tf") == 8
        assert collector._determine_priority("k8s/base/deploy.yaml") == 8

    def test_rank_is_stable_for_ties(self):
        collector = BudgetedCollector("/dummy/path")
        paths = sorted(["Makefile", "LICENSE", "README.md", "package.json", "CODEOWNERS", "k8s/a.yaml"])

        ranked = collector.rank(paths)

        assert ranked == ["package.json", "README.md", "CODEOWNERS", "LICENSE", "Makefile", "k8s/a.yaml"]

    def test_estimate_tokens_rounds_up(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2
        assert estimate_tokens("x" * 24000) == 6000

    def test_truncate_content(self):
        assert truncate_content("short", 10) == "short"
        assert truncate_content("x" * 10, 10) == "x" * 10

        truncated = truncate_content("abcdefghij", 4)
        assert truncated.startswith("abcd")
        assert truncated[4:] == "\n\n... [Content truncated - file too large. Showing first 4 characters]"

    def test_default_budgets(self):
        budgets = Budgets()
        assert budgets.max_depth == 10
        assert budgets.max_file_chars == 50000
        assert budgets.max_total_tokens == 15000

        with pytest.raises(AttributeError):
            budgets.max_depth = 3


class TestDepthProfiles:

    def test_profiles_build_supersets(self):
        assert set(MINIMAL_PATTERNS) < set(STANDARD_PATTERNS) < set(DEEP_PATTERNS)
        assert DEPTH_PROFILES["minimal"][: len(MINIMAL_PATTERNS)] == tuple(MINIMAL_PATTERNS)

    def test_known_profiles_resolve(self):
        for name in ("minimal", "standard", "deep"):
            resolved, patterns = resolve_profile(name)
            assert resolved == name
            assert patterns == DEPTH_PROFILES[name]

    def test_unknown_profile_falls_back_to_standard(self, caplog):
        with caplog.at_level(logging.WARNING):
            resolved, patterns = resolve_profile("not-a-real-profile")

        assert resolved == "standard"
        assert patterns == DEPTH_PROFILES["standard"]
        assert "falling back to 'standard'" in caplog.text

    def test_missing_profile_uses_standard(self):
        assert resolve_profile(None)[0] == "standard"

    def test_default_excludes(self):
        assert "node_modules/**" in DEFAULT_EXCLUDE_PATTERNS
        assert ".git/**" in DEFAULT_EXCLUDE_PATTERNS
        assert "*.pyc" in DEFAULT_EXCLUDE_PATTERNS
