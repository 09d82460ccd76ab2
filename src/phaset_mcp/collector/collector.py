import logging
import math
import os
import posixpath
from typing import Iterable, List, Optional, Tuple

# [OTEL] Trace API
from opentelemetry import trace

from .config import (
    CHARS_PER_TOKEN,
    CI_DIR_MARKER,
    CI_FILES,
    CONTAINER_FILES,
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_PROFILE,
    DEPTH_PROFILES,
    INFRASTRUCTURE_MARKERS,
    PACKAGE_MANIFESTS,
    PRIORITY_API_SPEC,
    PRIORITY_CI,
    PRIORITY_CONTAINER,
    PRIORITY_DEFAULT,
    PRIORITY_INFRASTRUCTURE,
    PRIORITY_PACKAGE_MANIFEST,
    PRIORITY_README,
    PRIORITY_ROOT_MANIFEST,
    TRUNCATION_NOTICE,
)
from .discovery import discover, validate_root
from .schema import Budgets, CollectedFile, CollectionEvent, CollectionResult

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def resolve_profile(profile: Optional[str]) -> Tuple[str, Tuple[str, ...]]:
    """
    Maps a depth profile name to its inclusion patterns.
    Unknown names fall back to the default profile rather than failing.
    """
    name = profile or DEFAULT_PROFILE
    if name not in DEPTH_PROFILES:
        logger.warning(f"Unknown depth profile '{name}', falling back to '{DEFAULT_PROFILE}'")
        name = DEFAULT_PROFILE
    return name, DEPTH_PROFILES[name]


def estimate_tokens(text: str) -> int:
    """Rough, deterministic estimate: 1 token ~ 4 characters, rounded up."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def truncate_content(content: str, max_chars: int) -> str:
    """Keeps the first `max_chars` characters and appends a truncation notice."""
    if len(content) <= max_chars:
        return content
    return content[:max_chars] + TRUNCATION_NOTICE.format(max_chars=max_chars)


class BudgetedCollector:
    """
    Collects a prioritized, budget-constrained subset of files from a directory.

    The collection funnel is: Discovery (pattern match) -> Ranking (filename
    heuristics) -> Reading (binary check, truncation) -> Budgeting (aggregate
    token cap). All state is local to one `collect()` call.
    """

    def __init__(
        self,
        root: str,
        budgets: Optional[Budgets] = None,
        exclude: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
    ):
        self.root = os.path.abspath(root)
        self.budgets = budgets or Budgets()
        self.exclude = tuple(exclude)

    def collect(self, profile: Optional[str] = DEFAULT_PROFILE) -> CollectionResult:
        """
        Runs discovery for the profile, then reads files in priority order
        until the token budget is exhausted.

        Args:
            profile: 'minimal', 'standard' or 'deep'. Anything else behaves as 'standard'.

        Returns:
            CollectionResult: Accepted files (highest priority first) plus events.

        Raises:
            FileNotFoundError: If the root does not exist.
            NotADirectoryError: If the root is not a directory.
        """
        with tracer.start_as_current_span("collector.collect") as span:
            span.set_attribute("repo.root", self.root)
            try:
                validate_root(self.root)
            except OSError as e:
                span.record_exception(e)
                raise

            name, patterns = resolve_profile(profile)
            span.set_attribute("collector.profile", name)

            result = CollectionResult(root=self.root, profile=name)
            matches = discover(
                self.root,
                patterns,
                exclude=self.exclude,
                max_depth=self.budgets.max_depth,
                events=result.events,
            )
            ranked = self.rank(matches)
            span.set_attribute("collector.candidates", len(ranked))

            for index, rel_path in enumerate(ranked):
                collected = self._read_candidate(rel_path, result.events)
                if collected is None:
                    continue

                # Stop if adding this file would exceed our budget
                if result.total_tokens + collected.estimated_tokens > self.budgets.max_total_tokens:
                    result.budget_skipped = len(ranked) - index
                    detail = (
                        f"{result.total_tokens}/{self.budgets.max_total_tokens} tokens used, "
                        f"collected {len(result.files)} files, "
                        f"skipping remaining {result.budget_skipped} files"
                    )
                    logger.warning(f"Reached token budget limit ({detail})")
                    result.events.append(CollectionEvent("budget_exhausted", rel_path, detail))
                    break

                result.files.append(collected)
                result.total_tokens += collected.estimated_tokens

            span.set_attribute("collector.files", len(result.files))
            span.set_attribute("collector.total_tokens", result.total_tokens)
            logger.info(f"Collected {len(result.files)} files (~{result.total_tokens} tokens)")
            return result

    def rank(self, paths: Iterable[str]) -> List[str]:
        """
        Stable-sorts paths by priority. Ties keep their incoming
        (lexicographic) order.
        """
        return sorted(paths, key=self._determine_priority)

    def _read_candidate(self, rel_path: str, events: List[CollectionEvent]) -> Optional[CollectedFile]:
        """
        Reads, checks and truncates a single candidate.
        Returns None (and records an event) if the file must be skipped.
        """
        full_path = os.path.join(self.root, *rel_path.split("/"))
        try:
            with open(full_path, "rb") as fh:
                raw = fh.read()
        except OSError as e:
            # Permission errors, or the file vanished since discovery
            logger.warning(f"Could not read {rel_path}: {e}")
            events.append(CollectionEvent("unreadable", rel_path, str(e)))
            return None

        if b"\0" in raw:
            logger.warning(f"Skipping {rel_path}: appears to be binary")
            events.append(CollectionEvent("binary", rel_path))
            return None

        content = raw.decode("utf-8", errors="replace")
        max_chars = self.budgets.max_file_chars
        truncated = len(content) > max_chars
        if truncated:
            detail = f"{len(content)} chars, keeping first {max_chars}"
            logger.warning(f"Truncating {rel_path}: too large ({detail})")
            events.append(CollectionEvent("truncated", rel_path, detail))
            content = truncate_content(content, max_chars)

        return CollectedFile(
            path=rel_path,
            content=content,
            original_byte_length=len(raw),
            truncated=truncated,
            estimated_tokens=estimate_tokens(content),
        )

    def _determine_priority(self, rel_path: str) -> int:
        """
        Heuristically ranks a file by how much it tells about the project.
        Lower number = higher priority.
        """
        name = posixpath.basename(rel_path)
        dir_name = posixpath.dirname(rel_path)

        # Highest priority: root manifest and README
        if name == "package.json":
            return PRIORITY_ROOT_MANIFEST
        if name.lower().startswith("readme"):
            return PRIORITY_README

        # Other package manager files
        if name in PACKAGE_MANIFESTS:
            return PRIORITY_PACKAGE_MANIFEST

        # API specs, then container builds
        if name.startswith("openapi.") or name.startswith("swagger.") or "api-spec" in name:
            return PRIORITY_API_SPEC
        if name in CONTAINER_FILES:
            return PRIORITY_CONTAINER

        # CI/CD pipelines
        if CI_DIR_MARKER in dir_name or name in CI_FILES:
            return PRIORITY_CI

        # Infrastructure as code
        if any(marker in rel_path for marker in INFRASTRUCTURE_MARKERS):
            return PRIORITY_INFRASTRUCTURE

        return PRIORITY_DEFAULT


def collect(root: str, profile: Optional[str] = DEFAULT_PROFILE, budgets: Optional[Budgets] = None) -> CollectionResult:
    """Convenience wrapper: one BudgetedCollector per call."""
    return BudgetedCollector(root, budgets=budgets).collect(profile)
