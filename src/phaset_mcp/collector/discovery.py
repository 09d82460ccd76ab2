import logging
import os
from typing import Iterable, List, Optional, Set

# [OTEL] Trace API
from opentelemetry import trace

from .config import MAX_DEPTH
from .patterns import PatternSet
from .schema import CollectionEvent

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def validate_root(root: str) -> str:
    """
    Fail-fast check run before any walk begins.

    Returns:
        str: The absolute root path.

    Raises:
        FileNotFoundError: If the root does not exist.
        NotADirectoryError: If the root exists but is not a directory.
    """
    root = os.path.abspath(root)
    if not os.path.exists(root):
        raise FileNotFoundError(f"Path does not exist: {root}")
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Path is not a directory: {root}")
    return root


def discover(
    root: str,
    patterns: Iterable[str],
    exclude: Iterable[str] = (),
    max_depth: int = MAX_DEPTH,
    events: Optional[List[CollectionEvent]] = None,
) -> List[str]:
    """
    Walks `root` depth-first and returns every file matching the patterns.

    The root directory has depth 0 and a directory `n` segments below it has
    depth `n`; only directories with depth <= `max_depth` are listed, so with
    `max_depth=0` only files directly under the root can match.

    Excluded entries are skipped without recursion. Directories are tested both
    as `dir` and `dir/`, which lets `node_modules/**` prune `node_modules`
    itself instead of filtering each file below it.

    Args:
        root (str): Directory to walk.
        patterns (Iterable[str]): Inclusion patterns.
        exclude (Iterable[str]): Exclusion patterns.
        max_depth (int): Maximum recursion depth.
        events (Optional[List[CollectionEvent]]): If given, unreadable and
            depth-pruned directories are appended to it.

    Returns:
        List[str]: Forward-slash relative paths, deduplicated and sorted.

    Raises:
        FileNotFoundError, NotADirectoryError: If `root` is not a directory.
    """
    with tracer.start_as_current_span("collector.discover") as span:
        try:
            root = validate_root(root)
        except OSError as e:
            span.record_exception(e)
            raise

        span.set_attribute("repo.root", root)
        include = PatternSet(patterns)
        ignore = PatternSet(exclude)
        found: Set[str] = set()

        def _record(event: CollectionEvent):
            if events is not None:
                events.append(event)

        def _walk(current_dir: str, rel_dir: str, depth: int):
            try:
                with os.scandir(current_dir) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as e:
                # Skip directories we can't read
                logger.warning(f"Cannot read directory {current_dir}: {e}")
                _record(CollectionEvent("directory_unreadable", rel_dir or ".", str(e)))
                return

            for entry in entries:
                rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name

                # Symlinks are neither files nor directories here (loop prevention)
                if entry.is_dir(follow_symlinks=False):
                    if ignore.matches(rel_path) or ignore.matches(rel_path + "/"):
                        continue
                    if depth + 1 > max_depth:
                        logger.debug(f"Depth limit {max_depth} reached, not entering {rel_path}")
                        _record(CollectionEvent("depth_pruned", rel_path, f"depth limit {max_depth}"))
                        continue
                    _walk(entry.path, rel_path, depth + 1)
                elif entry.is_file(follow_symlinks=False):
                    if ignore.matches(rel_path):
                        continue
                    if include.matches(rel_path):
                        found.add(rel_path)

        if include:
            _walk(root, "", 0)

        results = sorted(found)
        span.set_attribute("collector.candidates", len(results))
        logger.debug(f"Discovered {len(results)} files under {root}")
        return results
