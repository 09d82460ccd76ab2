"""
Restricted glob matching for relative, forward-slash paths.

Supported syntax:
*   Exact matches: ``package.json``
*   Single-segment wildcards: ``*.json``, ``src/*.ts`` (never cross ``/``)
*   Any-depth prefixes: ``**/*.yaml`` (zero or more leading segments)
*   Rest-of-path suffixes: ``node_modules/**``
*   Bare ``**``: anything, including ``/``

Dot files are ordinary segments. Matching is case-sensitive. There is no
brace expansion, character class or negation syntax; every other character is
a literal.
"""
import re
from typing import Iterable, Tuple

# Translation order matters: '**/' is consumed before '/**', which is consumed
# before a bare '**', which is consumed before a single '*'.
_ANY_SEGMENTS = "(?:.*/)?"
_REST_OF_PATH = "/.*"
_ANYTHING = ".*"
_SEGMENT_CHARS = "[^/]*"


def normalize_pattern(pattern: str) -> str:
    """Converts platform separators to '/'."""
    return pattern.replace("\\", "/")


def _translate_single(text: str) -> str:
    return _SEGMENT_CHARS.join(re.escape(part) for part in text.split("*"))


def _translate_bare(text: str) -> str:
    return _ANYTHING.join(_translate_single(part) for part in text.split("**"))


def _translate_suffix(text: str) -> str:
    return _REST_OF_PATH.join(_translate_bare(part) for part in text.split("/**"))


def translate(pattern: str) -> str:
    """
    Translates a glob pattern into an equivalent regular expression.

    Each wildcard form is split out in priority order and the literal pieces
    between them are escaped, so no substitution can corrupt the output of an
    earlier one. The result is meant for a full-string match.

    Args:
        pattern (str): The glob pattern (separators are normalized first).

    Returns:
        str: The regex source, without anchors.
    """
    pattern = normalize_pattern(pattern)
    return _ANY_SEGMENTS.join(_translate_suffix(part) for part in pattern.split("**/"))


def compile_pattern(pattern: str) -> re.Pattern:
    return re.compile(translate(pattern))


def match_pattern(path: str, pattern: str) -> bool:
    """Returns True if the whole normalized `path` matches `pattern`."""
    return compile_pattern(pattern).fullmatch(normalize_pattern(path)) is not None


class PatternSet:
    """
    Immutable, compiled list of glob patterns.

    Built fresh for each discovery or collection request, so no compiled
    state is shared between concurrent callers.
    """

    __slots__ = ("_patterns", "_compiled")

    def __init__(self, patterns: Iterable[str] = ()):
        normalized = tuple(normalize_pattern(p) for p in patterns)
        object.__setattr__(self, "_patterns", normalized)
        object.__setattr__(self, "_compiled", tuple(compile_pattern(p) for p in normalized))

    def __setattr__(self, name, value):
        raise AttributeError("PatternSet is immutable")

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __repr__(self) -> str:
        return f"PatternSet({list(self._patterns)!r})"

    def matches(self, path: str) -> bool:
        """Returns True if `path` matches ANY pattern in the set."""
        path = normalize_pattern(path)
        return any(regex.fullmatch(path) for regex in self._compiled)


def is_included(path: str, include: PatternSet, exclude: PatternSet) -> bool:
    """
    Inclusion decision for a single path.

    A path is included iff it matches some inclusion pattern and no exclusion
    pattern. Exclusion is evaluated first.
    """
    if exclude.matches(path):
        return False
    return include.matches(path)
