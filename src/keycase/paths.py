"""Exclusion matching for canonical JSON paths.

Paths are rooted at ``$`` and built as ``$.key`` for object members and
``$.arr[0]`` for array elements.  A pattern matches a path in one of three
ways:

- glob:       the pattern contains ``*``; every other character is literal and
              ``*`` matches any run of characters (including ``.`` and ``[``).
- exact:      ``path == pattern``.
- descendant: ``path`` starts with ``pattern + "."``.

Compiled glob regexes are memoized in a module-level ``LRUCache`` so a pattern
list reused across many jobs is compiled once.

Example::

    from keycase.paths import is_excluded

    is_excluded("$.userA.secret", ["$.*.secret"])   # True
    is_excluded("$.userA.public", ["$.*.secret"])   # False
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from threading import Lock

from cachetools import LRUCache, cached

__all__ = ["ExclusionMatcher", "child_path", "compile_glob", "element_path", "is_excluded", "matches"]

ROOT = "$"

_GLOB_CACHE: LRUCache[str, re.Pattern[str]] = LRUCache(maxsize=256)


def child_path(parent: str, key: str) -> str:
    """Return the path of object member ``key`` under ``parent``."""
    return f"{ROOT}.{key}" if parent == ROOT else f"{parent}.{key}"


def element_path(parent: str, index: int) -> str:
    """Return the path of array element ``index`` under ``parent``."""
    return f"{parent}[{index}]"


@cached(cache=_GLOB_CACHE, lock=Lock())
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` glob into an anchored regex.

    Args:
        pattern: Path pattern containing at least one ``*``.

    Returns:
        A compiled pattern to be used with ``fullmatch``.
    """
    body = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(body)


def _compile_rule(pattern: str) -> re.Pattern[str] | None:
    return compile_glob(pattern) if "*" in pattern else None


def _rule_matches(path: str, pattern: str, regex: re.Pattern[str] | None) -> bool:
    if regex is not None:
        return regex.fullmatch(path) is not None
    return path == pattern or path.startswith(pattern + ".")


def matches(path: str, pattern: str) -> bool:
    """Return True if ``pattern`` excludes ``path``."""
    return _rule_matches(path, pattern, _compile_rule(pattern))


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    """Return True if any of ``patterns`` matches ``path``.

    Patterns are tried in order and evaluation stops at the first match.  An
    empty pattern list excludes nothing.
    """
    return any(matches(path, p) for p in patterns)


class ExclusionMatcher:
    """A pattern list prepared once for a whole JSON traversal.

    Glob patterns are compiled up front; literal patterns keep their exact and
    descendant checks.  Evaluation order follows the input order.

    Args:
        patterns: Ordered exclusion patterns.  May be empty.
    """

    __slots__ = ("_rules",)

    def __init__(self, patterns: Sequence[str] = ()) -> None:
        self._rules: tuple[tuple[str, re.Pattern[str] | None], ...] = tuple(
            (p, _compile_rule(p)) for p in patterns
        )

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def excludes(self, path: str) -> bool:
        """Return True if any prepared pattern matches ``path``."""
        return any(_rule_matches(path, pattern, regex) for pattern, regex in self._rules)
