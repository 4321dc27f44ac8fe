"""Name filtering with include/exclude glob patterns.

Patterns use shell glob syntax (``*``, ``?``, ``[...]``, ``[!...]``) and
are matched against bare entry names, never full paths. Each pattern is
validated and compiled once, when it is registered, so a malformed
pattern is reported before any traversal starts.
"""

import fnmatch
import re


class PatternSyntaxError(ValueError):
    """Raised when a glob pattern is malformed.

    Attributes:
        pattern: The offending pattern text.
        position: Index in the pattern where the problem was found.
    """

    def __init__(self, pattern: str, position: int, message: str) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(f"{message} at position {position} in pattern {pattern!r}")


def _validate(pattern: str) -> None:
    """Check glob syntax that fnmatch would silently accept.

    Raises:
        PatternSyntaxError: On an unterminated character class (``[]`` and
            ``[!]`` included), a reversed range, or ``**`` that is not a
            whole component.
    """
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "[":
            start = i
            i += 1
            if i < n and pattern[i] == "!":
                i += 1
            # A leading "]" is a literal member
            if i < n and pattern[i] == "]":
                i += 1
            while i < n and pattern[i] != "]":
                if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
                    low, high = pattern[i], pattern[i + 2]
                    if low > high:
                        raise PatternSyntaxError(pattern, i, f"invalid range {low}-{high}")
                    i += 3
                    continue
                i += 1
            if i >= n:
                raise PatternSyntaxError(pattern, start, "unterminated character class")
        elif char == "*":
            run_start = i
            while i < n and pattern[i] == "*":
                i += 1
            run = i - run_start
            if run > 2:
                raise PatternSyntaxError(pattern, run_start, "too many consecutive wildcards")
            if run == 2:
                before = pattern[run_start - 1] if run_start > 0 else "/"
                after = pattern[i] if i < n else "/"
                if before != "/" or after != "/":
                    raise PatternSyntaxError(
                        pattern, run_start, "recursive wildcard must form a whole component"
                    )
            continue
        i += 1


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Validate a glob pattern and compile it to a regular expression.

    Args:
        pattern: Glob pattern text.

    Returns:
        Compiled regular expression matching whole names.

    Raises:
        PatternSyntaxError: If the pattern is malformed.
    """
    _validate(pattern)
    return re.compile(fnmatch.translate(pattern))


class PatternFilter:
    """Accept or reject names by include and exclude glob patterns.

    Exclude patterns take priority: a name matching any exclude pattern
    is rejected even if an include pattern also matches. With no include
    patterns every non-excluded name is accepted.

    Args:
        ignore_case: Match case-insensitively. Set before adding patterns.
    """

    def __init__(self, *, ignore_case: bool = False) -> None:
        self.ignore_case = ignore_case
        self._include: list[tuple[str, re.Pattern[str]]] = []
        self._exclude: list[tuple[str, re.Pattern[str]]] = []

    @property
    def include_patterns(self) -> tuple[str, ...]:
        """Registered include patterns, in order."""
        return tuple(text for text, _ in self._include)

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        """Registered exclude patterns, in order."""
        return tuple(text for text, _ in self._exclude)

    def _prepare(self, pattern: str) -> tuple[str, re.Pattern[str]]:
        text = pattern.lower() if self.ignore_case else pattern
        return text, compile_pattern(text)

    def add_include(self, pattern: str) -> None:
        """Register a pattern that names must match (``-P``).

        Raises:
            PatternSyntaxError: If the pattern is malformed.
        """
        self._include.append(self._prepare(pattern))

    def add_exclude(self, pattern: str) -> None:
        """Register a pattern that rejects matching names (``-I``).

        Raises:
            PatternSyntaxError: If the pattern is malformed.
        """
        self._exclude.append(self._prepare(pattern))

    def matches(self, name: str) -> bool:
        """Check whether a bare entry name passes the filter.

        Args:
            name: Entry basename.

        Returns:
            True if the name is accepted.
        """
        candidate = name.lower() if self.ignore_case else name

        if any(regex.match(candidate) for _, regex in self._exclude):
            return False

        if self._include:
            return any(regex.match(candidate) for _, regex in self._include)

        return True

    def __repr__(self) -> str:
        return (
            f"PatternFilter(include={list(self.include_patterns)!r}, "
            f"exclude={list(self.exclude_patterns)!r}, ignore_case={self.ignore_case!r})"
        )
