"""ACL pattern evaluation.

Patterns are dot separated segments:
    - ``*`` matches exactly one segment
    - ``#`` matches any number of segments, including none
    - a leading ``!`` turns a pattern into a denial

Compiled patterns are cached, so evaluating the same ACL list for many
edges of a page costs one regex match per pattern.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

__all__ = ["AccessCheck", "get_cached_access_check"]


def get_cached_access_check(acl: Iterable[str]) -> AccessCheck:
    """Return a cached ``AccessCheck`` for the given ACL list.

    Example:
        >>> check = get_cached_access_check(["agent_pools.*.read", "!agent_pools.0.read"])
        >>> check.matches_required_access("agent_pools.3.read")
        True
        >>> check.matches_required_access("agent_pools.0.read")
        False
    """
    return _get_cached_access_check(tuple(acl))


@lru_cache(maxsize=2048)
def _compile_acl_pattern(access: str) -> re.Pattern[str]:
    regex = re.escape(access).replace("\\*", "[^.#]*?").replace("\\#", ".*?")
    return re.compile(f"^{regex}$")


@lru_cache(maxsize=512)
def _get_cached_access_check(acl: tuple[str, ...]) -> AccessCheck:
    return AccessCheck(acl)


class AccessCheck:
    """Matcher deciding a required access against granted patterns.

    Denials are checked first and win; otherwise any matching grant
    allows the access; no match denies it.
    """

    def __init__(self, acl: Iterable[str]) -> None:
        entries = list(acl)
        self._positive = [_compile_acl_pattern(entry) for entry in entries if not entry.startswith("!")]
        self._negative = [_compile_acl_pattern(entry[1:]) for entry in entries if entry.startswith("!")]

    def matches_required_access(self, required_access: str | None) -> bool:
        """Return whether ``required_access`` is granted.

        A ``None`` requirement is always granted.
        """
        if required_access is None:
            return True

        if any(pattern.match(required_access) for pattern in self._negative):
            return False
        return any(pattern.match(required_access) for pattern in self._positive)
