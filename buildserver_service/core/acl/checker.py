"""Programmatic ACL checks for services and resolvers.

The pagination core never makes authorization decisions; services ask
an ``ACLChecker`` before exposing permission-dependent data, such as the
actions a caller may perform on an agent pool.
"""

from __future__ import annotations

from collections.abc import Iterable

from buildserver_service.core.acl.access_check import get_cached_access_check
from buildserver_service.core.exceptions import ForbiddenException

__all__ = ["ACLChecker"]


class ACLChecker:
    """ACL checker bound to the caller's granted patterns.

    Example:
        >>> checker = ACLChecker(["agent_pools.#", "!agent_pools.*.remove_agents"])
        >>> checker.has_acl("agent_pools.3.manage_projects")
        True
        >>> checker.get_failed_patterns("agent_pools.3.read", "agent_pools.3.remove_agents")
        ['agent_pools.3.remove_agents']
    """

    def __init__(self, acl: Iterable[str]) -> None:
        self.acl = tuple(acl)
        self._checker = get_cached_access_check(self.acl)

    def has_acl(self, pattern: str) -> bool:
        return self._checker.matches_required_access(pattern)

    def has_any_acl(self, *patterns: str) -> bool:
        return any(self.has_acl(pattern) for pattern in patterns)

    def has_all_acls(self, *patterns: str) -> bool:
        return all(self.has_acl(pattern) for pattern in patterns)

    def get_failed_patterns(self, *patterns: str) -> list[str]:
        """Patterns among ``patterns`` the caller is not granted."""
        return [pattern for pattern in patterns if not self.has_acl(pattern)]

    def require(self, pattern: str) -> None:
        """Raise ``ForbiddenException`` unless ``pattern`` is granted."""
        if not self.has_acl(pattern):
            raise ForbiddenException(
                detail=f"Missing required access: {pattern}",
                type="access-denied",
                extra={"required_access": pattern},
            )
