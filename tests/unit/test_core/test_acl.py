"""Unit tests for ACL evaluation."""

from __future__ import annotations

import pytest

from buildserver_service.core.acl import ACLChecker
from buildserver_service.core.acl.access_check import AccessCheck, get_cached_access_check
from buildserver_service.core.exceptions import ForbiddenException


class TestAccessCheck:
    @pytest.mark.parametrize(
        ("acl", "required", "expected"),
        [
            (["#"], "agent_pools.1.authorize_agents", True),
            (["agent_pools.*.authorize_agents"], "agent_pools.7.authorize_agents", True),
            (["agent_pools.*.authorize_agents"], "agent_pools.7.enable_agents", False),
            (["agent_pools.*"], "agent_pools.7.enable_agents", False),
            (["agent_pools.#"], "agent_pools.7.enable_agents", True),
            (["agent_pools.1.#", "!agent_pools.1.manage_agents"], "agent_pools.1.manage_agents", False),
            (["agent_pools.1.#", "!agent_pools.1.manage_agents"], "agent_pools.1.enable_agents", True),
            ([], "agent_pools.1.enable_agents", False),
        ],
    )
    def test_matches_required_access(self, acl, required, expected):
        assert AccessCheck(acl).matches_required_access(required) is expected

    def test_none_requirement_is_granted(self):
        assert AccessCheck([]).matches_required_access(None) is True

    def test_cached_check_is_reused(self):
        assert get_cached_access_check(["a.*"]) is get_cached_access_check(("a.*",))


class TestACLChecker:
    def test_helpers(self):
        checker = ACLChecker(["agent_pools.#", "!agent_pools.*.manage_agents"])

        assert checker.has_acl("agent_pools.3.manage_projects")
        assert checker.has_any_acl("agent_pools.3.manage_agents", "agent_pools.3.enable_agents")
        assert not checker.has_all_acls("agent_pools.3.manage_agents", "agent_pools.3.enable_agents")
        assert checker.get_failed_patterns("agent_pools.3.read", "agent_pools.3.manage_agents") == [
            "agent_pools.3.manage_agents"
        ]

    def test_require_raises_forbidden(self):
        checker = ACLChecker(["agent_pools.1.#"])

        checker.require("agent_pools.1.enable_agents")
        with pytest.raises(ForbiddenException) as exc_info:
            checker.require("agent_pools.2.enable_agents")

        assert exc_info.value.status_code == 403
        assert exc_info.value.extra == {"required_access": "agent_pools.2.enable_agents"}
