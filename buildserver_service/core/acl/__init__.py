"""ACL based authorization collaborator."""

from buildserver_service.core.acl.access_check import AccessCheck, get_cached_access_check
from buildserver_service.core.acl.checker import ACLChecker

__all__ = ["ACLChecker", "AccessCheck", "get_cached_access_check"]
