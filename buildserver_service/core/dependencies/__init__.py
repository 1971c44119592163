"""FastAPI dependencies shared by the feature routers."""

from buildserver_service.core.dependencies.acl import ACL, get_acl_checker
from buildserver_service.core.dependencies.pagination import (
    LookupLimit,
    OffsetPagination,
    get_lookup_limit,
    get_offset_pagination,
)

__all__ = [
    "ACL",
    "LookupLimit",
    "OffsetPagination",
    "get_acl_checker",
    "get_lookup_limit",
    "get_offset_pagination",
]
