"""ACL dependency.

Authentication happens at the gateway, which forwards the caller's ACL
patterns as a comma separated header. Requests without the header get
the configured default ACL.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from buildserver_service.core.acl import ACLChecker
from buildserver_service.core.settings import get_auth_settings


def parse_acl_header(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def get_acl_checker(request: Request) -> ACLChecker:
    settings = get_auth_settings()
    header = request.headers.get(settings.acl_header)
    if header is None:
        return ACLChecker(settings.default_acl)
    return ACLChecker(parse_acl_header(header))


ACL = Annotated[ACLChecker, Depends(get_acl_checker)]
