"""Authorization settings.

Authentication happens upstream; the gateway forwards the caller's ACL
patterns in a request header. Environment variables use AUTH_ prefix.
"""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AuthSettings(BaseSettings):
    """ACL source configuration.

    Example: AUTH_DEFAULT_ACL=agent_pools.*.read,projects.*.read
    """

    default_acl: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["#"],
        description="ACL patterns granted when the request carries none",
    )
    acl_header: str = Field(
        default="X-ACL",
        min_length=1,
        description="Header holding comma separated ACL patterns",
    )

    @field_validator("default_acl", mode="before")
    @classmethod
    def _parse_acl_list(cls, v: object) -> object:
        """Accept a JSON list or a comma separated string."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
