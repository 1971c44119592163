"""FastAPI dependency for the build server finder."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from buildserver_service.features.buildserver.registry import BuildServerRegistry, get_registry

Registry = Annotated[BuildServerRegistry, Depends(get_registry)]

__all__ = ["Registry"]
