"""Projects feature: project listings and build type ancestry."""

from __future__ import annotations

from .connections import AgentPoolProjectsConnection, ProjectEdge, ProjectsConnection
from .schemas import ProjectResponse
from .service import ProjectService

__all__ = [
    "AgentPoolProjectsConnection",
    "ProjectEdge",
    "ProjectResponse",
    "ProjectService",
    "ProjectsConnection",
]
