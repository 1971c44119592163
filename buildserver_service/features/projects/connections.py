"""Project connections."""

from __future__ import annotations

from buildserver_service.core.pagination import DelegatingConnection, LazyEdge
from buildserver_service.features.buildserver.models import Project
from buildserver_service.features.projects.schemas import ProjectResponse


class ProjectEdge(LazyEdge[Project, ProjectResponse]):
    """Edge over a project; its local context is the project itself."""

    def __init__(self, project: Project) -> None:
        super().__init__(project, ProjectResponse.from_domain)


class ProjectsConnection(DelegatingConnection[ProjectResponse, ProjectEdge]):
    edge_type = ProjectEdge


class AgentPoolProjectsConnection(DelegatingConnection[ProjectResponse, ProjectEdge]):
    """Projects associated with an agent pool."""

    edge_type = ProjectEdge


__all__ = ["AgentPoolProjectsConnection", "ProjectEdge", "ProjectsConnection"]
