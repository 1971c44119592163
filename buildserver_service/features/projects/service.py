"""Service layer for the projects feature."""

from __future__ import annotations

import logging

from buildserver_service.core.pagination import PaginationArguments
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.projects.connections import ProjectsConnection
from buildserver_service.infra.logging import get_lazy_logger

logger = logging.getLogger(__name__)
lazy_logger = get_lazy_logger(__name__)


class ProjectService:
    """Project listings and build type ancestry."""

    def __init__(self, registry: BuildServerRegistry) -> None:
        self._registry = registry

    def list_projects(
        self,
        pagination: PaginationArguments | None = None,
        *,
        archived: bool | None = None,
    ) -> ProjectsConnection:
        connection = ProjectsConnection(self._registry.all_projects(), pagination)
        if archived is None:
            return connection
        return connection.narrowed(lambda project: project.archived == archived)

    def ancestor_projects(
        self,
        build_type_id: str,
        pagination: PaginationArguments | None = None,
    ) -> ProjectsConnection:
        """Projects from the root down to the build type's own project.

        An unknown build type yields an empty connection rather than an
        error, so a dangling reference never fails the enclosing query.
        """
        build_type = self._registry.find_build_type(build_type_id)
        if build_type is None:
            logger.info("Ancestor projects requested for unknown build type", extra={"build_type_id": build_type_id})
            return ProjectsConnection.empty()

        chain = self._registry.project_path(build_type.project_id)
        lazy_logger.debug(lambda: f"ancestors of {build_type_id}: {[project.id for project in chain]}")
        return ProjectsConnection(chain, pagination)


__all__ = ["ProjectService"]
