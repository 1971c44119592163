"""Pydantic schemas for the projects feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from buildserver_service.features.buildserver.models import Project


class ProjectResponse(BaseModel):
    """Representation of a project returned from the API."""

    id: str = Field(description="Project external id")
    name: str = Field(description="Project name")
    parent_id: str | None = Field(default=None, description="Parent project id (None for the root)")
    archived: bool = Field(default=False, description="Whether the project is archived")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, project: Project) -> ProjectResponse:
        return cls(
            id=project.id,
            name=project.name,
            parent_id=project.parent_id,
            archived=project.archived,
        )
