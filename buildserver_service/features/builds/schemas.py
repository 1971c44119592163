"""Pydantic schemas for the builds feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from buildserver_service.features.buildserver.models import Build, BuildStatus


class BuildResponse(BaseModel):
    id: int = Field(description="Build id")
    build_type_id: str = Field(description="Build configuration id")
    number: str = Field(description="Build number")
    branch: str = Field(description="Branch the build ran on")
    status: BuildStatus = Field(description="Build status")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_domain(cls, build: Build) -> BuildResponse:
        return cls(
            id=build.id,
            build_type_id=build.build_type_id,
            number=build.number,
            branch=build.branch,
            status=build.status,
        )


class BuildsPage(BaseModel):
    """Page of a streamed build search.

    Streaming finders do not know the total size, so the page reports
    whether more matches exist and how much of the history was scanned.
    """

    items: list[BuildResponse] = Field(default_factory=list, description="Matching builds")
    count: int = Field(default=0, description="Number of builds returned")
    start: int = Field(default=0, description="Matches skipped before this page")
    next_start: int | None = Field(default=None, description="Start of the next page (None if no more)")
    has_more: bool = Field(default=False, description="Whether more matching builds exist")
    processed: int = Field(default=0, description="Unique builds inspected")
    lookup_limit_reached: bool = Field(
        default=False,
        description="Scan stopped at the lookup limit; more matches may exist",
    )
