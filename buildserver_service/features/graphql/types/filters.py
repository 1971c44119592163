"""Filter inputs of connection fields."""

from __future__ import annotations

import strawberry


@strawberry.input(description="Restricts an agents connection")
class AgentsFilter:
    authorized: bool | None = strawberry.field(
        default=None,
        description="Only authorized (true) or unauthorized (false) agents",
    )


@strawberry.input(description="Restricts a projects connection")
class ProjectsFilter:
    archived: bool | None = strawberry.field(
        default=None,
        description="Only archived (true) or active (false) projects",
    )


__all__ = ["AgentsFilter", "ProjectsFilter"]
