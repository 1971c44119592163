"""Builds feature: streamed, deduplicated build searches."""

from __future__ import annotations

from .schemas import BuildResponse, BuildsPage
from .service import BuildService, BuildStatusFilter

__all__ = ["BuildResponse", "BuildService", "BuildStatusFilter", "BuildsPage"]
