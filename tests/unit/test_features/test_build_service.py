"""Tests for the streamed build search."""

from __future__ import annotations

from buildserver_service.features.buildserver.models import Build, BuildStatus
from buildserver_service.features.buildserver.registry import BuildServerRegistry
from buildserver_service.features.builds.service import BuildService, BuildStatusFilter


def ids(builds) -> list[int]:
    return [build.id for build in builds]


def test_builds_newest_first(registry: BuildServerRegistry):
    result = BuildService(registry).find_builds(["Backend_Api_Build"])

    assert ids(result.items) == [5, 4, 3, 2, 1]
    assert result.has_more is False


def test_builds_of_several_build_types_are_concatenated(registry: BuildServerRegistry):
    result = BuildService(registry).find_builds(["Frontend_Build", "Backend_Api_Build"], count=7)

    assert ids(result.items) == [15, 14, 13, 12, 11, 5, 4]
    assert result.has_more is True


def test_overlapping_sources_are_deduplicated(registry: BuildServerRegistry):
    # "any branch" next to "main" yields every main build twice
    result = BuildService(registry).find_builds(["Backend_Api_Build"], branches=[None, "main"])

    assert ids(result.items) == [5, 4, 3, 2, 1]
    assert result.processed == 5


def test_repeated_build_type_is_deduplicated(registry: BuildServerRegistry):
    result = BuildService(registry).find_builds(["Frontend_Build", "Frontend_Build"])

    assert ids(result.items) == [15, 14, 13, 12, 11]


def test_branch_filter(registry: BuildServerRegistry):
    result = BuildService(registry).find_builds(["Backend_Api_Build"], branches=["feature"])

    assert ids(result.items) == [4, 2]


def test_status_filter_and_paging(registry: BuildServerRegistry):
    service = BuildService(registry)
    build_types = ["Backend_Api_Build", "Backend_Api_Test", "Frontend_Build"]

    failures = service.find_builds(build_types, status=BuildStatus.FAILURE)
    successes = service.find_builds(build_types, status=BuildStatus.SUCCESS, start=2, count=3)

    assert ids(failures.items) == [3, 8, 13]
    assert ids(successes.items) == [2, 1, 10]
    assert successes.has_more is True


def test_lookup_limit(registry: BuildServerRegistry):
    result = BuildService(registry).find_builds(
        ["Backend_Api_Build", "Frontend_Build"], status=BuildStatus.FAILURE, lookup_limit=4
    )

    assert ids(result.items) == [3]
    assert result.processed == 4
    assert result.lookup_limit_reached is True


def test_unknown_build_type_yields_nothing(registry: BuildServerRegistry):
    assert BuildService(registry).find_builds(["Nope"]).items == []


def test_page_reports_next_start(registry: BuildServerRegistry):
    page = BuildService(registry).find_builds_page(["Backend_Api_Build"], start=1, count=2)

    assert [item.id for item in page.items] == [4, 3]
    assert page.next_start == 3
    assert page.has_more is True

    last = BuildService(registry).find_builds_page(["Backend_Api_Build"], start=3, count=2)
    assert last.next_start is None


def test_status_filter_accepts_everything_without_status():
    build = Build(1, "bt", "1", "main", BuildStatus.UNKNOWN)

    assert BuildStatusFilter(None).is_included(build)
    assert not BuildStatusFilter(BuildStatus.SUCCESS).is_included(build)
