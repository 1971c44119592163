"""Tests for the in-memory build server registry."""

from __future__ import annotations

from buildserver_service.core.items import collect
from buildserver_service.features.buildserver.models import Build, CloudImage, CloudProfile, Project
from buildserver_service.features.buildserver.registry import BuildServerRegistry


def test_lookups_by_id(registry: BuildServerRegistry):
    assert registry.find_agent_pool(2).name == "Windows"
    assert registry.find_agent(4).enabled is False
    assert registry.find_build_type("Frontend_Build").project_id == "Frontend"
    assert registry.find_agent_pool(99) is None
    assert registry.find_project("Nope") is None


def test_find_projects_keeps_order_and_skips_unknown(registry: BuildServerRegistry):
    projects = registry.find_projects(["Legacy", "Nope", "_Root"])

    assert [project.id for project in projects] == ["Legacy", "_Root"]


def test_collections_are_copies(empty_registry: BuildServerRegistry):
    empty_registry.add_project(Project("_Root", "<Root project>"))

    empty_registry.all_projects().clear()

    assert len(empty_registry.all_projects()) == 1


def test_project_path(registry: BuildServerRegistry):
    assert [project.id for project in registry.project_path("Backend_Api")] == [
        "_Root",
        "Backend",
        "Backend_Api",
    ]
    assert registry.project_path("Nope") == []


def test_cloud_images_per_profile(empty_registry: BuildServerRegistry):
    profile = empty_registry.add_cloud_profile(
        CloudProfile("p", "Profile"),
        [CloudImage("i1", "One", "p"), CloudImage("i2", "Two", "p")],
    )

    assert [image.id for image in empty_registry.get_images(profile)] == ["i1", "i2"]
    assert empty_registry.get_images(CloudProfile("other", "Other")) == []


def test_builds_holder_scans_lazily(empty_registry: BuildServerRegistry):
    for build_id in range(1, 101):
        empty_registry.add_build(Build(build_id, "bt", str(build_id)))

    result = collect(empty_registry.builds("bt"), count=3)

    assert [build.id for build in result.items] == [100, 99, 98]
    # The fourth accepted build ends the scan
    assert result.processed == 4


def test_duplicate_checker_compares_build_ids(empty_registry: BuildServerRegistry):
    checker = empty_registry.create_duplicate_checker()

    assert checker.check_duplicate_and_remember(Build(1, "bt", "1")) is False
    assert checker.check_duplicate_and_remember(Build(1, "other", "1", branch="x")) is True
