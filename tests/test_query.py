from __future__ import annotations

import pytest

from phaseswarm.db import (
    Project,
    SelectionOutcome,
    filter_projects,
    is_within_root,
    parse_timestamp,
    select_projects,
    sort_projects,
    status_tag,
)


@pytest.mark.parametrize(
    ("cwd", "expected"),
    [
        ("/a/b", True),
        ("/a/b/c", True),
        ("/a/b/c/d", True),
        ("/a/bc", False),
        ("/a", False),
        ("/x/a/b", False),
    ],
)
def test_prefix_match_is_literal_string_containment(cwd: str, expected: bool) -> None:
    assert is_within_root("/a/b", cwd, sep="/") is expected


def test_missing_or_empty_root_never_matches() -> None:
    assert is_within_root(None, "/a/b", sep="/") is False
    assert is_within_root("", "/a/b", sep="/") is False
    assert is_within_root(42, "/a/b", sep="/") is False


def test_no_case_folding_or_trailing_separator_normalisation() -> None:
    assert is_within_root("/A/b", "/a/b", sep="/") is False
    assert is_within_root("/a/b/", "/a/b", sep="/") is False


def _projects() -> list[Project]:
    return [
        Project(name="here", path="/repo/ps/here", project_root="/repo"),
        Project(name="below", path="/repo/sub/ps", project_root="/repo/sub"),
        Project(name="sibling", path="/repo2/ps", project_root="/repo2"),
        Project(name="legacy", path="/old/ps"),
    ]


def test_global_registry_is_scoped_to_cwd() -> None:
    names = [p.name for p in filter_projects(_projects(), "global", "/repo/sub/x", sep="/")]
    assert names == ["here", "below"]


def test_show_all_returns_everything_and_is_a_superset() -> None:
    projects = _projects()
    everything = filter_projects(projects, "global", "/repo", show_all=True, sep="/")
    scoped = filter_projects(projects, "global", "/repo", show_all=False, sep="/")
    assert everything == projects
    assert all(p in everything for p in scoped)


def test_local_registry_is_never_filtered() -> None:
    legacy_only = [Project(name="a", path="/p/a"), Project(name="b", path="/p/b")]
    assert filter_projects(legacy_only, "local", "/anywhere", sep="/") == legacy_only
    assert filter_projects(legacy_only, "global", "/anywhere", sep="/") == []


def test_sort_most_recent_first_and_stable_for_missing() -> None:
    projects = [
        Project(name="first-null"),
        Project(name="jan", last_accessed="2024-01-01"),
        Project(name="jun", last_accessed="2024-06-01"),
        Project(name="second-null"),
    ]
    ordered = [p.name for p in sort_projects(projects)]
    assert ordered == ["jun", "jan", "first-null", "second-null"]


def test_sort_treats_unparseable_as_oldest_and_keeps_ties() -> None:
    projects = [
        Project(name="garbage", last_accessed="not a date"),
        Project(name="a", last_accessed="2024-03-01T10:00:00.000Z"),
        Project(name="b", last_accessed="2024-03-01T10:00:00Z"),
        Project(name="c", last_accessed="2024-03-01T12:00:00+02:00"),
    ]
    # c is 10:00Z as well, so a, b, c tie and keep input order
    assert [p.name for p in sort_projects(projects)] == ["a", "b", "c", "garbage"]


def test_parse_timestamp_variants() -> None:
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("yesterday") is None
    assert parse_timestamp("2024-01-01T00:00:00Z").year == 2024
    naive = parse_timestamp("2024-01-01T00:00:00")
    assert naive is not None and naive.utcoffset().total_seconds() == 0
    assert parse_timestamp(0).year == 1970


@pytest.mark.parametrize(
    ("project", "tag", "color"),
    [
        (Project(status="complete"), "[DONE]", "green"),
        (Project(status="active", current_phase=2, total_phases=5), "[Phase 2/5]", "yellow"),
        (Project(status="active", current_phase=7, total_phases=5), "[Phase 7/5]", "yellow"),
        (Project(status="active"), "[Phase None/None]", "yellow"),
        (Project(status="paused"), "[paused]", "reset"),
        (Project(), "[unknown]", "reset"),
    ],
)
def test_status_tag(project: Project, tag: str, color: str) -> None:
    assert status_tag(project) == (tag, color)


def test_select_projects_outcomes() -> None:
    assert select_projects([], "global", "/repo").outcome is SelectionOutcome.EMPTY

    no_match = select_projects(_projects(), "global", "/elsewhere")
    assert no_match.outcome is SelectionOutcome.NO_MATCH
    assert no_match.total == 4
    assert no_match.projects == []

    everything = select_projects(_projects(), "global", "/elsewhere", show_all=True)
    assert everything.outcome is SelectionOutcome.OK
    assert len(everything.projects) == 4
