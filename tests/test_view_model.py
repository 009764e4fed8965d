"""Tests for the admin dashboard view-model."""

from datetime import datetime, timedelta

import pytest

from app.dashboard.view_model import (
    ASCENDING,
    DESCENDING,
    DashboardActionError,
    DashboardState,
    filter_and_sort,
    next_sort,
)
from app.models.application import Application

BASE_DATE = datetime(2026, 9, 1, 9, 0, 0)


def make_application(index, full_name, nim="2301700000", major="CS", lnt_class="UI/UX Design", position="UI/UX Design"):
    return Application(
        id=f"app-{index}",
        full_name=full_name,
        nim=nim,
        major=major,
        lnt_class=lnt_class,
        position=position,
        binusian_email=f"user{index}@binus.ac.id",
        private_email=f"user{index}@gmail.com",
        resume_url=f"https://files.example.com/{index}.pdf",
        submission_date=BASE_DATE + timedelta(hours=index),
    )


@pytest.fixture
def applications():
    return [
        make_application(1, "Alice Tan", nim="2301000001", major="Computer Science", lnt_class="C Programming"),
        make_application(2, "Budi Santoso", nim="2301000002", major="Information Systems", position="Java Programming"),
        make_application(3, "Citra Lestari", nim="2301000003", major="Computer Science", lnt_class="Java Programming"),
        make_application(4, "Dewi Anggraini", nim="2401999999", major="Data Science", position="C Programming"),
        make_application(5, "alice wong", nim="2301000005", major="Cyber Security"),
    ]


def names(apps):
    return [app.full_name for app in apps]


def test_default_view_is_newest_first(applications):
    assert names(filter_and_sort(applications)) == [
        "alice wong",
        "Dewi Anggraini",
        "Citra Lestari",
        "Budi Santoso",
        "Alice Tan",
    ]


def test_search_is_case_insensitive_on_name(applications):
    result = filter_and_sort(applications, search_query="ALICE", sort_key="nim", direction=ASCENDING)

    assert names(result) == ["Alice Tan", "alice wong"]


def test_search_matches_nim_and_major(applications):
    assert names(filter_and_sort(applications, search_query="24019")) == ["Dewi Anggraini"]
    assert set(names(filter_and_sort(applications, search_query="computer"))) == {"Alice Tan", "Citra Lestari"}


def test_search_ignores_other_fields(applications):
    assert filter_and_sort(applications, search_query="gmail.com") == []


def test_empty_search_keeps_class_and_position_filters(applications):
    result = filter_and_sort(applications, search_query="", selected_classes=["UI/UX Design"])

    assert set(names(result)) == {"Budi Santoso", "Dewi Anggraini", "alice wong"}


def test_class_and_position_filters_combine(applications):
    result = filter_and_sort(
        applications,
        selected_classes=["UI/UX Design"],
        selected_positions=["C Programming", "Java Programming"],
    )

    assert set(names(result)) == {"Budi Santoso", "Dewi Anggraini"}


def test_opposite_directions_reverse_distinct_keys(applications):
    ascending = filter_and_sort(applications, sort_key="fullName", direction=ASCENDING)
    descending = filter_and_sort(applications, sort_key="fullName", direction=DESCENDING)

    assert names(ascending) == list(reversed(names(descending)))


def test_equal_keys_keep_their_relative_order(applications):
    # three applicants share the "UI/UX Design" position
    ascending = filter_and_sort(applications, sort_key="position", direction=ASCENDING)
    descending = filter_and_sort(applications, sort_key="position", direction=DESCENDING)

    same_position = [a.full_name for a in applications if a.position == "UI/UX Design"]
    assert [a.full_name for a in ascending if a.position == "UI/UX Design"] == same_position
    assert [a.full_name for a in descending if a.position == "UI/UX Design"] == same_position


def test_sort_accepts_attribute_names(applications):
    assert filter_and_sort(applications, sort_key="lnt_class", direction=ASCENDING) == filter_and_sort(
        applications, sort_key="lntClass", direction=ASCENDING
    )


def test_unknown_sort_key_is_rejected(applications):
    with pytest.raises(ValueError):
        filter_and_sort(applications, sort_key="resumeUrl")


def test_unknown_direction_is_rejected(applications):
    with pytest.raises(ValueError):
        filter_and_sort(applications, direction="sideways")


def test_next_sort_flips_active_ascending_column():
    assert next_sort("fullName", ASCENDING, "fullName") == ("fullName", DESCENDING)
    assert next_sort("fullName", DESCENDING, "fullName") == ("fullName", ASCENDING)
    assert next_sort("submissionDate", ASCENDING, "nim") == ("nim", ASCENDING)


def test_state_recomputes_visible_list(applications):
    state = DashboardState(applications)
    state.search_query = "alice"
    assert names(state.visible) == ["alice wong", "Alice Tan"]

    state.request_sort("fullName")
    assert names(state.visible) == ["Alice Tan", "alice wong"]

    state.toggle_filter(state.selected_classes, "C Programming")
    assert names(state.visible) == ["Alice Tan"]
    state.toggle_filter(state.selected_classes, "C Programming")
    assert state.selected_classes == []


@pytest.mark.asyncio
async def test_optimistic_update_keeps_change_on_success(applications):
    state = DashboardState(applications)
    edited = applications[1].model_copy(update={"major": "Business IT"})
    persisted = []

    async def persist(application):
        persisted.append(application.id)

    await state.update(edited, persist)

    assert persisted == ["app-2"]
    assert state.applications[1].major == "Business IT"


@pytest.mark.asyncio
async def test_failed_update_restores_previous_list_exactly(applications):
    state = DashboardState(applications)
    before = list(state.applications)
    edited = applications[0].model_copy(update={"full_name": "Changed"})
    seen_during_call = []

    async def persist(application):
        seen_during_call.append(names(state.applications))
        raise RuntimeError("server said no")

    with pytest.raises(DashboardActionError, match="Failed to update application"):
        await state.update(edited, persist)

    # the edit was visible while the request was in flight
    assert seen_during_call[0][0] == "Changed"
    assert state.applications == before


@pytest.mark.asyncio
async def test_failed_delete_restores_previous_list(applications):
    state = DashboardState(applications)
    before = list(state.applications)

    async def persist(application_id):
        assert application_id not in [a.id for a in state.applications]
        raise RuntimeError("network down")

    with pytest.raises(DashboardActionError, match="Failed to delete application"):
        await state.delete("app-3", persist)

    assert state.applications == before


@pytest.mark.asyncio
async def test_successful_delete_removes_application(applications):
    state = DashboardState(applications)

    async def persist(application_id):
        return None

    await state.delete("app-3", persist)

    assert "Citra Lestari" not in names(state.applications)
    assert len(state.applications) == 4
