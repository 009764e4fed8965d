"""
Admin dashboard view-model.

`filter_and_sort` is a pure function of the fetched applications and the
current search/sort/filter inputs. `DashboardState` keeps those inputs plus
the fetched list, and applies edits and deletes optimistically: the local
list changes first and is restored from a snapshot if the server call fails.
"""

import logging
from typing import Awaitable, Callable, Iterable, List, Optional, Sequence

from app.models.application import Application

logger = logging.getLogger(__name__)

ASCENDING = "asc"
DESCENDING = "desc"

DEFAULT_SORT_KEY = "submission_date"
DEFAULT_DIRECTION = DESCENDING

# Columns the dashboard can sort by (wire name -> attribute)
SORTABLE_FIELDS = {
    "fullName": "full_name",
    "nim": "nim",
    "major": "major",
    "lntClass": "lnt_class",
    "position": "position",
    "binusianEmail": "binusian_email",
    "privateEmail": "private_email",
    "submissionDate": "submission_date",
}


class DashboardActionError(Exception):
    """An optimistic edit/delete was rolled back because the server call failed."""


def resolve_sort_key(key: str) -> str:
    """Accept either the camelCase column name or the attribute name."""
    if key in SORTABLE_FIELDS:
        return SORTABLE_FIELDS[key]
    if key in SORTABLE_FIELDS.values():
        return key
    raise ValueError(f"Cannot sort by {key!r}")


def matches_search(application: Application, search_query: str) -> bool:
    query = search_query.lower()
    return (
        query in application.full_name.lower()
        or query in application.nim.lower()
        or query in application.major.lower()
    )


def filter_and_sort(
    applications: Iterable[Application],
    search_query: str = "",
    sort_key: str = DEFAULT_SORT_KEY,
    direction: str = DEFAULT_DIRECTION,
    selected_classes: Sequence[str] = (),
    selected_positions: Sequence[str] = (),
) -> List[Application]:
    if direction not in (ASCENDING, DESCENDING):
        raise ValueError(f"Unknown sort direction {direction!r}")
    attribute = resolve_sort_key(sort_key)

    visible = [
        app
        for app in applications
        if matches_search(app, search_query or "")
        and (not selected_classes or app.lnt_class in selected_classes)
        and (not selected_positions or app.position in selected_positions)
    ]
    # sorted() is stable in both directions, so equal keys keep their order
    return sorted(visible, key=lambda app: getattr(app, attribute), reverse=direction == DESCENDING)


def next_sort(current_key: str, current_direction: str, key: str):
    """Clicking the active ascending column flips it; any other click sorts ascending."""
    if resolve_sort_key(current_key) == resolve_sort_key(key) and current_direction == ASCENDING:
        return key, DESCENDING
    return key, ASCENDING


class DashboardState:
    def __init__(self, applications: Iterable[Application] = ()):
        self.applications: List[Application] = list(applications)
        self.search_query = ""
        self.sort_key = DEFAULT_SORT_KEY
        self.direction = DEFAULT_DIRECTION
        self.selected_classes: List[str] = []
        self.selected_positions: List[str] = []

    @property
    def visible(self) -> List[Application]:
        return filter_and_sort(
            self.applications,
            search_query=self.search_query,
            sort_key=self.sort_key,
            direction=self.direction,
            selected_classes=self.selected_classes,
            selected_positions=self.selected_positions,
        )

    def request_sort(self, key: str):
        self.sort_key, self.direction = next_sort(self.sort_key, self.direction, key)

    def toggle_filter(self, selected: List[str], option: str):
        if option in selected:
            selected.remove(option)
        else:
            selected.append(option)

    async def update(self, application: Application, persist: Callable[[Application], Awaitable[Optional[object]]]):
        snapshot = list(self.applications)
        self.applications = [application if app.id == application.id else app for app in self.applications]
        try:
            await persist(application)
        except Exception as e:
            logger.warning("Update of application %s failed; restoring list: %s", application.id, e)
            self.applications = snapshot
            raise DashboardActionError("Failed to update application. Please try again.") from e

    async def delete(self, application_id: str, persist: Callable[[str], Awaitable[Optional[object]]]):
        snapshot = list(self.applications)
        self.applications = [app for app in self.applications if app.id != application_id]
        try:
            await persist(application_id)
        except Exception as e:
            logger.warning("Delete of application %s failed; restoring list: %s", application_id, e)
            self.applications = snapshot
            raise DashboardActionError("Failed to delete application. Please try again.") from e
