import asyncio
from typing import Any, Callable, Dict, List

from mandram.views.icons import Icon
from mandram.views.state import EmptyPlaceholder, ListView, ListViewState, ViewStatus

OFFICE_BEARERS_PLACEHOLDER = EmptyPlaceholder(
    icon=Icon.USERS,
    title="Office Bearers Coming Soon",
    description="The office bearers for this year have not been announced yet.",
)
CORE_COMMITTEE_PLACEHOLDER = EmptyPlaceholder(
    icon=Icon.USERS,
    title="Core Committee Coming Soon",
    description="The core committee for this year will be listed here.",
)
TEAM_PLACEHOLDER = EmptyPlaceholder(
    icon=Icon.USERS,
    title="No Team Members Found",
    description="We could not find anyone listed for this year.",
)


class TeamYearView:
    """Year tabs over the team roster.

    The newest year is shown as two sections (office bearers, core
    committee); any older year as one merged grid. Faculty never appear here.
    """

    def __init__(
        self,
        years: List[int],
        fetch_office_bearers: Callable[..., Any],
        fetch_core_committee: Callable[..., Any],
        show_error_banner: bool = False,
    ):
        if not years:
            raise ValueError("At least one team year is required")
        self.years = sorted(set(years), reverse=True)
        self.selected_year = self.years[0]
        self.office_bearers = ListViewState(OFFICE_BEARERS_PLACEHOLDER, skeleton_count=4,
                                            show_error_banner=show_error_banner)
        self.core_committee = ListViewState(CORE_COMMITTEE_PLACEHOLDER, skeleton_count=6,
                                            show_error_banner=show_error_banner)
        self._office_view = ListView(fetch_office_bearers, self.office_bearers)
        self._core_view = ListView(fetch_core_committee, self.core_committee)

    @property
    def latest_year(self) -> int:
        return self.years[0]

    @property
    def is_latest_year(self) -> bool:
        return self.selected_year == self.latest_year

    @property
    def badge(self) -> str:
        return "Current Team" if self.is_latest_year else f"Team {self.selected_year}"

    async def select(self, year: int):
        """Switch tab and refetch both rosters for that year"""
        if year not in self.years:
            raise ValueError(f"Unknown team year: {year}")
        self.selected_year = year
        await asyncio.gather(
            self._office_view.load(year=year),
            self._core_view.load(year=year),
        )

    def _merged_snapshot(self) -> Dict[str, Any]:
        statuses = {self.office_bearers.visible_status, self.core_committee.visible_status}
        if ViewStatus.LOADING in statuses:
            return {"status": ViewStatus.LOADING.value, "items": [],
                    "skeleton_count": self.office_bearers.skeleton_count + self.core_committee.skeleton_count}
        if ViewStatus.ERROR in statuses:
            errors = [s.error for s in (self.office_bearers, self.core_committee) if s.error]
            return {"status": ViewStatus.ERROR.value, "items": [], "error": errors[0]}
        members = self.office_bearers.items + self.core_committee.items
        if not members:
            return {"status": ViewStatus.EMPTY.value, "items": [],
                    "placeholder": TEAM_PLACEHOLDER.model_dump(mode="json")}
        return {"status": ViewStatus.POPULATED.value, "items": members}

    def layout(self) -> Dict[str, Any]:
        layout: Dict[str, Any] = {
            "years": self.years,
            "selected_year": self.selected_year,
            "is_latest_year": self.is_latest_year,
            "badge": self.badge,
        }
        if self.is_latest_year:
            layout["layout"] = "sectioned"
            layout["office_bearers"] = self.office_bearers.snapshot()
            layout["core_committee"] = self.core_committee.snapshot()
        else:
            layout["layout"] = "merged"
            layout["members"] = self._merged_snapshot()
        return layout
