"""
Page sections of the site as loadable view models.

Each section fetches through the data-access services, keeps its own
transient state and serialises to a snapshot the page renderer consumes.
Nothing is cached between requests.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from mandram.config import settings
from mandram.modules.achievements.service import AchievementService
from mandram.modules.events.service import EventService
from mandram.modules.gallery.service import GalleryService
from mandram.modules.kanaiyazhi.service import KanaiyazhiService
from mandram.modules.team.service import TeamService
from mandram.views.carousel import Carousel
from mandram.views.icons import Icon, icon_for_category
from mandram.views.lightbox import Lightbox
from mandram.views.state import EmptyPlaceholder, ListView, ListViewState
from mandram.views.team_year import TeamYearView

logger = logging.getLogger(__name__)


def _with_icons(snapshot: Dict[str, Any]) -> Dict[str, Any]:
    """Attach the category icon to every item of a snapshot"""
    snapshot["items"] = [
        {**item.model_dump(mode="json"), "icon": icon_for_category(item.category).value}
        for item in snapshot["items"]
    ]
    return snapshot


class EventsSection:
    def __init__(self, supabase: Client, past_limit: int = 10):
        service = EventService(supabase)
        self.past_limit = past_limit
        self.upcoming = ListViewState(EmptyPlaceholder(
            icon=Icon.CALENDAR,
            title="No Upcoming Events",
            description="Stay tuned! New events will be announced soon.",
        ))
        self.past = ListViewState(EmptyPlaceholder(
            icon=Icon.CALENDAR,
            title="No Past Events",
            description="Our event history will appear here.",
        ))
        self._upcoming_view = ListView(service.fetch_upcoming_events, self.upcoming)
        self._past_view = ListView(service.fetch_past_events, self.past)

    async def load(self):
        await asyncio.gather(
            self._upcoming_view.load(),
            self._past_view.load(limit=self.past_limit),
        )

    def snapshot(self) -> Dict[str, Any]:
        return {
            "section": "events",
            "upcoming": _with_icons(self.upcoming.snapshot()),
            "past": _with_icons(self.past.snapshot()),
        }


class AchievementsSection:
    def __init__(self, supabase: Client):
        service = AchievementService(supabase)
        self.state = ListViewState(EmptyPlaceholder(
            icon=Icon.TROPHY,
            title="No Achievements Yet",
            description="Our milestones and awards will be showcased here.",
        ))
        self._view = ListView(service.fetch_achievements, self.state)

    async def load(self):
        await self._view.load()

    def snapshot(self) -> Dict[str, Any]:
        return {"section": "achievements", **_with_icons(self.state.snapshot())}


class KanaiyazhiSection:
    def __init__(self, supabase: Client):
        service = KanaiyazhiService(supabase)
        self.state = ListViewState(EmptyPlaceholder(
            icon=Icon.BOOK_OPEN,
            title="No Editions Published",
            description="Kanaiyazhi editions will be available to read here.",
        ))
        self._view = ListView(service.fetch_editions, self.state)

    async def load(self):
        await self._view.load()

    def snapshot(self) -> Dict[str, Any]:
        return {"section": "kanaiyazhi", **self.state.snapshot()}


class GallerySection:
    """Bento grid preview that expands to the full gallery, with a lightbox."""

    def __init__(self, supabase: Client, preview_count: int = 6, expanded: bool = False):
        service = GalleryService(supabase)
        self.preview_count = preview_count
        self.expanded = expanded
        self.state = ListViewState(EmptyPlaceholder(
            icon=Icon.IMAGE,
            title="No Images Yet",
            description="Photos from our events will appear here soon.",
        ), skeleton_count=preview_count)
        self.lightbox = Lightbox()
        self._view = ListView(service.fetch_gallery_images, self.state)

    @property
    def visible_items(self) -> List[Any]:
        if self.expanded:
            return self.state.items
        return self.state.items[:self.preview_count]

    async def load(self):
        await self._view.load()
        self.lightbox.resize(len(self.visible_items))

    def expand(self):
        self.expanded = True
        self.lightbox.resize(len(self.visible_items))

    def snapshot(self) -> Dict[str, Any]:
        snapshot = self.state.snapshot()
        snapshot["items"] = self.visible_items
        snapshot.update({
            "section": "gallery",
            "expanded": self.expanded,
            "has_more": not self.expanded and len(self.state.items) > self.preview_count,
            "lightbox": {"selected_index": self.lightbox.selected_index, "length": self.lightbox.length},
        })
        return snapshot


class PongalSection:
    def __init__(self, supabase: Client, interval: float = 5.0, idle_resume: float = 10.0):
        service = GalleryService(supabase)
        self.state = ListViewState(EmptyPlaceholder(
            icon=Icon.SPARKLES,
            title="Pongal Memories Coming Soon",
            description="Photos from Pongal Thiruvizha will be shared here.",
        ), skeleton_count=1)
        self.carousel = Carousel(interval=interval, idle_resume=idle_resume)
        self._view = ListView(service.fetch_pongal_images, self.state)

    async def load(self):
        await self._view.load()
        self.carousel.resize(len(self.state.items))

    def snapshot(self) -> Dict[str, Any]:
        snapshot = self.state.snapshot()
        snapshot.update({
            "section": "pongal",
            "carousel": {
                "current_index": self.carousel.current_index,
                "interval_seconds": self.carousel.interval,
                "idle_resume_seconds": self.carousel.idle_resume,
            },
        })
        return snapshot


class TeamSection:
    def __init__(self, supabase: Client, years: List[int]):
        service = TeamService(supabase)
        self.view = TeamYearView(years, service.fetch_office_bearers, service.fetch_core_committee)

    async def load(self, year: Optional[int] = None):
        await self.view.select(year if year is not None else self.view.latest_year)

    def snapshot(self) -> Dict[str, Any]:
        return {"section": "team", **self.view.layout()}


SECTION_NAMES = ("events", "team", "gallery", "pongal", "achievements", "kanaiyazhi")


async def load_section(
    name: str,
    supabase: Client,
    year: Optional[int] = None,
    expanded: bool = False,
    lightbox: Optional[int] = None,
) -> Dict[str, Any]:
    """Build, load and snapshot one section. Raises KeyError for unknown names and ValueError for bad options."""
    if name == "events":
        section = EventsSection(supabase, past_limit=settings.past_events_limit)
        await section.load()
    elif name == "team":
        section = TeamSection(supabase, settings.get_team_years())
        await section.load(year)
    elif name == "gallery":
        section = GallerySection(supabase, preview_count=settings.gallery_preview_count, expanded=expanded)
        await section.load()
        if lightbox is not None:
            section.lightbox.open(lightbox)
    elif name == "pongal":
        section = PongalSection(
            supabase,
            interval=settings.carousel_interval_seconds,
            idle_resume=settings.carousel_idle_resume_seconds,
        )
        await section.load()
    elif name == "achievements":
        section = AchievementsSection(supabase)
        await section.load()
    elif name == "kanaiyazhi":
        section = KanaiyazhiSection(supabase)
        await section.load()
    else:
        raise KeyError(name)
    logger.debug(f"Loaded section {name}")
    return section.snapshot()
