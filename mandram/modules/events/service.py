from supabase import Client
from mandram.modules.events.schemas import Event
from mandram.core.queries import execute_rows, execute_count, execute_insert, utc_now_iso
from mandram.core.result import Result
from typing import Any, Dict, List, Optional
from datetime import datetime

TABLE = "events"


class EventService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _filtered(self, query, featured: Optional[bool], category: Optional[str]):
        if featured:
            query = query.eq("is_featured", True)
        if category:
            query = query.eq("category", category)
        return query

    def fetch_upcoming_events(self, now: Optional[datetime] = None) -> Result[List[Event]]:
        """Events dated now or later, soonest first"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .gte("date", utc_now_iso(now))\
            .order("date")
        return execute_rows(query, Event, "upcoming events")

    def fetch_past_events(self, limit: int = 10, now: Optional[datetime] = None) -> Result[List[Event]]:
        """Events dated before now, most recent first, capped at limit"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .lt("date", utc_now_iso(now))\
            .order("date", desc=True)\
            .limit(limit)
        return execute_rows(query, Event, "past events")

    def fetch_featured_events(self) -> Result[List[Event]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("is_featured", True)\
            .order("date", desc=True)
        return execute_rows(query, Event, "featured events")

    def fetch_events(self, featured: Optional[bool] = None, category: Optional[str] = None) -> Result[List[Event]]:
        """All events ordered by date, optionally filtered by featured flag and category"""
        query = self._filtered(self.supabase.table(TABLE).select("*"), featured, category)
        return execute_rows(query.order("date"), Event, "events")

    def count_events(self, featured: Optional[bool] = None, category: Optional[str] = None) -> Result[int]:
        query = self._filtered(self.supabase.table(TABLE).select("id", count="exact"), featured, category)
        return execute_count(query, "events")

    def create_event(self, body: Dict[str, Any]) -> Result[dict]:
        """Insert one row as given; the body is passed through unvalidated"""
        return execute_insert(self.supabase.table(TABLE).insert(body), "event")

    def get_upcoming_events(self, now: Optional[datetime] = None) -> List[Event]:
        return self.fetch_upcoming_events(now).unwrap_or([])

    def get_past_events(self, limit: int = 10, now: Optional[datetime] = None) -> List[Event]:
        return self.fetch_past_events(limit, now).unwrap_or([])

    def get_featured_events(self) -> List[Event]:
        return self.fetch_featured_events().unwrap_or([])
