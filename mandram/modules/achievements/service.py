from supabase import Client
from mandram.modules.achievements.schemas import Achievement
from mandram.core.queries import execute_rows
from mandram.core.result import Result
from typing import List

TABLE = "achievements"


class AchievementService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def fetch_achievements(self) -> Result[List[Achievement]]:
        """All achievements, newest year first"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .order("year", desc=True)
        return execute_rows(query, Achievement, "achievements")

    def fetch_achievements_by_category(self, category: str) -> Result[List[Achievement]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("category", category)\
            .order("year", desc=True)
        return execute_rows(query, Achievement, "achievements by category")

    def get_achievements(self) -> List[Achievement]:
        return self.fetch_achievements().unwrap_or([])

    def get_achievements_by_category(self, category: str) -> List[Achievement]:
        return self.fetch_achievements_by_category(category).unwrap_or([])
