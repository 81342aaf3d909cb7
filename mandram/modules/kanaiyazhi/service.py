from supabase import Client
from mandram.modules.kanaiyazhi.schemas import KanaiyazhiEdition
from mandram.core.queries import execute_rows, execute_maybe_one
from mandram.core.result import Result
from typing import List, Optional

TABLE = "kanaiyazhi_editions"


class KanaiyazhiService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def fetch_editions(self) -> Result[List[KanaiyazhiEdition]]:
        """All editions, latest year first and latest edition first within a year"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .order("year", desc=True)\
            .order("edition_number", desc=True)
        return execute_rows(query, KanaiyazhiEdition, "Kanaiyazhi editions")

    def fetch_featured_edition(self) -> Result[Optional[KanaiyazhiEdition]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("is_featured", True)\
            .limit(1)\
            .maybe_single()
        return execute_maybe_one(query, KanaiyazhiEdition, "featured edition")

    def fetch_editions_by_year(self, year: int) -> Result[List[KanaiyazhiEdition]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("year", year)\
            .order("edition_number", desc=True)
        return execute_rows(query, KanaiyazhiEdition, "editions by year")

    def get_editions(self) -> List[KanaiyazhiEdition]:
        return self.fetch_editions().unwrap_or([])

    def get_featured_edition(self) -> Optional[KanaiyazhiEdition]:
        return self.fetch_featured_edition().unwrap_or(None)

    def get_editions_by_year(self, year: int) -> List[KanaiyazhiEdition]:
        return self.fetch_editions_by_year(year).unwrap_or([])
