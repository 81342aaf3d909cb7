from supabase import Client
from mandram.modules.team.schemas import TeamMember
from mandram.core.queries import execute_rows, execute_count, execute_insert
from mandram.core.result import Result
from typing import Any, Dict, List, Optional

TABLE = "team_members"


class TeamService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _ordered(self, query):
        return query.order("position_order", nullsfirst=False)

    def _for_year(self, query, year: Optional[int]):
        # Filter in the query so the backend enforces the year, never post-filter
        if year is not None:
            query = query.eq("year", year)
        return query

    def fetch_office_bearers(self, year: Optional[int] = None) -> Result[List[TeamMember]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("is_office_bearer", True)
        query = self._ordered(self._for_year(query, year))
        return execute_rows(query, TeamMember, "office bearers")

    def fetch_core_committee(self, year: Optional[int] = None) -> Result[List[TeamMember]]:
        """Members who are neither office bearers nor faculty"""
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("is_office_bearer", False)\
            .eq("is_faculty", False)
        query = self._ordered(self._for_year(query, year))
        return execute_rows(query, TeamMember, "core committee")

    def fetch_faculty_coordinators(self) -> Result[List[TeamMember]]:
        query = self.supabase.table(TABLE)\
            .select("*")\
            .eq("is_faculty", True)
        return execute_rows(self._ordered(query), TeamMember, "faculty coordinators")

    def fetch_all_team_members(self) -> Result[List[TeamMember]]:
        query = self.supabase.table(TABLE).select("*")
        return execute_rows(self._ordered(query), TeamMember, "all team members")

    def fetch_team(self, office_bearers: Optional[bool] = None, year: Optional[int] = None) -> Result[List[TeamMember]]:
        """Route query: optional office-bearer flag and year, ordered by position"""
        query = self.supabase.table(TABLE).select("*")
        if office_bearers is not None:
            query = query.eq("is_office_bearer", office_bearers)
        query = self._ordered(self._for_year(query, year))
        return execute_rows(query, TeamMember, "team members")

    def count_team(self, office_bearers: Optional[bool] = None, year: Optional[int] = None) -> Result[int]:
        query = self.supabase.table(TABLE).select("id", count="exact")
        if office_bearers is not None:
            query = query.eq("is_office_bearer", office_bearers)
        return execute_count(self._for_year(query, year), "team members")

    def create_team_member(self, body: Dict[str, Any]) -> Result[dict]:
        return execute_insert(self.supabase.table(TABLE).insert(body), "team member")

    def get_office_bearers(self, year: Optional[int] = None) -> List[TeamMember]:
        return self.fetch_office_bearers(year).unwrap_or([])

    def get_core_committee(self, year: Optional[int] = None) -> List[TeamMember]:
        return self.fetch_core_committee(year).unwrap_or([])

    def get_faculty_coordinators(self) -> List[TeamMember]:
        return self.fetch_faculty_coordinators().unwrap_or([])

    def get_all_team_members(self) -> List[TeamMember]:
        return self.fetch_all_team_members().unwrap_or([])
