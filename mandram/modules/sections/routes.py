from fastapi import APIRouter, Depends, HTTPException
from mandram.database.supabase_client import get_supabase
from mandram.views.sections import SECTION_NAMES, load_section
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/sections", tags=["sections"])


@router.get("")
async def list_sections():
    return {"sections": list(SECTION_NAMES)}


@router.get("/{name}")
async def get_section(
    name: str,
    year: Optional[int] = None,
    expanded: bool = False,
    lightbox: Optional[int] = None,
    supabase: Client = Depends(get_supabase)
):
    """Freshly loaded view model of one page section"""
    if name not in SECTION_NAMES:
        raise HTTPException(status_code=404, detail=f"Unknown section: {name}")
    try:
        return await load_section(name, supabase, year=year, expanded=expanded, lightbox=lightbox)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
