from enum import Enum
from typing import Optional


class Icon(str, Enum):
    """Icon identifiers understood by the frontend (lucide names)."""
    CALENDAR = "calendar"
    BOOK_OPEN = "book-open"
    TROPHY = "trophy"
    AWARD = "award"
    SPARKLES = "sparkles"
    MUSIC = "music"
    MIC = "mic"
    FEATHER = "feather"
    PALETTE = "palette"
    MEDAL = "medal"
    USERS = "users"
    IMAGE = "image"
    STAR = "star"


DEFAULT_CATEGORY_ICON = Icon.STAR

CATEGORY_ICONS = {
    "workshop": Icon.BOOK_OPEN,
    "competition": Icon.TROPHY,
    "festival": Icon.SPARKLES,
    "cultural": Icon.MUSIC,
    "music": Icon.MUSIC,
    "debate": Icon.MIC,
    "speech": Icon.MIC,
    "literary": Icon.FEATHER,
    "literature": Icon.FEATHER,
    "art": Icon.PALETTE,
    "award": Icon.AWARD,
    "recognition": Icon.AWARD,
    "sports": Icon.MEDAL,
    "community": Icon.USERS,
    "meetup": Icon.USERS,
}


def icon_for_category(category: Optional[str]) -> Icon:
    if not category:
        return DEFAULT_CATEGORY_ICON
    return CATEGORY_ICONS.get(category.strip().lower(), DEFAULT_CATEGORY_ICON)
