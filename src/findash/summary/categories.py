"""Keyword lookup from free-text category labels to display tags."""
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple


class CategoryTag(Enum):
    HOME = "home"
    GROCERIES = "groceries"
    TRANSPORT = "transport"
    DINING = "dining"
    HEALTH = "health"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    OTHER = "other"


# Checked in order; first keyword hit wins ("home food" is HOME)
CATEGORY_KEYWORDS: List[Tuple[CategoryTag, FrozenSet[str]]] = [
    (CategoryTag.HOME, frozenset({"rent", "home", "house"})),
    (CategoryTag.GROCERIES, frozenset({"food", "grocery", "groceries"})),
    (CategoryTag.TRANSPORT, frozenset({"transport", "car", "fuel"})),
    (CategoryTag.DINING, frozenset({"restaurant", "dining"})),
    (CategoryTag.HEALTH, frozenset({"health", "medical"})),
    (CategoryTag.ENTERTAINMENT, frozenset({"entertainment", "movie", "film"})),
    (CategoryTag.UTILITIES, frozenset({"utility", "utilities", "electric"})),
]


def tag_for(category: str) -> CategoryTag:
    """Pick the display tag for a category label (substring match, case-insensitive)."""
    lowered = category.lower()
    for tag, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return tag
    return CategoryTag.OTHER


def tag_categories(categories) -> Dict[str, CategoryTag]:
    """Map every label in an iterable to its tag, keeping iteration order."""
    return {category: tag_for(category) for category in categories}
