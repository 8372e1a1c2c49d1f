"""
Location filter and search engine.

Given the fetched locations, a free-text query and a category group, produce
the visible subset. Filtering never reorders: the result is always a
sub-sequence of the input.

Author: Food Map maintainers
Date: 2026-10-19
"""

from typing import Any, Dict, FrozenSet, Iterable, List, Optional

# =========================
# Module Constants
# =========================

ALL_GROUPS = "all"

GROUP_CATEGORIES: Dict[str, FrozenSet[str]] = {
    "fast_food": frozenset({"burger", "chicken", "sandwich", "dumplings", "beef_bowl", "breakfast"}),
    "cafe": frozenset({"coffee", "independent", "tea", "bakery"}),
    "bubble_tea": frozenset({"bubble_tea"}),
}


class UnknownGroupError(ValueError):
    """Raised for a group filter that is neither "all" nor a known group."""


# =========================
# Helpers
# =========================

def _field(location: Any, name: str) -> Optional[str]:
    """Read a field from an ORM row, a pydantic model or a plain dict."""
    if isinstance(location, dict):
        return location.get(name)
    return getattr(location, name, None)


def group_names() -> List[str]:
    """Return the selectable group tags, "all" first."""
    return [ALL_GROUPS] + list(GROUP_CATEGORIES)


def categories_for(group_filter: str) -> Optional[FrozenSet[str]]:
    """Return the categories mapped to ``group_filter``.

    Returns:
        None for "all", otherwise the group's category set.

    Raises:
        UnknownGroupError: If the group is not defined.
    """
    if group_filter == ALL_GROUPS:
        return None
    try:
        return GROUP_CATEGORIES[group_filter]
    except KeyError:
        raise UnknownGroupError(f"Unknown group: {group_filter}") from None


def matches_group(location: Any, categories: Optional[FrozenSet[str]]) -> bool:
    if categories is None:
        return True
    return _field(location, "category") in categories


def matches_query(location: Any, needle: str) -> bool:
    """Case-insensitive substring match on name or category.

    Args:
        location: Location-like object.
        needle: Already case-folded query.
    """
    name = _field(location, "name") or ""
    if needle in name.lower():
        return True
    category = _field(location, "category")
    return bool(category) and needle in category.lower()


# =========================
# Public API
# =========================

def filter_locations(locations: Iterable[Any], query: str, group_filter: str = ALL_GROUPS) -> List[Any]:
    """Return the visible locations for a query and group selection.

    Whitespace in ``query`` is significant; only case is folded.

    Args:
        locations: Locations in store order.
        query: Free-text search, may be empty.
        group_filter: "all" or a key of GROUP_CATEGORIES.

    Returns:
        The matching locations, in input order.

    Raises:
        UnknownGroupError: If ``group_filter`` is not defined.
    """
    categories = categories_for(group_filter)
    grouped = [loc for loc in locations if matches_group(loc, categories)]

    if not query:
        return grouped

    needle = query.lower()
    return [loc for loc in grouped if matches_query(loc, needle)]
