"""
Field normalisation for Notion records.

Each gallery field is read through a fallback chain because the database
schema is not uniform: a text property may arrive as a rich-text array or
as a bare ``plain_text`` value, and a title may live under ``Title`` or
``Name``. Whitespace-only values count as missing.
"""

from typing import Any, Optional

from app.domain.models import GalleryItem, NotionPage
from app.domain.stats import StatsProvider

DEFAULT_DESCRIPTION = "No description available"
DEFAULT_CATEGORY = "Other"
DEFAULT_AUTHOR = "Anonymous"
DEFAULT_LINK = "#"


def _prop(properties: dict[str, Any], name: str) -> dict[str, Any]:
    value = properties.get(name)
    return value if isinstance(value, dict) else {}


def _first_segment_text(segments: Any) -> Optional[str]:
    """Return the trimmed plain text of the first segment, if any."""
    if not isinstance(segments, list) or not segments:
        return None
    first = segments[0]
    if not isinstance(first, dict):
        return None
    return _clean(first.get("plain_text"))


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def extract_text(prop: dict[str, Any]) -> Optional[str]:
    """
    Read a text-like property.

    Tries the first rich-text segment, then a direct ``plain_text`` value.
    """
    return _first_segment_text(prop.get("rich_text")) or _clean(prop.get("plain_text"))


def extract_title(properties: dict[str, Any]) -> Optional[str]:
    return (
        _first_segment_text(_prop(properties, "Title").get("title"))
        or _first_segment_text(_prop(properties, "Name").get("title"))
    )


def extract_category(properties: dict[str, Any]) -> Optional[str]:
    """Read the Category property as text, falling back to a select value."""
    prop = _prop(properties, "Category")
    text = extract_text(prop)
    if text:
        return text

    select = prop.get("select")
    if isinstance(select, dict):
        return _clean(select.get("name"))
    return None


def extract_link(properties: dict[str, Any]) -> Optional[str]:
    url = _prop(properties, "Link").get("url")
    return url if isinstance(url, str) and url else None


def extract_is_free(properties: dict[str, Any]) -> bool:
    checkbox = _prop(properties, "IsFree").get("checkbox")
    return checkbox if isinstance(checkbox, bool) else True


def normalize_page(page: NotionPage, index: int, stats: StatsProvider) -> GalleryItem:
    """
    Turn a raw Notion record into a GalleryItem.

    Args:
        page: The raw record.
        index: Position of the record in the fetched order (before sorting),
            used for the synthetic id and title fallbacks.
        stats: Provider for the card statistics.
    """
    props = page.properties
    category = extract_category(props) or DEFAULT_CATEGORY

    return GalleryItem(
        id=page.id or f"notion-{index}",
        title=extract_title(props) or f"Item {index + 1}",
        description=extract_text(_prop(props, "Description")) or DEFAULT_DESCRIPTION,
        category=category,
        link=extract_link(props) or DEFAULT_LINK,
        author=extract_text(_prop(props, "Author")) or DEFAULT_AUTHOR,
        created=page.created_time,
        last_edited=page.last_edited_time,
        stats=stats.generate(page),
        tags=[category],
        is_free=extract_is_free(props),
    )
