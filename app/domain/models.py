"""
Domain models — pure data structures for the gallery service.

These models have no framework dependencies beyond Pydantic and represent
the core business entities. They are used across all layers. Field aliases
carry the camelCase names the front end expects.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class NotionPage(BaseModel):
    """
    A raw record returned by a Notion database query.

    Property values are kept as untyped dicts: the same property name can
    arrive as rich text, title, select, url or checkbox depending on how
    the database was set up.
    """

    id: Optional[str] = Field(None, description="Notion page identifier")
    created_time: Optional[str] = Field(None, description="Creation timestamp")
    last_edited_time: Optional[str] = Field(None, description="Last edit timestamp")
    properties: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_api(cls, doc: dict[str, Any]) -> "NotionPage":
        """Construct a NotionPage from a raw query result entry."""
        if doc is None:
            raise ValueError("Cannot create NotionPage from None")

        properties = doc.get("properties")
        return cls(
            id=doc.get("id"),
            created_time=doc.get("created_time"),
            last_edited_time=doc.get("last_edited_time"),
            properties=properties if isinstance(properties, dict) else {},
        )


class ItemStats(BaseModel):
    """Engagement figures shown on a gallery card."""

    views: int
    downloads: int
    rating: float


class GalleryItem(BaseModel):
    """The normalised, UI-ready representation of one Notion record."""

    id: str
    title: str
    description: str
    category: str
    link: str
    author: str
    created: Optional[str] = None
    last_edited: Optional[str] = None
    stats: ItemStats
    tags: list[str] = Field(default_factory=list)
    is_free: bool = Field(True, alias="isFree")

    model_config = ConfigDict(populate_by_name=True)


class GalleryQuery(BaseModel):
    """Validated query parameters for one gallery request."""

    page: int = Field(1, ge=1)
    limit: int = Field(12, ge=1)
    category: str = ""
    search: str = ""


class Pagination(BaseModel):
    """Pagination metadata for a slice of gallery items."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GalleryPage(BaseModel):
    """A paginated gallery result plus the categories seen upstream."""

    data: list[GalleryItem] = Field(default_factory=list)
    pagination: Pagination
    categories: list[str] = Field(default_factory=list)
