"""
API request/response schemas.

These Pydantic models define the contract between the API layer
and external clients. They are separate from domain models to
allow the API surface to evolve independently.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.domain.models import GalleryItem, GalleryPage, Pagination


class GalleryResponse(BaseModel):
    """
    Response body for GET /notion.

    ``error`` is only present when the query failed, in which case
    ``data`` and ``categories`` are empty.
    """

    data: list[GalleryItem] = Field(..., description="Items on the requested page")
    pagination: Pagination = Field(..., description="Pagination metadata")
    categories: list[str] = Field(
        ..., description="Distinct categories across all fetched records"
    )
    error: Optional[str] = Field(
        None, description="Failure message, present only on error"
    )

    @classmethod
    def from_page(cls, page: GalleryPage) -> "GalleryResponse":
        return cls(data=page.data, pagination=page.pagination, categories=page.categories)

    @classmethod
    def from_error(cls, page: GalleryPage, message: str) -> "GalleryResponse":
        return cls(
            data=page.data,
            pagination=page.pagination,
            categories=page.categories,
            error=message,
        )
