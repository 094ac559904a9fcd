"""
Product Response DTOs

DTOs for product-related API responses.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List


class ProductResponse(BaseModel):
    """Response DTO for product information."""

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")
    price: Decimal = Field(description="Product price")
    category: int = Field(description="Category code")
    description: Optional[str] = Field(None, description="Product description")

    class Config:
        """Pydantic configuration."""
        from_attributes = True  # Allow creation from ORM models


class ProductSummaryResponse(BaseModel):
    """Response DTO for the id/name product projection."""

    id: int = Field(description="Product ID")
    name: str = Field(description="Product name")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class ProductPageResponse(BaseModel):
    """
    Response DTO for one page of products.

    Includes the paging metadata needed to request neighbouring pages.
    """

    content: List[ProductResponse] = Field(description="Products on this page")
    page: int = Field(description="Zero-based page index")
    size: int = Field(description="Requested page size")
    total_elements: int = Field(description="Number of products matching the filter")
    total_pages: int = Field(description="Number of pages at this size")
    has_next: bool = Field(description="Whether a following page exists")
    has_previous: bool = Field(description="Whether a preceding page exists")

    @classmethod
    def from_page(cls, page) -> "ProductPageResponse":
        return cls(
            content=[ProductResponse.model_validate(p) for p in page.content],
            page=page.number,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_previous=page.has_previous,
        )


class PriceUpdateResponse(BaseModel):
    """Response DTO for a category price update."""

    updated: int = Field(description="Number of products updated")
    category: int = Field(description="Category code")
    price: Decimal = Field(description="New price")
