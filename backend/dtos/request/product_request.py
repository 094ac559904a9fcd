"""
Product Request DTOs

DTOs for product-related API requests.
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional

from constants import StringMatcher
from models import Product
from repositories.example_matcher import ExampleMatcher


class ProductExampleRequest(BaseModel):
    """
    Request DTO for query-by-example searches.

    Set fields form the probe; unset fields are ignored. Text fields are
    matched according to string_matcher.
    """

    name: Optional[str] = Field(None, description="Name to match")
    price: Optional[Decimal] = Field(None, description="Exact price")
    category: Optional[int] = Field(None, description="Exact category code")
    description: Optional[str] = Field(None, description="Description to match")
    string_matcher: StringMatcher = Field(StringMatcher.CONTAINING, description="How text fields are compared")
    ignore_case: bool = Field(True, description="Compare text fields ignoring case")

    def to_probe(self) -> Product:
        """Build the unsaved Product used as the probe."""
        return Product(
            name=self.name,
            price=self.price,
            category=self.category,
            description=self.description,
        )

    def to_matcher(self) -> ExampleMatcher:
        return (
            ExampleMatcher.matching()
            .with_ignore_paths("id")
            .with_string_matcher(self.string_matcher)
            .with_ignore_case(self.ignore_case)
        )

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "widget",
                "string_matcher": "CONTAINING",
                "ignore_case": True
            }
        }


class PriceUpdateRequest(BaseModel):
    """Request DTO for setting the price of a whole category."""

    price: Decimal = Field(ge=0, description="New price")
    category: int = Field(ge=-128, le=127, description="Category code")
