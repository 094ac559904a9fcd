"""
Internal Product DTOs

Lightweight projections passed between the repository and service layers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSummary:
    """
    Id and name of a product, loaded without the remaining columns.
    """

    id: int
    name: str
