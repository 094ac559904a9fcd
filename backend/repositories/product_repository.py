"""
Product repository for product-specific data access operations.

Supports three ways of filtering the catalog: composable Specifications
(inherited find/find_page), query by example (inherited find_by_example)
and a fixed set of nullable criteria (find_products_by_criteria).
"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy import update
from sqlalchemy.orm import Session

from models import Product as ProductModel
from dtos.internal.product_summary import ProductSummary
from .base_repository import BaseRepository
from .paging import Sort
from .specifications import Specification


class ProductRepository(BaseRepository[ProductModel]):
    """Repository for Product model operations."""

    def __init__(self, db: Session):
        super().__init__(db, ProductModel)

    def update_price_by_category(self, price: Decimal, category: int) -> int:
        """
        Set the price of every product in a category with one UPDATE.

        Args:
            price: New price
            category: Category code

        Returns:
            Number of rows updated
        """
        result = self.db.execute(
            update(self.model)
            .where(self.model.category == category)
            .values(price=price)
        )
        self.db.flush()
        return result.rowcount

    def find_products_by_criteria(
        self,
        name: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> List[ProductModel]:
        """
        Get products with optional filtering.

        Each criterion left as None is ignored.

        Args:
            name: Case-insensitive substring of the product name
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound

        Returns:
            List of matching products
        """
        query = self.db.query(self.model)

        if name is not None:
            query = query.filter(self.model.name.icontains(name, autoescape=True))
        if min_price is not None:
            query = query.filter(self.model.price >= min_price)
        if max_price is not None:
            query = query.filter(self.model.price <= max_price)

        return query.all()

    def find_summaries(
        self,
        spec: Optional[Specification[ProductModel]] = None,
        sort: Optional[Sort] = None
    ) -> List[ProductSummary]:
        """
        Load id and name of the products matching a Specification.

        Args:
            spec: Specification to match products against (None matches all)
            sort: Optional ordering

        Returns:
            List of ProductSummary projections
        """
        query = self._filtered(spec)
        if sort is not None:
            query = self._apply_sort(query, sort)
        rows = query.with_entities(self.model.id, self.model.name).all()
        return [ProductSummary(id=row.id, name=row.name) for row in rows]
