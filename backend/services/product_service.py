"""
Product Service

Business operations over the product catalog: deletion, bulk price updates
and the three search strategies (query by example, nullable criteria and
composed specifications), plus paged and projected listings.
"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from constants import StringMatcher, ProductDefaults
from database import transaction
from dtos.internal.product_summary import ProductSummary
from exceptions import EntityNotFoundError, InvalidArgumentError
from models import Product
from repositories.base_repository import validate_id
from repositories.example_matcher import Example, ExampleMatcher
from repositories.paging import Page, PageRequest, Sort
from repositories.product_repository import ProductRepository
from repositories.product_specifications import build_product_filter
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def default_product_matcher() -> ExampleMatcher:
    """Matcher used by example searches: name contains, ignoring case, id and description."""
    return (
        ExampleMatcher.matching()
        .with_ignore_paths(*ProductDefaults.IGNORED_PATHS)
        .with_string_matcher(StringMatcher.CONTAINING)
        .with_ignore_case()
    )


class ProductService:
    """Service for product-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize ProductService.

        Args:
            db: Database session
        """
        self.db = db
        self.product_repo = ProductRepository(db)

    @log_operation("delete_product")
    def delete_product(self, product_id: int) -> None:
        """
        Delete a product by id in its own transaction.

        Raises:
            InvalidArgumentError: If product_id is not a positive integer
            EntityNotFoundError: If no product has this id
        """
        validate_id(product_id, "product_id")
        with transaction(self.db):
            if not self.product_repo.delete_by_id(product_id):
                raise EntityNotFoundError("Product", product_id)
        logger.info(f"Deleted product {product_id}")

    @log_operation("update_product_prices")
    def update_product_prices(self, price: Decimal, category: int) -> int:
        """
        Set one price for every product in a category.

        Args:
            price: New price (must not be negative)
            category: Category code

        Returns:
            Number of products updated

        Raises:
            InvalidArgumentError: If price is None or negative
        """
        if price is None or price < 0:
            raise InvalidArgumentError(f"Invalid price: {price}", argument="price", value=price)
        if category is None:
            raise InvalidArgumentError("Category is required", argument="category", value=category)

        with transaction(self.db):
            updated = self.product_repo.update_price_by_category(price, category)
        logger.info(f"Updated price to {price} for {updated} product(s) in category {category}")
        return updated

    def fetch_products_by_example(
        self,
        probe: Optional[Product] = None,
        matcher: Optional[ExampleMatcher] = None
    ) -> List[Product]:
        """
        Find products matching a probe product.

        Args:
            probe: Unsaved Product whose set columns are matched
                   (default: name "product")
            matcher: Matching rules (default: default_product_matcher())

        Returns:
            Matching products
        """
        if probe is None:
            probe = Product(name=ProductDefaults.PROBE_NAME)
        example = Example.of(probe, matcher or default_product_matcher())

        products = self.product_repo.find_by_example(example)
        self._log_products(products)
        return products

    def fetch_products_by_criteria(
        self,
        name: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> List[Product]:
        """Find products with the repository's nullable-criteria query."""
        products = self.product_repo.find_products_by_criteria(name, min_price, max_price)
        self._log_products(products)
        return products

    def fetch_products_by_specifications(
        self,
        name: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> List[Product]:
        """
        Find products by combining the present criteria into one Specification.

        Args:
            name: Case-insensitive substring of the name
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound

        Returns:
            Products satisfying every present criterion (all products when none is present)
        """
        spec = build_product_filter(name, min_price, max_price)
        logger.debug(f"Product filter: {spec!r}")

        products = self.product_repo.find(spec)
        self._log_products(products)
        return products

    @log_operation("fetch_paged_products")
    def fetch_paged_products(
        self,
        page: int,
        size: int,
        sort: Optional[Sort] = None,
        name: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None
    ) -> Page[Product]:
        """
        Load one page of products, optionally filtered and sorted.

        Args:
            page: Zero-based page index
            size: Page size (positive)
            sort: Ordering (unsorted when None)
            name, min_price, max_price: Optional criteria, as for
                fetch_products_by_specifications

        Returns:
            Page of products with total counts

        Raises:
            InvalidArgumentError: If page < 0, size <= 0 or sort names an unknown column
        """
        page_request = PageRequest.of(page, size, sort)
        spec = build_product_filter(name, min_price, max_price)

        product_page = self.product_repo.find_page(page_request, spec)

        self._log_products(product_page.content)
        logger.info(f"Total Pages: {product_page.total_pages}")
        logger.info(f"Total Elements: {product_page.total_elements}")
        return product_page

    def fetch_product_summaries(
        self,
        name: Optional[str] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        sort: Optional[Sort] = None
    ) -> List[ProductSummary]:
        """Id and name of the products matching the optional criteria."""
        spec = build_product_filter(name, min_price, max_price)
        return self.product_repo.find_summaries(spec, sort)

    def _log_products(self, products: List[Product]) -> None:
        for product in products:
            logger.info(f"Product: {product}")
