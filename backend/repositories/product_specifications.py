"""
Product-specific Specifications

Atomic predicates over products and the builder that turns optional search
criteria into a single combined specification.
"""

from decimal import Decimal
from typing import Optional

from models import Product
from .specifications import Specification, all_of


def _as_decimal(value) -> Decimal:
    # via str() so 0.1 becomes Decimal('0.1')
    return value if isinstance(value, Decimal) else Decimal(str(value))


class ProductNameContainsSpec(Specification[Product]):
    """Product name contains a substring, ignoring case."""

    def __init__(self, name: str):
        """
        Args:
            name: Substring to look for. Matched literally, so '%' and '_'
                  carry no wildcard meaning.
        """
        self.name = name

    def is_satisfied_by(self, product: Product) -> bool:
        return product.name is not None and self.name.lower() in product.name.lower()

    def to_sql_filter(self):
        return Product.name.icontains(self.name, autoescape=True)

    def __repr__(self):
        return f"NameContains({self.name!r})"


class ProductPriceAtLeastSpec(Specification[Product]):
    """Product price is greater than or equal to a lower bound."""

    def __init__(self, min_price: Decimal):
        self.min_price = _as_decimal(min_price)

    def is_satisfied_by(self, product: Product) -> bool:
        return product.price is not None and _as_decimal(product.price) >= self.min_price

    def to_sql_filter(self):
        return Product.price >= self.min_price

    def __repr__(self):
        return f"PriceAtLeast({self.min_price})"


class ProductPriceAtMostSpec(Specification[Product]):
    """Product price is less than or equal to an upper bound."""

    def __init__(self, max_price: Decimal):
        self.max_price = _as_decimal(max_price)

    def is_satisfied_by(self, product: Product) -> bool:
        return product.price is not None and _as_decimal(product.price) <= self.max_price

    def to_sql_filter(self):
        return Product.price <= self.max_price

    def __repr__(self):
        return f"PriceAtMost({self.max_price})"


class ProductCategorySpec(Specification[Product]):
    """Product belongs to a category code."""

    def __init__(self, category: int):
        self.category = category

    def is_satisfied_by(self, product: Product) -> bool:
        return product.category == self.category

    def to_sql_filter(self):
        return Product.category == self.category

    def __repr__(self):
        return f"Category({self.category})"


def build_product_filter(
    name: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
) -> Specification[Product]:
    """
    Build the combined product filter from optional criteria.

    A criterion is present when it is not None; an empty name is present and
    matches every name. Present criteria are ANDed in the order name,
    min_price, max_price. With no criteria the result matches every product.

    Args:
        name: Case-insensitive substring of the product name
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound

    Returns:
        Combined specification

    Example:
        spec = build_product_filter(name="widget", min_price=Decimal("10"))
        products = product_repo.find(spec)

        # Explicit composition
        spec = ProductCategorySpec(2) & (ProductNameContainsSpec("pro") | ~ProductPriceAtLeastSpec(100))
    """
    specs = []
    if name is not None:
        specs.append(ProductNameContainsSpec(name))
    if min_price is not None:
        specs.append(ProductPriceAtLeastSpec(min_price))
    if max_price is not None:
        specs.append(ProductPriceAtMostSpec(max_price))
    return all_of(specs)
