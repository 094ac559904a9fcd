from decimal import Decimal

from models import Product
from repositories.product_repository import ProductRepository
from repositories.product_specifications import (
    ProductNameContainsSpec,
    ProductPriceAtLeastSpec,
    ProductPriceAtMostSpec,
    ProductCategorySpec,
    build_product_filter,
)
from repositories.specifications import (
    AndSpecification,
    MatchAllSpecification,
    NotSpecification,
    OrSpecification,
    all_of,
)


def _product(name="Widget", price="10", category=1):
    return Product(name=name, price=Decimal(price), category=category)


def ids(products):
    return sorted(p.id for p in products)


class TestInMemoryEvaluation:
    def test_name_contains_ignores_case(self):
        spec = ProductNameContainsSpec("wid")
        assert spec.is_satisfied_by(_product(name="Super WIDGET"))
        assert not spec.is_satisfied_by(_product(name="Gadget"))

    def test_price_bounds_are_inclusive(self):
        product = _product(price="15")
        assert ProductPriceAtLeastSpec(Decimal("15")).is_satisfied_by(product)
        assert ProductPriceAtMostSpec(Decimal("15")).is_satisfied_by(product)
        assert not ProductPriceAtLeastSpec(Decimal("15.01")).is_satisfied_by(product)
        assert not ProductPriceAtMostSpec(Decimal("14.99")).is_satisfied_by(product)

    def test_float_bounds_are_converted_exactly(self):
        assert ProductPriceAtLeastSpec(0.1).min_price == Decimal("0.1")

    def test_combinators(self):
        widget = _product(name="Widget", price="10", category=1)
        cheap = ProductPriceAtMostSpec(Decimal("12"))
        named_gadget = ProductNameContainsSpec("gadget")

        assert isinstance(cheap & named_gadget, AndSpecification)
        assert isinstance(cheap | named_gadget, OrSpecification)
        assert isinstance(~cheap, NotSpecification)

        assert not (cheap & named_gadget).is_satisfied_by(widget)
        assert (cheap | named_gadget).is_satisfied_by(widget)
        assert not (~cheap).is_satisfied_by(widget)
        assert (ProductCategorySpec(1) & ~named_gadget).is_satisfied_by(widget)

    def test_all_of_empty_matches_everything(self):
        spec = all_of([])
        assert isinstance(spec, MatchAllSpecification)
        assert spec.is_satisfied_by(_product())

    def test_match_all_is_identity_for_and(self):
        spec = ProductCategorySpec(2)
        assert (MatchAllSpecification() & spec) is spec


class TestBuildProductFilter:
    def test_no_criteria_matches_all(self):
        assert isinstance(build_product_filter(), MatchAllSpecification)

    def test_criteria_combined_left_to_right(self):
        spec = build_product_filter(name="w", min_price=Decimal("1"), max_price=Decimal("9"))
        assert repr(spec) == "((NameContains('w') AND PriceAtLeast(1)) AND PriceAtMost(9))"

    def test_empty_name_is_a_present_criterion(self):
        spec = build_product_filter(name="")
        assert isinstance(spec, ProductNameContainsSpec)
        assert spec.is_satisfied_by(_product(name="anything"))

    def test_min_price_only_on_two_products(self, db_session, two_products):
        repo = ProductRepository(db_session)

        result = repo.find(build_product_filter(min_price=Decimal("15")))

        assert ids(result) == [2]

    def test_no_criteria_returns_full_collection(self, db_session, two_products):
        repo = ProductRepository(db_session)

        assert ids(repo.find(build_product_filter())) == [1, 2]

    def test_every_present_criterion_must_hold(self, db_session, catalog):
        repo = ProductRepository(db_session)

        result = repo.find(build_product_filter(name="widget", max_price=Decimal("30")))

        assert ids(result) == [1]

    def test_sql_and_in_memory_agree(self, db_session, catalog):
        repo = ProductRepository(db_session)
        criteria = [
            {},
            {"name": "PRODUCT"},
            {"min_price": Decimal("15")},
            {"max_price": Decimal("15")},
            {"name": "o", "min_price": Decimal("10"), "max_price": Decimal("30")},
            {"min_price": Decimal("100")},
        ]
        for kwargs in criteria:
            spec = build_product_filter(**kwargs)
            expected = [p.id for p in catalog if spec.is_satisfied_by(p)]
            assert ids(repo.find(spec)) == sorted(expected), kwargs

    def test_name_wildcards_are_literal(self, db_session, catalog):
        repo = ProductRepository(db_session)

        assert ids(repo.find(build_product_filter(name="100%"))) == [6]
        assert ids(repo.find(build_product_filter(name="n_s"))) == [6]
        assert ids(repo.find(build_product_filter(name="%"))) == [6]

    def test_or_and_not_translate_to_sql(self, db_session, catalog):
        repo = ProductRepository(db_session)

        spec = ProductCategorySpec(3) | ~ProductPriceAtLeastSpec(Decimal("10"))

        assert ids(repo.find(spec)) == [4, 5, 6]
