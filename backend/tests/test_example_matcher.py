from decimal import Decimal

import pytest

from constants import StringMatcher
from exceptions import InvalidArgumentError
from models import Product, User
from repositories.example_matcher import Example, ExampleMatcher
from repositories.product_repository import ProductRepository
from repositories.product_specifications import build_product_filter
from repositories.specifications import MatchAllSpecification


def ids(products):
    return sorted(p.id for p in products)


def containing_matcher():
    return (
        ExampleMatcher.matching()
        .with_ignore_paths("id", "description")
        .with_string_matcher(StringMatcher.CONTAINING)
        .with_ignore_case()
    )


class TestExampleMatcher:
    def test_matchers_are_immutable(self):
        base = ExampleMatcher.matching()
        derived = base.with_ignore_paths("id").with_ignore_case()

        assert base.ignored_paths == frozenset()
        assert not base.ignore_case
        assert derived.is_ignored_path("id")
        assert derived.ignore_case

    def test_empty_probe_matches_all(self):
        spec = Example.of(Product()).to_specification()
        assert isinstance(spec, MatchAllSpecification)


class TestFindByExample:
    @pytest.mark.parametrize("fragment", ["widget", "PRODUCT", "o", "zzz"])
    def test_name_probe_equals_name_criterion(self, db_session, catalog, fragment):
        repo = ProductRepository(db_session)

        by_example = repo.find_by_example(Example.of(Product(name=fragment), containing_matcher()))
        by_criterion = repo.find(build_product_filter(name=fragment))

        assert ids(by_example) == ids(by_criterion)

    def test_exact_matcher_is_case_sensitive_by_default(self, db_session, catalog):
        repo = ProductRepository(db_session)

        assert ids(repo.find_by_example(Example.of(Product(name="Gadget")))) == [2]
        assert repo.find_by_example(Example.of(Product(name="gadget"))) == []

    def test_exact_matcher_ignoring_case(self, db_session, catalog):
        repo = ProductRepository(db_session)
        matcher = ExampleMatcher.matching().with_ignore_case()

        assert ids(repo.find_by_example(Example.of(Product(name="gadget"), matcher))) == [2]

    @pytest.mark.parametrize(
        "string_matcher, value, expected",
        [
            (StringMatcher.STARTING, "product", [4, 5]),
            (StringMatcher.ENDING, "PRO", [3]),
            (StringMatcher.CONTAINING, "_", [6]),
        ],
    )
    def test_string_matchers(self, db_session, catalog, string_matcher, value, expected):
        repo = ProductRepository(db_session)
        matcher = ExampleMatcher.matching().with_string_matcher(string_matcher).with_ignore_case()

        assert ids(repo.find_by_example(Example.of(Product(name=value), matcher))) == expected

    def test_non_text_fields_use_equality(self, db_session, catalog):
        repo = ProductRepository(db_session)
        probe = Product(name="product", category=2)

        result = repo.find_by_example(Example.of(probe, containing_matcher()))

        assert ids(result) == [4]

    def test_price_equality(self, db_session, catalog):
        repo = ProductRepository(db_session)

        result = repo.find_by_example(Example.of(Product(price=Decimal("20.00"))))

        assert ids(result) == [2]

    def test_ignored_paths_are_skipped(self, db_session, catalog):
        repo = ProductRepository(db_session)
        probe = Product(id=999, name="widget", description="does not matter")

        result = repo.find_by_example(Example.of(probe, containing_matcher()))

        assert ids(result) == [1, 3]

    def test_include_null_values(self, db_session, catalog):
        repo = ProductRepository(db_session)
        matcher = (
            ExampleMatcher.matching()
            .with_ignore_paths("id", "name", "price", "category")
            .with_include_null_values()
        )

        result = repo.find_by_example(Example.of(Product(), matcher))

        assert ids(result) == [2, 3, 5, 6]

    def test_probe_of_wrong_type_rejected(self, db_session):
        repo = ProductRepository(db_session)

        with pytest.raises(InvalidArgumentError):
            repo.find_by_example(Example.of(User(name="x")))
