from decimal import Decimal

import pytest

from constants import Direction
from exceptions import InvalidArgumentError
from repositories.paging import Order, Page, PageRequest, Sort
from repositories.product_repository import ProductRepository
from repositories.product_specifications import build_product_filter


class TestPageRequest:
    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(InvalidArgumentError) as exc_info:
            PageRequest.of(0, size)
        assert exc_info.value.argument == "size"

    def test_negative_page_rejected(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            PageRequest.of(-1, 10)
        assert exc_info.value.argument == "page"

    def test_offset_and_next(self):
        request = PageRequest.of(2, 25)
        assert request.offset == 50
        assert request.next().page == 3
        assert request.sort == Sort.unsorted()


class TestSort:
    def test_parse_with_descending_prefix(self):
        sort = Sort.parse("-price, name")
        assert list(sort) == [Order("price", Direction.DESC), Order("name", Direction.ASC)]

    @pytest.mark.parametrize("expression", [None, "", "   "])
    def test_parse_blank_is_unsorted(self, expression):
        assert not Sort.parse(expression).is_sorted

    def test_parse_rejects_empty_key(self):
        with pytest.raises(InvalidArgumentError):
            Sort.parse("price,-")

    def test_by_and_combination(self):
        sort = Sort.by("price", direction=Direction.DESC).and_(Sort.by("name"))
        assert sort == Sort.parse("-price,name")


class TestPage:
    def test_total_pages_rounds_up(self):
        page = Page(content=[1, 2], number=0, size=2, total_elements=5)
        assert page.total_pages == 3
        assert page.has_next
        assert page.is_first
        assert not page.has_previous

    def test_empty_result_has_no_pages(self):
        page = Page(content=[], number=0, size=10, total_elements=0)
        assert page.total_pages == 0
        assert page.is_last
        assert page.number_of_elements == 0

    def test_empty_page_is_still_a_page(self):
        page = Page(content=[], number=3, size=10, total_elements=25)
        assert page
        assert page.number_of_elements == 0
        assert list(page) == []

    def test_map_keeps_metadata(self):
        page = Page(content=[1, 2], number=1, size=2, total_elements=4)
        mapped = page.map(lambda n: n * 10)
        assert mapped.content == [10, 20]
        assert (mapped.number, mapped.size, mapped.total_elements) == (1, 2, 4)
        assert mapped.is_last


class TestFindPage:
    def test_first_page_of_two_rows(self, db_session, two_products):
        repo = ProductRepository(db_session)

        page = repo.find_page(PageRequest.of(0, 1))

        assert len(page.content) == 1
        assert page.total_pages == 2
        assert page.total_elements == 2

    def test_sorted_pages_cover_collection_once(self, db_session, catalog):
        repo = ProductRepository(db_session)
        sort = Sort.by("price", direction=Direction.DESC)

        first = repo.find_page(PageRequest.of(0, 4, sort))
        second = repo.find_page(PageRequest.of(1, 4, sort))

        prices = [p.price for p in first.content + second.content]
        assert prices == sorted(prices, reverse=True)
        assert [p.id for p in first.content] == [3, 6, 2, 5]
        assert [p.id for p in second.content] == [1, 4]
        assert second.is_last

    def test_filter_applies_to_content_and_totals(self, db_session, catalog):
        repo = ProductRepository(db_session)
        spec = build_product_filter(min_price=Decimal("15"))

        page = repo.find_page(PageRequest.of(0, 2, Sort.by("name")), spec)

        assert page.total_elements == 4
        assert page.total_pages == 2
        assert [p.name for p in page.content] == ["100% Cotton_Shirt", "Gadget"]

    def test_page_past_the_end_is_empty(self, db_session, two_products):
        repo = ProductRepository(db_session)

        page = repo.find_page(PageRequest.of(5, 10))

        assert page.content == []
        assert page.total_elements == 2
        assert page.total_pages == 1

    def test_no_rows_is_not_an_error(self, db_session):
        page = ProductRepository(db_session).find_page(PageRequest.of(0, 10))

        assert page.content == []
        assert page.total_elements == 0
        assert page.total_pages == 0

    def test_unknown_sort_property_rejected(self, db_session, two_products):
        repo = ProductRepository(db_session)

        with pytest.raises(InvalidArgumentError):
            repo.find_page(PageRequest.of(0, 10, Sort.by("popularity")))
