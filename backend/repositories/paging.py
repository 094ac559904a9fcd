"""
Paging and Sorting

Value objects describing which slice of a result set to load and in which
order, plus the Page container returned by paged repository queries.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from constants import Direction
from exceptions import InvalidArgumentError

T = TypeVar('T')
R = TypeVar('R')


@dataclass(frozen=True)
class Order:
    """A single sort key: column name plus direction."""

    name: str
    direction: Direction = Direction.ASC

    @property
    def is_ascending(self) -> bool:
        return self.direction == Direction.ASC


@dataclass(frozen=True)
class Sort:
    """
    Ordered sequence of sort keys. Earlier orders take precedence.

    Example:
        Sort.by("price", direction=Direction.DESC).and_(Sort.by("name"))
        Sort.parse("-price,name")  # same thing
    """

    orders: Tuple[Order, ...] = ()

    @classmethod
    def by(cls, *properties: str, direction: Direction = Direction.ASC) -> "Sort":
        return cls(tuple(Order(name, direction) for name in properties))

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @classmethod
    def parse(cls, expression: Optional[str]) -> "Sort":
        """
        Parse a comma-separated sort expression.

        Each key is a property name; a leading '-' sorts it descending.

        Args:
            expression: e.g. "-price,name" (None or blank means unsorted)

        Returns:
            Parsed Sort

        Raises:
            InvalidArgumentError: If a key is empty
        """
        if not expression or not expression.strip():
            return cls.unsorted()

        orders = []
        for raw_key in expression.split(','):
            key = raw_key.strip()
            direction = Direction.ASC
            if key.startswith('-'):
                direction = Direction.DESC
                key = key[1:].strip()
            if not key:
                raise InvalidArgumentError(
                    f"Invalid sort expression: {expression!r}", argument="sort", value=expression
                )
            orders.append(Order(key, direction))
        return cls(tuple(orders))

    def and_(self, other: "Sort") -> "Sort":
        return Sort(self.orders + other.orders)

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def __iter__(self):
        return iter(self.orders)


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page index, positive page size and an optional sort.

    Raises:
        InvalidArgumentError: If page is negative or size is not positive
    """

    page: int
    size: int
    sort: Sort = field(default_factory=Sort.unsorted)

    def __post_init__(self):
        if self.size is None or self.size <= 0:
            raise InvalidArgumentError(
                f"Page size must be positive: {self.size}", argument="size", value=self.size
            )
        if self.page is None or self.page < 0:
            raise InvalidArgumentError(
                f"Page index must not be negative: {self.page}", argument="page", value=self.page
            )

    @classmethod
    def of(cls, page: int, size: int, sort: Optional[Sort] = None) -> "PageRequest":
        return cls(page, size, sort or Sort.unsorted())

    @property
    def offset(self) -> int:
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size, self.sort)


@dataclass
class Page(Generic[T]):
    """
    One slice of a larger result set with total-count metadata.

    total_pages is ceil(total_elements / size), so an empty result has
    zero pages.
    """

    content: List[T]
    number: int
    size: int
    total_elements: int
    sort: Sort = field(default_factory=Sort.unsorted)

    @classmethod
    def of(cls, content: List[T], request: PageRequest, total_elements: int) -> "Page[T]":
        return cls(
            content=list(content),
            number=request.page,
            size=request.size,
            total_elements=total_elements,
            sort=request.sort,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, converter: Callable[[T], R]) -> "Page[R]":
        """Transform the content while keeping the paging metadata."""
        return Page(
            content=[converter(item) for item in self.content],
            number=self.number,
            size=self.size,
            total_elements=self.total_elements,
            sort=self.sort,
        )

    def __iter__(self):
        return iter(self.content)
