"""
Specification Pattern Implementation

Encapsulates query criteria in composable objects. A specification can be
evaluated against an in-memory candidate or translated into a SQLAlchemy
filter expression, so the same rule drives both unit checks and queries.

Compose with & (AND), | (OR) and ~ (NOT).
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Generic, Iterable, TypeVar

from sqlalchemy import and_, or_, not_, true


T = TypeVar('T')


class Specification(ABC, Generic[T]):
    """
    Abstract base class for specifications.

    A specification encapsulates a single business rule or query criterion.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check if a candidate object satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies specification
        """
        pass

    @abstractmethod
    def to_sql_filter(self):
        """
        Convert specification to SQLAlchemy filter expression.

        Returns:
            SQLAlchemy boolean clause
        """
        pass

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine specifications with AND."""
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "OrSpecification[T]":
        """Combine specifications with OR."""
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        """Negate specification with NOT."""
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """Specification that combines two specifications with AND."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return and_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self):
        return f"({self.left!r} AND {self.right!r})"


class OrSpecification(Specification[T]):
    """Specification that combines two specifications with OR."""

    def __init__(self, left: Specification[T], right: Specification[T]):
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return or_(self.left.to_sql_filter(), self.right.to_sql_filter())

    def __repr__(self):
        return f"({self.left!r} OR {self.right!r})"


class NotSpecification(Specification[T]):
    """Specification that negates another specification."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def to_sql_filter(self):
        return not_(self.spec.to_sql_filter())

    def __repr__(self):
        return f"NOT {self.spec!r}"


class MatchAllSpecification(Specification[T]):
    """Specification satisfied by every candidate."""

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_sql_filter(self):
        return true()

    def __and__(self, other: Specification[T]) -> Specification[T]:
        # Identity for AND: keeps composed filters free of redundant TRUE terms
        return other

    def __repr__(self):
        return "MatchAll"


def all_of(specs: Iterable[Specification[T]]) -> Specification[T]:
    """
    Fold specifications together with AND, left to right.

    Args:
        specs: Specifications to combine (may be empty)

    Returns:
        The combined specification, or MatchAllSpecification when specs is empty
    """
    return reduce(lambda left, right: left & right, specs, MatchAllSpecification())
