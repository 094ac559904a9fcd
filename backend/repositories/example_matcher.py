"""
Query by Example

Matches entities against a partially populated, unsaved "probe" instance of
the same model. Every mapped column of the probe that holds a value becomes
an equality predicate; text columns are compared with a configurable
StringMatcher. The result is an ordinary Specification, so examples compose
with the other specifications and run through the same repository methods.
"""

from dataclasses import dataclass, replace
from typing import Any, FrozenSet, Generic, List, Optional, TypeVar

from sqlalchemy import String, func, inspect

from constants import StringMatcher
from .specifications import Specification, all_of

T = TypeVar('T')


@dataclass(frozen=True)
class ExampleMatcher:
    """
    Immutable matching rules for an Example.

    Each with_* method returns a new matcher.

    Usage:
        matcher = (
            ExampleMatcher.matching()
            .with_ignore_paths("id", "description")
            .with_string_matcher(StringMatcher.CONTAINING)
            .with_ignore_case()
        )
    """

    ignored_paths: FrozenSet[str] = frozenset()
    string_matcher: StringMatcher = StringMatcher.EXACT
    ignore_case: bool = False
    include_null_values: bool = False

    @classmethod
    def matching(cls) -> "ExampleMatcher":
        return cls()

    def with_ignore_paths(self, *paths: str) -> "ExampleMatcher":
        return replace(self, ignored_paths=self.ignored_paths | frozenset(paths))

    def with_string_matcher(self, string_matcher: StringMatcher) -> "ExampleMatcher":
        return replace(self, string_matcher=StringMatcher(string_matcher))

    def with_ignore_case(self, ignore_case: bool = True) -> "ExampleMatcher":
        return replace(self, ignore_case=ignore_case)

    def with_include_null_values(self) -> "ExampleMatcher":
        return replace(self, include_null_values=True)

    def is_ignored_path(self, path: str) -> bool:
        return path in self.ignored_paths


class _StringPropertySpec(Specification[Any]):
    """Text column compared with a StringMatcher."""

    def __init__(self, column, attr: str, value: str, matcher: StringMatcher, ignore_case: bool):
        self.column = column
        self.attr = attr
        self.value = value
        self.matcher = matcher
        self.ignore_case = ignore_case

    def is_satisfied_by(self, candidate) -> bool:
        actual = getattr(candidate, self.attr)
        if actual is None:
            return False
        expected = self.value
        if self.ignore_case:
            actual, expected = actual.lower(), expected.lower()

        if self.matcher == StringMatcher.CONTAINING:
            return expected in actual
        if self.matcher == StringMatcher.STARTING:
            return actual.startswith(expected)
        if self.matcher == StringMatcher.ENDING:
            return actual.endswith(expected)
        return actual == expected

    def to_sql_filter(self):
        if self.matcher == StringMatcher.CONTAINING:
            op = self.column.icontains if self.ignore_case else self.column.contains
            return op(self.value, autoescape=True)
        if self.matcher == StringMatcher.STARTING:
            op = self.column.istartswith if self.ignore_case else self.column.startswith
            return op(self.value, autoescape=True)
        if self.matcher == StringMatcher.ENDING:
            op = self.column.iendswith if self.ignore_case else self.column.endswith
            return op(self.value, autoescape=True)
        if self.ignore_case:
            return func.lower(self.column) == self.value.lower()
        return self.column == self.value

    def __repr__(self):
        return f"{self.attr} {self.matcher.value.lower()} {self.value!r}"


class _EqualPropertySpec(Specification[Any]):
    """Non-text column equal to a value, or IS NULL when value is None."""

    def __init__(self, column, attr: str, value):
        self.column = column
        self.attr = attr
        self.value = value

    def is_satisfied_by(self, candidate) -> bool:
        return getattr(candidate, self.attr) == self.value

    def to_sql_filter(self):
        if self.value is None:
            return self.column.is_(None)
        return self.column == self.value

    def __repr__(self):
        return f"{self.attr} == {self.value!r}"


class Example(Generic[T]):
    """
    A probe entity paired with the matcher that says how to compare it.

    Args:
        probe: Unsaved model instance; only the columns it sets take part
        matcher: Matching rules (defaults to ExampleMatcher.matching())
    """

    def __init__(self, probe: T, matcher: Optional[ExampleMatcher] = None):
        self.probe = probe
        self.matcher = matcher or ExampleMatcher.matching()

    @classmethod
    def of(cls, probe: T, matcher: Optional[ExampleMatcher] = None) -> "Example[T]":
        return cls(probe, matcher)

    @property
    def probe_type(self) -> type:
        return type(self.probe)

    def to_specification(self) -> Specification[T]:
        """
        Translate the probe into a Specification.

        Returns:
            AND of one predicate per matched column, or MatchAllSpecification
            when no column takes part
        """
        specs: List[Specification[T]] = []
        mapper = inspect(self.probe_type)

        for attr in mapper.column_attrs:
            key = attr.key
            if self.matcher.is_ignored_path(key):
                continue

            value = getattr(self.probe, key)
            if value is None and not self.matcher.include_null_values:
                continue

            column = getattr(self.probe_type, key)
            column_type = attr.columns[0].type
            if value is not None and isinstance(column_type, String):
                specs.append(
                    _StringPropertySpec(
                        column, key, value, self.matcher.string_matcher, self.matcher.ignore_case
                    )
                )
            else:
                specs.append(_EqualPropertySpec(column, key, value))

        return all_of(specs)
