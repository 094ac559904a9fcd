"""
Base repository providing common CRUD and query operations.
"""

from typing import Generic, TypeVar, List, Optional, Type, Any
from sqlalchemy import inspect
from sqlalchemy.orm import Session, Query

from exceptions import EntityNotFoundError, InvalidArgumentError
from .specifications import Specification
from .paging import Page, PageRequest, Sort
from .example_matcher import Example

T = TypeVar('T')


def validate_id(entity_id: Any, argument: str = "id") -> int:
    """
    Check that an identifier is a positive integer.

    Args:
        entity_id: Identifier supplied by the caller
        argument: Argument name reported in the error

    Returns:
        The identifier, unchanged

    Raises:
        InvalidArgumentError: If the identifier is None, not an int, or <= 0
    """
    if entity_id is None or isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
        raise InvalidArgumentError(f"Invalid {argument}: {entity_id}", argument=argument, value=entity_id)
    return entity_id


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Writes only flush; committing is left to the caller's transaction
    (see database.transaction).
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model
        self.entity_name = model.__name__

    def get_by_id(self, id: int) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_or_raise(self, id: int) -> T:
        """
        Retrieve a record by its ID, failing loudly when it is absent.

        Args:
            id: Primary key value

        Returns:
            Model instance

        Raises:
            InvalidArgumentError: If id is not a positive integer
            EntityNotFoundError: If no row has this id
        """
        validate_id(id)
        obj = self.get_by_id(id)
        if obj is None:
            raise EntityNotFoundError(self.entity_name, id)
        return obj

    def update(self, obj: T) -> T:
        """
        Update an existing record.

        Args:
            obj: Model instance with updated values

        Returns:
            Updated model instance
        """
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        """
        Delete a record from the database.

        Args:
            obj: Model instance to delete
        """
        self.db.delete(obj)
        self.db.flush()

    def delete_by_id(self, id: int) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        obj = self.get_by_id(id)
        if obj:
            self.delete(obj)
            return True
        return False

    def count(self, spec: Optional[Specification[T]] = None) -> int:
        """
        Count records, optionally only those matching a Specification.

        Args:
            spec: Specification to match records against

        Returns:
            Number of matching records
        """
        return self._filtered(spec).count()

    # Specification queries

    def find(self, spec: Optional[Specification[T]] = None, sort: Optional[Sort] = None) -> List[T]:
        """
        Find records using a Specification.

        Args:
            spec: Specification to match records against (None matches all)
            sort: Optional ordering; without it the order is unspecified

        Returns:
            List of records matching the specification

        Example:
            spec = ProductNameContainsSpec('pro') & ProductPriceAtLeastSpec(10)
            products = product_repo.find(spec, Sort.by('price'))
        """
        query = self._filtered(spec)
        if sort is not None:
            query = self._apply_sort(query, sort)
        return query.all()

    def find_page(self, page_request: PageRequest, spec: Optional[Specification[T]] = None) -> Page[T]:
        """
        Load one page of the records matching a Specification.

        The total is counted over the whole filtered set; the slice is taken
        after ordering by page_request.sort, with the primary key as the last
        sort key so page boundaries are stable.

        Args:
            page_request: Zero-based page index, size and sort
            spec: Specification to match records against (None matches all)

        Returns:
            Page with the slice and total counts
        """
        query = self._filtered(spec)
        total = query.count()

        query = self._apply_sort(query, page_request.sort)
        query = query.order_by(self.model.id.asc())
        content = query.offset(page_request.offset).limit(page_request.size).all()

        return Page.of(content, page_request, total)

    def find_by_example(self, example: Example[T], sort: Optional[Sort] = None) -> List[T]:
        """
        Find records that match a probe entity.

        Args:
            example: Probe plus matching rules

        Returns:
            List of matching records

        Raises:
            InvalidArgumentError: If the probe is not an instance of this repository's model
        """
        if not isinstance(example.probe, self.model):
            raise InvalidArgumentError(
                f"Example probe must be a {self.entity_name}, got {type(example.probe).__name__}",
                argument="example",
            )
        return self.find(example.to_specification(), sort)

    # Internal helpers

    def _filtered(self, spec: Optional[Specification[T]]) -> Query:
        query = self.db.query(self.model)
        if spec is not None:
            query = query.filter(spec.to_sql_filter())
        return query

    def _apply_sort(self, query: Query, sort: Sort) -> Query:
        """
        Add ORDER BY clauses for each sort key.

        Raises:
            InvalidArgumentError: If a key is not a column of the model
        """
        columns = {attr.key for attr in inspect(self.model).column_attrs}
        for order in sort:
            if order.name not in columns:
                raise InvalidArgumentError(
                    f"Cannot sort {self.entity_name} by unknown property '{order.name}'",
                    argument="sort",
                    value=order.name,
                )
            column = getattr(self.model, order.name)
            query = query.order_by(column.asc() if order.is_ascending else column.desc())
        return query
