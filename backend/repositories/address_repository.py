"""
Address repository for address data access operations.
"""

from sqlalchemy.orm import Session

from models import Address as AddressModel
from .base_repository import BaseRepository


class AddressRepository(BaseRepository[AddressModel]):
    """Repository for Address model operations."""

    def __init__(self, db: Session):
        super().__init__(db, AddressModel)
