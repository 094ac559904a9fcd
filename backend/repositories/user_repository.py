"""
User repository for user-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from models import User as UserModel
from .base_repository import BaseRepository


class UserRepository(BaseRepository[UserModel]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, UserModel)

    def find_all_with_tags(self) -> List[UserModel]:
        """
        Get all users with their tags and addresses eagerly loaded.

        Returns:
            List of users ordered by id
        """
        return self.db.query(self.model).options(
            selectinload(self.model.tags),
            selectinload(self.model.addresses)
        ).order_by(self.model.id).all()

    def get_by_email(self, email: str) -> Optional[UserModel]:
        """
        Get a user by email address.

        Args:
            email: Email address

        Returns:
            User instance, or None if not found
        """
        return self.db.query(self.model).filter(
            self.model.email == email
        ).first()
