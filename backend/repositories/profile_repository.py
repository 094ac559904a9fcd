"""
Profile repository for profile data access operations.
"""

from typing import Optional
from sqlalchemy.orm import Session, joinedload

from models import Profile as ProfileModel
from .base_repository import BaseRepository


class ProfileRepository(BaseRepository[ProfileModel]):
    """Repository for Profile model operations."""

    def __init__(self, db: Session):
        super().__init__(db, ProfileModel)

    def get_with_user(self, profile_id: int) -> Optional[ProfileModel]:
        """
        Get a profile with its owning user eagerly loaded.

        Args:
            profile_id: Profile id (same as the user id)

        Returns:
            Profile instance with user, or None if not found
        """
        return self.db.query(self.model).options(
            joinedload(self.model.user)
        ).filter(self.model.id == profile_id).first()
