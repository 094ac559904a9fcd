"""
User Service

Lookups over the user graph (users, profiles, addresses) and the removal of
a user's addresses.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from database import transaction
from exceptions import EntityNotFoundError
from models import Address, Profile, User
from repositories.address_repository import AddressRepository
from repositories.base_repository import validate_id
from repositories.profile_repository import ProfileRepository
from repositories.user_repository import UserRepository
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize UserService.

        Args:
            db: Database session
        """
        self.db = db
        self.user_repo = UserRepository(db)
        self.profile_repo = ProfileRepository(db)
        self.address_repo = AddressRepository(db)

    @log_operation("show_related_entities")
    def show_related_entities(self, profile_id: int) -> Profile:
        """
        Load a profile and log the email of the user it belongs to.

        Args:
            profile_id: Profile id

        Returns:
            The profile, with its user loaded

        Raises:
            InvalidArgumentError: If profile_id is None or not positive
            EntityNotFoundError: If no profile has this id
        """
        validate_id(profile_id, "profile_id")
        with transaction(self.db):
            profile = self.profile_repo.get_with_user(profile_id)
            if profile is None:
                raise EntityNotFoundError("Profile", profile_id)
            logger.info(f"User email: {profile.user.email}")
        return profile

    def fetch_address(self, address_id: int) -> Address:
        """
        Load an address by id and log it.

        Raises:
            InvalidArgumentError: If address_id is not a positive integer
            EntityNotFoundError: If no address has this id
        """
        address = self.address_repo.get_or_raise(address_id)
        logger.info(f"Address: {address}")
        return address

    @log_operation("delete_related")
    def delete_related(self, user_id: int) -> Optional[Address]:
        """
        Remove a user's first address (lowest id) and delete it.

        The removal is committed in its own transaction.

        Args:
            user_id: User id

        Returns:
            The removed address, or None when the user has no addresses

        Raises:
            InvalidArgumentError: If user_id is not a positive integer
            EntityNotFoundError: If no user has this id
        """
        with transaction(self.db):
            user = self.user_repo.get_or_raise(user_id)
            if not user.addresses:
                logger.warning(f"User {user_id} has no addresses to remove")
                return None

            address = user.addresses[0]
            address_id = address.id
            user.remove_address(address)
            self.user_repo.update(user)

        logger.info(f"Removed address {address_id} from user {user_id}")
        return address

    def fetch_users(self) -> List[User]:
        """
        Load all users with their tags and addresses, logging each.

        Returns:
            Users ordered by id
        """
        users = self.user_repo.find_all_with_tags()
        for user in users:
            logger.info(f"User: {user}")
            for address in user.addresses:
                logger.info(f"Address: {address}")
        return users
