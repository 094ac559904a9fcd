"""
User, profile and address API endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends

from dependencies import get_user_service
from dtos.response.user_response import UserResponse, ProfileResponse, AddressResponse
from services.user_service import UserService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/users", response_model=List[UserResponse])
@handle_api_errors("Get users")
def get_users(service: UserService = Depends(get_user_service)):
    """All users with their tags and addresses."""
    return service.fetch_users()


@router.get("/profiles/{profile_id}/related", response_model=ProfileResponse)
@handle_api_errors("Get profile")
def get_profile_related(profile_id: int, service: UserService = Depends(get_user_service)):
    """A profile together with the email of the user it belongs to."""
    profile = service.show_related_entities(profile_id)
    return ProfileResponse.from_profile(profile)


@router.get("/addresses/{address_id}", response_model=AddressResponse)
@handle_api_errors("Get address")
def get_address(address_id: int, service: UserService = Depends(get_user_service)):
    """A single address."""
    return service.fetch_address(address_id)


@router.delete("/users/{user_id}/addresses/first", response_model=Optional[AddressResponse])
@handle_api_errors("Delete user address")
def delete_first_address(user_id: int, service: UserService = Depends(get_user_service)):
    """
    Remove the user's first address.

    Returns the removed address, or null when the user had none.
    """
    return service.delete_related(user_id)
