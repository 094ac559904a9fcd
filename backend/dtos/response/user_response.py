"""
User Response DTOs

DTOs for user, profile and address API responses.
"""

from datetime import date
from pydantic import BaseModel, Field
from typing import Optional, List


class AddressResponse(BaseModel):
    """Response DTO for an address."""

    id: int = Field(description="Address ID")
    street: str = Field(description="Street")
    city: str = Field(description="City")
    zip: str = Field(description="Postal code")
    state: Optional[str] = Field(None, description="State or region")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class TagResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class UserResponse(BaseModel):
    """Response DTO for a user with tags and addresses."""

    id: int = Field(description="User ID")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")
    tags: List[TagResponse] = Field(default_factory=list, description="Tags")
    addresses: List[AddressResponse] = Field(default_factory=list, description="Addresses")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class ProfileResponse(BaseModel):
    """Response DTO for a profile and the email of its user."""

    id: int = Field(description="Profile ID (same as the user ID)")
    bio: Optional[str] = Field(None, description="Biography")
    phone_number: Optional[str] = Field(None, description="Phone number")
    date_of_birth: Optional[date] = Field(None, description="Date of birth")
    loyalty_points: int = Field(0, description="Loyalty points")
    user_email: str = Field(description="Email of the owning user")

    @classmethod
    def from_profile(cls, profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            bio=profile.bio,
            phone_number=profile.phone_number,
            date_of_birth=profile.date_of_birth,
            loyalty_points=profile.loyalty_points,
            user_email=profile.user.email,
        )
