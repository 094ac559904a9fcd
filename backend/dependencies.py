"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances bound
to the request-scoped database session, so routers never construct
repositories themselves and tests can override a single provider.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.product_service import ProductService
from services.user_service import UserService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """
    Factory function for creating ProductService instances.

    Args:
        db: Database session (injected)

    Returns:
        ProductService bound to the request session
    """
    return ProductService(db)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)

    Returns:
        UserService bound to the request session
    """
    return UserService(db)
