"""
Product API endpoints
"""
from decimal import Decimal
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, Query

from config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from constants import HTTPStatus
from dependencies import get_product_service
from dtos.request.product_request import ProductExampleRequest, PriceUpdateRequest
from dtos.response.product_response import (
    ProductResponse,
    ProductSummaryResponse,
    ProductPageResponse,
    PriceUpdateResponse,
)
from exceptions import InvalidArgumentError
from repositories.paging import Sort
from services.product_service import ProductService
from utils.error_handlers import handle_api_errors

router = APIRouter()


def check_price_range(min_price: Optional[Decimal], max_price: Optional[Decimal]) -> None:
    """Reject a price range whose lower bound exceeds its upper bound."""
    if min_price is not None and max_price is not None and min_price > max_price:
        raise InvalidArgumentError(
            f"min_price ({min_price}) must not be greater than max_price ({max_price})",
            argument="min_price",
            value=min_price,
        )


@router.get("/products", response_model=List[ProductResponse])
@handle_api_errors("Get products")
def get_products(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the product name"),
    min_price: Optional[Decimal] = Query(None, ge=0, description="Inclusive lower price bound"),
    max_price: Optional[Decimal] = Query(None, ge=0, description="Inclusive upper price bound"),
    mode: Literal["specification", "criteria"] = Query(
        "specification", description="Filter strategy: composed specifications or the criteria query"
    ),
    service: ProductService = Depends(get_product_service)
):
    """
    List products matching every supplied criterion.

    Query parameters:
    - name: Case-insensitive substring of the product name
    - min_price / max_price: Inclusive price bounds
    - mode: specification (default) or criteria; both return the same rows
    """
    check_price_range(min_price, max_price)
    if mode == "criteria":
        return service.fetch_products_by_criteria(name, min_price, max_price)
    return service.fetch_products_by_specifications(name, min_price, max_price)


@router.get("/products/page", response_model=ProductPageResponse)
@handle_api_errors("Get product page")
def get_product_page(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort: Optional[str] = Query(None, description="Sort keys, e.g. -price,name. Prefix with - for desc"),
    name: Optional[str] = Query(None, description="Case-insensitive substring of the product name"),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    service: ProductService = Depends(get_product_service)
):
    """Paginated, optionally sorted and filtered product list."""
    check_price_range(min_price, max_price)
    product_page = service.fetch_paged_products(
        page,
        size,
        Sort.parse(sort),
        name=name,
        min_price=min_price,
        max_price=max_price,
    )
    return ProductPageResponse.from_page(product_page)


@router.get("/products/summaries", response_model=List[ProductSummaryResponse])
@handle_api_errors("Get product summaries")
def get_product_summaries(
    name: Optional[str] = Query(None),
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    sort: Optional[str] = Query(None, description="Sort keys, e.g. -price,name"),
    service: ProductService = Depends(get_product_service)
):
    """Id and name of the matching products."""
    check_price_range(min_price, max_price)
    return service.fetch_product_summaries(name, min_price, max_price, Sort.parse(sort))


@router.post("/products/search-by-example", response_model=List[ProductResponse])
@handle_api_errors("Search products by example")
def search_products_by_example(
    request: ProductExampleRequest,
    service: ProductService = Depends(get_product_service)
):
    """Products matching the fields set in the request body."""
    return service.fetch_products_by_example(request.to_probe(), request.to_matcher())


@router.put("/products/prices", response_model=PriceUpdateResponse)
@handle_api_errors("Update product prices")
def update_product_prices(
    request: PriceUpdateRequest,
    service: ProductService = Depends(get_product_service)
):
    """Set one price for every product in a category."""
    updated = service.update_product_prices(request.price, request.category)
    return PriceUpdateResponse(updated=updated, category=request.category, price=request.price)


@router.delete("/products/{product_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete product")
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """
    Delete a product.

    Raises:
        HTTPException: 404 if the product does not exist, 400 for a non-positive id
    """
    service.delete_product(product_id)
