from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional
import logging
from customer_directory.models.requests import CustomerFilters, CustomerQuery
from customer_directory.models.responses import Customer, CustomerListResponse, ErrorResponse
from customer_directory.services.customer_data_service import (
    CustomerDataService,
    customer_data_service,
)
from customer_directory.services.customer_query_service import CustomerQueryService
from customer_directory.services.pagination_service import parse_query_int
from customer_directory.utils.exceptions import CustomerNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


def get_customer_data_service() -> CustomerDataService:
    return customer_data_service


def get_customer_query_service(
        data_service: CustomerDataService = Depends(get_customer_data_service),
) -> CustomerQueryService:
    return CustomerQueryService(data_service)


@router.get(
    "",
    response_model=CustomerListResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def list_customers(
        page: Optional[str] = Query(None, description="Page number, 1-based"),
        page_size: Optional[str] = Query(None, alias="pageSize", description="Customers per page (max 100)"),
        customer_id: Optional[str] = Query(None, alias="id", description="Partial customer ID"),
        full_name: Optional[str] = Query(None, alias="fullName", description="Partial full name"),
        email: Optional[str] = Query(None, description="Partial email"),
        registration_date: Optional[str] = Query(
            None, alias="registrationDate", description="Registration date, DD/MM/YYYY"
        ),
        query_service: CustomerQueryService = Depends(get_customer_query_service),
) -> JSONResponse:
    """
    List customers matching the given filters, one page at a time.
    Malformed page numbers fall back to defaults rather than failing.
    """
    query = CustomerQuery(
        filters=CustomerFilters(
            id=customer_id,
            full_name=full_name,
            email=email,
            registration_date=registration_date,
        ),
        page=parse_query_int(page),
        page_size=parse_query_int(page_size),
    )
    return query_service.get_customers(query)


@router.get(
    "/{customer_id}",
    response_model=Customer,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse}},
)
async def get_customer(
        customer_id: str,
        data_service: CustomerDataService = Depends(get_customer_data_service),
):
    """Get a single customer by ID (case-insensitive)"""
    customer = data_service.get_customer_by_id(customer_id)
    if customer is None:
        logger.info(f"Customer {customer_id} not found")
        raise CustomerNotFoundError(customer_id)
    return customer
