# customer_directory/models/responses.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Customer(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Unique customer identifier")
    full_name: str = Field(..., alias="fullName", description="Customer display name")
    email: str = Field(..., description="Customer email address")
    registration_date: str = Field(
        ..., alias="registrationDate", description="Registration date (YYYY-MM-DD)"
    )


class PaginationParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int


class PaginationResult(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    items: List[T] = Field(..., description="Items on the requested page")
    total: int = Field(..., description="Number of items before pagination")
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class CustomerListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Customer] = Field(..., description="Customers on the requested page")
    total: int = Field(..., description="Number of matching customers")
    page: int = Field(..., description="Normalized page number")
    page_size: int = Field(..., alias="pageSize", description="Normalized page size")
    total_pages: int = Field(..., alias="totalPages", description="Number of pages")
    filters: Optional[Dict[str, str]] = Field(None, description="Active filter criteria")


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    timestamp: str
    version: str
    total_customers: int = Field(..., alias="totalCustomers")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[Dict[str, List[str]]] = None
