import math
import re
from typing import Optional, Sequence, TypeVar, Union

from customer_directory.config import MAX_PAGE_SIZE
from customer_directory.models.requests import CustomerFilters
from customer_directory.models.responses import (
    Customer,
    CustomerListResponse,
    PaginationParams,
    PaginationResult,
)

T = TypeVar("T")

Number = Union[int, float, None]

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_query_int(raw: Optional[str]) -> Optional[int]:
    """
    Leniently parse an integer query parameter.

    Leading digits are used and trailing text ignored ("2.7" -> 2,
    "12abc" -> 12). Returns None when no leading integer is present or
    the digits exceed the interpreter's integer conversion limit.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        return None


def _floor_or_default(value: Number, default: int) -> int:
    # None, NaN, infinities and zero all fall back to the default
    if value is None:
        return default
    if isinstance(value, float) and not math.isfinite(value):
        return default
    return math.floor(value) or default


def validate_pagination_params(
    page: Number, page_size: Number, default_page_size: int = DEFAULT_PAGE_SIZE
) -> PaginationParams:
    """
    Normalize pagination parameters.

    page: floored, missing or zero becomes 1, never below 1.
    page_size: floored, missing or zero becomes ``default_page_size``,
    then clamped to [1, MAX_PAGE_SIZE]; a negative size therefore clamps to 1.
    """
    validated_page = max(1, _floor_or_default(page, DEFAULT_PAGE))
    validated_page_size = max(1, min(MAX_PAGE_SIZE, _floor_or_default(page_size, default_page_size)))

    return PaginationParams(page=validated_page, page_size=validated_page_size)


def paginate(
    items: Sequence[T],
    page: Number,
    page_size: Number,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> PaginationResult[T]:
    """
    Slice a sequence into the requested page.

    Pages past the end yield no items; nothing here raises for out of
    range input.
    """
    params = validate_pagination_params(page, page_size, default_page_size)

    total = len(items)
    total_pages = math.ceil(total / params.page_size)
    start = (params.page - 1) * params.page_size
    end = start + params.page_size

    return PaginationResult(
        items=list(items[start:end]),
        total=total,
        page=params.page,
        page_size=params.page_size,
        total_pages=total_pages,
        has_next_page=params.page < total_pages,
        has_previous_page=params.page > 1,
    )


def create_customer_response(
    result: PaginationResult[Customer], filters: Optional[CustomerFilters] = None
) -> CustomerListResponse:
    """Shape a page of customers into the public response, echoing active filters"""
    active_filters = filters.active_criteria() if filters is not None else {}

    return CustomerListResponse(
        items=result.items,
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        filters=active_filters or None,
    )
