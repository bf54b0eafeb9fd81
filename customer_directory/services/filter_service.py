import logging
from typing import Callable, List, NamedTuple, Sequence, Tuple

from customer_directory.models.requests import CustomerFilters
from customer_directory.models.responses import Customer
from customer_directory.utils.date_utils import convert_date_format

logger = logging.getLogger(__name__)

INVALID_DATE_MESSAGE = "Registration date must be in DD/MM/YYYY format"

Predicate = Callable[[Customer], bool]


class FilterValidationResult(NamedTuple):
    is_valid: bool
    errors: List[str]


def validate_filters(filters: CustomerFilters) -> FilterValidationResult:
    """
    Validate filter criteria.

    Only the registration date is checked; ID, name and email are used
    verbatim as substrings whatever they contain.
    """
    errors = []

    if filters.registration_date and convert_date_format(filters.registration_date) is None:
        errors.append(INVALID_DATE_MESSAGE)

    return FilterValidationResult(is_valid=not errors, errors=errors)


def _contains(field: str, needle: str) -> Predicate:
    needle = needle.lower()
    return lambda customer: needle in getattr(customer, field).lower()


def _registered_on(registration_date: str) -> Predicate:
    filter_date = convert_date_format(registration_date)
    if filter_date is None:
        # Unparseable date matches nothing
        return lambda customer: False
    return lambda customer: customer.registration_date == filter_date


def build_predicates(filters: CustomerFilters) -> Tuple[Predicate, ...]:
    """Build one predicate per active criterion: id, full name, email, registration date"""
    predicates = []
    if filters.id:
        predicates.append(_contains("id", filters.id))
    if filters.full_name:
        predicates.append(_contains("full_name", filters.full_name))
    if filters.email:
        predicates.append(_contains("email", filters.email))
    if filters.registration_date:
        predicates.append(_registered_on(filters.registration_date))
    return tuple(predicates)


def apply_filters(customers: Sequence[Customer], filters: CustomerFilters) -> List[Customer]:
    """Return the customers satisfying every active criterion, in their original order"""
    predicates = build_predicates(filters)
    if not predicates:
        return list(customers)

    filtered = [customer for customer in customers if all(p(customer) for p in predicates)]
    logger.debug(f"Filters {filters.active_criteria()} matched {len(filtered)} of {len(customers)} customers")
    return filtered
