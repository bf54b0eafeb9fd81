import logging
from typing import Optional

from fastapi.responses import JSONResponse

from customer_directory.config import settings
from customer_directory.models.requests import CustomerQuery
from customer_directory.services.customer_data_service import (
    CustomerDataService,
    customer_data_service,
)
from customer_directory.services.filter_service import apply_filters, validate_filters
from customer_directory.services.pagination_service import (
    create_customer_response,
    paginate,
)
from customer_directory.utils import responses

logger = logging.getLogger(__name__)


class CustomerQueryService:
    """Runs a customer lookup: validate filters, filter, paginate, shape the response"""

    def __init__(
        self,
        data_service: Optional[CustomerDataService] = None,
        default_page_size: Optional[int] = None,
    ):
        self.data_service = data_service or customer_data_service
        self.default_page_size = default_page_size or settings.default_page_size

    def get_customers(self, query: CustomerQuery) -> JSONResponse:
        validation = validate_filters(query.filters)
        if not validation.is_valid:
            logger.warning(f"Rejected customer query: {validation.errors}")
            return responses.validation_error(validation.errors)

        try:
            customers = self.data_service.get_all_customers()
            filtered = apply_filters(customers, query.filters)
            result = paginate(filtered, query.page, query.page_size, self.default_page_size)
            body = create_customer_response(result, query.filters)
        except Exception:
            logger.exception("Error in get_customers")
            return responses.error("Internal server error")

        logger.info(
            f"Customer query page={result.page} page_size={result.page_size} "
            f"matched {result.total} customers"
        )
        return responses.success(body)
