import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError

from customer_directory.config import settings
from customer_directory.models.responses import Customer
from customer_directory.utils.exceptions import CustomerDataError

logger = logging.getLogger(__name__)


class CustomerDataService:
    """Read-only access to the customer directory loaded from a static JSON file"""

    def __init__(self, data_path: Union[str, Path]):
        self.data_path = Path(data_path)
        self._customers: Optional[Tuple[Customer, ...]] = None
        logger.info(f"CustomerDataService initialized with data path: {self.data_path}")

    def load(self) -> Tuple[Customer, ...]:
        """Load the customer snapshot once; later calls return the same snapshot"""
        if self._customers is None:
            self._customers = self._read_customers()
            logger.info(f"Loaded {len(self._customers)} customers from {self.data_path}")
        return self._customers

    def _read_customers(self) -> Tuple[Customer, ...]:
        try:
            with self.data_path.open(encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read customer data from {self.data_path}: {str(e)}")
            raise CustomerDataError(f"Customer data could not be read: {str(e)}")

        # Accept {"customers": [...]} or a bare list
        records = document.get("customers", []) if isinstance(document, dict) else document
        if not isinstance(records, list):
            raise CustomerDataError("Customer data must be a list of customer records")

        try:
            return tuple(Customer.model_validate(record) for record in records)
        except ValidationError as e:
            logger.error(f"Invalid customer record in {self.data_path}: {str(e)}")
            raise CustomerDataError(f"Customer data is malformed: {str(e)}")

    def get_all_customers(self) -> Tuple[Customer, ...]:
        """Get all customers in their stored order"""
        return self.load()

    def get_total_customer_count(self) -> int:
        return len(self.load())

    def get_customer_by_id(self, customer_id: str) -> Optional[Customer]:
        """Find a customer by ID, ignoring case"""
        wanted = customer_id.lower()
        return next((c for c in self.load() if c.id.lower() == wanted), None)

    def get_customers_by_ids(self, customer_ids: Iterable[str]) -> List[Customer]:
        wanted = {customer_id.lower() for customer_id in customer_ids}
        return [c for c in self.load() if c.id.lower() in wanted]

    def customer_exists(self, customer_id: str) -> bool:
        return self.get_customer_by_id(customer_id) is not None


# Global instance
customer_data_service = CustomerDataService(settings.customer_data_path)
