class CustomerDirectoryException(Exception):
    """Base exception for the customer directory service"""

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class CustomerDataError(CustomerDirectoryException):
    """Customer data source could not be read or parsed"""

    def __init__(self, message: str):
        super().__init__(message, "DATA_SOURCE_ERROR")


class CustomerNotFoundError(CustomerDirectoryException):
    """Customer not found errors"""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__("Customer not found", "CUSTOMER_NOT_FOUND")


STATUS_CODE_MAP = {
    "CUSTOMER_NOT_FOUND": 404,
    "DATA_SOURCE_ERROR": 500,
    "INTERNAL_ERROR": 500,
}


def status_code_for(exc: CustomerDirectoryException) -> int:
    """Map an exception code to its HTTP status code"""
    return STATUS_CODE_MAP.get(exc.code, 500)
