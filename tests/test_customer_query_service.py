import json
import logging

from customer_directory.models.requests import CustomerFilters, CustomerQuery
from customer_directory.models.responses import Customer
from customer_directory.services.customer_query_service import CustomerQueryService
from customer_directory.utils.exceptions import CustomerDataError


class StaticDataService:
    def __init__(self, customers):
        self.customers = tuple(customers)
        self.calls = 0

    def get_all_customers(self):
        self.calls += 1
        return self.customers


class BrokenDataService:
    def get_all_customers(self):
        raise CustomerDataError("disk on fire at /srv/data/customers.json")


def make_customers():
    return [
        Customer(id="CUST-001", full_name="John Doe", email="john.doe@email.com", registration_date="2023-01-15"),
        Customer(id="CUST-002", full_name="Jane Smith", email="jane.smith@email.com", registration_date="2023-02-20"),
        Customer(id="CUST-003", full_name="Bob Johnson", email="bob.johnson@email.com", registration_date="2023-01-16"),
    ]


def body_of(response):
    return json.loads(response.body)


class TestCustomerQueryService:
    def setup_method(self):
        self.data_service = StaticDataService(make_customers())
        self.service = CustomerQueryService(self.data_service, default_page_size=10)

    def test_defaults_return_first_page(self):
        response = self.service.get_customers(CustomerQuery())
        assert response.status_code == 200
        body = body_of(response)
        assert body == {
            "items": [
                {"id": "CUST-001", "fullName": "John Doe", "email": "john.doe@email.com", "registrationDate": "2023-01-15"},
                {"id": "CUST-002", "fullName": "Jane Smith", "email": "jane.smith@email.com", "registrationDate": "2023-02-20"},
                {"id": "CUST-003", "fullName": "Bob Johnson", "email": "bob.johnson@email.com", "registrationDate": "2023-01-16"},
            ],
            "total": 3,
            "page": 1,
            "pageSize": 10,
            "totalPages": 1,
        }

    def test_filters_are_applied_and_echoed(self):
        query = CustomerQuery(filters=CustomerFilters(full_name="JOHN"), page=1, page_size=1)
        body = body_of(self.service.get_customers(query))
        assert [c["id"] for c in body["items"]] == ["CUST-001"]
        assert body["total"] == 2
        assert body["totalPages"] == 2
        assert body["filters"] == {"fullName": "JOHN"}

    def test_invalid_date_is_rejected_before_data_access(self):
        query = CustomerQuery(filters=CustomerFilters(registration_date="2023-01-15"))
        response = self.service.get_customers(query)
        assert response.status_code == 400
        assert body_of(response) == {
            "error": "Validation failed",
            "details": {"validationErrors": ["Registration date must be in DD/MM/YYYY format"]},
        }
        assert self.data_service.calls == 0

    def test_configured_default_page_size(self):
        service = CustomerQueryService(self.data_service, default_page_size=2)
        body = body_of(service.get_customers(CustomerQuery()))
        assert body["pageSize"] == 2
        assert body["totalPages"] == 2

    def test_data_failure_returns_opaque_500(self, caplog):
        service = CustomerQueryService(BrokenDataService())
        with caplog.at_level(logging.ERROR):
            response = service.get_customers(CustomerQuery())
        assert response.status_code == 500
        assert body_of(response) == {"error": "Internal server error"}
        assert "disk on fire" not in response.body.decode()
        assert "Error in get_customers" in caplog.text
