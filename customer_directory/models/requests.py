# customer_directory/models/requests.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional


class CustomerFilters(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field("", description="Partial, case-insensitive customer ID")
    full_name: str = Field("", alias="fullName", description="Partial, case-insensitive full name")
    email: str = Field("", description="Partial, case-insensitive email")
    registration_date: str = Field(
        "", alias="registrationDate", description="Registration date in DD/MM/YYYY format"
    )

    @field_validator("id", "full_name", "email", "registration_date", mode="before")
    @classmethod
    def absent_as_empty(cls, v):
        return "" if v is None else v

    def active_criteria(self) -> Dict[str, str]:
        """Non-empty criteria keyed by their wire names"""
        return {name: value for name, value in self.model_dump(by_alias=True).items() if value}


class CustomerQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    filters: CustomerFilters = Field(default_factory=CustomerFilters)
    page: Optional[int] = Field(None, description="Requested page, 1-based")
    page_size: Optional[int] = Field(None, description="Requested page size")
