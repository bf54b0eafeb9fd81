from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

# Page size cap applied on every request regardless of deployment settings
MAX_PAGE_SIZE = 100

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "customers.json"


class Settings(BaseSettings):
    # API Configuration
    api_title: str = "Customer Directory API"
    api_version: str = "1.0.0"
    api_description: str = "Filtered, paginated lookups over a fixed customer directory"

    # Logging
    log_level: str = "INFO"

    # Customer data
    customer_data_path: str = str(DEFAULT_DATA_PATH)

    # Pagination
    default_page_size: int = 10

    # CORS
    cors_origins: str = "*"  # Comma separated list of allowed origins

    @property
    def cors_origins_list(self) -> List[str]:
        """Get allowed CORS origins as a list"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    class Config:
        env_file = ".env"


settings = Settings()
