from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from customer_directory.config import settings
from customer_directory.models.responses import ErrorResponse, HealthResponse
from customer_directory.routers import customers
from customer_directory.routers.customers import get_customer_data_service
from customer_directory.services.customer_data_service import (
    CustomerDataService,
    customer_data_service,
)
from customer_directory.utils import responses
from customer_directory.utils.exceptions import CustomerDirectoryException, status_code_for
import logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle events"""
    # Startup
    logger.info("Starting up Customer Directory API...")

    try:
        total = len(customer_data_service.load())
        logger.info(f"✓ Customer data loaded ({total} customers)")
    except CustomerDirectoryException as e:
        # Requests will report the failure; keep serving health and docs
        logger.error(f"✗ Customer data load failed: {e.message}")

    yield

    # Shutdown
    logger.info("Shutting down Customer Directory API...")
    logger.info("✓ Application shutdown completed")


# Create FastAPI app with lifespan events
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description=settings.api_description,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(customers.router)


@app.exception_handler(CustomerDirectoryException)
async def customer_directory_exception_handler(request: Request, exc: CustomerDirectoryException):
    """Global exception handler for CustomerDirectoryException"""
    status_code = status_code_for(exc)

    if status_code >= 500:
        logger.error(f"Unhandled {exc.code} on {request.url.path}: {exc.message}")
        return responses.error("Internal server error", status_code)

    return responses.error(exc.message, status_code)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": settings.api_title,
        "version": settings.api_version,
        "description": settings.api_description,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health", response_model=HealthResponse, responses={500: {"model": ErrorResponse}})
async def health(data_service: CustomerDataService = Depends(get_customer_data_service)):
    """Health check reporting the size of the loaded directory"""
    try:
        total_customers = data_service.get_total_customer_count()
    except Exception:
        logger.exception("Error in health check")
        return responses.error("Health check failed")

    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return responses.success(
        HealthResponse(
            message=f"{settings.api_title} is healthy",
            timestamp=timestamp,
            version=settings.api_version,
            total_customers=total_customers,
        )
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
