from typing import Any, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


def success(data: Any, status_code: int = 200) -> JSONResponse:
    """Build a successful JSON response, dumping pydantic models by wire name"""
    if isinstance(data, BaseModel):
        data = data.model_dump(by_alias=True, exclude_none=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def error(message: str, status_code: int = 500, details: Optional[Any] = None) -> JSONResponse:
    """Build an error response: {"error": message[, "details": details]}"""
    content = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def validation_error(errors: List[str]) -> JSONResponse:
    return error("Validation failed", 400, {"validationErrors": errors})
