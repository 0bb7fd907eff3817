"""Exception handlers rendering application errors as ``{"error": ...}``."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import BaseModel
from starlette.responses import JSONResponse

from src.book_api.core.exceptions import BookApiError, InvalidInputError


class ErrorResponse(BaseModel):
    """Error body returned by every failing route."""

    error: str
    details: list[Any] | None = None


STORE_UNAVAILABLE_RESPONSE: dict[int | str, dict[str, Any]] = {
    503: {"model": ErrorResponse, "description": "Data store unavailable"},
}
INVALID_INPUT_RESPONSE: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
}
NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Book not found"},
}


async def book_api_error_handler(request: Request, exc: BookApiError) -> JSONResponse:
    logger.bind(status_code=exc.status_code, error_type=type(exc).__name__).info(
        "request.rejected: {}", exc.message
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error = InvalidInputError(details=jsonable_encoder(exc.errors()))
    return await book_api_error_handler(request, error)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookApiError, book_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    document_validation_as_invalid_input(app)


def document_validation_as_invalid_input(app: FastAPI) -> None:
    """Drop FastAPI's generated 422 entries from the OpenAPI document.

    Request validation failures are answered by ``validation_error_handler``
    with the 400 ``ErrorResponse`` each route already declares.
    """
    generate = app.openapi

    def openapi() -> dict[str, Any]:
        schema = generate()
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        components = schema.get("components", {}).get("schemas", {})
        components.pop("HTTPValidationError", None)
        components.pop("ValidationError", None)
        return schema

    app.openapi = openapi  # type: ignore[method-assign]
