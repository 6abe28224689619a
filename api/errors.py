"""
Contract Error Handlers.

Translates contract translation failures into client-facing 400 responses.
The Service Host owns the FastAPI app and calls
`register_contract_error_handlers(app)` while building it.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.models import ErrorResponse
from domain.errors import ContractError, ContractFormatError, ContractShapeError

logger = logging.getLogger(__name__)

CONTRACT_ERROR_STATUS = 400


def contract_error_response(exc: ContractError) -> JSONResponse:
    """
    Build the 400 response for a rejected payload.

    Example:
        contract_error_response(ContractShapeError("orderNumbers", "x", "an array of strings"))
        # -> 400 {"error": "ContractShapeError", "field": "orderNumbers", ...}
    """
    body = ErrorResponse(
        error=type(exc).__name__,
        detail=str(exc),
        field=exc.field,
        status_code=CONTRACT_ERROR_STATUS,
    )
    return JSONResponse(status_code=CONTRACT_ERROR_STATUS, content=body.model_dump())


async def _handle_contract_error(request: Request, exc: ContractError) -> JSONResponse:
    logger.warning(
        "Rejected contract payload on %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return contract_error_response(exc)


def register_contract_error_handlers(app: FastAPI) -> None:
    """Register handlers for both contract error kinds on a host app."""
    app.add_exception_handler(ContractFormatError, _handle_contract_error)
    app.add_exception_handler(ContractShapeError, _handle_contract_error)


__all__ = [
    "CONTRACT_ERROR_STATUS",
    "contract_error_response",
    "register_contract_error_handlers",
]
