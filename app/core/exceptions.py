"""
Application Exception Handling

Single AppException class for all catalog errors with FastAPI integration.
"""

import enum
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ErrorCode(str, enum.Enum):
    """
    Closed set of caller-facing error kinds.

    Every member must have an entry in STATUS_BY_CODE.
    """

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"
    UNABLE_TO_DELETE_CATEGORY = "UNABLE_TO_DELETE_CATEGORY"
    CATEGORY_CYCLE = "CATEGORY_CYCLE"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    def __str__(self) -> str:
        return self.value


STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.CATEGORY_NOT_FOUND: 404,
    ErrorCode.PRODUCT_NOT_FOUND: 404,
    ErrorCode.UNABLE_TO_DELETE_CATEGORY: 409,
    ErrorCode.CATEGORY_CYCLE: 409,
    ErrorCode.VALIDATION_ERROR: 400,
}


class AppException(Exception):
    """
    Unified application exception for all expected error scenarios.

    The HTTP status is derived from the error code, so callers never pick
    one by hand.

    Usage:
        raise AppException("Category not found", ErrorCode.CATEGORY_NOT_FOUND)
        raise AppException(
            "Unable to delete category",
            ErrorCode.UNABLE_TO_DELETE_CATEGORY,
            {"children": 2, "products": 0},
        )
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = STATUS_BY_CODE[code]
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code.value,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException to the JSON error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies, paths and queries as 400."""
    logger.debug(f"Rejected request {request.method} {request.url.path}: {exc.errors()}")
    error = validation_error(jsonable_encoder(exc.errors()))
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def category_not_found(category_id: Optional[int] = None) -> AppException:
    """Create category not found exception."""
    details = {"category_id": category_id} if category_id is not None else {}
    return AppException("Category not found", ErrorCode.CATEGORY_NOT_FOUND, details)


def product_not_found(product_id: Optional[int] = None) -> AppException:
    """Create product not found exception."""
    details = {"product_id": product_id} if product_id is not None else {}
    return AppException("Product not found", ErrorCode.PRODUCT_NOT_FOUND, details)


def unable_to_delete_category(category_id: int, children: int, products: int) -> AppException:
    """Create exception for a category still referenced by children or products."""
    return AppException(
        "Unable to delete category",
        ErrorCode.UNABLE_TO_DELETE_CATEGORY,
        {"category_id": category_id, "children": children, "products": products}
    )


def category_cycle(category_id: int, parent_id: int) -> AppException:
    """Create exception for a reparent that would close a loop in the tree."""
    return AppException(
        "Category cannot be moved under itself or its descendants",
        ErrorCode.CATEGORY_CYCLE,
        {"category_id": category_id, "parent_id": parent_id}
    )


def validation_error(errors: Any) -> AppException:
    """Create invalid request parameters exception."""
    return AppException(
        "Invalid request parameters",
        ErrorCode.VALIDATION_ERROR,
        {"errors": errors}
    )
