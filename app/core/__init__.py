"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: ErrorCode, AppException and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import exceptions
    raise exceptions.category_not_found(category_id)

==============================================================================
"""

from .exceptions import (
    AppException,
    ErrorCode,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "ErrorCode",
    "register_exception_handlers",
]
