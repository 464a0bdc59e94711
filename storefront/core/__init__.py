"""
==============================================================================
Core Package
==============================================================================

Core infrastructure shared by the API layer.

Modules:
--------
- exceptions: AppException class and error factory functions

Usage:
------
    from storefront.core import AppException
    from storefront.core import exceptions

    raise exceptions.storage_failure()

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "register_exception_handlers",
]
