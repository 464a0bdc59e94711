"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

- Common: Service info and error envelope
- Purchase: Purchase stub request/response

==============================================================================
"""

from .common import ServiceInfo, ErrorResponse
from .purchase import PurchaseRequest, PurchaseResponse

__all__ = [
    "ServiceInfo",
    "ErrorResponse",
    "PurchaseRequest",
    "PurchaseResponse",
]
