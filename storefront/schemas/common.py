"""
==============================================================================
Common Schemas Module
==============================================================================

Shared response schemas used across API endpoints.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, Field


class ServiceInfo(BaseModel):
    """Root service information payload."""
    status: str = Field(default="OK")
    service: str
    database: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    error: str
    code: Optional[str] = None
