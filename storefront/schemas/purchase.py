"""
==============================================================================
Purchase Schemas Module
==============================================================================

Request and response schemas for the purchase stub.

Both request fields are optional at the schema level so that a missing
field surfaces as a 400 with field-level guidance instead of a generic
body validation error.

==============================================================================
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PurchaseRequest(BaseModel):
    """Purchase request body: ``{"gameId": ..., "userId": ...}``."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    game_id: Optional[str] = Field(default=None, alias="gameId")
    user_id: Optional[str] = Field(default=None, alias="userId")

    @field_validator("game_id", "user_id", mode="before")
    @classmethod
    def falsy_to_none(cls, v: Any) -> Any:
        # 0 and false count as missing, like an empty string
        if isinstance(v, (bool, int, float)) and not v:
            return None
        return v

    @field_validator("game_id", "user_id")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def missing_fields(self) -> List[str]:
        """Wire names of the required fields that are absent or blank."""
        missing = []
        if self.game_id is None:
            missing.append("gameId")
        if self.user_id is None:
            missing.append("userId")
        return missing


class PurchaseResponse(BaseModel):
    """Stub purchase confirmation."""
    message: str
    success: bool = Field(default=True)
