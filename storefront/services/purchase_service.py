"""
==============================================================================
Purchase Service Module
==============================================================================

Stub purchase boundary. Validates the request shape and returns a canned
confirmation; no transaction, persistence or inventory check happens here.

==============================================================================
"""

from __future__ import annotations

import logging

from storefront.core import exceptions
from storefront.schemas.purchase import PurchaseRequest, PurchaseResponse


# Module logger
logger = logging.getLogger(__name__)


class PurchaseService:
    """Purchase stub service."""

    def purchase(self, data: PurchaseRequest) -> PurchaseResponse:
        """
        Accept a purchase request.

        Args:
            data: PurchaseRequest with gameId and userId

        Returns:
            PurchaseResponse with success=True

        Raises:
            AppException: VALIDATION_ERROR if gameId or userId is missing
        """
        missing = data.missing_fields()
        if missing:
            logger.warning(f"Purchase rejected, missing fields: {missing}")
            raise exceptions.missing_fields(missing)

        logger.info(f"Stub purchase accepted: game={data.game_id} user={data.user_id}")

        return PurchaseResponse(
            message=(
                f"Purchase of game ID {data.game_id} processed successfully. "
                "This is a stub transaction response."
            ),
            success=True,
        )
