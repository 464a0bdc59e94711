"""
==============================================================================
Purchase Endpoints
==============================================================================

POST /api/purchase - stub purchase boundary, no real transaction.

==============================================================================
"""

from fastapi import APIRouter, status

from storefront.schemas.common import ErrorResponse
from storefront.schemas.purchase import PurchaseRequest, PurchaseResponse
from storefront.services.purchase_service import PurchaseService


router = APIRouter(prefix="/purchase", tags=["Purchase"])


@router.post(
    "",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def purchase_game(data: PurchaseRequest):
    """Accept a purchase request for a game."""
    return PurchaseService().purchase(data)
