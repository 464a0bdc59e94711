"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the API routes and the database.

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Service      │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   ORM Session   │  ← Data Access
    └─────────────────┘

- CatalogService: ordered catalog listing
- PurchaseService: purchase stub validation

==============================================================================
"""

from .catalog_service import CatalogService
from .purchase_service import PurchaseService

__all__ = [
    "CatalogService",
    "PurchaseService",
]
