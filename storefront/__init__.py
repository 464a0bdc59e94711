"""Game studio catalog storefront: catalog API server and async client."""

__version__ = "1.0.0"
