"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- categories: Category tree CRUD and search
- products: Product CRUD and search

==============================================================================
"""

from . import health, categories, products

__all__ = ["health", "categories", "products"]
