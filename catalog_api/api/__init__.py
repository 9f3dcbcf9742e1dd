"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from catalog_api.api.admin_products import router as admin_products_router
from catalog_api.api.categories import router as categories_router
from catalog_api.api.health import router as health_router
from catalog_api.api.products import router as products_router

__all__ = [
    "admin_products_router",
    "categories_router",
    "health_router",
    "products_router",
]
