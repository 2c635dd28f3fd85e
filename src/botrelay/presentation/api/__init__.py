"""Relay API routers.

Endpoints (paths are fixed by the browser client):
    GET  /api/public-bots        - Public pool bots
    POST /api/register-bot       - Register a bot for an alt account
    GET  /api/categories         - Allowed categories
    GET  /api/category-settings  - One category by id (unrestricted)
    GET  /api/registrations      - Registrations of an alt account
"""

from fastapi import APIRouter

from botrelay.presentation.api.bots import router as bots_router
from botrelay.presentation.api.categories import router as categories_router
from botrelay.presentation.api.registrations import router as registrations_router

api_router = APIRouter(prefix="/api")

api_router.include_router(bots_router)
api_router.include_router(categories_router)
api_router.include_router(registrations_router)

__all__ = [
    "api_router",
    "bots_router",
    "categories_router",
    "registrations_router",
]
