"""HTTP Routers."""

from fastapi import APIRouter

from apps.feed.presentation.http.controllers import discovery, feed, health

api_router = APIRouter()
api_router.include_router(feed.router)
api_router.include_router(discovery.router)

health_router = APIRouter()
health_router.include_router(health.router)

__all__ = ["api_router", "health_router"]
