"""Aggregates all endpoint routers."""

from fastapi import APIRouter

from hotelbook.api.endpoints import auth, health, listings, pages, reviews

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(pages.router, tags=["pages"])
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(listings.router, prefix="/hotels", tags=["listings"])
api_router.include_router(reviews.router, prefix="/hotels", tags=["reviews"])
