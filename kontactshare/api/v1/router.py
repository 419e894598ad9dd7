"""API router configuration."""

from fastapi import APIRouter

from kontactshare.api.v1.endpoints import admin, auth, health, profiles

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(profiles.router)
api_router.include_router(admin.router)
