"""API v0 routes."""

from fastapi import APIRouter

from app.api.v0 import auth, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/users/auth", tags=["auth"])
