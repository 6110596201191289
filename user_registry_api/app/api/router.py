"""
Top‑level API router.

Aggregates the domain routers.  Routes are mounted at the root of the
application; there is no version prefix.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/usuario", tags=["Usuario"])
