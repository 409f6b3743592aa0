"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import picks, session

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    session.router,
    prefix="/leagues/{league_id}/seasons/{season}/weeks/{week}/session",
    tags=["Pick session"],
)
api_router.include_router(
    picks.router, prefix="/leagues", tags=["Picks"]
)
