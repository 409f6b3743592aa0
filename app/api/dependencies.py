"""
Shared API dependencies.

Reusable FastAPI dependencies for identity and the services stored on
the application state.
"""

import datetime

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from app.core.security import IdentityProvider, bearer_scheme
from app.pickem.data_service import PickDataService
from app.services.pick_session_service import PickSessionRegistry


def get_identity_provider(request: Request) -> IdentityProvider:
    return request.app.state.identity_provider


def get_data_service(request: Request) -> PickDataService:
    return request.app.state.data_service


def get_session_registry(request: Request) -> PickSessionRegistry:
    return request.app.state.session_registry


def get_now(request: Request) -> datetime.datetime:
    """Current time from the application clock."""
    return request.app.state.clock()


def get_current_user_id(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
                        identity: IdentityProvider = Depends(get_identity_provider), ) -> str:
    """Resolve the bearer token to the current user id."""
    user_id = identity.resolve(credentials.credentials) if credentials else None
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return user_id
