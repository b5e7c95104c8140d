"""Authentication utilities for the flood risk simulator API.

Bearer token authentication against a single configured API key.
"""

from __future__ import annotations

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from flood_simulator.config import settings

security = HTTPBearer()


def get_api_token() -> str:
    """Retrieve the configured API token from settings.

    Raises
    ------
    ValueError
        If API_TOKEN is not configured or is empty.
    """
    token = settings.API_TOKEN
    if not token:
        raise ValueError("API_TOKEN is not configured")
    return token


def verify_token(credentials: HTTPAuthorizationCredentials = Security(security)) -> str:
    """Verify the provided Bearer token against the configured API token.

    Raises
    ------
    HTTPException
        If the token does not match (HTTP 403 Forbidden).
    """
    token = credentials.credentials
    api_token = get_api_token()

    if token != api_token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return token
