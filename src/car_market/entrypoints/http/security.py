"""Bearer-token authentication for routes that act on behalf of a seller."""

from __future__ import annotations

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from car_market.domain.errors import UnauthorizedError
from car_market.entrypoints.http.dependencies import get_access_gate
from car_market.ports.access_gate import AccessGate

# auto_error=False so a missing header goes through the domain error handler
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_seller_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    access_gate: AccessGate = Depends(get_access_gate),
) -> str:
    """
    Resolve the caller identity from the Authorization header.

    Raises:
        UnauthorizedError: If no bearer token is present or the gate rejects it
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication required")

    return access_gate.authenticate(credentials.credentials)
