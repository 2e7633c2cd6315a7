from __future__ import annotations

from car_market.domain.errors import UnauthorizedError
from car_market.ports.access_gate import AccessGate


class StaticTokenAccessGate(AccessGate):
    """
    Access gate backed by a fixed token -> seller id table.

    Stands in for the external token verifier in development and tests;
    deployments with a real identity provider override the HTTP dependency
    that builds it.
    """

    def __init__(self, tokens: dict[str, str]) -> None:
        self._tokens = dict(tokens)

    def authenticate(self, token: str) -> str:
        seller_id = self._tokens.get(token)
        if seller_id is None:
            raise UnauthorizedError("Invalid or expired access token")
        return seller_id
