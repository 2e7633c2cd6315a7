from __future__ import annotations

from abc import ABC, abstractmethod


class AccessGate(ABC):
    """
    Port for the external token verifier.

    Given request credentials, returns a stable caller identity or raises
    UnauthorizedError. Token issuance and verification live outside this
    service.
    """

    @abstractmethod
    def authenticate(self, token: str) -> str: ...
