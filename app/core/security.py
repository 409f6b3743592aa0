"""
Identity resolution.

Authentication is handled by an external identity provider; the API only
needs to turn an opaque bearer token into a user id.
"""

from abc import ABC, abstractmethod
from typing import Optional

from fastapi.security import HTTPBearer

bearer_scheme = HTTPBearer(auto_error=False)


class IdentityProvider(ABC):
    """Resolves an opaque access token to a user id."""

    @abstractmethod
    def resolve(self, token: str) -> Optional[str]:
        """Return the user id for *token*, or ``None`` if it is not valid."""
        ...


class StaticTokenIdentityProvider(IdentityProvider):
    """Token table loaded from configuration (``API_TOKENS``)."""

    def __init__(self, tokens: dict[str, str]):
        self.tokens = dict(tokens)

    def resolve(self, token: str) -> Optional[str]:
        return self.tokens.get(token)
