"""
In-memory token storage implementation.

Provides non-persistent token storage for testing and temporary use.
"""
from typing import Optional

from .protocols import TokenStore
from .models import Token


class MemoryTokenStore(TokenStore):
    """
    In-memory token storage.

    The token lives as long as this object, so it is reused across
    uploads within the process but not across runs.

    Example:
        >>> store = MemoryTokenStore()
        >>> store.save(Token("jwt"))
        >>> store.load().value
        'jwt'
    """

    def __init__(self, token: Optional[Token] = None):
        self._token = token

    def load(self) -> Optional[Token]:
        return self._token

    def save(self, token: Token) -> None:
        self._token = token

    def delete(self) -> None:
        self._token = None

    def close(self) -> None:
        """Close storage (no-op for memory storage)."""
        pass

    def __enter__(self) -> 'MemoryTokenStore':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
