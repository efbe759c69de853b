"""
Token storage protocols.

Defines the interface for token storage implementations.
"""
from typing import Protocol, Optional, runtime_checkable
from .models import Token


@runtime_checkable
class TokenStore(Protocol):
    """
    Protocol for token storage implementations.

    Implementations can use SQLite, JSON, a keyring, or any other backend.
    Expiry is decided by TokenCache, not by the store.
    """

    def load(self) -> Optional[Token]:
        """
        Load the stored token.

        Returns:
            Token if one is stored, None otherwise
        """
        ...

    def save(self, token: Token) -> None:
        """
        Store a token, replacing any previous one.

        Args:
            token: Token to store
        """
        ...

    def delete(self) -> None:
        """Remove the stored token."""
        ...

    def close(self) -> None:
        """Release resources."""
        ...
