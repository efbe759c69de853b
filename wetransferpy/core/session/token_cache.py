"""
Token cache with age-based expiry.

Not synchronized: one active upload pipeline per process is assumed.
"""
from datetime import datetime, timedelta
from typing import Callable, Optional

from .memory_store import MemoryTokenStore
from .models import DEFAULT_TOKEN_MAX_AGE, Token
from .protocols import TokenStore
from ..logging import get_logger


class TokenCache:
    """
    Cached bearer token backed by a TokenStore.

    Example:
        >>> cache = TokenCache(MemoryTokenStore())
        >>> cache.set("jwt")
        >>> cache.get().value
        'jwt'
        >>> cache.clear()
        >>> cache.get() is None
        True
    """

    def __init__(
        self,
        store: Optional[TokenStore] = None,
        max_age: timedelta = DEFAULT_TOKEN_MAX_AGE,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Initialize token cache.

        Args:
            store: Backing storage (in-memory if not provided)
            max_age: Tokens older than this are treated as absent
            clock: Source of the current time
        """
        self._store = store if store is not None else MemoryTokenStore()
        self._max_age = max_age
        self._clock = clock
        self._logger = get_logger('wetransferpy.session')

    @property
    def store(self) -> TokenStore:
        return self._store

    @property
    def max_age(self) -> timedelta:
        return self._max_age

    def get(self) -> Optional[Token]:
        """Return the cached token, or None if absent or expired."""
        token = self._store.load()
        if token is None:
            return None
        if token.is_expired(self._max_age, now=self._clock()):
            self._logger.debug("Cached token is too old and will not be used")
            return None
        return token

    def set(self, value: str) -> Token:
        """Store a token value stamped with the current time."""
        token = Token(value=value, issued_at=self._clock())
        self._store.save(token)
        self._logger.debug("Token cached")
        return token

    def clear(self) -> None:
        """Remove the cached token to force reacquisition."""
        self._store.delete()
        self._logger.debug("Token cleared")
