"""
Token management module.

Caches the bearer token with age-based expiry, in memory or persisted
in a SQLite session file.
"""
from .protocols import TokenStore
from .models import Token
from .memory_store import MemoryTokenStore
from .sqlite_store import SQLiteTokenStore
from .token_cache import TokenCache

__all__ = [
    'TokenStore',
    'Token',
    'MemoryTokenStore',
    'SQLiteTokenStore',
    'TokenCache',
]
