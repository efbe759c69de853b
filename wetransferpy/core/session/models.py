"""
Token data models.

Contains the cached bearer token and its issue timestamp.
"""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional


# Tokens are valid for a year; refresh well before that.
DEFAULT_TOKEN_MAX_AGE = timedelta(days=300)


@dataclass(frozen=True)
class Token:
    """
    Bearer token issued by the authorize call.

    Attributes:
        value: JSON web token
        issued_at: When the token was obtained
    """
    value: str
    issued_at: datetime = field(default_factory=datetime.now)

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Age of the token relative to now."""
        return (now or datetime.now()) - self.issued_at

    def is_expired(self, max_age: timedelta, now: Optional[datetime] = None) -> bool:
        """True when the token is older than max_age."""
        return self.age(now) > max_age

    def __repr__(self) -> str:
        # Never leak the token itself
        return f"Token(issued_at={self.issued_at.isoformat()!r})"
