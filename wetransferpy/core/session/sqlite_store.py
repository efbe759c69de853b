"""
SQLite token storage implementation.

Persists the bearer token and its issue date across process runs.
"""
import sqlite3
import threading
from pathlib import Path
from datetime import datetime
from typing import Optional, Union
from contextlib import contextmanager

from .protocols import TokenStore
from .models import Token


class SQLiteTokenStore(TokenStore):
    """
    SQLite-based token storage.

    Stores the token in a local SQLite database file.

    Example:
        >>> store = SQLiteTokenStore("wetransfer")
        >>> # Creates wetransfer.session file
        >>>
        >>> store.save(Token("jwt"))
        >>> loaded = store.load()
    """

    EXTENSION = '.session'
    SCHEMA_VERSION = 1

    def __init__(
        self,
        session_name: Union[str, Path],
        base_path: Optional[Path] = None
    ):
        """
        Initialize SQLite token storage.

        Args:
            session_name: Session name (without extension) or full path
            base_path: Optional base directory for session files
        """
        self._lock = threading.Lock()
        self._conn: Optional[sqlite3.Connection] = None

        if isinstance(session_name, Path) or session_name.endswith(self.EXTENSION):
            self._path = Path(session_name)
        else:
            if base_path:
                self._path = base_path / f"{session_name}{self.EXTENSION}"
            else:
                self._path = Path(f"{session_name}{self.EXTENSION}")

        self._path.parent.mkdir(parents=True, exist_ok=True)

        self._init_db()

    @property
    def path(self) -> Path:
        """Get session file path."""
        return self._path

    @contextmanager
    def _get_connection(self):
        """Get thread-safe database connection."""
        with self._lock:
            if self._conn is None:
                self._conn = sqlite3.connect(
                    str(self._path),
                    check_same_thread=False
                )
                self._conn.row_factory = sqlite3.Row
            yield self._conn

    def _init_db(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS version (
                    version INTEGER PRIMARY KEY
                )
            ''')

            cursor.execute('''
                CREATE TABLE IF NOT EXISTS token (
                    id INTEGER PRIMARY KEY,
                    value TEXT NOT NULL,
                    issued_at TEXT NOT NULL
                )
            ''')

            cursor.execute('SELECT version FROM version LIMIT 1')
            row = cursor.fetchone()
            if row is None:
                cursor.execute(
                    'INSERT INTO version (version) VALUES (?)',
                    (self.SCHEMA_VERSION,)
                )

            conn.commit()

    def load(self) -> Optional[Token]:
        """
        Load the stored token.

        Returns:
            Token if exists, None otherwise
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('SELECT value, issued_at FROM token LIMIT 1')

            row = cursor.fetchone()
            if row is None:
                return None

            return Token(
                value=row['value'],
                issued_at=datetime.fromisoformat(row['issued_at']),
            )

    def save(self, token: Token) -> None:
        """
        Store a token, replacing any previous one.

        Args:
            token: Token to store
        """
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('DELETE FROM token')
            cursor.execute(
                'INSERT INTO token (value, issued_at) VALUES (?, ?)',
                (token.value, token.issued_at.isoformat())
            )
            conn.commit()

    def delete(self) -> None:
        """Remove the stored token."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute('DELETE FROM token')
            conn.commit()

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def delete_file(self) -> None:
        """Delete the session file completely."""
        self.close()
        if self._path.exists():
            self._path.unlink()

    def __enter__(self) -> 'SQLiteTokenStore':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
