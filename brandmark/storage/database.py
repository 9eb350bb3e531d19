"""SQLite-backed token ledger, checked before every paid generation call."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from brandmark.config import DEFAULT_TOKEN_BALANCE, TOKEN_DB_PATH


class SqliteTokenStore:
    """Thread-safe SQLite store of per-user token balances.

    Every balance change is recorded in ``token_transactions``. A user's
    row is created with the default balance on first access.
    """

    def __init__(self, db_path: Path, default_balance: int = DEFAULT_TOKEN_BALANCE) -> None:
        self._db_path = db_path
        self._default_balance = default_balance
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._local = threading.local()
        self._init_schema(self._conn)

    @property
    def _conn(self) -> sqlite3.Connection:
        """One connection per thread (SQLite requirement)."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")
            conn.row_factory = sqlite3.Row
            self._local.conn = conn
        return conn

    @staticmethod
    def _init_schema(conn: sqlite3.Connection) -> None:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS user_tokens (
                user_id     TEXT PRIMARY KEY,
                balance     INTEGER NOT NULL
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS token_transactions (
                id          INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id     TEXT NOT NULL,
                amount      INTEGER NOT NULL,
                action_type TEXT NOT NULL,
                description TEXT NOT NULL DEFAULT '',
                created_at  TEXT NOT NULL
            )
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_transactions_user
            ON token_transactions (user_id, created_at DESC)
        """)
        conn.commit()

    def _ensure_user(self, user_id: str) -> None:
        self._conn.execute(
            "INSERT OR IGNORE INTO user_tokens (user_id, balance) VALUES (?, ?)",
            (user_id, self._default_balance),
        )

    def _record(self, user_id: str, amount: int, action_type: str, description: str) -> None:
        self._conn.execute(
            """INSERT INTO token_transactions
               (user_id, amount, action_type, description, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (user_id, amount, action_type, description, datetime.now(timezone.utc).isoformat()),
        )

    # ── Balance ───────────────────────────────────────────

    def get_balance(self, user_id: str) -> int:
        self._ensure_user(user_id)
        self._conn.commit()
        row = self._conn.execute(
            "SELECT balance FROM user_tokens WHERE user_id = ?", (user_id,)
        ).fetchone()
        return int(row["balance"])

    def use_token(self, user_id: str, action_type: str, description: str = "") -> bool:
        """Spend one token. Returns False, spending nothing, when the balance is 0."""
        conn = self._conn
        self._ensure_user(user_id)
        cursor = conn.execute(
            "UPDATE user_tokens SET balance = balance - 1 WHERE user_id = ? AND balance > 0",
            (user_id,),
        )
        if cursor.rowcount != 1:
            conn.commit()
            return False
        self._record(user_id, -1, action_type, description or action_type)
        conn.commit()
        return True

    def add_tokens(self, user_id: str, amount: int, description: str) -> int:
        """Credit tokens (e.g. after a purchase). Returns the new balance."""
        if amount <= 0:
            raise ValueError("amount must be positive")
        conn = self._conn
        self._ensure_user(user_id)
        conn.execute(
            "UPDATE user_tokens SET balance = balance + ? WHERE user_id = ?",
            (amount, user_id),
        )
        self._record(user_id, amount, "purchase", description)
        conn.commit()
        return self.get_balance(user_id)

    def transaction_history(self, user_id: str) -> list[dict]:
        rows = self._conn.execute(
            """SELECT id, amount, action_type, description, created_at
               FROM token_transactions WHERE user_id = ?
               ORDER BY created_at DESC, id DESC""",
            (user_id,),
        ).fetchall()
        return [dict(r) for r in rows]


@lru_cache(maxsize=1)
def get_token_store() -> SqliteTokenStore:
    return SqliteTokenStore(TOKEN_DB_PATH)
