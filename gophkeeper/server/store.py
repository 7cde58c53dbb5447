"""Persistent storage of accounts and data units."""

from __future__ import annotations

import sqlite3
import threading
from datetime import datetime

from gophkeeper.server.config import StoreConfig
from gophkeeper.server.model import Unit, UnitKey, UnitMeta

_AUTH_TABLE = (
    "CREATE TABLE IF NOT EXISTS auth ("
    " userid INTEGER PRIMARY KEY AUTOINCREMENT,"
    " login VARCHAR (20) NOT NULL UNIQUE,"
    " password VARCHAR (30) NOT NULL"
    " )"
)

_UNITS_TABLE = (
    "CREATE TABLE IF NOT EXISTS data_units ("
    " userid INTEGER,"
    " unitname VARCHAR (20) NOT NULL,"
    " uploadedat TIMESTAMP NOT NULL,"
    " type SMALLINT NOT NULL,"
    " datask VARCHAR (30) NOT NULL,"
    " data BLOB NOT NULL,"
    " PRIMARY KEY (userid, unitname)"
    " )"
)


class NoRowsError(LookupError):
    """Raised when a query finds nothing."""

    def __init__(self, message: str = "no rows") -> None:
        super().__init__(message)


class AlreadyExistsError(Exception):
    """Raised when a record with the same key exists."""

    def __init__(self, message: str = "already exists") -> None:
        super().__init__(message)


def _database_path(dsn: str) -> str:
    """Take a plain path, or the dbname of a keyword=value DSN."""
    if "=" not in dsn:
        return dsn or ":memory:"
    params = dict(part.split("=", 1) for part in dsn.split() if "=" in part)
    return params.get("dbname") or ":memory:"


def _is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    message = str(exc)
    return "UNIQUE" in message or "PRIMARY KEY" in message


class Store:
    """Account and data unit storage in a SQL database."""

    def __init__(self, config: StoreConfig) -> None:
        self._lock = threading.Lock()
        self._db = sqlite3.connect(_database_path(config.db_dsn), check_same_thread=False)
        with self._db:
            self._db.execute(_AUTH_TABLE)
            self._db.execute(_UNITS_TABLE)

    def auth_register(self, login: str, password: str) -> int:
        """Create an account and return its user id."""
        with self._lock:
            try:
                with self._db:
                    cursor = self._db.execute(
                        "INSERT INTO auth (login, password) VALUES (?, ?)", (login, password)
                    )
            except sqlite3.IntegrityError as exc:
                if _is_unique_violation(exc):
                    raise AlreadyExistsError() from exc
                raise
            return int(cursor.lastrowid)

    def auth_login(self, login: str, password: str) -> int:
        """Return the user id of an account found by login."""
        with self._lock:
            row = self._db.execute("SELECT userid FROM auth WHERE login = ?", (login,)).fetchone()
        if row is None:
            raise NoRowsError()
        return int(row[0])

    def list(self, user_id: int) -> list[str]:
        """Return the names of a user's units."""
        with self._lock:
            rows = self._db.execute(
                "SELECT unitname FROM data_units WHERE userid = ? ORDER BY unitname", (user_id,)
            ).fetchall()
        return [name for (name,) in rows]

    def read(self, user_id: int, unit_name: str) -> Unit:
        """Return a user's unit by name."""
        with self._lock:
            row = self._db.execute(
                "SELECT userid, unitname, uploadedat, type, datask, data"
                " FROM data_units WHERE userid = ? AND unitname = ?",
                (user_id, unit_name),
            ).fetchone()
        if row is None:
            raise NoRowsError()
        owner, name, uploaded_at, unit_type, data_sk, data = row
        return Unit(
            key=UnitKey(user_id=owner, unit_name=name),
            meta=UnitMeta(
                type=unit_type,
                data_sk=data_sk,
                uploaded_at=datetime.fromisoformat(uploaded_at),
            ),
            data=bytes(data),
        )

    def write(self, unit: Unit) -> None:
        """Insert a new unit."""
        with self._lock:
            try:
                with self._db:
                    self._db.execute(
                        "INSERT INTO data_units (userid, unitname, uploadedat, type, datask, data)"
                        " VALUES (?, ?, ?, ?, ?, ?)",
                        (
                            unit.key.user_id,
                            unit.key.unit_name,
                            unit.meta.uploaded_at.isoformat(),
                            int(unit.meta.type),
                            unit.meta.data_sk,
                            bytes(unit.data),
                        ),
                    )
            except sqlite3.IntegrityError as exc:
                if _is_unique_violation(exc):
                    raise AlreadyExistsError() from exc
                raise

    def delete(self, user_id: int, unit_name: str) -> None:
        """Remove a user's unit by name."""
        with self._lock:
            with self._db:
                cursor = self._db.execute(
                    "DELETE FROM data_units WHERE userid = ? AND unitname = ?",
                    (user_id, unit_name),
                )
        if cursor.rowcount == 0:
            raise NoRowsError()

    def close(self) -> None:
        """Close the database connection."""
        with self._lock:
            self._db.close()