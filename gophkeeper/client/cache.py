"""Local file cache of the unit list, unit data and session token."""

from __future__ import annotations

import dataclasses
import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable

from gophkeeper.client.config import CacheConfig
from gophkeeper.client.model import Unit, unit_from_json, unit_to_json

LIST_FILE_NAME = "dataList.txt"
UNITS_FILE_NAME = "dataUnits.json"
TOKEN_FILE_NAME = "token.txt"

_ENCODING = "utf-8"


class NotFoundError(LookupError):
    """Raised when requested data is not in the cache."""

    def __init__(self, message: str = "data not found") -> None:
        super().__init__(message)


class Cache:
    """Cache backed by three files in ``config.file_repo``; changes are saved on close."""

    def __init__(self, config: CacheConfig) -> None:
        self._config = config
        repo = Path(config.file_repo)
        self._list_path = repo / LIST_FILE_NAME
        self._units_path = repo / UNITS_FILE_NAME
        self._token_path = repo / TOKEN_FILE_NAME
        for path in (self._list_path, self._units_path, self._token_path):
            path.touch(exist_ok=True)

        self._lock = threading.Lock()
        self._names: list[str] = self._list_path.read_text(encoding=_ENCODING).splitlines()
        self._units: dict[str, Unit] = dict(self._load_units())
        self._token = self._token_path.read_text(encoding=_ENCODING)
        self._list_changed = False
        self._units_changed = False
        self._token_changed = False

    def _load_units(self) -> Iterable[tuple[str, Unit]]:
        for line in self._units_path.read_text(encoding=_ENCODING).splitlines():
            try:
                unit = unit_from_json(line)
            except ValueError:
                continue
            yield unit.name, unit

    @property
    def token(self) -> str:
        """The stored session token."""
        return self._token

    @token.setter
    def token(self, value: str) -> None:
        self._token = value
        self._token_changed = True

    def get_list(self) -> list[str]:
        """Return the names of the cached units."""
        with self._lock:
            return list(self._names)

    def sync_list(self, server_list: Iterable[str]) -> None:
        """Replace the list of names with the server's."""
        with self._lock:
            self._names = list(server_list)
            self._list_changed = True

    def get_unit(self, unit_name: str) -> Unit:
        """Return a cached unit that is listed and still valid."""
        with self._lock:
            if unit_name not in self._names:
                raise NotFoundError()
            unit = self._units.get(unit_name)
            if unit is None:
                raise NotFoundError()
            valid_until = unit.body.meta.valid_until
            if valid_until is None:
                raise NotFoundError()
            now = datetime.now().astimezone() if valid_until.tzinfo else datetime.now()
            if valid_until < now:
                raise NotFoundError()
            return unit

    def set_unit(self, unit: Unit) -> None:
        """Store a copy of the unit, valid for the configured number of days."""
        valid_until = datetime.now().astimezone() + timedelta(days=self._config.valid_period)
        stored = dataclasses.replace(
            unit,
            body=dataclasses.replace(
                unit.body,
                meta=dataclasses.replace(unit.body.meta, valid_until=valid_until),
            ),
        )
        with self._lock:
            self._names.append(stored.name)
            self._list_changed = True
            self._units[stored.name] = stored
            self._units_changed = True

    def delete_unit(self, unit_name: str) -> None:
        """Remove a name from the list of cached units."""
        with self._lock:
            try:
                self._names.remove(unit_name)
            except ValueError:
                raise NotFoundError() from None
            self._list_changed = True

    def close(self) -> None:
        """Write changed data back to the files."""
        with self._lock:
            if self._list_changed:
                self._list_path.write_text(
                    "".join(f"{name}\n" for name in self._names), encoding=_ENCODING
                )
                self._list_changed = False
            if self._units_changed:
                self._units_path.write_text(
                    "".join(f"{unit_to_json(unit)}\n" for unit in self._units.values()),
                    encoding=_ENCODING,
                )
                self._units_changed = False
            if self._token_changed:
                self._token_path.write_text(self._token, encoding=_ENCODING)
                self._token_changed = False

    def __enter__(self) -> "Cache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()