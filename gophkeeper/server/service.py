"""Server logic over the store."""

from __future__ import annotations

import logging

from gophkeeper.server.config import ServiceConfig
from gophkeeper.server.model import Unit
from gophkeeper.server.store import Store


class Service:
    """Operations on a user's data units."""

    def __init__(self, config: ServiceConfig, store: Store, logger: logging.Logger) -> None:
        self._config = config
        self._store = store
        self._logger = logger

    def list(self, user_id: int) -> list[str]:
        """Return the names of a user's units."""
        return self._store.list(user_id)

    def read(self, user_id: int, unit_name: str) -> Unit:
        """Return a user's unit by name."""
        return self._store.read(user_id, unit_name)

    def write(self, unit: Unit) -> None:
        """Store a new unit."""
        self._store.write(unit)

    def delete(self, user_id: int, unit_name: str) -> None:
        """Delete a user's unit by name."""
        self._store.delete(user_id, unit_name)