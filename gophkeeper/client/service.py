"""Client logic: talks to the remote server and falls back on the local cache."""

from __future__ import annotations

from typing import Any, Protocol

from gophkeeper.client.cache import Cache
from gophkeeper.client.config import ServiceConfig
from gophkeeper.client.model import Unit


class OfflineError(Exception):
    """The server could not be used; ``result`` holds what the cache gave instead."""

    def __init__(self, result: Any) -> None:
        super().__init__("offline")
        self.result = result


class RemoteClient(Protocol):
    """Operations the remote server offers to the client."""

    def register(self, login: str, password: str) -> str: ...

    def authenticate(self, login: str, password: str) -> str: ...

    def list(self, token: str) -> list[str]: ...

    def read(self, token: str, unit_name: str) -> Unit: ...

    def write(self, token: str, unit: Unit) -> None: ...

    def delete(self, token: str, unit_name: str) -> None: ...

    def close(self) -> None: ...


class Service:
    """Client service combining the remote client with the local cache."""

    def __init__(self, config: ServiceConfig, client: RemoteClient, cache: Cache) -> None:
        self._config = config
        self._client = client
        self._cache = cache

    def register(self, login: str, password: str) -> None:
        """Register a new user and keep the issued token."""
        self._cache.token = self._client.register(login, password)

    def login(self, login: str, password: str) -> None:
        """Log in and keep the issued token."""
        self._cache.token = self._client.authenticate(login, password)

    def list(self) -> list[str]:
        """Return the names of the stored units.

        When the server fails, raises OfflineError carrying the cached list.
        """
        try:
            names = self._client.list(self._cache.token)
        except Exception as exc:
            raise OfflineError(self._cache.get_list()) from exc
        self._cache.sync_list(names)
        return names

    def read(self, unit_name: str) -> Unit:
        """Return a unit by name.

        When the server fails, raises OfflineError carrying the cached unit;
        if the cache has no valid copy either, an empty unit is returned.
        """
        try:
            unit = self._client.read(self._cache.token, unit_name)
        except Exception as exc:
            from gophkeeper.client.cache import NotFoundError

            try:
                cached = self._cache.get_unit(unit_name)
            except NotFoundError:
                return Unit()
            raise OfflineError(cached) from exc
        self._cache.set_unit(unit)
        return unit

    def write(self, unit: Unit) -> None:
        """Store a unit on the server, then cache it."""
        self._client.write(self._cache.token, unit)
        self._cache.set_unit(unit)

    def delete(self, unit_name: str) -> None:
        """Delete a unit on the server, then drop it from the cache list."""
        self._client.delete(self._cache.token, unit_name)
        self._cache.delete_unit(unit_name)

    def close(self) -> None:
        """Close the remote connection and save the cache."""
        self._client.close()
        self._cache.close()