import pytest

from gophkeeper.client.cache import Cache, NotFoundError
from gophkeeper.client.config import CacheConfig, ServiceConfig
from gophkeeper.client.model import Unit, UnitBody, UnitMeta, UnitType
from gophkeeper.client.service import OfflineError, Service


class FakeClient:
    def __init__(self, online=True):
        self.online = online
        self.units = {}
        self.tokens = []
        self.closed = False
        self.issued = "token"

    def _check(self, token=None):
        if token is not None:
            self.tokens.append(token)
        if not self.online:
            raise ConnectionError("connection refused")

    def register(self, login, password):
        self._check()
        return self.issued

    def authenticate(self, login, password):
        self._check()
        return self.issued

    def list(self, token):
        self._check(token)
        return list(self.units)

    def read(self, token, unit_name):
        self._check(token)
        if unit_name not in self.units:
            raise KeyError(unit_name)
        return self.units[unit_name]

    def write(self, token, unit):
        self._check(token)
        self.units[unit.name] = unit

    def delete(self, token, unit_name):
        self._check(token)
        del self.units[unit_name]

    def close(self):
        self.closed = True


def make_unit(name="site", data=b"secret"):
    return Unit(name=name, body=UnitBody(meta=UnitMeta(type=UnitType.LOGIN), data=data))


@pytest.fixture
def cache(tmp_path):
    return Cache(CacheConfig(file_repo=str(tmp_path), valid_period=1))


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def service(client, cache):
    return Service(ServiceConfig(), client, cache)


def test_register_stores_token(service, client, cache):
    client.issued = "token"
    service.register("user", "password")
    assert cache.token == "token"


def test_login_stores_token_and_passes_it_on(service, client, cache):
    client.issued = "token"
    service.login("user", "password")
    assert cache.token == "token"
    listing = service.list()
    assert listing == []
    assert client.tokens == ["token"]


def test_login_failure_propagates(service, client, cache):
    client.online = False
    with pytest.raises(ConnectionError):
        service.login("user", "password")
    assert cache.token == ""


def test_list_online_syncs_cache(service, client, cache):
    client.units = {"a": make_unit("a"), "b": make_unit("b")}
    assert service.list() == ["a", "b"]
    assert cache.get_list() == ["a", "b"]


def test_list_offline_returns_cached_list(service, client, cache):
    cache.sync_list(["x", "y"])
    client.online = False
    with pytest.raises(OfflineError) as info:
        service.list()
    assert info.value.result == ["x", "y"]
    assert str(info.value) == "offline"


def test_read_online_caches_unit(service, client, cache):
    unit = make_unit()
    client.units[unit.name] = unit
    assert service.read("site") == unit
    cached = cache.get_unit("site")
    assert cached.body.data == unit.body.data


def test_read_offline_returns_cached_unit(service, client):
    client.units["site"] = make_unit()
    service.read("site")
    client.online = False
    with pytest.raises(OfflineError) as info:
        service.read("site")
    assert info.value.result.name == "site"
    assert info.value.result.body.data == b"secret"


def test_read_offline_without_cache_gives_empty_unit(service, client):
    client.online = False
    assert service.read("missing") == Unit()


def test_write_caches_after_server(service, client, cache):
    unit = make_unit()
    service.write(unit)
    assert client.units["site"] == unit
    assert "site" in cache.get_list()


def test_write_failure_leaves_cache_untouched(service, client, cache):
    client.online = False
    with pytest.raises(ConnectionError):
        service.write(make_unit())
    assert cache.get_list() == []


def test_delete_removes_from_cache_list(service, client, cache):
    service.write(make_unit())
    service.delete("site")
    assert "site" not in client.units
    assert cache.get_list() == []


def test_delete_missing_in_cache_raises(service, client):
    client.units["site"] = make_unit()
    with pytest.raises(NotFoundError):
        service.delete("site")


def test_close_saves_cache_and_closes_client(service, client, tmp_path):
    client.issued = "token"
    service.register("user", "password")
    service.write(make_unit())
    service.close()
    assert client.closed is True
    reopened = Cache(CacheConfig(file_repo=str(tmp_path), valid_period=1))
    assert reopened.token == "token"
    assert reopened.get_list() == ["site"]