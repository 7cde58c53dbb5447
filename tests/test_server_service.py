import logging
from datetime import datetime

import pytest

from gophkeeper.server.config import ServiceConfig, StoreConfig
from gophkeeper.server.model import Unit, UnitKey, UnitMeta
from gophkeeper.server.service import Service
from gophkeeper.server.store import AlreadyExistsError, NoRowsError, Store


@pytest.fixture
def service():
    store = Store(StoreConfig(db_dsn=":memory:"))
    yield Service(ServiceConfig(), store, logging.getLogger("test"))
    store.close()


def _unit(name="card"):
    return Unit(
        key=UnitKey(user_id=5, unit_name=name),
        meta=UnitMeta(type=4, data_sk="sk", uploaded_at=datetime(2024, 6, 1)),
        data=b"payload",
    )


def test_write_then_read(service):
    service.write(_unit())
    assert service.read(5, "card") == _unit()


def test_write_duplicate_propagates(service):
    service.write(_unit())
    with pytest.raises(AlreadyExistsError):
        service.write(_unit())


def test_read_missing_propagates(service):
    with pytest.raises(NoRowsError):
        service.read(5, "card")


def test_list_and_delete(service):
    service.write(_unit("a"))
    service.write(_unit("b"))
    assert service.list(5) == ["a", "b"]
    service.delete(5, "a")
    assert service.list(5) == ["b"]
    with pytest.raises(NoRowsError):
        service.delete(5, "a")