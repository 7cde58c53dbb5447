from datetime import datetime

from gophkeeper.server.model import ZERO_TIME, Unit, UnitKey, UnitMeta, UnitType


def test_unit_types_match_documented_codes():
    assert [int(t) for t in UnitType] == [1, 2, 3, 4]
    assert UnitType(3) is UnitType.BINARY


def test_default_unit_is_empty():
    unit = Unit()
    assert unit.key == UnitKey(user_id=0, unit_name="")
    assert unit.meta.uploaded_at == ZERO_TIME
    assert unit.data == b""


def test_units_compare_by_value():
    moment = datetime(2024, 5, 1, 12, 0, 0)
    first = Unit(UnitKey(7, "mail"), UnitMeta(UnitType.LOGIN, "sk", moment), b"abc")
    second = Unit(UnitKey(7, "mail"), UnitMeta(1, "sk", moment), b"abc")
    assert first == second


def test_unit_key_is_hashable():
    keys = {UnitKey(1, "a"), UnitKey(1, "a"), UnitKey(2, "a")}
    assert len(keys) == 2