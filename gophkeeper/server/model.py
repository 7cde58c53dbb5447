"""Data units as the server stores them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum

ZERO_TIME = datetime(1, 1, 1)


class UnitType(IntEnum):
    """Kinds of data a unit can hold."""

    LOGIN = 1
    TEXT = 2
    BINARY = 3
    CARD = 4


@dataclass(frozen=True)
class UnitKey:
    """Identifies a unit: the owner and the unit's name."""

    user_id: int = 0
    unit_name: str = ""


@dataclass
class UnitMeta:
    """Metadata of a stored unit."""

    type: int = 0
    data_sk: str = ""
    uploaded_at: datetime = ZERO_TIME


@dataclass
class Unit:
    """A stored data unit."""

    key: UnitKey = field(default_factory=UnitKey)
    meta: UnitMeta = field(default_factory=UnitMeta)
    data: bytes = b""