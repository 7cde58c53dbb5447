"""Data units as the client sees them, and their JSON form."""

from __future__ import annotations

import base64
import binascii
import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional

ZERO_TIME = "0001-01-01T00:00:00Z"

_FRACTION = re.compile(r"\.(\d+)")


class UnitType(IntEnum):
    """Kinds of data a unit can hold."""

    LOGIN = 1
    TEXT = 2
    BINARY = 3
    CARD = 4


@dataclass
class UnitMeta:
    """Metadata of a data unit; ``valid_until`` of ``None`` means unset."""

    type: int = 0
    valid_until: Optional[datetime] = None


@dataclass
class UnitBody:
    """Body of a data unit: metadata and the payload."""

    meta: UnitMeta = field(default_factory=UnitMeta)
    data: bytes = b""


@dataclass
class Unit:
    """A named data unit."""

    name: str = ""
    body: UnitBody = field(default_factory=UnitBody)


def _format_time(moment: Optional[datetime]) -> str:
    if moment is None:
        return ZERO_TIME
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.isoformat()
    if moment.utcoffset() == timezone.utc.utcoffset(None):
        text = text.removesuffix("+00:00") + "Z"
    return text


def _parse_time(text: Any) -> Optional[datetime]:
    if text is None or text == ZERO_TIME:
        return None
    if not isinstance(text, str):
        raise ValueError(f"invalid time value: {text!r}")
    normalised = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    normalised = _FRACTION.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"), normalised, count=1
    )
    try:
        moment = datetime.fromisoformat(normalised)
    except ValueError as exc:
        raise ValueError(f"invalid time value: {text!r}") from exc
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _expect_dict(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object")
    return value


def unit_to_json(unit: Unit) -> str:
    """Serialise a unit to a single-line JSON document."""
    document = {
        "name": unit.name,
        "body": {
            "meta": {
                "type": int(unit.body.meta.type),
                "validuntil": _format_time(unit.body.meta.valid_until),
            },
            "data": base64.b64encode(unit.body.data).decode("ascii"),
        },
    }
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def unit_from_json(line: str | bytes) -> Unit:
    """Parse a unit from its JSON form; raises ValueError when malformed."""
    try:
        document = json.loads(line)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid unit JSON: {exc}") from exc
    document = _expect_dict(document, "unit")
    body = _expect_dict(document.get("body"), "body")
    meta = _expect_dict(body.get("meta"), "meta")

    name = document.get("name") or ""
    if not isinstance(name, str):
        raise ValueError("name must be a string")

    unit_type = meta.get("type") or 0
    if isinstance(unit_type, bool) or not isinstance(unit_type, int):
        raise ValueError("type must be an integer")

    raw_data = body.get("data")
    if raw_data is None:
        data = b""
    elif isinstance(raw_data, str):
        try:
            data = base64.b64decode(raw_data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("data must be base64") from exc
    else:
        raise ValueError("data must be a base64 string")

    return Unit(
        name=name,
        body=UnitBody(
            meta=UnitMeta(type=unit_type, valid_until=_parse_time(meta.get("validuntil"))),
            data=data,
        ),
    )