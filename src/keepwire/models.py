from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional

from keepwire import config
from keepwire import timestamps as ts
from keepwire.exc import InvalidFieldType, MissingField
from keepwire.tags import ITEM_TYPE, LIST_TYPE, NODE_KIND, NOTE_TYPE, TIMESTAMPS_KIND
from keepwire.tokens import COLOR, DISMISSED, PERIOD, Color, Dismissed, Period

_JSON_TYPES = {str: "a string", int: "an integer", bool: "a boolean"}


def _object(record: str, data: Any) -> dict:
    if not isinstance(data, dict):
        raise InvalidFieldType(record, "<root>", "an object", data)
    return data


def _field(record: str, data: dict, key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise MissingField(record, key) from None


def _typed(record: str, data: dict, key: str, kind: type) -> Any:
    value = _field(record, data, key)
    # bool is an int subclass; the wire keeps them apart
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise InvalidFieldType(record, key, _JSON_TYPES[kind], value)
    return value


def _optional_int(record: str, data: dict, key: str) -> int:
    if key not in data:
        return 0
    return _typed(record, data, key, int)


@dataclass
class Timestamps:
    """Time-related data about a node. None means unset."""

    created: Optional[datetime.datetime] = None
    deleted: Optional[datetime.datetime] = None
    trashed: Optional[datetime.datetime] = None
    updated: Optional[datetime.datetime] = None
    user_edited: Optional[datetime.datetime] = None

    def to_dict(self) -> dict:
        return {
            "kind": TIMESTAMPS_KIND.encode(),
            "created": ts.encode(self.created),
            "deleted": ts.encode(self.deleted),
            "trashed": ts.encode(self.trashed),
            "updated": ts.encode(self.updated),
            "userEdited": ts.encode(self.user_edited),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Timestamps:
        name = cls.__name__
        data = _object(name, data)
        TIMESTAMPS_KIND.decode(_field(name, data, "kind"))
        return cls(
            created=ts.decode(_field(name, data, "created")),
            deleted=ts.decode(_field(name, data, "deleted")),
            trashed=ts.decode(_field(name, data, "trashed")),
            updated=ts.decode(_field(name, data, "updated")),
            user_edited=ts.decode(_field(name, data, "userEdited")),
        )


@dataclass
class Node:
    """Identity of any entry: notes, lists and list items."""

    id: str = ""
    parent_id: str = ""
    sort_value: int = 0
    timestamps: Timestamps = field(default_factory=Timestamps)

    # static discriminator written to "type"; None for the abstract bases
    TYPE = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "kind": NODE_KIND.encode(),
            "parentId": self.parent_id,
            "sortValue": self.sort_value,
            "timestamps": self.timestamps.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> Node:
        data = _object(cls.__name__, data)
        return cls(**cls._load_fields(data))

    @classmethod
    def _load_fields(cls, data: dict) -> dict:
        name = cls.__name__
        NODE_KIND.decode(_field(name, data, "kind"))
        return {
            "id": _typed(name, data, "id", str),
            "parent_id": _typed(name, data, "parentId", str),
            "sort_value": _typed(name, data, "sortValue", int),
            "timestamps": Timestamps.from_dict(_field(name, data, "timestamps")),
        }

    def _dump_type(self, ret: dict) -> None:
        if self.TYPE is not None:
            ret["type"] = self.TYPE.encode()


@dataclass
class ParentNode(Node):
    """Shared base of the top-level containers."""

    title: str = ""
    archived: bool = False
    color: Color = Color.DEFAULT

    def to_dict(self) -> dict:
        ret = super().to_dict()
        ret["title"] = self.title
        ret["isArchived"] = self.archived
        ret["color"] = COLOR.encode(self.color)
        self._dump_type(ret)
        return ret

    @classmethod
    def _load_fields(cls, data: dict) -> dict:
        name = cls.__name__
        fields = super()._load_fields(data)
        fields["title"] = _typed(name, data, "title", str)
        fields["archived"] = _typed(name, data, "isArchived", bool)
        fields["color"] = COLOR.decode(_field(name, data, "color"))
        if cls.TYPE is not None:
            cls.TYPE.decode(_field(name, data, "type"))
        return fields


@dataclass
class Note(ParentNode):
    """A textual entry. Its text lives in a single child node."""

    TYPE = NOTE_TYPE


@dataclass
class List(ParentNode):
    """A list whose child nodes are its items."""

    TYPE = LIST_TYPE


@dataclass
class Item(Node):
    """A single entry of a list."""

    checked: bool = False
    text: str = ""

    TYPE = ITEM_TYPE

    def to_dict(self) -> dict:
        ret = super().to_dict()
        self._dump_type(ret)
        ret["checked"] = self.checked
        ret["text"] = self.text
        return ret

    @classmethod
    def _load_fields(cls, data: dict) -> dict:
        name = cls.__name__
        fields = super()._load_fields(data)
        cls.TYPE.decode(_field(name, data, "type"))
        fields["checked"] = _typed(name, data, "checked", bool)
        fields["text"] = _typed(name, data, "text", str)
        return fields


@dataclass
class Time:
    """When a reminder fires.

    The date is always given. The time of day is either a broad period
    (morning, afternoon, ...) or the explicit hour, minute and second. A
    named period wins: explicit fields stored next to it are ignored by
    to_datetime().
    """

    year: int = 0
    month: int = 0
    day: int = 0
    period: Period = Period.SPECIFIC_TIME
    hour: int = 0
    minute: int = 0
    second: int = 0

    def to_dict(self) -> dict:
        ret = {"year": self.year, "month": self.month, "day": self.day}
        if self.period is not Period.SPECIFIC_TIME:
            ret["period"] = PERIOD.encode(self.period)
        for key in ("hour", "minute", "second"):
            value = getattr(self, key)
            if value:
                ret[key] = value
        return ret

    @classmethod
    def from_dict(cls, data: Any) -> Time:
        data = _object(cls.__name__, data)
        return cls(**cls._load_fields(data))

    @classmethod
    def _load_fields(cls, data: dict) -> dict:
        name = cls.__name__
        period = Period.SPECIFIC_TIME
        if "period" in data:
            period = PERIOD.decode(data["period"])
        return {
            "year": _typed(name, data, "year", int),
            "month": _typed(name, data, "month", int),
            "day": _typed(name, data, "day", int),
            "period": period,
            "hour": _optional_int(name, data, "hour"),
            "minute": _optional_int(name, data, "minute"),
            "second": _optional_int(name, data, "second"),
        }

    def to_datetime(self, tz: Optional[datetime.tzinfo] = None) -> datetime.datetime:
        """Point in time this reminder fires, in tz or the configured zone."""
        if tz is None:
            tz = config.reminder_timezone()
        if self.period.hour is not None:
            hour, minute, second = self.period.hour, 0, 0
        else:
            hour, minute, second = self.hour, self.minute, self.second
        when = datetime.datetime(self.year, self.month, self.day, hour, minute, second)
        if tz is None:
            # local offset in effect on that date, not today's
            return when.astimezone()
        return when.replace(tzinfo=tz)


@dataclass
class Reminder:
    """A time and message telling the user about a note or list."""

    dismissed: Dismissed = Dismissed.NOT_DISMISSED
    description: str = ""
    time: Time = field(default_factory=Time)

    def to_dict(self) -> dict:
        ret = {
            "state": DISMISSED.encode(self.dismissed),
            "description": self.description,
        }
        ret.update(self.time.to_dict())
        return ret

    @classmethod
    def from_dict(cls, data: Any) -> Reminder:
        name = cls.__name__
        data = _object(name, data)
        return cls(
            dismissed=DISMISSED.decode(_field(name, data, "state")),
            description=_typed(name, data, "description", str),
            time=Time(**Time._load_fields(data)),
        )

    def to_datetime(self, tz: Optional[datetime.tzinfo] = None) -> datetime.datetime:
        return self.time.to_datetime(tz)
