from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, TypeVar

from keepwire.exc import UnencodableValue, UnknownToken

E = TypeVar("E", bound=enum.Enum)


class Period(enum.Enum):
    """Coarse time of day for reminders without an exact time."""

    SPECIFIC_TIME = 0
    MORNING = 1
    AFTERNOON = 2
    EVENING = 3
    NIGHT = 4

    @property
    def hour(self) -> int | None:
        """Canonical hour of a named period, None for SPECIFIC_TIME."""
        return _PERIOD_HOURS.get(self)


class Color(enum.Enum):
    """Background color of a note or list."""

    DEFAULT = 0
    RED = 1
    ORANGE = 2
    YELLOW = 3
    GREEN = 4
    TEAL = 5
    BLUE = 6
    GRAY = 7


class Dismissed(enum.Enum):
    """Whether a reminder notification has been acknowledged."""

    NOT_DISMISSED = 0
    DISMISSED = 1

    def __bool__(self) -> bool:
        return self is Dismissed.DISMISSED


_PERIOD_HOURS = MappingProxyType({
    Period.MORNING: 9,
    Period.AFTERNOON: 13,
    Period.EVENING: 17,
    Period.NIGHT: 20,
})


class TokenCodec(Generic[E]):
    """Fixed two-way mapping between an enum and its wire tokens."""

    def __init__(
        self,
        enum_cls: type[E],
        table: Mapping[E, str],
        unencodable: Iterable[E] = (),
    ) -> None:
        skipped = frozenset(unencodable)
        missing = [m for m in enum_cls if m not in table and m not in skipped]
        if missing:
            raise TypeError(f"{enum_cls.__name__}: no token for {missing}")
        if len(set(table.values())) != len(table):
            raise TypeError(f"{enum_cls.__name__}: duplicate tokens")

        self.enum_cls = enum_cls
        self.name = enum_cls.__name__
        self._encode = MappingProxyType(dict(table))
        self._decode = MappingProxyType({t: m for m, t in table.items()})

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(self._encode.values())

    def encode(self, value: E) -> str:
        try:
            return self._encode[value]
        except (KeyError, TypeError):
            raise UnencodableValue(self.name, value) from None

    def decode(self, token: Any) -> E:
        if not isinstance(token, str) or token not in self._decode:
            raise UnknownToken(self.name, token)
        return self._decode[token]


# SPECIFIC_TIME is never written: callers omit the period field instead.
PERIOD: TokenCodec[Period] = TokenCodec(
    Period,
    {
        Period.MORNING: "MORNING",
        Period.AFTERNOON: "AFTERNOON",
        Period.EVENING: "EVENING",
        Period.NIGHT: "NIGHT",
    },
    unencodable=(Period.SPECIFIC_TIME,),
)

COLOR: TokenCodec[Color] = TokenCodec(
    Color,
    {
        Color.DEFAULT: "DEFAULT",
        Color.RED: "RED",
        Color.ORANGE: "ORANGE",
        Color.YELLOW: "YELLOW",
        Color.GREEN: "GREEN",
        Color.TEAL: "TEAL",
        Color.BLUE: "BLUE",
        Color.GRAY: "GRAY",
    },
)

DISMISSED: TokenCodec[Dismissed] = TokenCodec(
    Dismissed,
    {
        Dismissed.NOT_DISMISSED: "INITIAL",
        Dismissed.DISMISSED: "DISMISSED",
    },
)
