from __future__ import annotations

import json
from typing import Any


def _wire(value: Any) -> str:
    """Render a value the way it appears on the wire."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


class WireError(Exception):
    """Base class for every encode/decode failure."""


class TagMismatch(WireError):
    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} got {actual}")

    @classmethod
    def from_values(cls, expected: Any, actual: Any) -> TagMismatch:
        return cls(_wire(expected), _wire(actual))


class UnknownToken(WireError):
    def __init__(self, enum_name: str, token: Any) -> None:
        self.enum_name = enum_name
        self.token = token
        super().__init__(f"unexpected {enum_name} value {_wire(token)}")


class UnencodableValue(WireError):
    def __init__(self, enum_name: str, value: Any) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"unsupported {enum_name} value {value!r}")


class MalformedTimestamp(WireError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"malformed timestamp {_wire(value)}")


class MissingField(WireError):
    def __init__(self, record: str, key: str) -> None:
        self.record = record
        self.key = key
        super().__init__(f"{record}: missing field {key!r}")


class InvalidFieldType(WireError):
    def __init__(self, record: str, key: str, expected: str, value: Any) -> None:
        self.record = record
        self.key = key
        self.expected = expected
        self.value = value
        super().__init__(
            f"{record}: field {key!r} must be {expected}, got {_wire(value)}"
        )


class MalformedDocument(WireError):
    pass
