from __future__ import annotations

from typing import Any

from keepwire.exc import TagMismatch


class LiteralTag:
    """A field whose wire value is always one fixed string.

    The tag carries no state of its own: encoding ignores the in-memory
    record and decoding only checks that the observed value is the constant.
    """

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value

    def encode(self) -> str:
        return self.value

    def decode(self, raw: Any) -> None:
        if not isinstance(raw, str) or raw != self.value:
            raise TagMismatch.from_values(self.value, raw)

    def __repr__(self) -> str:
        return f"LiteralTag({self.value!r})"


# kind fields
NODE_KIND = LiteralTag("notes#node")
TIMESTAMPS_KIND = LiteralTag("notes#timestamps")

# static type field of each node category
NOTE_TYPE = LiteralTag("NOTE")
LIST_TYPE = LiteralTag("LIST")
ITEM_TYPE = LiteralTag("LIST_ITEM")
