from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Any, TypeVar, Union

from keepwire.exc import InvalidFieldType, MalformedDocument, MissingField, UnknownToken, WireError
from keepwire.models import Item, List, Note, Reminder, Timestamps, Time

logger = logging.getLogger(__name__)

Record = Union[Note, List, Item, Reminder, Timestamps, Time]
R = TypeVar("R", Note, List, Item, Reminder, Timestamps, Time)

# "type" discriminator -> record class
NODE_TYPES = MappingProxyType({
    cls.TYPE.value: cls
    for cls in (Note, List, Item)
})


def dumps(record: Record) -> str:
    """Encode a record as compact JSON text."""
    return json.dumps(record.to_dict(), separators=(",", ":"), ensure_ascii=False)


def dumps_nodes(nodes: list[Note | List | Item]) -> str:
    return json.dumps(
        [node.to_dict() for node in nodes], separators=(",", ":"), ensure_ascii=False
    )


def _parse(text: str | bytes) -> Any:
    try:
        return json.loads(text)
    except (ValueError, TypeError) as exc:
        raise MalformedDocument(f"invalid JSON: {exc}") from exc


def loads(text: str | bytes, cls: type[R]) -> R:
    """Decode JSON text into a record of the given class."""
    data = _parse(text)
    try:
        return cls.from_dict(data)
    except WireError as exc:
        logger.debug("Failed to decode %s: %s", cls.__name__, exc)
        raise


def load_node(data: Any) -> Note | List | Item:
    """Decode a node dict, choosing the record class from its type field."""
    if not isinstance(data, dict):
        raise InvalidFieldType("node", "<root>", "an object", data)
    if "type" not in data:
        raise MissingField("node", "type")
    cls = NODE_TYPES.get(data["type"]) if isinstance(data["type"], str) else None
    if cls is None:
        raise UnknownToken("NodeType", data["type"])
    logger.debug("Decoding node %r as %s", data.get("id"), cls.__name__)
    return cls.from_dict(data)


def loads_node(text: str | bytes) -> Note | List | Item:
    return load_node(_parse(text))


def loads_nodes(text: str | bytes) -> list[Note | List | Item]:
    """Decode a JSON array of nodes, or a single node object."""
    data = _parse(text)
    if isinstance(data, dict):
        return [load_node(data)]
    if not isinstance(data, list):
        raise InvalidFieldType("nodes", "<root>", "an array", data)
    return [load_node(entry) for entry in data]
