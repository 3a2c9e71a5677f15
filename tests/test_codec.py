from __future__ import annotations

import datetime
import json

import pytest

from keepwire.codec import dumps, dumps_nodes, load_node, loads, loads_node, loads_nodes
from keepwire.exc import InvalidFieldType, MalformedDocument, MissingField, TagMismatch, UnknownToken
from keepwire.models import Item, List, Note, Reminder, Time, Timestamps
from keepwire.timestamps import SENTINEL
from keepwire.tokens import Color, Dismissed, Period


def test_groceries_end_to_end():
    updated = datetime.datetime(2024, 3, 5, 17, 4, 9, 123456, tzinfo=datetime.timezone.utc)
    groceries = List(
        id="l1",
        timestamps=Timestamps(created=None, updated=updated),
        title="Groceries",
        archived=False,
        color=Color.GREEN,
    )

    text = dumps(groceries)
    raw = json.loads(text)
    assert raw["kind"] == "notes#node"
    assert raw["type"] == "LIST"
    assert raw["isArchived"] is False
    assert raw["color"] == "GREEN"
    assert raw["timestamps"]["created"] == SENTINEL
    assert raw["timestamps"]["updated"] == "2024-03-05T17:04:09.123Z"
    assert '"isArchived":false' in text

    decoded = loads(text, List)
    assert decoded.title == "Groceries"
    assert decoded.color is Color.GREEN
    assert decoded.timestamps.created is None
    assert decoded.timestamps.updated == updated.replace(microsecond=123000)
    assert dumps(decoded) == text


def test_dumps_is_compact():
    text = dumps(Reminder(time=Time(year=2024, month=3, day=5, period=Period.NIGHT)))
    assert text == (
        '{"state":"INITIAL","description":"","year":2024,"month":3,"day":5,"period":"NIGHT"}'
    )


def test_dumps_keeps_non_ascii():
    assert '"text":"Café"' in dumps(Item(text="Café"))


def test_loads_reminder():
    rem = loads(
        '{"state":"DISMISSED","description":"Call","year":2024,"month":3,"day":5,"hour":6,"minute":30}',
        Reminder,
    )
    assert rem.dismissed is Dismissed.DISMISSED
    assert rem.time == Time(year=2024, month=3, day=5, hour=6, minute=30)


def test_loads_malformed_json():
    with pytest.raises(MalformedDocument):
        loads('{"state":', Reminder)


def test_loads_propagates_first_error(groceries):
    raw = groceries.to_dict()
    raw["kind"] = "notes#timestamps"
    raw["color"] = "PURPLE"
    with pytest.raises(TagMismatch):
        loads(json.dumps(raw), List)


@pytest.mark.parametrize("fixture, cls", [("groceries", List), ("milk", Item), ("memo", Note)])
def test_load_node_dispatches_on_type(fixture, cls, request):
    node = request.getfixturevalue(fixture)
    decoded = load_node(node.to_dict())
    assert type(decoded) is cls
    assert decoded == node


def test_load_node_unknown_type(memo):
    raw = memo.to_dict()
    raw["type"] = "BLOB"
    with pytest.raises(UnknownToken):
        load_node(raw)


def test_load_node_missing_type(memo):
    raw = memo.to_dict()
    del raw["type"]
    with pytest.raises(MissingField):
        load_node(raw)


def test_loads_node(milk):
    assert loads_node(dumps(milk)) == milk


def test_loads_nodes_array(groceries, milk, memo):
    text = dumps_nodes([groceries, milk, memo])
    assert loads_nodes(text) == [groceries, milk, memo]


def test_loads_nodes_single_object(memo):
    assert loads_nodes(dumps(memo)) == [memo]


def test_loads_nodes_rejects_scalar():
    with pytest.raises(InvalidFieldType):
        loads_nodes('"NOTE"')
