from __future__ import annotations

import datetime

import pytest

from keepwire.models import Item, List, Note, Timestamps
from keepwire.tokens import Color

UPDATED = datetime.datetime(2024, 3, 5, 17, 4, 9, 123000, tzinfo=datetime.timezone.utc)


@pytest.fixture
def groceries() -> List:
    return List(
        id="1712.abc",
        parent_id="root",
        sort_value=42,
        timestamps=Timestamps(updated=UPDATED),
        title="Groceries",
        archived=False,
        color=Color.GREEN,
    )


@pytest.fixture
def milk() -> Item:
    return Item(
        id="1712.def",
        parent_id="1712.abc",
        sort_value=7,
        timestamps=Timestamps(created=UPDATED, updated=UPDATED),
        checked=True,
        text="Milk",
    )


@pytest.fixture
def memo() -> Note:
    return Note(
        id="1712.ghi",
        parent_id="root",
        timestamps=Timestamps(trashed=UPDATED),
        title="Memo",
        archived=True,
        color=Color.TEAL,
    )
