# tests/test_continuation.py

from __future__ import annotations

import pytest

from sct_reader.core.exceptions import InvalidArtccEntryError
from sct_reader.grammars.continuation import select_group, split_name
from sct_reader.registry.partial import LineGroupKind, LineGroupTable


def test_split_name_without_name() -> None:
    tokens = ["N1", "E1", "N2", "E2"]
    assert split_name(tokens, 4, error_cls=InvalidArtccEntryError) == (None, tokens)


def test_split_name_joins_multi_word_name() -> None:
    tokens = ["Milano", "ACC", "N1", "E1", "N2", "E2"]
    name, fields = split_name(tokens, 4, error_cls=InvalidArtccEntryError)
    assert name == "Milano ACC"
    assert fields == ["N1", "E1", "N2", "E2"]


def test_split_name_too_few_fields() -> None:
    with pytest.raises(InvalidArtccEntryError):
        split_name(["N1", "E1", "N2"], 4, error_cls=InvalidArtccEntryError)


def test_unnamed_line_without_open_group_fails() -> None:
    table = LineGroupTable(LineGroupKind.ARTCC)
    with pytest.raises(InvalidArtccEntryError):
        select_group(table, None, error_cls=InvalidArtccEntryError)


def test_unnamed_line_extends_current_group() -> None:
    table = LineGroupTable(LineGroupKind.ARTCC)
    opened = select_group(table, "London ACC", error_cls=InvalidArtccEntryError)
    assert select_group(table, None, error_cls=InvalidArtccEntryError) is opened
    assert len(table) == 1


def test_repeated_tail_name_extends_tail() -> None:
    table = LineGroupTable(LineGroupKind.LOW_AIRWAY)
    first = select_group(table, "L9", error_cls=InvalidArtccEntryError)
    again = select_group(table, "L9", error_cls=InvalidArtccEntryError)
    assert again is first
    assert [g.name for g in table.groups] == ["L9"]


def test_new_name_opens_group_and_becomes_current() -> None:
    table = LineGroupTable(LineGroupKind.ARTCC)
    select_group(table, "A", error_cls=InvalidArtccEntryError)
    b = select_group(table, "B", error_cls=InvalidArtccEntryError)

    assert [g.name for g in table.groups] == ["A", "B"]
    assert table.current is b


def test_earlier_name_reselects_group_without_duplicating() -> None:
    table = LineGroupTable(LineGroupKind.ARTCC)
    a = select_group(table, "A", error_cls=InvalidArtccEntryError)
    select_group(table, "B", error_cls=InvalidArtccEntryError)

    assert select_group(table, "A", error_cls=InvalidArtccEntryError) is a
    assert table.current is a
    assert select_group(table, None, error_cls=InvalidArtccEntryError) is a
    assert [g.name for g in table.groups] == ["A", "B"]
