"""pluck tests — projecting one field out of a collection of records.

Tests cover:
    - Reference products example
    - Missing key and None value both omitted (never represented as None)
    - Falsy present values kept
    - Values of mixed types returned as-is
    - Sets of FrozenRecord accepted
    - Non-mapping elements rejected with NotARecordError, logged with its error code
"""

import logging

import pytest

from setkit.core.domain_types import FrozenRecord
from setkit.core.errors import NotARecordError
from setkit.core.pluck import pluck

PRODUCTS = [
    {"sku": "FOO-1", "title": "Backpack", "price": 9.99},
    {"sku": "FOO-2", "title": "Wallet", "price": 8.99},
]


def test_plucks_titles_in_order():
    assert pluck(PRODUCTS, "title") == ["Backpack", "Wallet"]


def test_missing_key_is_omitted():
    records = PRODUCTS + [{"sku": "FOO-3"}]
    assert pluck(records, "title") == ["Backpack", "Wallet"]


def test_none_value_is_omitted():
    records = [{"title": None}, {"title": "Hat"}]
    assert pluck(records, "title") == ["Hat"]


def test_falsy_present_values_are_kept():
    records = [{"v": 0}, {"v": ""}, {"v": False}, {"v": []}, {"w": 1}]
    assert pluck(records, "v") == [0, "", False, []]


def test_heterogeneous_values():
    records = [{"v": 1}, {"v": "two"}, {"v": 3.0}]
    assert pluck(records, "v") == [1, "two", 3.0]


def test_unknown_key_yields_empty_list():
    assert pluck(PRODUCTS, "color") == []


def test_empty_collection_yields_empty_list():
    assert pluck(set(), "title") == []


def test_set_of_frozen_records():
    records = {FrozenRecord(p) for p in PRODUCTS}
    assert sorted(pluck(records, "sku")) == ["FOO-1", "FOO-2"]


def test_non_mapping_element_rejected():
    with pytest.raises(NotARecordError) as exc_info:
        pluck([{"title": "Hat"}, "not a record"], "title")
    assert exc_info.value.code == "NOT_A_RECORD"
    assert exc_info.value.type_name == "str"


def test_rejection_logged_with_error_code(caplog):
    caplog.set_level(logging.WARNING, logger="setkit.core.pluck")
    with pytest.raises(NotARecordError):
        pluck([42], "title")
    records = [r for r in caplog.records if r.name == "setkit.core.pluck"]
    assert records[-1].error_code == "NOT_A_RECORD"
    assert records[-1].operation == "pluck"
