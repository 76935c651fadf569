# -*- coding: utf-8 -*-
"""
Tests for draft helpers (merge, rehydration, serialization).
"""

from datetime import date, datetime

import pytest
from PyQt5.QtCore import QDate

from ui.wizards.framework.draft import (
    DATE_FIELDS,
    detach_value,
    draft_to_record,
    rehydrate_editing_record,
    union_merge,
)
from utils.datetime_utils import to_qdate


class TestUnionMerge:
    """Test union merge semantics."""

    def test_incoming_values_win(self):
        draft = {"a": 1, "b": 2}
        union_merge(draft, {"b": 3, "c": 4})
        assert draft == {"a": 1, "b": 3, "c": 4}

    def test_merge_is_in_place(self):
        draft = {"a": 1}
        assert union_merge(draft, {"b": 2}) is draft

    def test_none_and_empty_values_are_noops(self):
        draft = {"a": 1}
        union_merge(draft, None)
        union_merge(draft, {})
        assert draft == {"a": 1}

    def test_sequence_equals_union(self):
        first = {"policyName": "Flex", "priorityLevel": "high"}
        second = {"priorityLevel": "low", "allowRefunds": True}
        draft = {}
        union_merge(draft, first)
        union_merge(draft, second)
        assert draft == {**first, **second}

    def test_nested_values_are_copied(self):
        values = {"loyaltyTiers": ["gold"], "channels": {"web": True}}
        draft = union_merge({}, values)

        values["loyaltyTiers"].append("silver")
        values["channels"]["web"] = False

        assert draft == {"loyaltyTiers": ["gold"], "channels": {"web": True}}


class TestDetachValue:
    """Test copying of draft values."""

    def test_containers_are_new_objects(self):
        value = {"tiers": ["gold", {"level": 1}], "tags": {"a"}, "pair": (["x"], 2)}
        copied = detach_value(value)

        assert copied == value
        assert copied["tiers"] is not value["tiers"]
        assert copied["tiers"][1] is not value["tiers"][1]
        assert copied["tags"] is not value["tags"]
        assert copied["pair"][0] is not value["pair"][0]

    def test_qdate_is_copied(self):
        original = QDate(2025, 1, 1)
        copied = detach_value(original)
        original.setDate(2030, 5, 5)
        assert copied == QDate(2025, 1, 1)

    def test_scalars_pass_through(self):
        assert detach_value("Flex") == "Flex"
        assert detach_value(None) is None


class TestDateValues:
    """Test raw value to QDate conversion."""

    @pytest.mark.parametrize("raw, expected", [
        ("2025-03-01", QDate(2025, 3, 1)),
        ("2025-03-01T10:30:00", QDate(2025, 3, 1)),
        ("2025-03-01T10:30:00.000Z", QDate(2025, 3, 1)),
        (date(2024, 12, 31), QDate(2024, 12, 31)),
        (datetime(2024, 2, 29, 8, 0), QDate(2024, 2, 29)),
        (QDate(2023, 7, 4), QDate(2023, 7, 4)),
        (0, QDate(1970, 1, 1)),
        (1735689600000, QDate(2025, 1, 1)),
    ])
    def test_parsable_values(self, raw, expected):
        assert to_qdate(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "not a date", "2025-13-45", True, [], {}])
    def test_unparsable_values_are_invalid(self, raw):
        value = to_qdate(raw)
        assert isinstance(value, QDate)
        assert value.isValid() is False


class TestRehydrateEditingRecord:
    """Test building a draft from an editing record."""

    def test_none_and_empty_give_empty_draft(self):
        assert rehydrate_editing_record(None) == {}
        assert rehydrate_editing_record({}) == {}
        assert rehydrate_editing_record({}, rehydrate_absent_dates=True) == {}

    def test_non_date_fields_copied_verbatim(self):
        record = {"discountName": "Spring", "loyaltyTiers": ["gold", "silver"], "discountValue": 10}
        assert rehydrate_editing_record(record) == record

    def test_record_lists_not_shared_with_draft(self):
        record = {"discountName": "Spring", "loyaltyTiers": ["gold"]}
        draft = rehydrate_editing_record(record)

        draft["loyaltyTiers"].append("silver")

        assert record["loyaltyTiers"] == ["gold"]

    def test_every_present_date_field_converted(self):
        record = {name: "2025-06-15" for name in DATE_FIELDS}
        draft = rehydrate_editing_record(record)
        for name in DATE_FIELDS:
            assert draft[name] == QDate(2025, 6, 15)

    def test_absent_fields_only_added_in_legacy_mode(self):
        record = {"promoName": "WELCOME", "startDate": "2025-01-01"}

        modern = rehydrate_editing_record(record, rehydrate_absent_dates=False)
        legacy = rehydrate_editing_record(record, rehydrate_absent_dates=True)

        assert set(modern) == {"promoName", "startDate"}
        assert set(legacy) == {"promoName"} | set(DATE_FIELDS)
        assert legacy["startDate"] == QDate(2025, 1, 1)
        assert legacy["endDate"].isValid() is False

    def test_explicit_none_date_is_invalid(self):
        draft = rehydrate_editing_record({"offerName": "X", "endDate": None})
        assert draft["endDate"].isValid() is False


class TestDraftToRecord:
    """Test JSON-safe serialization of drafts."""

    def test_dates_and_sets_serialized(self):
        draft = {
            "validFrom": QDate(2025, 3, 1),
            "validTo": QDate(),
            "loyaltyTiers": {"gold", "bronze"},
            "channels": ("web", "mobile"),
            "refundFee": 25,
        }
        assert draft_to_record(draft) == {
            "validFrom": "2025-03-01",
            "validTo": None,
            "loyaltyTiers": ["bronze", "gold"],
            "channels": ["web", "mobile"],
            "refundFee": 25,
        }

    def test_nested_values_serialized(self):
        draft = {"selectedServices": [{"name": "Meal", "date": QDate(2025, 1, 2)}]}
        assert draft_to_record(draft) == {"selectedServices": [{"name": "Meal", "date": "2025-01-02"}]}
