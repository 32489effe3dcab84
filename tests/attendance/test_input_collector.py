from decimal import Decimal

import pytest

from src.warehouse_timesheet.warehouse_timesheet.attendance.input_collector import FormInputCollector
from src.warehouse_timesheet.warehouse_timesheet.core.exceptions import ValidationError


def test_missing_fields_count_as_abandoned_and_describe_request():
    collector = FormInputCollector({})

    assert collector.collect_worked_and_extra(True, Decimal("25")) is None
    assert collector.pending == {"kind": "worked_and_extra", "initial": {"worked": True, "extra": "25"}}


def test_cancel_flag_wins_over_values():
    collector = FormInputCollector({"extra": "10", "worked": "1", "cancel": "true"})

    assert collector.collect_worked_and_extra(True, Decimal("0")) is None


def test_extra_accepts_any_sign():
    collector = FormInputCollector({"extra": "-1500.25", "worked": "false"})

    value = collector.collect_worked_and_extra(True, Decimal("0"))

    assert value.worked is False
    assert value.extra == Decimal("-1500.25")


def test_hours_and_extra_are_parsed():
    collector = FormInputCollector({"hours": "7.5", "extra": "0", "worked": True})

    value = collector.collect_worked_hours_and_extra(True, 8.0, Decimal("0"))

    assert value.hours == 7.5
    assert value.worked is True
    assert collector.pending["initial"] == {"worked": True, "hours": "8", "extra": "0"}


@pytest.mark.parametrize("hours", ["-1", "abc", "nan"])
def test_invalid_hours_rejected(hours):
    collector = FormInputCollector({"hours": hours, "extra": "0"})

    with pytest.raises(ValidationError):
        collector.collect_worked_hours_and_extra(True, 8.0, Decimal("0"))


def test_invalid_extra_rejected():
    collector = FormInputCollector({"extra": "12,5"})

    with pytest.raises(ValidationError):
        collector.collect_worked_and_extra(True, Decimal("0"))


@pytest.mark.parametrize("extra", ["0.123456", "1E+20", "-100000000000000"])
def test_extra_outside_storable_range_rejected(extra):
    collector = FormInputCollector({"extra": extra, "worked": True})

    with pytest.raises(ValidationError):
        collector.collect_worked_and_extra(True, Decimal("0"))


def test_extra_with_four_places_kept_exactly():
    collector = FormInputCollector({"extra": "0.1235", "worked": True})

    assert collector.collect_worked_and_extra(True, Decimal("0")).extra == Decimal("0.1235")
