"""Tests for the DutyAssignment entity."""

from backoffice.domain.entities.duty_assignment import (
    UNKNOWN_CLIENT,
    UNKNOWN_VESSEL,
    DutyAssignment,
)


def test_from_record_coerces_numbers(sample_assignment):
    a = DutyAssignment.from_record({**sample_assignment, "ratePerDay": "500", "conveyance": "abc"})
    assert a.rate_per_day == 500.0
    assert a.conveyance == 0.0
    assert a.mother_vessel == "MV Star"


def test_defaults_for_missing_fields():
    a = DutyAssignment.from_record({})
    assert a.start_shift == "day"
    assert a.status == "pending"
    assert a.is_ongoing


def test_labels_fall_back():
    a = DutyAssignment.from_record({"vesselName": "Old Vessel"})
    assert a.client_label == UNKNOWN_CLIENT
    assert a.vessel_label == "Old Vessel"
    assert DutyAssignment(id=None).vessel_label == UNKNOWN_VESSEL


def test_to_record_keeps_camel_case(sample_assignment):
    record = DutyAssignment.from_record({**sample_assignment, "id": "ORD-1"}).to_record()
    assert record["id"] == "ORD-1"
    assert record["motherVessel"] == "MV Star"
    assert record["ratePerDay"] == 500.0
    assert "vesselName" not in record


def test_to_record_omits_missing_id():
    assert "id" not in DutyAssignment(id=None).to_record()
