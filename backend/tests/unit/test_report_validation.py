"""Unit tests for report submission validation and normalization."""

from datetime import date

import pytest

from fieldreports.domain.entities import WorkType
from fieldreports.domain.exceptions import ReportValidationError
from fieldreports.domain.validation import (
    ErrorCode,
    ReportInput,
    normalize_report,
    validate_report,
)


def _errors(payload: dict) -> list[tuple[str, ErrorCode]]:
    return [(e.field, e.code) for e in validate_report(ReportInput.from_mapping(payload))]


def test_valid_submission_has_no_errors(make_payload):
    assert _errors(make_payload()) == []


@pytest.mark.parametrize(
    "field",
    [
        "workDate",
        "workerName",
        "customerName",
        "siteAddress",
        "serialNumber",
        "startTime",
        "endTime",
        "breakMinutes",
    ],
)
def test_missing_required_field_is_reported(make_payload, field: str):
    payload = make_payload()
    del payload[field]
    assert (field, ErrorCode.REQUIRED) in _errors(payload)


def test_missing_work_type_is_invalid_choice(make_payload):
    payload = make_payload()
    del payload["workType"]
    assert _errors(payload) == [("workType", ErrorCode.INVALID_CHOICE)]


def test_missing_fault_code_flag_is_invalid_type(make_payload):
    payload = make_payload()
    del payload["hasFaultCode"]
    assert _errors(payload) == [("hasFaultCode", ErrorCode.INVALID_TYPE)]


def test_blank_text_counts_as_missing(make_payload):
    assert _errors(make_payload(workerName="   ")) == [("workerName", ErrorCode.REQUIRED)]


@pytest.mark.parametrize(
    "field, limit",
    [("workerName", 100), ("customerName", 200), ("siteAddress", 500)],
)
def test_text_length_limits(make_payload, field: str, limit: int):
    assert _errors(make_payload(**{field: "a" * limit})) == []
    assert _errors(make_payload(**{field: "a" * (limit + 1)})) == [(field, ErrorCode.TOO_LONG)]


def test_all_errors_reported_in_field_order():
    errors = _errors({})
    assert [field for field, _ in errors] == [
        "workDate",
        "workerName",
        "customerName",
        "siteAddress",
        "serialNumber",
        "workType",
        "hasFaultCode",
        "startTime",
        "endTime",
        "breakMinutes",
    ]


def test_unparseable_work_date(make_payload):
    assert _errors(make_payload(workDate="2024-13-40")) == [("workDate", ErrorCode.FORMAT_INVALID)]
    assert _errors(make_payload(workDate="yesterday")) == [("workDate", ErrorCode.FORMAT_INVALID)]


def test_iso_timestamp_work_date_is_accepted(make_payload):
    assert _errors(make_payload(workDate="2024-04-01T00:00:00.000Z")) == []
    assert _errors(make_payload(workDate="2024-04-01T09:30:00+09:00")) == []


@pytest.mark.parametrize("value", ["2024-04-01garbage", "2024-04-01Tnoon", "2024-04-01T09:00:00Zjunk"])
def test_work_date_with_trailing_text_is_rejected(make_payload, value):
    assert _errors(make_payload(workDate=value)) == [("workDate", ErrorCode.FORMAT_INVALID)]


def test_serial_number_format(make_payload):
    assert _errors(make_payload(serialNumber="TM-012345")) == []
    assert _errors(make_payload(serialNumber="TM-12AB56")) == [
        ("serialNumber", ErrorCode.FORMAT_INVALID)
    ]
    assert _errors(make_payload(serialNumber="012345")) == [
        ("serialNumber", ErrorCode.FORMAT_INVALID)
    ]


def test_unknown_work_type(make_payload):
    assert _errors(make_payload(workType="repair")) == [("workType", ErrorCode.INVALID_CHOICE)]


def test_other_work_type_requires_description(make_payload):
    assert _errors(make_payload(workType="other", workTypeOther="")) == [
        ("workTypeOther", ErrorCode.REQUIRED)
    ]
    assert _errors(make_payload(workType="other", workTypeOther="x" * 501)) == [
        ("workTypeOther", ErrorCode.TOO_LONG)
    ]
    assert _errors(make_payload(workType="other", workTypeOther="清掃")) == []


def test_description_not_required_for_other_work_types(make_payload):
    assert _errors(make_payload(workType="adjustment", workTypeOther="x")) == []
    assert _errors(make_payload(workType="inspection")) == []


@pytest.mark.parametrize("flag", ["true", 1, None])
def test_fault_code_flag_must_be_boolean(make_payload, flag):
    assert _errors(make_payload(hasFaultCode=flag)) == [("hasFaultCode", ErrorCode.INVALID_TYPE)]


def test_part_number_format(make_payload):
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity=2)) == []
    assert _errors(make_payload(partNumber="NF-1234567", partQuantity=2)) == [
        ("partNumber", ErrorCode.FORMAT_INVALID)
    ]


@pytest.mark.parametrize("quantity", [None, 0, "", "abc", -3])
def test_part_number_requires_quantity(make_payload, quantity):
    payload = make_payload(partNumber="NF-A1B2C3D4", partQuantity=quantity)
    assert _errors(payload) == [("partQuantity", ErrorCode.REQUIRED)]


def test_invalid_part_number_still_checks_quantity(make_payload):
    assert _errors(make_payload(partNumber="NF-12")) == [
        ("partNumber", ErrorCode.FORMAT_INVALID),
        ("partQuantity", ErrorCode.REQUIRED),
    ]


def test_part_quantity_accepts_integer_like_input(make_payload):
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity=5)) == []
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity="5")) == []


def test_part_quantity_upper_bound(make_payload):
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity=99999)) == []
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity=100000)) == [
        ("partQuantity", ErrorCode.OUT_OF_RANGE)
    ]


def test_quantity_ignored_without_part_number(make_payload):
    assert _errors(make_payload(partNumber="", partQuantity=0)) == []


@pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "0900", 900])
def test_time_format(make_payload, value):
    assert _errors(make_payload(startTime=value, endTime="23:59")) == [
        ("startTime", ErrorCode.FORMAT_INVALID)
    ]


def test_end_before_start_is_an_order_error():
    errors = validate_report(
        ReportInput(start_time="18:00", end_time="09:00")
    )
    assert any(e.field == "endTime" and e.code is ErrorCode.ORDER_INVALID for e in errors)


def test_equal_times_are_accepted(make_payload):
    assert _errors(make_payload(startTime="09:00", endTime="09:00")) == []


def test_order_check_skipped_when_a_time_is_malformed(make_payload):
    assert _errors(make_payload(startTime="18:00", endTime="9:00")) == [
        ("endTime", ErrorCode.FORMAT_INVALID)
    ]


def test_break_minutes(make_payload):
    assert _errors(make_payload(breakMinutes="45")) == []
    assert _errors(make_payload(breakMinutes=0)) == []
    assert _errors(make_payload(breakMinutes=-1)) == [("breakMinutes", ErrorCode.OUT_OF_RANGE)]
    assert _errors(make_payload(breakMinutes="lots")) == [("breakMinutes", ErrorCode.REQUIRED)]
    assert _errors(make_payload(breakMinutes=True)) == [("breakMinutes", ErrorCode.REQUIRED)]


@pytest.mark.parametrize("value", [30.5, "30.5", ".5"])
def test_fractional_break_minutes_is_a_format_error(make_payload, value):
    assert _errors(make_payload(breakMinutes=value)) == [("breakMinutes", ErrorCode.FORMAT_INVALID)]


def test_whole_number_float_break_minutes_is_accepted(make_payload):
    assert _errors(make_payload(breakMinutes=30.0)) == []


def test_fractional_part_quantity_is_a_format_error(make_payload):
    assert _errors(make_payload(partNumber="NF-A1B2C3D4", partQuantity=1.5)) == [
        ("partQuantity", ErrorCode.FORMAT_INVALID)
    ]


def test_validation_is_idempotent(make_payload):
    submission = ReportInput.from_mapping(make_payload(workType="other", startTime="25:00"))
    assert validate_report(submission) == validate_report(submission)


def test_errors_carry_messages():
    errors = validate_report(ReportInput())
    assert all(e.message for e in errors)
    assert errors[0].message == "作業日は必須です"


# ── Canonical identifiers ────────────────────────────────────────────


def test_canonicalized_submission_accepts_unprefixed_identifiers(make_payload):
    submission = ReportInput.from_mapping(
        make_payload(serialNumber="012345", partNumber="a1b2c3d4", partQuantity=1)
    ).with_canonical_identifiers()
    assert submission.serial_number == "TM-012345"
    assert submission.part_number == "NF-A1B2C3D4"
    assert validate_report(submission) == []


# ── Normalization ────────────────────────────────────────────────────


def test_normalize_trims_and_types_fields(make_payload):
    fields = normalize_report(
        ReportInput.from_mapping(
            make_payload(workerName="  山田太郎 ", breakMinutes="30", workDate="2024-04-01T09:00:00Z")
        )
    )
    assert fields.worker_name == "山田太郎"
    assert fields.break_minutes == 30
    assert fields.work_date == date(2024, 4, 1)
    assert fields.work_type is WorkType.ADJUSTMENT
    assert fields.work_duration_minutes == 450


def test_normalize_clears_gated_values(make_payload):
    fields = normalize_report(
        ReportInput.from_mapping(
            make_payload(
                workType="inspection",
                workTypeOther="ignored",
                hasFaultCode=False,
                faultCodeContent="E-42",
                partNumber="",
                partQuantity=3,
            )
        )
    )
    assert fields.work_type_other is None
    assert fields.fault_code is None
    assert fields.fault_code_content is None
    assert fields.part_replacement is None
    assert fields.part_quantity is None


def test_normalize_keeps_gated_values_when_enabled(make_payload):
    fields = normalize_report(
        ReportInput.from_mapping(
            make_payload(
                workType="other",
                workTypeOther=" 清掃 ",
                hasFaultCode=True,
                faultCodeContent=" E-42 ",
                partNumber="NF-A1B2C3D4",
                partQuantity="2",
            )
        )
    )
    assert fields.work_type_other == "清掃"
    assert fields.has_fault_code is True
    assert fields.fault_code_content == "E-42"
    assert fields.part_number == "NF-A1B2C3D4"
    assert fields.part_quantity == 2


def test_fault_code_without_content_is_still_a_fault(make_payload):
    fields = normalize_report(
        ReportInput.from_mapping(make_payload(hasFaultCode=True, faultCodeContent="  "))
    )
    assert fields.has_fault_code is True
    assert fields.fault_code_content is None


def test_normalize_raises_with_all_errors(make_payload):
    with pytest.raises(ReportValidationError) as exc_info:
        normalize_report(ReportInput.from_mapping(make_payload(workerName="", breakMinutes=-5)))
    assert [e.field for e in exc_info.value.errors] == ["workerName", "breakMinutes"]
