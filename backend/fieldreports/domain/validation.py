"""Report submission validation.

``validate_report`` checks every field of a raw submission and returns all
problems at once, in a fixed order, so a form can show them inline.
``normalize_report`` turns an accepted submission into the field set that is
persisted. Both are pure functions.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Any

from fieldreports.domain.entities.report import (
    FaultCode,
    PartReplacement,
    ReportFields,
    WorkType,
)
from fieldreports.domain.exceptions import ReportValidationError
from fieldreports.domain.identifiers import (
    canonical_part_number,
    canonical_serial_number,
    is_valid_part_number,
    is_valid_serial_number,
)

TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):[0-5][0-9]$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T")
_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
_DECIMAL_PATTERN = re.compile(r"^[+-]?\d*\.\d+$")

MAX_WORKER_NAME_LENGTH = 100
MAX_CUSTOMER_NAME_LENGTH = 200
MAX_SITE_ADDRESS_LENGTH = 500
MAX_WORK_TYPE_OTHER_LENGTH = 500
MAX_PART_QUANTITY = 99999


class ErrorCode(str, Enum):
    """Reason a field was rejected."""

    REQUIRED = "required"
    TOO_LONG = "too_long"
    FORMAT_INVALID = "format_invalid"
    INVALID_CHOICE = "invalid_choice"
    INVALID_TYPE = "invalid_type"
    ORDER_INVALID = "order_invalid"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class FieldError:
    """A single validation problem, keyed by the wire name of the field it blocks."""

    field: str
    code: ErrorCode
    message: str


@dataclass(frozen=True)
class ReportInput:
    """A raw report submission.

    Values are kept exactly as received (any JSON type) so the validator can
    tell a missing value from a wrongly typed one.
    """

    work_date: Any = None
    worker_name: Any = None
    customer_name: Any = None
    site_address: Any = None
    serial_number: Any = None
    work_type: Any = None
    work_type_other: Any = None
    has_fault_code: Any = None
    fault_code_content: Any = None
    part_number: Any = None
    part_quantity: Any = None
    start_time: Any = None
    end_time: Any = None
    break_minutes: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReportInput":
        """Build from a camelCase JSON object; unknown keys are ignored."""
        return cls(**{attr: data.get(wire) for wire, attr in WIRE_FIELDS.items()})

    def with_canonical_identifiers(self) -> "ReportInput":
        """Apply the TM-/NF- prefixes and upper case to entered identifiers."""
        serial = self.serial_number
        part = self.part_number
        if isinstance(serial, str):
            serial = canonical_serial_number(serial)
        if isinstance(part, str):
            part = canonical_part_number(part)
        return replace(self, serial_number=serial, part_number=part)


WIRE_FIELDS: dict[str, str] = {
    "workDate": "work_date",
    "workerName": "worker_name",
    "customerName": "customer_name",
    "siteAddress": "site_address",
    "serialNumber": "serial_number",
    "workType": "work_type",
    "workTypeOther": "work_type_other",
    "hasFaultCode": "has_fault_code",
    "faultCodeContent": "fault_code_content",
    "partNumber": "part_number",
    "partQuantity": "part_quantity",
    "startTime": "start_time",
    "endTime": "end_time",
    "breakMinutes": "break_minutes",
}


# ── Coercion helpers ─────────────────────────────────────────────────


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def parse_work_date(value: Any) -> date | None:
    """Accept a date, a datetime, ``YYYY-MM-DD``, or a complete ISO 8601 timestamp.

    Anything after the date must form a valid timestamp; trailing text is
    rejected.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        if _DATE_PATTERN.match(text):
            return date.fromisoformat(text)
        if _TIMESTAMP_PATTERN.match(text):
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text).date()
    except ValueError:
        return None
    return None


def is_fractional_number(value: Any) -> bool:
    """True for numeric input with a fractional part, e.g. ``30.5`` or ``"1.5"``."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return not value.is_integer()
    if isinstance(value, str):
        return bool(_DECIMAL_PATTERN.match(value.strip()))
    return False


def coerce_int(value: Any) -> int | None:
    """Integer-like input → int; anything else (including bools) → None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _INTEGER_PATTERN.match(value.strip()):
        return int(value.strip())
    return None


def parse_work_type(value: Any) -> WorkType | None:
    try:
        return WorkType(value)
    except (ValueError, TypeError):
        return None


# ── Field checks ─────────────────────────────────────────────────────


def _check_text(
    errors: list[FieldError], field: str, value: Any, label: str, max_length: int
) -> None:
    if _is_blank(value):
        errors.append(FieldError(field, ErrorCode.REQUIRED, f"{label}は必須です"))
    elif len(value) > max_length:
        errors.append(
            FieldError(
                field,
                ErrorCode.TOO_LONG,
                f"{label}は{max_length}文字以内で入力してください",
            )
        )


def _check_time(errors: list[FieldError], field: str, value: Any, label: str) -> bool:
    """Returns True when the value is a well-formed HH:MM string."""
    if value is None or value == "":
        errors.append(FieldError(field, ErrorCode.REQUIRED, f"{label}は必須です"))
        return False
    if not isinstance(value, str) or not TIME_PATTERN.match(value):
        errors.append(
            FieldError(field, ErrorCode.FORMAT_INVALID, f"{label}の形式が正しくありません")
        )
        return False
    return True


def validate_report(submission: ReportInput) -> list[FieldError]:
    """Validate a submission; an empty list means it is accepted.

    Serial and part numbers are checked in canonical (prefixed) form, see
    ``ReportInput.with_canonical_identifiers``.
    """
    errors: list[FieldError] = []

    if not _is_present(submission.work_date):
        errors.append(FieldError("workDate", ErrorCode.REQUIRED, "作業日は必須です"))
    elif parse_work_date(submission.work_date) is None:
        errors.append(
            FieldError("workDate", ErrorCode.FORMAT_INVALID, "作業日の形式が正しくありません")
        )

    _check_text(errors, "workerName", submission.worker_name, "作業者名", MAX_WORKER_NAME_LENGTH)
    _check_text(errors, "customerName", submission.customer_name, "顧客名", MAX_CUSTOMER_NAME_LENGTH)
    _check_text(errors, "siteAddress", submission.site_address, "現場住所", MAX_SITE_ADDRESS_LENGTH)

    if _is_blank(submission.serial_number):
        errors.append(
            FieldError("serialNumber", ErrorCode.REQUIRED, "シリアルナンバーは必須です")
        )
    elif not is_valid_serial_number(submission.serial_number):
        errors.append(
            FieldError(
                "serialNumber",
                ErrorCode.FORMAT_INVALID,
                "TM-に続く数字6桁で入力してください（例：TM-012345）",
            )
        )

    work_type = parse_work_type(submission.work_type)
    if work_type is None:
        errors.append(
            FieldError("workType", ErrorCode.INVALID_CHOICE, "作業種類を選択してください")
        )
    elif work_type is WorkType.OTHER:
        _check_text(
            errors,
            "workTypeOther",
            submission.work_type_other,
            "その他の内容",
            MAX_WORK_TYPE_OTHER_LENGTH,
        )

    if not isinstance(submission.has_fault_code, bool):
        errors.append(
            FieldError(
                "hasFaultCode",
                ErrorCode.INVALID_TYPE,
                "フォルトコードの有無を選択してください",
            )
        )

    if _is_present(submission.part_number):
        part_number = submission.part_number
        if not isinstance(part_number, str) or not is_valid_part_number(part_number):
            errors.append(
                FieldError(
                    "partNumber",
                    ErrorCode.FORMAT_INVALID,
                    "NF-に続く英数字8桁で入力してください（例：NF-A1B2C3D4）",
                )
            )

        quantity = coerce_int(submission.part_quantity)
        if is_fractional_number(submission.part_quantity):
            errors.append(
                FieldError(
                    "partQuantity",
                    ErrorCode.FORMAT_INVALID,
                    "個数は整数で入力してください",
                )
            )
        elif quantity is None or quantity < 1:
            errors.append(
                FieldError(
                    "partQuantity",
                    ErrorCode.REQUIRED,
                    "部品番号を入力した場合、個数は1以上を入力してください",
                )
            )
        elif quantity > MAX_PART_QUANTITY:
            errors.append(
                FieldError(
                    "partQuantity",
                    ErrorCode.OUT_OF_RANGE,
                    f"個数は{MAX_PART_QUANTITY}以下を入力してください",
                )
            )

    start_ok = _check_time(errors, "startTime", submission.start_time, "開始時間")
    end_ok = _check_time(errors, "endTime", submission.end_time, "終了時間")
    if start_ok and end_ok and submission.start_time > submission.end_time:
        errors.append(
            FieldError(
                "endTime",
                ErrorCode.ORDER_INVALID,
                "終了時間は開始時間以降を指定してください",
            )
        )

    break_minutes = coerce_int(submission.break_minutes)
    if is_fractional_number(submission.break_minutes):
        errors.append(
            FieldError("breakMinutes", ErrorCode.FORMAT_INVALID, "休憩時間は整数で入力してください")
        )
    elif break_minutes is None:
        errors.append(FieldError("breakMinutes", ErrorCode.REQUIRED, "休憩時間は必須です"))
    elif break_minutes < 0:
        errors.append(
            FieldError("breakMinutes", ErrorCode.OUT_OF_RANGE, "休憩時間は0以上を入力してください")
        )

    return errors


def normalize_report(submission: ReportInput) -> ReportFields:
    """Validate and convert a submission into the persisted field set.

    Text is trimmed, identifiers upper-cased, and values that only make sense
    behind a gate (other-work text, fault code content, part quantity) are
    dropped when the gate is off.

    Raises:
        ReportValidationError: if ``validate_report`` reports any error.
    """
    errors = validate_report(submission)
    if errors:
        raise ReportValidationError(errors)

    work_type = WorkType(submission.work_type)

    fault_code = None
    if submission.has_fault_code:
        content = submission.fault_code_content
        content = content.strip() if isinstance(content, str) else ""
        fault_code = FaultCode(content or None)

    part_replacement = None
    if _is_present(submission.part_number):
        part_replacement = PartReplacement(
            part_number=submission.part_number.strip().upper(),
            quantity=coerce_int(submission.part_quantity),
        )

    return ReportFields(
        work_date=parse_work_date(submission.work_date),
        worker_name=submission.worker_name.strip(),
        customer_name=submission.customer_name.strip(),
        site_address=submission.site_address.strip(),
        serial_number=submission.serial_number.strip().upper(),
        work_type=work_type,
        work_type_other=(
            submission.work_type_other.strip() if work_type is WorkType.OTHER else None
        ),
        fault_code=fault_code,
        part_replacement=part_replacement,
        start_time=submission.start_time,
        end_time=submission.end_time,
        break_minutes=coerce_int(submission.break_minutes),
    )
