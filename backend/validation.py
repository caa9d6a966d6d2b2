# backend/validation.py
"""
Form-side logic: field validation plus the small reducers the form page
uses to edit its draft record.  Nothing in here touches Streamlit.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from backend.errors import InvalidAgeError
from backend.schema import DATE_FIELDS, FIELD_LABELS, PatientRecord

logger = logging.getLogger(__name__)

AGE_MIN: float = 0
AGE_MAX: float = 150

ErrorMap = dict[str, str]


# ════════════════════════════════════════════════════════════════════════
# 1 ▪ age parsing
# ════════════════════════════════════════════════════════════════════════
# ASCII-only number syntax, the same inputs a browser's Number() accepts
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX   = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_BASES   = {"x": 16, "o": 8, "b": 2}


def parse_age(raw: str) -> float | None:
    """
    Numeric value of ``raw`` or None when it is not a number.

    Blank text counts as 0; underscores, non-ASCII digits and nan/inf
    spellings are not numbers.
    """
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not text:
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _RADIX.fullmatch(text):
        return float(int(text[2:], _BASES[text[1].lower()]))
    return None


def check_age(raw: str) -> float:
    value = parse_age(raw)
    if value is None or not AGE_MIN <= value <= AGE_MAX:
        raise InvalidAgeError(raw)
    return value


# ════════════════════════════════════════════════════════════════════════
# 2 ▪ validation
# ════════════════════════════════════════════════════════════════════════
def validate(record: PatientRecord) -> ErrorMap:
    """
    Return ``{field: message}`` for every problem in ``record``.
    An empty mapping means the record can be submitted.
    """
    errors: ErrorMap = {}

    for field, label in FIELD_LABELS.items():
        value = getattr(record, field)
        if value is None or value == "":
            errors[field] = f"{label} is required"

    # a present-but-bad age replaces whatever was recorded for it above
    if record.age:
        try:
            check_age(record.age)
        except InvalidAgeError as err:
            errors["age"] = str(err)

    return errors


def is_valid(errors: ErrorMap) -> bool:
    return not errors


# ════════════════════════════════════════════════════════════════════════
# 3 ▪ form state + reducers
# ════════════════════════════════════════════════════════════════════════
class FormState(BaseModel):
    """Draft record plus the error messages currently shown next to fields."""

    model_config = ConfigDict(frozen=True)

    record: PatientRecord  = Field(default_factory=PatientRecord)
    errors: dict[str, str] = Field(default_factory=dict)


def update_field(state: FormState, field: str, value: Any) -> FormState:
    """Apply one edit; the error shown for that field goes away immediately."""
    if field not in PatientRecord.model_fields:
        raise KeyError(f"Unknown patient field {field!r}")
    if value is None and field not in DATE_FIELDS:
        value = ""

    record = state.record.model_copy(update={field: value})
    errors = {k: msg for k, msg in state.errors.items() if k != field}
    return FormState(record=record, errors=errors)


def submit(state: FormState) -> tuple[FormState, bool]:
    errors   = validate(state.record)
    accepted = is_valid(errors)
    if accepted:
        logger.info("Intake form accepted for patient %s", state.record.patient_id)
    else:
        logger.info("Intake form rejected; fields with errors: %s", sorted(errors))
    return FormState(record=state.record, errors=errors), accepted
