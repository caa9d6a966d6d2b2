# backend/report.py
"""
Derived report for a stored patient record: stay length, summary labels,
display strings and the report identifier.  Pure functions only; the
report page does the rendering.
"""

from __future__ import annotations

# ── std-lib ───────────────────────────────────────────────────────────────
import logging
import math
from datetime import date, datetime, timedelta

# ── third-party ───────────────────────────────────────────────────────────
import pandas as pd
from pydantic import BaseModel, ConfigDict

# ── local helpers ─────────────────────────────────────────────────────────
from backend.errors import InvalidAgeError, MissingFieldError
from backend.schema import FIELD_LABELS, PatientRecord
from backend.validation import parse_age

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


# ════════════════════════════════════════════════════════════════════════
# 1 ▪ individual derivations
# ════════════════════════════════════════════════════════════════════════
def stay_duration_days(admit: date, discharge: date) -> int:
    """Whole days between the two dates, rounded up; order does not matter."""
    return math.ceil(abs(discharge - admit) / _ONE_DAY)


def age_category(age: float) -> str:
    if age < 18:
        return "Pediatric"
    if age < 65:
        return "Adult"
    return "Senior"


def stay_category(days: int) -> str:
    if days < 3:
        return "Short"
    if days < 7:
        return "Moderate"
    return "Extended"


def discharge_status(location: str) -> str:
    if location == "home":
        return "Successful"
    if location == "deceased":
        return "Critical"
    return "Transfer"


def capitalize_first(text: str) -> str:
    # rest of the string is left exactly as stored
    return text[:1].upper() + text[1:]


def location_label(location: str) -> str:
    return " ".join(capitalize_first(word) for word in location.split("-"))


def make_report_id(patient_id: str, now: datetime) -> str:
    return f"RPT-{patient_id}-{now:%Y%m%d-%H%M}"


def format_date(value: date | None) -> str:
    return value.strftime("%d/%m/%Y") if value else "N/A"


def format_stay(days: int) -> str:
    return f"{days} {'day' if days == 1 else 'days'}"


def format_generated_on(now: datetime) -> str:
    return f"Generated on {now:%B %d, %Y} at {now:%H:%M}"


# ════════════════════════════════════════════════════════════════════════
# 2 ▪ report view
# ════════════════════════════════════════════════════════════════════════
class ReportView(BaseModel):
    model_config = ConfigDict(frozen=True)

    record:                   PatientRecord
    generated_at:             datetime
    stay_duration_days:       int
    age_category:             str
    stay_category:            str
    discharge_status:         str
    gender_label:             str
    discharge_location_label: str
    report_id:                str

    # display strings
    generated_on:             str
    admit_date_label:         str
    discharge_date_label:     str
    stay_duration_label:      str


def derive(record: PatientRecord, now: datetime) -> ReportView:
    """
    Build the report for an already-validated ``record`` as of ``now``.

    Raises MissingFieldError when a stay date is absent and InvalidAgeError
    when age is not a number; callers should only pass records that passed
    ``validate()``.
    """
    for field in ("admit_date", "discharge_date"):
        if getattr(record, field) is None:
            raise MissingFieldError(field, FIELD_LABELS[field])

    age = parse_age(record.age)
    if age is None:
        raise InvalidAgeError(record.age)

    days = stay_duration_days(record.admit_date, record.discharge_date)
    view = ReportView(
        record                   = record,
        generated_at             = now,
        stay_duration_days       = days,
        age_category             = age_category(age),
        stay_category            = stay_category(days),
        discharge_status         = discharge_status(record.discharge_location),
        gender_label             = capitalize_first(record.gender),
        discharge_location_label = location_label(record.discharge_location),
        report_id                = make_report_id(record.patient_id, now),
        generated_on             = format_generated_on(now),
        admit_date_label         = format_date(record.admit_date),
        discharge_date_label     = format_date(record.discharge_date),
        stay_duration_label      = format_stay(days),
    )
    logger.debug("Derived report %s", view.report_id)
    return view


def report_table(view: ReportView) -> pd.DataFrame:
    """Field / value rows for the information sections of the report."""
    rec = view.record
    rows = [
        ("Patient information", "Subject ID",         rec.subject_id),
        ("Patient information", "Patient ID",         rec.patient_id),
        ("Patient information", "Patient Name",       rec.patient_name),
        ("Patient information", "Age",                f"{rec.age} years"),
        ("Patient information", "Gender",             view.gender_label),
        ("Hospital stay",       "Admission Date",     view.admit_date_label),
        ("Hospital stay",       "Discharge Date",     view.discharge_date_label),
        ("Hospital stay",       "Length of Stay",     view.stay_duration_label),
        ("Hospital stay",       "Discharge Location", view.discharge_location_label),
    ]
    return pd.DataFrame(rows, columns=["section", "field", "value"])
