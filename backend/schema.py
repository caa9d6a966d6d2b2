# backend/schema.py
"""Patient intake record shared by the form page, storage and the report."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

# ── vocabularies (stored value → display label) ───────────────────────────
GENDER_OPTIONS: dict[str, str] = {
    "male":   "Male",
    "female": "Female",
    "other":  "Other",
}

DISCHARGE_LOCATIONS: dict[str, str] = {
    "home":             "Home",
    "nursing-home":     "Nursing Home",
    "rehabilitation":   "Rehabilitation Center",
    "another-hospital": "Another Hospital",
    "deceased":         "Deceased",
}

# labels used in "<label> is required" messages, in form order
FIELD_LABELS: dict[str, str] = {
    "subject_id":         "Subject ID",
    "patient_id":         "Patient ID",
    "patient_name":       "Patient name",
    "age":                "Age",
    "gender":             "Gender",
    "admit_date":         "Admit date",
    "discharge_date":     "Discharge date",
    "discharge_location": "Discharge location",
}

DATE_FIELDS = ("admit_date", "discharge_date")


class PatientRecord(BaseModel):
    """
    One patient's intake data.  Every field starts empty so the model doubles
    as the draft the form edits; ``validate()`` decides when it is complete.

    Aliases are the camelCase keys used in the stored JSON document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject_id:         str         = Field("",   alias="subjectId")
    patient_id:         str         = Field("",   alias="patientId")
    patient_name:       str         = Field("",   alias="patientName")
    age:                str         = Field("",   alias="age")
    gender:             str         = Field("",   alias="gender")
    admit_date:         date | None = Field(None, alias="admitDate")
    discharge_date:     date | None = Field(None, alias="dischargeDate")
    discharge_location: str         = Field("",   alias="dischargeLocation")
