# backend/errors.py
"""
Everything that can go wrong between the intake form and the report.
All of these are user-recoverable: fix the field, or go back to the form.
"""

from __future__ import annotations

INVALID_AGE_MESSAGE = "Please enter a valid age"


class IntakeError(Exception):
    """Base class for intake / report errors."""


class MissingFieldError(IntakeError):
    def __init__(self, field: str, label: str | None = None):
        self.field = field
        self.label = label or field.replace("_", " ").capitalize()
        super().__init__(f"{self.label} is required")


class InvalidAgeError(IntakeError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(INVALID_AGE_MESSAGE)


class MissingRecordError(IntakeError):
    """Report requested but nothing usable is stored under ``key``."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No patient record stored under {key!r}")
