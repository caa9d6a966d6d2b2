"""
Shared pytest configuration and fixtures.

This module provides fixtures used by both the unit tests (backend package)
and the integration tests (Streamlit page scripts).
"""

from datetime import date
from pathlib import Path

import pytest

from backend.schema import PatientRecord


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory (where ``app.py`` lives)."""
    return Path(__file__).parent.parent


@pytest.fixture
def complete_record() -> PatientRecord:
    """A fully filled, in-range patient record."""
    return PatientRecord(
        subject_id="SUBJ-001",
        patient_id="P123",
        patient_name="Jane Doe",
        age="42",
        gender="female",
        admit_date=date(2024, 1, 1),
        discharge_date=date(2024, 1, 4),
        discharge_location="home",
    )


@pytest.fixture
def session_state() -> dict:
    """Plain dict standing in for ``st.session_state``."""
    return {}
