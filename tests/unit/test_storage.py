"""Unit tests for the form → report storage hand-off."""

import json
import logging
from datetime import date

import pytest

from backend.errors import MissingRecordError
from backend.schema import PatientRecord
from backend.storage import SessionStore, load_record

KEY = "patientData"


class TestSessionStore:
    """Test suite for SessionStore get/put."""

    def test_get_missing_key(self, session_state):
        assert SessionStore(session_state).get(KEY) is None

    def test_round_trip(self, session_state, complete_record):
        """Test a stored record reads back with identical values and dates."""
        # Arrange
        store = SessionStore(session_state)

        # Act
        store.put(KEY, complete_record)
        loaded = store.get(KEY)

        # Assert
        assert loaded == complete_record
        assert loaded.admit_date == date(2024, 1, 1)
        assert loaded.discharge_date == date(2024, 1, 4)

    def test_stored_document_uses_camel_case_and_iso_dates(self, session_state, complete_record):
        SessionStore(session_state).put(KEY, complete_record)

        doc = json.loads(session_state[KEY])

        assert doc["subjectId"] == "SUBJ-001"
        assert doc["patientId"] == "P123"
        assert doc["admitDate"] == "2024-01-01"
        assert doc["dischargeDate"] == "2024-01-04"
        assert doc["dischargeLocation"] == "home"

    def test_put_overwrites(self, session_state, complete_record):
        store = SessionStore(session_state)
        store.put(KEY, complete_record)

        store.put(KEY, complete_record.model_copy(update={"patient_id": "P999"}))

        assert store.get(KEY).patient_id == "P999"

    def test_reads_document_written_elsewhere(self, session_state):
        session_state[KEY] = json.dumps({
            "subjectId": "S1",
            "patientId": "P1",
            "patientName": "Sam",
            "age": "70",
            "gender": "male",
            "admitDate": "2024-06-01",
            "dischargeDate": "2024-06-10",
            "dischargeLocation": "rehabilitation",
        })

        record = SessionStore(session_state).get(KEY)

        assert record == PatientRecord(
            subject_id="S1", patient_id="P1", patient_name="Sam", age="70", gender="male",
            admit_date=date(2024, 6, 1), discharge_date=date(2024, 6, 10),
            discharge_location="rehabilitation",
        )

    def test_unreadable_document_treated_as_missing(self, session_state, caplog):
        session_state[KEY] = "{not json"

        with caplog.at_level(logging.WARNING, logger="backend.storage"):
            assert SessionStore(session_state).get(KEY) is None

        assert "Discarding unreadable record" in caplog.text


class TestLoadRecord:
    def test_load_record_present(self, session_state, complete_record):
        store = SessionStore(session_state)
        store.put(KEY, complete_record)

        assert load_record(store, KEY) == complete_record

    def test_load_record_missing(self, session_state):
        with pytest.raises(MissingRecordError) as exc_info:
            load_record(SessionStore(session_state), KEY)

        assert exc_info.value.key == KEY
