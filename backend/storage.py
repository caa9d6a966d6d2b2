# backend/storage.py
"""
Hand-off between the form page and the report page.

The record is kept as a JSON document under a single key of a mutable
mapping.  In the app that mapping is ``st.session_state`` (one per browser
tab); tests pass a plain dict.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from backend.errors import MissingRecordError
from backend.schema import PatientRecord

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, state: MutableMapping[str, Any]):
        self._state = state

    def get(self, key: str) -> PatientRecord | None:
        raw = self._state.get(key)
        if raw is None:
            return None
        try:
            return PatientRecord.model_validate_json(raw)
        except ValidationError as err:
            logger.warning("Discarding unreadable record under %r: %s", key, err)
            return None

    def put(self, key: str, record: PatientRecord) -> None:
        self._state[key] = record.model_dump_json(by_alias=True)
        logger.info("Stored record for patient %s under %r", record.patient_id, key)


def load_record(store: SessionStore, key: str) -> PatientRecord:
    """Stored record for ``key``; raises MissingRecordError when there is none."""
    record = store.get(key)
    if record is None:
        raise MissingRecordError(key)
    return record
