import logging
from datetime import date

import streamlit as st

from backend.logging_setup import configure_logging
from backend.schema import DISCHARGE_LOCATIONS, GENDER_OPTIONS, PatientRecord
from backend.settings import LOG_LEVEL, NOTICE_KEY, REPORT_TIME_KEY, STORAGE_KEY
from backend.storage import SessionStore
from backend.validation import FormState, submit, update_field

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

REPORT_PAGE  = "pages/02_patient_report.py"
STATE_KEY    = "intake_form"
REDIRECT_KEY = "intake_go_report"

FIELD_HELP = {
    "subject_id":         "Unique identifier for the patient",
    "patient_id":         "Unique identifier for the patient",
    "patient_name":       "Full name of the patient for identification",
    "age":                "Age is a significant risk factor for cardiovascular disease",
    "gender":             "Gender affects cardiovascular risk patterns",
    "admit_date":         "Enter the date of hospital admission",
    "discharge_date":     "Enter the date of hospital discharge",
    "discharge_location": "Where the patient went on leaving the hospital",
}


def widget_key(field: str) -> str:
    return f"intake_{field}"


# ─────────────────────────── callbacks ───────────────────────────────────
def _on_edit(field: str):
    st.session_state[STATE_KEY] = update_field(
        st.session_state[STATE_KEY], field, st.session_state[widget_key(field)]
    )


def _on_submit():
    state, accepted = submit(st.session_state[STATE_KEY])
    st.session_state[STATE_KEY] = state
    if not accepted:
        st.session_state[NOTICE_KEY] = (
            "**Please correct the errors**  \nFill in all required fields correctly."
        )
        return

    SessionStore(st.session_state).put(STORAGE_KEY, state.record)
    st.session_state.pop(REPORT_TIME_KEY, None)   # new record → new report time
    st.session_state[NOTICE_KEY] = (
        "**Form submitted successfully**  \nRedirecting to report page..."
    )
    st.session_state[REDIRECT_KEY] = True


# ───────────────────────────── state ─────────────────────────────────────
if STATE_KEY not in st.session_state:
    st.session_state[STATE_KEY] = FormState()

if st.session_state.pop(REDIRECT_KEY, False):
    st.switch_page(REPORT_PAGE)

# widget values are dropped when the user leaves the page; restore the draft
for name in PatientRecord.model_fields:
    if widget_key(name) not in st.session_state:
        st.session_state[widget_key(name)] = getattr(st.session_state[STATE_KEY].record, name)

notice = st.session_state.pop(NOTICE_KEY, None)
if notice:
    st.toast(notice, icon="⚠️")

errors = st.session_state[STATE_KEY].errors


def show_error(field: str):
    if errors.get(field):
        st.error(errors[field], icon="⚠️")


# ────────────────────────────── form ─────────────────────────────────────
st.header("Patient Information Form")
st.caption("Please fill in all required fields")

col1, col2 = st.columns(2)
with col1:
    st.text_input("Subject ID", placeholder="Enter subject ID",
                  key=widget_key("subject_id"), help=FIELD_HELP["subject_id"],
                  on_change=_on_edit, args=("subject_id",))
    show_error("subject_id")
with col2:
    st.text_input("Patient ID", placeholder="Enter patient ID",
                  key=widget_key("patient_id"), help=FIELD_HELP["patient_id"],
                  on_change=_on_edit, args=("patient_id",))
    show_error("patient_id")

col1, col2, col3 = st.columns(3)
with col1:
    st.text_input("Patient Name", placeholder="Enter patient name",
                  key=widget_key("patient_name"), help=FIELD_HELP["patient_name"],
                  on_change=_on_edit, args=("patient_name",))
    show_error("patient_name")
with col2:
    st.text_input("Age", placeholder="Enter patient age",
                  key=widget_key("age"), help=FIELD_HELP["age"],
                  on_change=_on_edit, args=("age",))
    show_error("age")
with col3:
    st.selectbox("Gender", ["", *GENDER_OPTIONS],
                 format_func=lambda v: GENDER_OPTIONS.get(v, "Select gender"),
                 key=widget_key("gender"), help=FIELD_HELP["gender"],
                 on_change=_on_edit, args=("gender",))
    show_error("gender")

col1, col2 = st.columns(2)
with col1:
    st.date_input("Admit Date", value=None, min_value=date(1900, 1, 1), format="DD/MM/YYYY",
                  key=widget_key("admit_date"), help=FIELD_HELP["admit_date"],
                  on_change=_on_edit, args=("admit_date",))
    show_error("admit_date")
with col2:
    st.date_input("Discharge Date", value=None, min_value=date(1900, 1, 1), format="DD/MM/YYYY",
                  key=widget_key("discharge_date"), help=FIELD_HELP["discharge_date"],
                  on_change=_on_edit, args=("discharge_date",))
    show_error("discharge_date")

st.selectbox("Discharge Location", ["", *DISCHARGE_LOCATIONS],
             format_func=lambda v: DISCHARGE_LOCATIONS.get(v, "Select the relevant discharge location"),
             key=widget_key("discharge_location"), help=FIELD_HELP["discharge_location"],
             on_change=_on_edit, args=("discharge_location",))
show_error("discharge_location")

st.button("Generate Report", type="primary", key="intake_submit", on_click=_on_submit)
