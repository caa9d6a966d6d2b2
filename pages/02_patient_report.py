import logging
from datetime import datetime

import streamlit as st

from backend.errors import MissingRecordError
from backend.logging_setup import configure_logging
from backend.report import derive, report_table
from backend.settings import LOG_LEVEL, NOTICE_KEY, REPORT_TIME_KEY, STORAGE_KEY
from backend.storage import SessionStore, load_record

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

FORM_PAGE = "pages/01_patient_form.py"

LOCATION_COLORS = {
    "home":             "green",
    "nursing-home":     "orange",
    "rehabilitation":   "blue",
    "another-hospital": "orange",
    "deceased":         "red",
}
STATUS_COLORS = {"Successful": "green", "Critical": "red", "Transfer": "orange"}

try:
    record = load_record(SessionStore(st.session_state), STORAGE_KEY)
except MissingRecordError as err:
    logger.info("%s; sending user back to the form", err)
    st.switch_page(FORM_PAGE)

notice = st.session_state.pop(NOTICE_KEY, None)
if notice:
    st.toast(notice, icon="✅")

# fixed across reruns; taken afresh each time the report is opened
generated_at = st.session_state.setdefault(REPORT_TIME_KEY, datetime.now())
view = derive(record, generated_at)

if st.button("← Back to Form", key="report_back"):
    st.session_state.pop(REPORT_TIME_KEY, None)
    st.switch_page(FORM_PAGE)

# ───────────────────────────── header ────────────────────────────────────
st.title("Patient Medical Report")
st.caption(view.generated_on)

table = report_table(view)

st.subheader("Patient Information")
st.table(table[table.section == "Patient information"][["field", "value"]].set_index("field"))

st.subheader("Hospital Stay Information")
st.table(table[table.section == "Hospital stay"][["field", "value"]].set_index("field"))
color = LOCATION_COLORS.get(record.discharge_location, "gray")
st.markdown(f"Discharge location: :{color}[**{view.discharge_location_label}**]")

# ───────────────────────────── summary ───────────────────────────────────
st.subheader("Report Summary")
c1, c2, c3 = st.columns(3)
c1.metric("Age Category", view.age_category)
c2.metric("Stay Duration", view.stay_category)
c3.metric("Discharge Status", view.discharge_status)
st.markdown(
    f"Outcome: :{STATUS_COLORS[view.discharge_status]}[{view.discharge_status}]"
)

st.divider()
st.caption("This report was automatically generated from the patient information form.")
st.caption(f"Report ID: {view.report_id}")
