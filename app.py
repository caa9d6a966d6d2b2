# app.py  ──────────────────────────────────────────────────────────────────
# Streamlit landing page for the MedReport patient intake & report flow
# -------------------------------------------------------------------------

import streamlit as st

from backend.logging_setup import configure_logging
from backend.settings import APP_TITLE, LOG_LEVEL

configure_logging(LOG_LEVEL)

FORM_PAGE = "pages/01_patient_form.py"

st.set_page_config(page_title=APP_TITLE, layout="centered")
st.title(APP_TITLE)
st.caption("Patient Information Management System")

# ─────────────────────────────── hero ────────────────────────────────────
st.header("Streamline Your Medical Reporting")
st.write(
    "Efficiently collect, process, and generate comprehensive patient reports "
    "with our intuitive medical information system."
)

if st.button("Start New Report", type="primary", key="start_report"):
    st.switch_page(FORM_PAGE)

# ───────────────────────────── features ──────────────────────────────────
st.subheader(f"Why Choose {APP_TITLE}?")
st.write("Built for healthcare professionals who value accuracy and efficiency")

features = [
    (
        "Easy Data Entry",
        "Intuitive form interface with validation ensures accurate patient "
        "data collection with minimal effort.",
    ),
    (
        "Instant Reports",
        "Generate comprehensive, professionally formatted reports instantly "
        "with all patient information organized clearly.",
    ),
    (
        "Smart Analytics",
        "Automated analysis of patient data with intelligent categorization "
        "and risk assessment insights.",
    ),
]
for col, (title, blurb) in zip(st.columns(len(features)), features):
    with col:
        st.markdown(f"**{title}**")
        st.write(blurb)

# ──────────────────────────────── CTA ────────────────────────────────────
st.divider()
st.markdown("### Ready to Improve Your Medical Reporting?")
st.write("Start creating detailed patient reports in minutes, not hours.")
if st.button("Create Patient Report", key="create_report"):
    st.switch_page(FORM_PAGE)
