# backend/settings.py
"""
Central place for app configuration.  Page scripts just do

    from backend.settings import STORAGE_KEY, LOG_LEVEL

and never worry about where the values came from.
"""
from __future__ import annotations

import os

import streamlit as st


# ------------------------------------------------------------------ lookup
# 1️⃣  Primary source: Streamlit secrets (.streamlit/secrets.toml)
# 2️⃣  Fallback:       regular environment variables for local runs
# 3️⃣  Default
def get_setting(name: str, default: str) -> str:
    try:
        value = st.secrets.get(name)
    except FileNotFoundError:       # no secrets.toml at all
        value = None
    if value is None:
        value = os.getenv(name)
    return default if value is None else str(value)


STORAGE_KEY : str = get_setting("STORAGE_KEY", "patientData")
LOG_LEVEL   : str = get_setting("LOG_LEVEL",   "INFO")
APP_TITLE   : str = get_setting("APP_TITLE",   "MedReport")

# ------------------------------------------------------------------ session keys
# shared by the form and report pages
NOTICE_KEY      : str = "intake_notice"          # toast queued for the next page
REPORT_TIME_KEY : str = "report_generated_at"    # timestamp of the report on screen
