"""
Data access layer.

Design rules:
- Views call ONLY functions in this package (via data.service).
- No Streamlit imports here; user-facing messages go through NotificationLog.
- Mock mode swaps the sources, never the parsing or adapter paths.
- No env var reads here (config-only).
"""
