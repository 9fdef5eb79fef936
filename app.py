"""
app.py - minimal entrypoint for Streamlit app

Keep this file tiny so streamlit can import it without side-effects.
Run the app with:
    streamlit run app.py

This module simply delegates to expense_ledger.ui.dashboard.main().
"""
import os

import streamlit as _st

_SETTING_KEYS = (
    "EXPENSE_LEDGER_DATA_DIR",
    "EXPENSE_LEDGER_STORAGE_KEY",
    "EXPENSE_LEDGER_CURRENCY",
    "EXPENSE_LEDGER_DELETE_DELAY",
    "EXPENSE_LEDGER_LOG_LEVEL",
)


def _export_secrets():
    """Copy Streamlit secrets into env vars so Settings.from_env sees them."""
    try:
        secrets = dict(_st.secrets)
    except FileNotFoundError:
        # no secrets.toml: plain environment variables only
        return
    for key in _SETTING_KEYS:
        if secrets.get(key) and key not in os.environ:
            os.environ[key] = str(secrets[key])


_export_secrets()

from expense_ledger.ui import dashboard  # noqa: E402


def main():
    dashboard.main()


if __name__ == "__main__":
    main()
