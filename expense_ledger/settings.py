"""
settings.py - runtime configuration read from environment variables

app.py copies Streamlit secrets into os.environ before this module is used,
so the same variables work locally (shell env) and on Streamlit Cloud.

Variables:
  - EXPENSE_LEDGER_DATA_DIR: directory holding the persisted expense list
  - EXPENSE_LEDGER_STORAGE_KEY: key under which the list is stored
  - EXPENSE_LEDGER_CURRENCY: currency symbol used for display only
  - EXPENSE_LEDGER_DELETE_DELAY: seconds a deleted row stays visible as "removing"
  - EXPENSE_LEDGER_LOG_LEVEL: logging level name
"""

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from expense_ledger.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")
DEFAULT_STORAGE_KEY = "expenses"
DEFAULT_CURRENCY = "₹"
DEFAULT_DELETE_DELAY = 0.3
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    data_dir: str = DEFAULT_DATA_DIR
    storage_key: str = DEFAULT_STORAGE_KEY
    currency_symbol: str = DEFAULT_CURRENCY
    delete_delay: float = DEFAULT_DELETE_DELAY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build Settings from environment variables.
        Blank values keep the default; a malformed delay is logged and ignored.
        """
        env = os.environ if environ is None else environ

        def _get(name: str, default: str) -> str:
            return (env.get(name) or "").strip() or default

        delay_raw = _get("EXPENSE_LEDGER_DELETE_DELAY", str(DEFAULT_DELETE_DELAY))
        try:
            delete_delay = float(delay_raw)
            if not math.isfinite(delete_delay) or delete_delay < 0:
                raise ValueError(delay_raw)
        except ValueError:
            logger.warning("Ignoring invalid EXPENSE_LEDGER_DELETE_DELAY=%r", delay_raw)
            delete_delay = DEFAULT_DELETE_DELAY

        return cls(
            data_dir=_get("EXPENSE_LEDGER_DATA_DIR", DEFAULT_DATA_DIR),
            storage_key=_get("EXPENSE_LEDGER_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            currency_symbol=_get("EXPENSE_LEDGER_CURRENCY", DEFAULT_CURRENCY),
            delete_delay=delete_delay,
            log_level=_get("EXPENSE_LEDGER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
