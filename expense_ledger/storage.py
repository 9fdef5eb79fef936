"""
storage.py - key/value persistence and the expense list codec

The ledger treats storage as an opaque string store: get(key) returns the
stored text or None, set(key, text) replaces it. Two stores are provided:

 - FileStore: one JSON file per key inside a data directory, written atomically
 - MemoryStore: dict-backed store used by tests and throwaway sessions

The persisted value is a JSON array of expense dicts (see Expense.to_dict).
Arrays written before ids existed ({title, amount, category, date} only) are
still accepted: missing, invalid or duplicate ids are renumbered on load.
"""

import datetime
import json
import math
import os
import shutil
import tempfile
from typing import Any, Dict, Iterable, List, Optional, Protocol

from expense_ledger.exceptions import PersistenceReadError
from expense_ledger.logging_utils import get_logger
from expense_ledger.models import Expense

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-memory KeyValueStore."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileStore:
    """
    KeyValueStore backed by files: the value for `key` lives in
    <directory>/<key>.json. The directory is created on first write.
    """

    def __init__(self, directory: str):
        self.directory = os.path.abspath(directory)

    def path_for(self, key: str) -> str:
        if not key or os.sep in key or (os.altsep and os.altsep in key) or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read %s; treating it as empty", path, exc_info=True)
            return None

    def set(self, key: str, value: str) -> None:
        """Write atomically: temp file in the same directory, fsync, then move."""
        target = self.path_for(key)
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f"tmp_{key}_", dir=self.directory, text=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            shutil.move(tmp_path, target)
        except Exception:
            logger.exception("Failed to write %s", target)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def serialize_expenses(expenses: Iterable[Expense]) -> str:
    return json.dumps([e.to_dict() for e in expenses], ensure_ascii=False, indent=2)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_record(index: int, raw: Any) -> Dict[str, Any]:
    if not isinstance(raw, dict):
        raise PersistenceReadError(f"entry {index} is not an object")
    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise PersistenceReadError(f"entry {index} has no title")
    amount = raw.get("amount")
    if not _is_number(amount) or not math.isfinite(amount) or amount <= 0:
        raise PersistenceReadError(f"entry {index} has an invalid amount: {amount!r}")
    category = raw.get("category")
    if not isinstance(category, str):
        raise PersistenceReadError(f"entry {index} has an invalid category: {category!r}")
    date = raw.get("date")
    try:
        datetime.date.fromisoformat(date)
    except (TypeError, ValueError):
        raise PersistenceReadError(f"entry {index} has an invalid date: {date!r}") from None
    return {
        "id": raw.get("id"),
        "title": title,
        "amount": float(amount),
        "category": category,
        "date": date,
    }


def deserialize_expenses(text: str) -> List[Expense]:
    """
    Decode a persisted expense array. Raises PersistenceReadError when the
    text is not JSON or any entry does not have the expected shape.
    Ids are kept when they are positive, unique integers; the others are
    renumbered after the highest kept id, in list order.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise PersistenceReadError(f"stored expenses are not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise PersistenceReadError("stored expenses are not a list")

    records = [_check_record(i, raw) for i, raw in enumerate(data)]

    seen = set()
    for rec in records:
        rid = rec["id"]
        if isinstance(rid, int) and not isinstance(rid, bool) and rid > 0 and rid not in seen:
            seen.add(rid)
        else:
            rec["id"] = None
    next_id = max(seen, default=0) + 1
    for rec in records:
        if rec["id"] is None:
            rec["id"] = next_id
            next_id += 1
    return [Expense.from_dict(rec) for rec in records]
