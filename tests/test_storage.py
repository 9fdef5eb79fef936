import json
import os

import pytest

from expense_ledger.exceptions import PersistenceReadError
from expense_ledger.ledger import ExpenseLedger
from expense_ledger.storage import FileStore, MemoryStore, deserialize_expenses, serialize_expenses


def test_reload_gives_identical_sequence(store, two_expenses):
    two_expenses.add("Unknown thing", 7.77, "Unknown", "2024-02-29")
    reloaded = ExpenseLedger(store)
    assert reloaded.list_expenses() == two_expenses.list_expenses()
    assert reloaded.total() == two_expenses.total()


def test_file_store_round_trip(tmp_path):
    data_dir = tmp_path / "data"
    ledger = ExpenseLedger(FileStore(str(data_dir)))
    ledger.add("Coffee", 4.5, "Food", "2024-01-10")
    ledger.add("Bus", 2.0, "Travel", "2024-01-10")

    assert os.listdir(data_dir) == ["expenses.json"]
    with open(data_dir / "expenses.json", encoding="utf-8") as f:
        assert [d["title"] for d in json.load(f)] == ["Coffee", "Bus"]

    reloaded = ExpenseLedger(FileStore(str(data_dir)))
    assert reloaded.list_expenses() == ledger.list_expenses()


def test_file_store_missing_key(tmp_path):
    assert FileStore(str(tmp_path / "nowhere")).get("expenses") is None


def test_file_store_unreadable_file_is_absent(tmp_path):
    # a directory where the file should be cannot be opened for reading
    os.makedirs(tmp_path / "expenses.json")
    assert FileStore(str(tmp_path)).get("expenses") is None


@pytest.mark.parametrize("key", ["", "../escape", ".hidden"])
def test_file_store_rejects_bad_keys(tmp_path, key):
    with pytest.raises(ValueError):
        FileStore(str(tmp_path)).path_for(key)


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "not json",
        "{}",
        "null",
        "[1, 2]",
        '[{"title": "", "amount": 3, "category": "Food", "date": "2024-01-01"}]',
        '[{"title": "x", "amount": 0, "category": "Food", "date": "2024-01-01"}]',
        '[{"title": "x", "amount": "5", "category": "Food", "date": "2024-01-01"}]',
        '[{"title": "x", "amount": true, "category": "Food", "date": "2024-01-01"}]',
        '[{"title": "x", "amount": 5, "category": null, "date": "2024-01-01"}]',
        '[{"title": "x", "amount": 5, "category": "Food", "date": "soon"}]',
        '[{"title": "x", "amount": 5, "category": "Food"}]',
    ],
)
def test_unusable_stored_value_loads_empty(payload):
    ledger = ExpenseLedger(MemoryStore({"expenses": payload}))
    assert ledger.list_expenses() == []
    assert ledger.total() == 0


def test_payload_without_ids_is_numbered_in_order():
    payload = json.dumps(
        [
            {"title": "Coffee", "amount": 4.5, "category": "Food", "date": "2024-01-10"},
            {"title": "Bus", "amount": 2, "category": "Travel", "date": "2024-01-10"},
        ]
    )
    ledger = ExpenseLedger(MemoryStore({"expenses": payload}))
    assert [(e.id, e.title) for e in ledger.list_expenses()] == [(1, "Coffee"), (2, "Bus")]
    assert ledger.list_expenses()[1].amount == 2.0
    assert ledger.add("Tea", 1.0, "Food", "2024-01-11").id == 3


def test_duplicate_and_invalid_ids_are_renumbered():
    rows = [
        {"id": 7, "title": "a", "amount": 1, "category": "Food", "date": "2024-01-01"},
        {"id": 7, "title": "b", "amount": 1, "category": "Food", "date": "2024-01-01"},
        {"id": -1, "title": "c", "amount": 1, "category": "Food", "date": "2024-01-01"},
        {"id": "x", "title": "d", "amount": 1, "category": "Food", "date": "2024-01-01"},
    ]
    expenses = deserialize_expenses(json.dumps(rows))
    assert [e.id for e in expenses] == [7, 8, 9, 10]


def test_deserialize_raises_on_bad_shape():
    with pytest.raises(PersistenceReadError):
        deserialize_expenses('{"expenses": []}')


def test_serialized_value_is_a_plain_json_array(two_expenses):
    data = json.loads(serialize_expenses(two_expenses.list_expenses()))
    assert data[0] == {"id": 1, "title": "Coffee", "amount": 4.5, "category": "Food", "date": "2024-01-10"}
