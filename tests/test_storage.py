from datetime import date

from library_app.storage import JsonStore, StorageStatus
from library_app.transaction_log import TransactionLog


def test_json_store_round_trip(tmp_path):
    store = JsonStore(str(tmp_path / "books.json"))
    payload = {"B1": {"id": "B1", "title": "Çalıkuşu", "author": "Reşat Nuri", "total": 1, "available": 1}}

    assert store.save(payload).ok
    result = store.load()
    assert result.status is StorageStatus.OK
    assert result.data == payload

def test_json_store_missing_file(tmp_path):
    result = JsonStore(str(tmp_path / "nope.json")).load()
    assert result.status is StorageStatus.MISSING
    assert result.data is None
    assert not result.ok

def test_json_store_directory_instead_of_file(tmp_path):
    result = JsonStore(str(tmp_path)).load()
    assert result.status is StorageStatus.IO_ERROR

def test_json_store_binary_garbage(tmp_path):
    path = tmp_path / "books.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert JsonStore(str(path)).load().status is StorageStatus.CORRUPT

def test_storage_result_to_dict(tmp_path):
    result = JsonStore(str(tmp_path / "nope.json")).load()
    assert result.to_dict()["status"] == "missing"


def test_transaction_log_appends_dated_lines(tmp_path):
    path = tmp_path / "transactions.log"
    log = TransactionLog(str(path), today=lambda: date(2024, 3, 9))

    assert log.write("first").ok
    assert log.write("second").ok
    assert path.read_text(encoding="utf-8") == "2024-03-09 - first\n2024-03-09 - second\n"

def test_transaction_log_keeps_existing_content(tmp_path):
    path = tmp_path / "transactions.log"
    path.write_text("2020-01-01 - old\n", encoding="utf-8")

    TransactionLog(str(path), today=lambda: date(2024, 3, 9)).write("new")
    assert path.read_text(encoding="utf-8").splitlines() == ["2020-01-01 - old", "2024-03-09 - new"]

def test_transaction_log_failure_is_swallowed(tmp_path):
    log = TransactionLog(str(tmp_path / "missing" / "transactions.log"))
    result = log.write("lost")
    assert result.status is StorageStatus.IO_ERROR

def test_json_store_failed_save_leaves_file_intact(tmp_path):
    path = tmp_path / "members.json"
    store = JsonStore(str(path))
    store.save({"M1": {"id": "M1", "name": "Alice", "issued_books": []}})
    before = path.read_text(encoding="utf-8")

    result = store.save({"M2": {"id": "M2", "name": "bad\udcff", "issued_books": []}})
    assert result.status is StorageStatus.IO_ERROR
    assert path.read_text(encoding="utf-8") == before
    assert not (tmp_path / "members.json.tmp").exists()
