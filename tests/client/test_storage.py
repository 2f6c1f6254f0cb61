from __future__ import annotations

from employee_records.client.storage import LocalStorage


def test_session_flag_survives_new_instance(tmp_path):
    path = tmp_path / "state" / "local_storage.json"
    LocalStorage(path).set_logged_in()

    assert LocalStorage(path).is_logged_in() is True


def test_clear_session_removes_flag(tmp_path):
    storage = LocalStorage(tmp_path / "ls.json")
    storage.set_logged_in()
    storage.set_item("other", "kept")

    storage.clear_session()

    assert storage.is_logged_in() is False
    assert storage.get_item("isLoggedIn") is None
    assert storage.get_item("other") == "kept"


def test_missing_or_corrupt_file_reads_as_empty(tmp_path):
    path = tmp_path / "ls.json"
    assert LocalStorage(path).is_logged_in() is False

    path.write_text("{not json", encoding="utf-8")

    assert LocalStorage(path).is_logged_in() is False
