import pytest

from prefutils.errors import PrefStoreError
from prefutils.storage.file_backend import FilePrefStore
from prefutils.storage.serializer import YAMLSerializer
from prefutils.typed import int_list


def test_save_load_delete_and_keys(tmp_path):
    b = FilePrefStore(tmp_path / "prefs")
    assert b.file_path == tmp_path / "prefs.json"

    b.set_int("Level", 3)
    b.set_string("Name", "ada")
    assert b.file_path.exists()

    other = FilePrefStore(tmp_path / "prefs")
    assert other.get_int("Level") == 3
    assert list(other.keys()) == ["Level", "Name"]

    b.delete_key("Level")
    b.delete_key("Missing")
    assert FilePrefStore(tmp_path / "prefs").has_key("Level") is False


def test_missing_file_is_empty_store(tmp_path):
    b = FilePrefStore(tmp_path / "sub" / "prefs.json")
    assert list(b.keys()) == []
    assert b.get_float("x") == 0.0
    assert not b.file_path.exists()


def test_explicit_suffix_is_kept(tmp_path):
    b = FilePrefStore(tmp_path / "prefs.txt", serializer=YAMLSerializer())
    assert b.file_path == tmp_path / "prefs.txt"


def test_manual_save(tmp_path):
    b = FilePrefStore(tmp_path / "prefs", autosave=False)
    b.set_int("k", 1)
    assert not b.file_path.exists()
    b.save()
    assert FilePrefStore(tmp_path / "prefs").get_int("k") == 1
    # no temp files are left behind
    assert [p.name for p in tmp_path.iterdir()] == ["prefs.json"]


def test_reload_discards_unsaved_changes(tmp_path):
    b = FilePrefStore(tmp_path / "prefs", autosave=False)
    b.set_int("k", 1)
    b.save()
    b.set_int("k", 2)
    b.reload()
    assert b.get_int("k") == 1


def test_delete_all(tmp_path):
    b = FilePrefStore(tmp_path / "prefs")
    b.set_int("a", 1)
    b.delete_all()
    assert list(FilePrefStore(tmp_path / "prefs").keys()) == []


def test_corrupt_file_raises(tmp_path):
    p = tmp_path / "prefs.json"
    p.write_bytes(b"{not json")
    with pytest.raises(PrefStoreError):
        FilePrefStore(p).get_int("a")
    p.write_bytes(b"[1, 2]")
    with pytest.raises(PrefStoreError):
        FilePrefStore(p).get_int("a")


def test_list_persists_across_instances(tmp_path):
    lst = int_list(FilePrefStore(tmp_path / "prefs"), "Scores")
    lst.extend([10, 20, 30])
    lst.insert(1, 15)
    lst.remove_at(0)

    reopened = int_list(FilePrefStore(tmp_path / "prefs"), "Scores")
    assert list(reopened) == [15, 20, 30]
