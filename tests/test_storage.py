# tests/test_storage.py
from ulush_app.storage import JsonFileStorage, MemoryStorage


def test_json_file_round_trip(tmp_path):
    s = JsonFileStorage(tmp_path / "data")
    value = [{"id": "1", "name": "Non", "qty": 20, "price": 10, "category": "O'zbekiston"}]
    assert s.save("app.products", value).ok
    assert (tmp_path / "data" / "app.products.json").exists()
    res = s.load("app.products", [])
    assert res.ok and res.value == value


def test_missing_key_returns_fallback_without_error(tmp_path):
    res = JsonFileStorage(tmp_path).load("nope", ["x"])
    assert res.ok and res.value == ["x"]


def test_unparsable_returns_fallback_with_error(tmp_path):
    s = JsonFileStorage(tmp_path)
    s.path_for("k").write_text("[1, 2", encoding="utf-8")
    res = s.load("k", "fallback")
    assert res.value == "fallback"
    assert not res.ok


def test_write_failure_is_returned_not_raised(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    res = JsonFileStorage(blocker / "sub").save("k", [1])
    assert not res.ok
    assert res.value == [1]


def test_memory_storage_keeps_text():
    s = MemoryStorage()
    s.save("k", ["Xitoy", "O'zbekiston"])
    assert s.data["k"].startswith("[")
    assert s.writes == 1
    assert s.load("k", None).value == ["Xitoy", "O'zbekiston"]
