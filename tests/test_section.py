"""Tests for the Section view."""

from pathlib import Path

import pytest

from inikv import IniStore, KeyNotFoundError, NotLoadedError, Section


@pytest.fixture
def s(tmp_path):
    path = tmp_path / "r.ini"
    path.write_text("[app]\nname = demo\nlog.level = info\n[db]\nhost = h\n")
    st = IniStore()
    st.load(path)
    return st


class TestSectionBasic:
    def test_get(self, s):
        app = s.section("app")
        assert app.get("name") == "demo"
        assert app.get("log.level") == "info"

    def test_get_missing(self, s):
        app = Section(s, "app")
        with pytest.raises(KeyNotFoundError):
            app.get("nope")
        assert app.get("nope", None) is None

    def test_contains(self, s):
        app = s.section("app")
        assert "name" in app
        assert "host" not in app

    def test_get_many(self, s):
        app = s.section("app")
        assert app.get_many("name", "host") == {"name": "demo"}

    def test_keys_and_items(self, s):
        app = s.section("app")
        assert app.keys() == ["log.level", "name"]
        assert app.items() == [("log.level", "info"), ("name", "demo")]
        assert list(app) == ["log.level", "name"]
        assert len(app) == 2

    def test_missing_section_is_empty(self, s):
        cache = s.section("cache")
        assert cache.keys() == []
        assert len(cache) == 0


class TestSectionIsolation:
    def test_two_sections_isolated(self, s):
        s.set("db.name", "other")
        assert s.section("app").get("name") == "demo"
        assert s.section("db").get("name") == "other"


class TestSectionWrite:
    def test_set_goes_through_store(self, s):
        cache = s.section("cache")
        cache.set("ttl", "60")
        assert s.get("cache.ttl") == "60"
        assert "[cache]" in Path(s.path).read_text()

    def test_delete_last_key_removes_section(self, s):
        db = s.section("db")
        db.delete("host")
        assert "db" not in s.sections()
        assert db.keys() == []


class TestSectionValidation:
    def test_dot_in_name(self, s):
        with pytest.raises(ValueError, match="cannot contain"):
            Section(s, "a.b")

    def test_wrong_store_type(self):
        with pytest.raises(TypeError, match="IniStore"):
            Section({}, "app")  # type: ignore

    def test_unloaded_store(self):
        with pytest.raises(NotLoadedError):
            IniStore().section("app").keys()
