"""Tests for the inikv.store() factory function."""

import pytest

from inikv import FileReadError, IniStore, store


class TestStoreFactory:
    def test_default_returns_unloaded(self):
        s = store()
        assert isinstance(s, IniStore)
        assert not s.loaded
        assert s.path is None

    def test_loads_path(self, tmp_path):
        path = tmp_path / "r.ini"
        path.write_text("[s]\nk = v\n")
        s = store(path)
        assert s.get("s.k") == "v"

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileReadError):
            store(tmp_path / "missing.ini")

    def test_options(self):
        s = store(encoding="latin-1", rollback_on_failure=True)
        assert s.encoding == "latin-1"
        assert s.rollback_on_failure

    def test_independent_instances(self, tmp_path):
        a_path = tmp_path / "a.ini"
        b_path = tmp_path / "b.ini"
        a_path.write_text("[s]\nk = a\n")
        b_path.write_text("[s]\nk = b\n")
        a, b = store(a_path), store(b_path)
        a.set("s.k", "changed")
        assert b.get("s.k") == "b"
        assert b_path.read_text() == "[s]\nk = b\n"
