"""Tests for inikv error types."""

from inikv import (
    FileOpenError,
    FileReadError,
    FileWriteError,
    IniKVError,
    KeyNotFoundError,
    NotFoundError,
    NotLoadedError,
    SectionNotFoundError,
    Status,
)


class TestErrorHierarchy:
    def test_not_found_is_key_error(self):
        err = KeyNotFoundError("db", "user")
        assert isinstance(err, NotFoundError)
        assert isinstance(err, KeyError)
        assert isinstance(err, IniKVError)

    def test_file_errors_are_os_errors(self):
        assert isinstance(FileReadError("x"), OSError)
        assert isinstance(FileWriteError("x"), FileOpenError)

    def test_statuses(self):
        assert FileReadError("x").status == Status.FILE_OPEN_FAILED
        assert FileWriteError("x").status == Status.FILE_WRITE_FAILED
        assert SectionNotFoundError("s").status == Status.SECTION_NOT_FOUND
        assert KeyNotFoundError("s", "k").status == Status.KEY_NOT_FOUND
        assert NotLoadedError().status == Status.STORE_NOT_LOADED


class TestErrorMessages:
    def test_key_not_found(self):
        assert str(KeyNotFoundError("db", "user")) == "Key 'user' not found in section 'db'"

    def test_section_not_found(self):
        assert str(SectionNotFoundError("db")) == "Section 'db' not found"

    def test_file_errors(self):
        assert str(FileReadError("a.ini", "gone")) == "Unable to read file 'a.ini': gone"
        assert str(FileWriteError(None)) == "Unable to write file None"
