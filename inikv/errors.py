"""inikv error types and status codes."""

from enum import IntEnum


class Status(IntEnum):
    """Result codes returned by the ``inikv.api`` functions."""

    OK = 0
    FILE_OPEN_FAILED = 1
    SECTION_NOT_FOUND = 2
    KEY_NOT_FOUND = 3
    STORE_NOT_LOADED = 4
    FILE_WRITE_FAILED = 255


class IniKVError(Exception):
    """Base class for all inikv errors."""

    status: Status


class FileOpenError(IniKVError, OSError):
    """Raised when the backing file cannot be opened.

    Attributes:
        path: The path that failed to open (``None`` if no path was set).
    """

    action = "open"

    def __init__(self, path: str | None, reason: str = "") -> None:
        self.path = path
        message = f"Unable to {self.action} file {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileReadError(FileOpenError):
    """Raised by ``load`` when the resource file cannot be read.

    The store keeps whatever it held before the call.
    """

    action = "read"
    status = Status.FILE_OPEN_FAILED


class FileWriteError(FileOpenError):
    """Raised by ``persist`` when the backing file cannot be written.

    A ``set`` or ``delete`` that triggered the write keeps its in-memory
    change unless the store was created with ``rollback_on_failure``.
    """

    action = "write"
    status = Status.FILE_WRITE_FAILED


class NotLoadedError(IniKVError):
    """Raised when a store is read or mutated before a successful load."""

    status = Status.STORE_NOT_LOADED

    def __init__(self) -> None:
        super().__init__("No resource file has been loaded yet")


class NotFoundError(IniKVError, KeyError):
    """Raised when a composite key does not resolve to a value.

    Attributes:
        section: The section part of the composite key.
        key: The key part of the composite key.
    """

    def __init__(self, section: str, key: str, message: str) -> None:
        self.section = section
        self.key = key
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the message
        return str(self.args[0])


class SectionNotFoundError(NotFoundError):
    """Raised when the section of a composite key does not exist."""

    status = Status.SECTION_NOT_FOUND

    def __init__(self, section: str, key: str = "") -> None:
        super().__init__(section, key, f"Section {section!r} not found")


class KeyNotFoundError(NotFoundError):
    """Raised when the section exists but holds no such key."""

    status = Status.KEY_NOT_FOUND

    def __init__(self, section: str, key: str) -> None:
        super().__init__(
            section, key, f"Key {key!r} not found in section {section!r}"
        )
