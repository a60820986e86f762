"""IniStore: a section/key=value file loaded into memory, and its factory."""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterator, MutableMapping
from typing import TYPE_CHECKING, Any

from .codec import Sections, dumps, parse
from .errors import (
    FileReadError,
    FileWriteError,
    KeyNotFoundError,
    NotLoadedError,
    SectionNotFoundError,
)
from .text import split_header, trim

if TYPE_CHECKING:
    from .section import Section

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class IniStore(MutableMapping[str, str]):
    """In-memory view of a resource file, written back on every change.

    Values are addressed by composite keys of the form ``section.key``;
    only the first dot separates the two, so keys may contain dots.
    ``set()`` and ``delete()`` persist the whole store to the file it was
    loaded from. Every public operation holds the store's lock.

    Implements ``MutableMapping[str, str]`` over composite keys. Sections
    whose names contain a dot are left out of iteration and ``len()``,
    since no composite key reaches them; ``sections()`` and ``as_dict()``
    still list them.

    Args:
        encoding: Text encoding of the backing file.
        rollback_on_failure: Undo the in-memory change of a ``set()`` or
            ``delete()`` whose write to disk failed. By default the change
            is kept and only the failure is reported.
    """

    def __init__(
        self,
        *,
        encoding: str = "utf-8",
        rollback_on_failure: bool = False,
    ) -> None:
        self.encoding = encoding
        self.rollback_on_failure = rollback_on_failure
        self._path: str | None = None
        self._sections: Sections = {}
        self._lock = threading.RLock()

    @property
    def path(self) -> str | None:
        """Backing file of the last successful load."""
        return self._path

    @property
    def loaded(self) -> bool:
        return bool(self._sections)

    # -- Loading --

    def load(self, path: str | os.PathLike[str]) -> None:
        """Replace the store's contents with those of ``path``.

        Raises ``FileReadError`` if the file cannot be read, in which
        case the store is left as it was.
        """
        processed = trim(os.fspath(path))
        with self._lock:
            try:
                with open(processed, encoding=self.encoding) as fh:
                    sections = parse(fh)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Unable to open file %s: %s", processed, e)
                raise FileReadError(processed, str(e)) from e

            self._path = processed
            self._sections = sections
            logger.info("File %s successfully loaded", processed)

    def reset(self) -> None:
        """Forget the loaded contents and backing path."""
        with self._lock:
            self._path = None
            self._sections = {}

    # -- Read operations --

    def get(self, key: str, default: Any = _MISSING) -> Any:  # type: ignore[override]
        """Get the value stored under a composite key.

        Raises ``SectionNotFoundError`` or ``KeyNotFoundError`` on a miss,
        unless ``default`` is given.
        """
        with self._lock:
            section, name = self._resolve(key)
            try:
                return self._lookup(section, name)
            except (SectionNotFoundError, KeyNotFoundError):
                if default is _MISSING:
                    raise
                return default

    def get_many(self, *keys: str) -> dict[str, str]:
        """Get multiple values, returning only keys that exist."""
        with self._lock:
            result: dict[str, str] = {}
            for key in keys:
                value = self.get(key, None)
                if value is not None:
                    result[key] = value
            return result

    def entries(self, section: str) -> dict[str, str]:
        """A copy of one section's key/value pairs."""
        with self._lock:
            self._require_loaded()
            try:
                return dict(self._sections[section])
            except KeyError:
                raise SectionNotFoundError(section) from None

    def sections(self) -> list[str]:
        """Section names in sorted order."""
        with self._lock:
            return sorted(self._sections)

    def section(self, name: str) -> Section:
        """A view over the keys of one section."""
        from .section import Section

        return Section(self, name)

    def as_dict(self) -> dict[str, dict[str, str]]:
        """A deep copy of the loaded sections."""
        with self._lock:
            return {name: dict(entries) for name, entries in self._sections.items()}

    # -- Write operations --

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under a composite key and persist.

        The section is created when missing. Raises ``ValueError`` for
        text that would not read back as the same entry.
        """
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        with self._lock:
            section, name = self._resolve(key)
            _check_entry(section, name, value)
            backup = self._backup()
            self._sections.setdefault(section, {})[name] = value
            self._persist_or_restore(backup)

    def delete(self, key: str) -> None:
        """Remove a composite key and persist.

        A section left without keys is removed with it.
        """
        with self._lock:
            section, name = self._resolve(key)
            self._lookup(section, name)
            backup = self._backup()
            entries = self._sections[section]
            del entries[name]
            if not entries:
                del self._sections[section]
            self._persist_or_restore(backup)

    def persist(self) -> None:
        """Write every section to the backing file, replacing its content.

        Raises ``FileWriteError`` if the file cannot be written.
        """
        with self._lock:
            if self._path is None:
                logger.error("Unable to write: no resource file loaded")
                raise FileWriteError(None, "no resource file loaded")
            text = dumps(self._sections)
            try:
                with open(self._path, "w", encoding=self.encoding) as fh:
                    fh.write(text)
            except OSError as e:
                logger.error("Unable to open file %s for writing: %s", self._path, e)
                raise FileWriteError(self._path, str(e)) from e
            logger.debug("Wrote %d sections to %s", len(self._sections), self._path)

    # -- MutableMapping --

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.set(key, value)

    def __delitem__(self, key: str) -> None:
        self.delete(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        with self._lock:
            if not self.loaded:
                return False
            section, name = split_header(trim(key))
            return name in self._sections.get(section, {})

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            keys = [
                f"{section}.{name}"
                for section in self._addressable()
                for name in sorted(self._sections[section])
            ]
        return iter(keys)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(self._sections[section]) for section in self._addressable())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, sections={len(self._sections)})"

    # -- Internals --

    def _require_loaded(self) -> None:
        if not self._sections:
            logger.error("No resource file has been loaded yet")
            raise NotLoadedError()

    def _resolve(self, key: str) -> tuple[str, str]:
        self._require_loaded()
        return split_header(trim(key))

    def _addressable(self) -> list[str]:
        # dotted section names cannot round-trip through a composite key
        return sorted(s for s in self._sections if "." not in s)

    def _lookup(self, section: str, name: str) -> str:
        entries = self._sections.get(section)
        if entries is None:
            logger.debug("Section %r not found", section)
            raise SectionNotFoundError(section, name)
        if name not in entries:
            logger.debug("Key %r not found in section %r", name, section)
            raise KeyNotFoundError(section, name)
        return entries[name]

    def _backup(self) -> Sections | None:
        if not self.rollback_on_failure:
            return None
        return {name: dict(entries) for name, entries in self._sections.items()}

    def _persist_or_restore(self, backup: Sections | None) -> None:
        try:
            self.persist()
        except FileWriteError:
            if backup is not None:
                self._sections = backup
                logger.warning("Rolled back in-memory change after failed write")
            raise


def _check_entry(section: str, name: str, value: str) -> None:
    if "\n" in section or any(c in section for c in "=[]"):
        raise ValueError(f"Invalid section name {section!r}")
    if "\n" in name or "=" in name or name.startswith((";", "[")):
        raise ValueError(f"Invalid key {name!r}")
    if "\n" in value:
        raise ValueError("Values cannot contain newlines")


def store(
    path: str | os.PathLike[str] | None = None,
    *,
    encoding: str = "utf-8",
    rollback_on_failure: bool = False,
) -> IniStore:
    """Create an IniStore, loading ``path`` when given.

    Args:
        path: Resource file to load. Raises ``FileReadError`` if it
            cannot be read.
        encoding: Text encoding of the backing file.
        rollback_on_failure: Undo in-memory changes whose write failed.

    Returns:
        An ``IniStore``, loaded if ``path`` was given.
    """
    result = IniStore(encoding=encoding, rollback_on_failure=rollback_on_failure)
    if path is not None:
        result.load(path)
    return result
