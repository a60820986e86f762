"""Section: single-section view over an IniStore."""

from __future__ import annotations

from typing import Any, Iterator

from .errors import SectionNotFoundError
from .store import _MISSING, IniStore


class Section:
    """A view over the keys of one section of an IniStore.

    Keys are addressed as ``name.key`` on the parent store, so every
    write goes through the store and is persisted immediately.

    Args:
        store: The IniStore to wrap.
        name: The section name (must not contain ``.``).
    """

    def __init__(self, store: IniStore, name: str) -> None:
        if "." in name:
            raise ValueError("Section names cannot contain '.'")
        if not isinstance(store, IniStore):
            raise TypeError(
                f"Section can only wrap IniStore, not {type(store).__name__}"
            )
        self._store = store
        self.name = name

    @property
    def store(self) -> IniStore:
        return self._store

    def _composite(self, key: str) -> str:
        return f"{self.name}.{key}"

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Get a value from this section."""
        return self._store.get(self._composite(key), default)

    def get_many(self, *keys: str) -> dict[str, str]:
        """Get multiple values from this section."""
        composite = {self._composite(k): k for k in keys}
        result = self._store.get_many(*composite.keys())
        return {composite[ck]: v for ck, v in result.items()}

    def keys(self) -> list[str]:
        """Keys of this section in sorted order (empty if it does not exist)."""
        return sorted(self._entries())

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._entries().items())

    def _entries(self) -> dict[str, str]:
        try:
            return self._store.entries(self.name)
        except SectionNotFoundError:
            return {}

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._composite(key) in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries())

    # -- Write operations --

    def set(self, key: str, value: str) -> None:
        """Set a key in this section and persist."""
        self._store.set(self._composite(key), value)

    def delete(self, key: str) -> None:
        """Delete a key from this section and persist."""
        self._store.delete(self._composite(key))

    def __repr__(self) -> str:
        return f"Section({self.name!r})"
