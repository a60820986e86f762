"""Status-code functions over a process-wide default store.

Each function returns a ``Status`` instead of raising an ``IniKVError``.
Misuse is not a status: ``set_value`` raises ``TypeError`` for a non-str
value and ``ValueError`` for text that cannot be written as an entry.
Pass ``store=`` to act on a specific ``IniStore`` rather than the
default one.
"""

from __future__ import annotations

import os
from typing import Callable, TypeVar

from .errors import IniKVError, Status
from .store import IniStore

T = TypeVar("T")

_default = IniStore()


def default_store() -> IniStore:
    """The store used when no ``store`` argument is given."""
    return _default


def reset() -> None:
    """Return the default store to its unloaded state."""
    _default.reset()


def _target(store: IniStore | None) -> IniStore:
    return _default if store is None else store


def _call(fn: Callable[[], T]) -> tuple[Status, T | None]:
    try:
        return Status.OK, fn()
    except IniKVError as e:
        return e.status, None


def load_resource(
    path: str | os.PathLike[str], *, store: IniStore | None = None
) -> Status:
    """Load a resource file, replacing the store's contents."""
    target = _target(store)
    return _call(lambda: target.load(path))[0]


def get_value(key: str, *, store: IniStore | None = None) -> tuple[Status, str | None]:
    """Look up a composite key; the value is ``None`` unless status is OK."""
    target = _target(store)
    return _call(lambda: target.get(key))


def set_value(key: str, value: str, *, store: IniStore | None = None) -> Status:
    """Store a value under a composite key and persist."""
    target = _target(store)
    return _call(lambda: target.set(key, value))[0]


def delete_value(key: str, *, store: IniStore | None = None) -> Status:
    """Remove a composite key and persist."""
    target = _target(store)
    return _call(lambda: target.delete(key))[0]


def dump_values(*, store: IniStore | None = None) -> Status:
    """Write the store back to its resource file."""
    target = _target(store)
    return _call(target.persist)[0]
