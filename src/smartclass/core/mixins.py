"""Mixin harvesting.

Mixin sources come in different shapes; each one is flattened into a plain
``name -> member`` mapping before it touches a class namespace:

- mappings contribute every string key;
- classes contribute their own namespace (``vars(cls)``), never inherited
  members, never dunder names such as ``__init__`` or ``__module__`` and never
  the ``extend``/``implement``/``superclass`` markers ``wrap`` attaches;
- other objects contribute their instance ``__dict__`` when they have one.

``initialize`` and ``constructor`` are skipped when ``skip_initializer`` is
true so that composing a mixin never replaces the host's initializer.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any, Dict, Iterable

from .blueprint import INITIALIZER_KEY

__all__ = ["harvest", "compose", "is_dunder"]

_INITIALIZER_NAMES = frozenset({INITIALIZER_KEY, "constructor"})
# attached to plain classes by ``wrap``
_WRAP_MARKERS = frozenset({"extend", "implement", "superclass"})


def is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def harvest(source: Any, *, skip_initializer: bool = True) -> Dict[str, Any]:
    """Return the members ``source`` contributes to a class namespace."""
    if source is None:
        return {}
    if isinstance(source, Mapping):
        items = [(key, value) for key, value in source.items() if isinstance(key, str)]
    elif inspect.isclass(source):
        items = [
            (key, value)
            for key, value in vars(source).items()
            if not is_dunder(key) and key not in _WRAP_MARKERS
        ]
    else:
        namespace = getattr(source, "__dict__", {})
        items = [(key, value) for key, value in namespace.items() if not is_dunder(key)]
    members: Dict[str, Any] = {}
    for key, value in items:
        if skip_initializer and key in _INITIALIZER_NAMES:
            continue
        members[key] = value
    return members


def compose(sources: Iterable[Any]) -> Dict[str, Any]:
    """Merge mixin sources in order; later sources win on name collisions."""
    merged: Dict[str, Any] = {}
    for source in sources:
        merged.update(harvest(source))
    return merged
