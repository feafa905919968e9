"""Static (class-level) property inheritance.

Statics are stored per class under ``STATICS_ATTR`` and are copied, not
delegated: a child sees a snapshot of its parent's statics taken when the
child is built.

Rules
-----
- Only parents carrying their own store contribute (engine classes); plain
  Python parents expose their class attributes through normal lookup.
- When the parent declares ``StaticsWhiteList`` only the listed names are
  copied; otherwise every parent static is copied.
- ``StaticsWhiteList``, ``extend`` and ``implement`` are never copied.
- The child's declared statics overlay the inherited ones, regardless of the
  whitelist. A declared whitelist is stored on the child under
  ``StaticsWhiteList``.
- Names in ``CLASS_OPERATIONS`` (``extend``, ``implement``, ``superclass``,
  ``prototype``, ``constructor``) and dunder names can never be statics;
  declaring one is logged and dropped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from .blueprint import WHITELIST_KEY, normalize_whitelist

__all__ = [
    "STATICS_ATTR",
    "CLASS_OPERATIONS",
    "own_statics",
    "accepts_static",
    "inherit_statics",
]

logger = logging.getLogger("smartclass")

STATICS_ATTR = "__statics__"

CLASS_OPERATIONS = frozenset({"extend", "implement", "superclass", "prototype", "constructor"})

_NEVER_INHERITED = frozenset({WHITELIST_KEY}) | CLASS_OPERATIONS


def own_statics(cls: Any) -> Optional[Dict[str, Any]]:
    """Return the static store declared directly on ``cls`` (``None`` if absent)."""
    return vars(cls).get(STATICS_ATTR)


def accepts_static(name: str) -> bool:
    """Tell whether ``name`` may live in a static store."""
    if name in CLASS_OPERATIONS or (name.startswith("__") and name.endswith("__")):
        logger.debug("Dropping static %r: reserved for the class machinery", name)
        return False
    return True


def inherit_statics(
    parent: Any,
    declared: Dict[str, Any],
    whitelist: Optional[Iterable[str]] = None,
    *,
    inherit: bool = True,
) -> Dict[str, Any]:
    """Compute the static store of a new child of ``parent``."""
    statics: Dict[str, Any] = {}
    source = own_statics(parent) if inherit and parent is not None else None
    if source:
        allowed = normalize_whitelist(source.get(WHITELIST_KEY))
        for name, value in source.items():
            if name in _NEVER_INHERITED:
                continue
            if allowed is not None and name not in allowed:
                continue
            statics[name] = value
    statics.update((name, value) for name, value in declared.items() if accepts_static(name))
    if whitelist is not None:
        statics[WHITELIST_KEY] = list(whitelist)
    return statics
