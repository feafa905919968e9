"""Blueprint parsing (source of truth).

A blueprint describes a class before it exists. Callers hand one to
``create``/``extend`` either as a plain mapping using the reserved keys below,
or as an explicit :class:`Blueprint` record.

Reserved keys
-------------
- ``Extends``: parent class (or plain function, promoted by the builder).
- ``Implements``: ordered mixin sources; a single source is accepted.
- ``Statics``: class-level properties for the new class.
- ``StaticsWhiteList``: names of this class's statics that children inherit.
- ``initialize``: instance initializer. Unlike the other reserved keys it also
  stays in ``members`` so it lands on the class namespace.

Every other string key is a member copied onto the class namespace.

``parse_blueprint(source)``
---------------------------
- ``Blueprint`` → returned unchanged.
- mapping → reserved keys extracted, remaining keys become ``members``.
- class → ``Blueprint(parent=source)`` (a class given where a description is
  expected means "derive from it").
- other callable → ``Blueprint(initializer=source)``.
- ``None`` / anything else → empty blueprint.

Malformed reserved values never raise: the ``mode="before"`` validators
degrade them to their defaults and log the fact at DEBUG level.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "Blueprint",
    "parse_blueprint",
    "normalize_whitelist",
    "RESERVED_KEYS",
    "EXTENDS_KEY",
    "IMPLEMENTS_KEY",
    "STATICS_KEY",
    "WHITELIST_KEY",
    "INITIALIZER_KEY",
]

logger = logging.getLogger("smartclass")

EXTENDS_KEY = "Extends"
IMPLEMENTS_KEY = "Implements"
STATICS_KEY = "Statics"
WHITELIST_KEY = "StaticsWhiteList"
INITIALIZER_KEY = "initialize"

RESERVED_KEYS = frozenset({EXTENDS_KEY, IMPLEMENTS_KEY, STATICS_KEY, WHITELIST_KEY})


def normalize_whitelist(value: Any) -> Optional[List[str]]:
    """Return ``value`` as a list of static names, ``None`` when unusable.

    A string is one name; lists, tuples and sets keep their string items.
    Anything else (mappings included) counts as "no whitelist declared".
    """
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set, frozenset)):
        return [name for name in value if isinstance(name, str)]
    logger.debug("Ignoring unusable %s: %r", WHITELIST_KEY, value)
    return None


class Blueprint(BaseModel):
    """Explicit description of a class to build."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    parent: Any = None
    mixins: List[Any] = Field(default_factory=list)
    statics: Dict[str, Any] = Field(default_factory=dict)
    statics_whitelist: Optional[List[str]] = None
    initializer: Any = None
    members: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("parent", mode="before")
    @classmethod
    def _check_parent(cls, value: Any) -> Any:
        if value is None or callable(value):
            return value
        logger.debug("Ignoring non-callable %s: %r", EXTENDS_KEY, value)
        return None

    @field_validator("mixins", mode="before")
    @classmethod
    def _check_mixins(cls, value: Any) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            value = [value]
        return [item for item in value if item is not None]

    @field_validator("statics", "members", mode="before")
    @classmethod
    def _check_mapping(cls, value: Any) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            logger.debug("Ignoring non-mapping blueprint value: %r", value)
            return {}
        return {key: item for key, item in value.items() if isinstance(key, str)}

    @field_validator("statics_whitelist", mode="before")
    @classmethod
    def _check_whitelist(cls, value: Any) -> Optional[List[str]]:
        return normalize_whitelist(value)

    @model_validator(mode="after")
    def _sync_initializer(self) -> "Blueprint":
        if self.initializer is not None:
            self.members[INITIALIZER_KEY] = self.initializer
        elif INITIALIZER_KEY in self.members:
            self.initializer = self.members[INITIALIZER_KEY]
        return self

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "Blueprint":
        """Split a description mapping into reserved parts and members."""
        members = {key: value for key, value in mapping.items() if key not in RESERVED_KEYS}
        return cls(
            parent=mapping.get(EXTENDS_KEY),
            mixins=mapping.get(IMPLEMENTS_KEY),
            statics=mapping.get(STATICS_KEY),
            statics_whitelist=mapping.get(WHITELIST_KEY),
            members=members,
        )


def parse_blueprint(source: Any) -> Blueprint:
    """Return the :class:`Blueprint` described by ``source``."""
    if isinstance(source, Blueprint):
        return source
    if source is None:
        return Blueprint()
    if isinstance(source, Mapping):
        return Blueprint.from_mapping(source)
    if inspect.isclass(source):
        return Blueprint(parent=source)
    if callable(source):
        return Blueprint(initializer=source)
    logger.debug("Unsupported blueprint %r treated as empty", source)
    return Blueprint()
