"""Core runtime aggregator (source of truth).

Purpose: expose the class-construction building blocks from a single module.
No extra logic beyond imports/exports.

Guarantees
----------
- Importing this module builds the root ``Class`` (as a side effect of
  importing ``builder``) and nothing else.
- Public API mirrors underlying modules 1:1:
  * ``blueprint`` → ``Blueprint``, ``parse_blueprint``
  * ``builder`` → ``ClassMeta``, ``Class``, ``create``, ``extend``,
    ``implement``, ``wrap``
  * ``initializer`` → ``resolve_initializer``
  * ``statics`` → ``inherit_statics``
"""

from .blueprint import Blueprint, parse_blueprint
from .builder import Class, ClassMeta, create, extend, implement, wrap
from .initializer import resolve_initializer
from .statics import inherit_statics

__all__ = [
    "Blueprint",
    "parse_blueprint",
    "Class",
    "ClassMeta",
    "create",
    "extend",
    "implement",
    "wrap",
    "resolve_initializer",
    "inherit_statics",
]
