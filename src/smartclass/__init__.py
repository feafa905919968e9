"""SmartClass public API surface (source of truth).

Recreate the module with these rules:
- Public exports: root ``Class``, metaclass ``ClassMeta``, the ``Blueprint``
  record and the operations ``create``, ``implement``, ``wrap`` and
  ``parse_blueprint``.
- ``extend`` is reached as a class method (``Class.extend``); the module-level
  function stays in ``smartclass.core``.

Constraints
-----------
- Import must stay lightweight: the only work done is building the root class.
- Version string lives here as ``__version__`` and must remain available for
  packaging tools.
"""

__version__ = "0.1.0"

from .core import Blueprint, Class, ClassMeta, create, implement, parse_blueprint, wrap

__all__ = [
    "Blueprint",
    "Class",
    "ClassMeta",
    "create",
    "implement",
    "parse_blueprint",
    "wrap",
]
