"""Initializer resolution.

Exactly one initializer runs per instantiation. Starting from the class being
instantiated, the MRO is walked upward and the first class whose own namespace
declares ``initialize`` (or, failing that, ``__init__``) wins. ``__init__``
covers wrapped plain classes and class statements written the usual Python
way. A declared ``initialize = None`` stops the walk without calling anything.

Ancestor initializers never run automatically; reaching them requires an
explicit call such as ``Dog.superclass.initialize(self, *args)``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from .blueprint import INITIALIZER_KEY

__all__ = ["resolve_initializer", "run_initializer"]


def resolve_initializer(cls: type) -> Optional[Callable]:
    """Return the initializer instances of ``cls`` run, or ``None``."""
    for klass in cls.__mro__:
        if klass is object:
            break
        namespace = vars(klass)
        if INITIALIZER_KEY in namespace:
            return namespace[INITIALIZER_KEY]
        if "__init__" in namespace:
            return namespace["__init__"]
    return None


def run_initializer(
    cls: type, instance: Any, args: Tuple[Any, ...], kwargs: Dict[str, Any]
) -> None:
    """Call the resolved initializer of ``cls`` on ``instance``."""
    initializer = resolve_initializer(cls)
    if initializer is None:
        return
    binder = getattr(initializer, "__get__", None)
    if binder is not None:
        binder(instance, cls)(*args, **kwargs)
    else:
        initializer(instance, *args, **kwargs)
