"""Class construction engine (source of truth).

``ClassMeta`` turns blueprints into ordinary Python classes; ``Class`` is the
root every class built here ultimately derives from.

Construction (``ClassMeta.__new__``)
------------------------------------
- The blueprint is either passed explicitly (``blueprint=`` class keyword, used
  by ``create``) or parsed from the class body, so ``class Dog(Animal): ...``
  and ``create(Animal, {...})`` go through the same steps.
- Effective parent: ``Extends`` > first base > root ``Class``. Plain functions
  are promoted through ``wrap``. Extra bases after the first are not ancestors:
  they are harvested as leading mixins.
- Namespace order: mixins in sequence (later wins), then own members. Python's
  MRO supplies everything inherited from the parent.
- ``__superclass__`` stores the parent; ``__statics__`` stores the class-level
  properties computed by ``inherit_statics``. Children of the root inherit no
  root statics, which keeps ``create`` a root-only static.

Class-level behaviour
---------------------
- ``superclass``, ``prototype`` and ``constructor`` are read-only metaclass
  properties: invisible to instances, immune to assignment.
- Reading a non-dunder class attribute checks the class's own statics first,
  so a static shadows a same-named member, inherited attribute or ``type``
  attribute (``mro``, ...) at class level. Assigning a non-dunder class
  attribute writes a static. Instances never see statics: ``self.name`` and
  ``super()`` still reach the member.
- A super-call through ``X.superclass.name`` is class-level access, so it
  returns the parent's static when one shadows ``name``; use
  ``vars(X.superclass)["name"]`` or ``super()`` to reach the member itself.
- ``extend``/``implement`` are metaclass methods, so every engine class has
  them and none of its instances do. They, and the read-only properties, can
  never be statics: assigning them raises ``AttributeError``.

Instantiation (``ClassMeta.__call__``)
--------------------------------------
- ``Class(target)`` with a single class or function argument is the conversion
  shorthand for ``wrap(target)``.
- Otherwise ``__new__`` builds the instance and ``run_initializer`` calls the
  single resolved initializer with the original arguments.

Module functions
----------------
``create(parent=None, blueprint=None, **options)``, ``extend(target,
blueprint=None, **options)``, ``implement(target, source)`` and
``wrap(target)``. ``options`` accepts ``name`` and ``module`` and is merged
with defaults through ``SmartOptions``.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from types import MethodType
from typing import Any, Dict, Optional, Tuple

from smartseeds import SmartOptions

from .blueprint import WHITELIST_KEY, Blueprint, parse_blueprint
from .initializer import run_initializer
from .mixins import compose, harvest, is_dunder
from .statics import CLASS_OPERATIONS, STATICS_ATTR, accepts_static, inherit_statics, own_statics

__all__ = ["ClassMeta", "Class", "create", "extend", "implement", "wrap", "SUPERCLASS_ATTR"]

logger = logging.getLogger("smartclass")

SUPERCLASS_ATTR = "__superclass__"

_CREATE_DEFAULTS: Dict[str, Any] = {"name": "SubClass", "module": None}

_root: Optional["ClassMeta"] = None

_constructor = property(lambda self: type(self), doc="Class that built this instance.")


class _ClassOnly:
    """Class attribute that instances cannot see."""

    def __init__(self, name: str, value: Any, *, bind: bool = False):
        self.name = name
        self.value = value
        self.bind = bind

    def __get__(self, instance: Any, owner: type) -> Any:
        if instance is not None:
            raise AttributeError(
                f"{type(instance).__name__!r} object has no attribute {self.name!r}"
            )
        if self.bind:
            return MethodType(self.value, owner)
        return self.value


def _as_parent(candidate: Any) -> Any:
    if candidate is None:
        return _root
    if inspect.isclass(candidate):
        return candidate
    return wrap(candidate)


class ClassMeta(type):
    """Metaclass of every class built by :func:`create`."""

    def __new__(
        mcs,
        name: str,
        bases: Tuple[type, ...],
        namespace: Dict[str, Any],
        *,
        blueprint: Optional[Blueprint] = None,
        root: bool = False,
    ):
        global _root
        body: Dict[str, Any] = {}
        if blueprint is None:
            blueprint = parse_blueprint(dict(namespace))
        else:
            body.update(namespace)
        if root:
            parent = None
            mixins = list(blueprint.mixins)
        else:
            first = bases[0] if bases else None
            parent = _as_parent(blueprint.parent if blueprint.parent is not None else first)
            mixins = list(bases[1:]) + list(blueprint.mixins)
        body.update(compose(mixins))
        body.update(blueprint.members)
        if parent is not None and not hasattr(parent, "constructor"):
            body.setdefault("constructor", _constructor)
        body[STATICS_ATTR] = inherit_statics(
            parent,
            blueprint.statics,
            blueprint.statics_whitelist,
            inherit=parent is not _root,
        )
        body[SUPERCLASS_ATTR] = parent
        cls = super().__new__(mcs, name, (parent,) if parent is not None else (), body)
        if root:
            _root = cls
        logger.debug(
            "Built class %s (parent=%s, mixins=%d, statics=%d)",
            name,
            getattr(parent, "__name__", None),
            len(mixins),
            len(body[STATICS_ATTR]),
        )
        return cls

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace)

    def __call__(cls, *args, **kwargs):
        if cls is _root and len(args) == 1 and not kwargs:
            target = args[0]
            if inspect.isclass(target) or inspect.isroutine(target):
                return wrap(target)
        new = cls.__new__
        instance = new(cls) if new is object.__new__ else new(cls, *args, **kwargs)
        run_initializer(cls, instance, args, kwargs)
        return instance

    def __getattribute__(cls, name: str) -> Any:
        if not is_dunder(name) and name not in CLASS_OPERATIONS:
            statics = type.__getattribute__(cls, "__dict__").get(STATICS_ATTR)
            if statics is not None and name in statics:
                return statics[name]
        return type.__getattribute__(cls, name)

    def __setattr__(cls, name: str, value: Any) -> None:
        if is_dunder(name):
            type.__setattr__(cls, name, value)
            return
        if name in CLASS_OPERATIONS:
            raise AttributeError(f"{name!r} is read-only on class {cls.__name__!r}")
        vars(cls)[STATICS_ATTR][name] = value

    def __delattr__(cls, name: str) -> None:
        statics = vars(cls)[STATICS_ATTR]
        if name in statics:
            del statics[name]
            return
        type.__delattr__(cls, name)

    def __dir__(cls):
        return sorted(set(super().__dir__()) | set(vars(cls)[STATICS_ATTR]))

    @property
    def superclass(cls) -> Optional[type]:
        """Parent class; ``None`` only for the root."""
        return vars(cls).get(SUPERCLASS_ATTR)

    @property
    def prototype(cls) -> type:
        return cls

    @property
    def constructor(cls) -> type:
        return cls

    def extend(cls, blueprint: Any = None, **options: Any) -> "ClassMeta":
        """Build a subclass of this class."""
        return extend(cls, blueprint, **options)

    def implement(cls, source: Any) -> "ClassMeta":
        """Copy the members of ``source`` onto this class in place."""
        return implement(cls, source)


def create(parent: Any = None, blueprint: Any = None, **options: Any) -> ClassMeta:
    """Build a new class from ``parent`` and ``blueprint``.

    Args:
        parent: Parent class, plain function (promoted via :func:`wrap`) or
            ``None`` for the root. When it is the only argument and not a
            class, it is taken as the blueprint instead.
        blueprint: Mapping with reserved keys, :class:`Blueprint`, function
            (the initializer) or class (the parent). ``Extends`` wins over
            ``parent``.
        options: ``name`` and ``module`` of the generated class.
    """
    opts = SmartOptions(options, defaults=_CREATE_DEFAULTS)
    if blueprint is None and parent is not None and not inspect.isclass(parent):
        parent, blueprint = None, parent
    bp = parse_blueprint(blueprint)
    base = _as_parent(bp.parent if bp.parent is not None else parent)
    name = getattr(opts, "name", None) or _CREATE_DEFAULTS["name"]
    namespace: Dict[str, Any] = {"__qualname__": name}
    module = getattr(opts, "module", None)
    if module:
        namespace["__module__"] = module
    return ClassMeta(name, (base,), namespace, blueprint=bp)


def extend(target: type, blueprint: Any = None, **options: Any) -> ClassMeta:
    """Build a subclass of ``target``; ``target`` always wins over ``Extends``."""
    bp = parse_blueprint(blueprint)
    if bp.parent is not target:
        bp = bp.model_copy(update={"parent": target})
    return create(target, bp, **options)


def _set_static(target: type, name: str, value: Any) -> None:
    store = own_statics(target)
    if store is None:
        type.__setattr__(target, name, value)
    elif accepts_static(name):
        store[name] = value


def implement(target: type, source: Any) -> type:
    """Copy members of ``source`` onto ``target`` in place and return ``target``.

    Mappings and blueprints copy every member, ``initialize`` included, and
    honour ``Implements``, ``Statics`` and ``StaticsWhiteList``; ``Extends`` is
    ignored. Any other source contributes its harvested members.
    """
    statics: Dict[str, Any] = {}
    whitelist = None
    if isinstance(source, (Mapping, Blueprint)):
        bp = parse_blueprint(source)
        if bp.parent is not None:
            logger.debug("Ignoring Extends passed to implement() on %s", target.__name__)
        members = compose(bp.mixins)
        members.update(bp.members)
        statics = bp.statics
        whitelist = bp.statics_whitelist
    else:
        members = harvest(source)
    for name, value in members.items():
        if name in CLASS_OPERATIONS and isinstance(target, ClassMeta):
            logger.debug("Skipping read-only member %s on %s", name, target.__name__)
            continue
        type.__setattr__(target, name, value)
    for name, value in statics.items():
        _set_static(target, name, value)
    if whitelist is not None:
        _set_static(target, WHITELIST_KEY, list(whitelist))
    logger.debug(
        "Implemented %d members and %d statics on %s", len(members), len(statics), target.__name__
    )
    return target


def wrap(target: Any) -> type:
    """Make ``target`` part of the hierarchy.

    Plain classes are augmented in place: ``extend``/``implement`` bound to the
    class, ``superclass`` pointing at the root and, when missing, an instance
    ``constructor``. The three markers are class-only, as on engine classes:
    instances raise ``AttributeError``. Their own members are left untouched.
    Plain functions are promoted to a new root subclass whose initializer is
    the function.
    """
    if isinstance(target, ClassMeta):
        return target
    if inspect.isclass(target):
        target.extend = _ClassOnly("extend", extend, bind=True)
        target.implement = _ClassOnly("implement", implement, bind=True)
        target.superclass = _ClassOnly("superclass", _root)
        if not hasattr(target, "constructor"):
            target.constructor = _constructor
        logger.debug("Wrapped plain class %s", target.__name__)
        return target
    if callable(target):
        name = getattr(target, "__name__", None)
        if not name or name == "<lambda>":
            name = _CREATE_DEFAULTS["name"]
        return create(None, Blueprint(initializer=target), name=name)
    raise TypeError(f"Cannot convert {type(target).__name__} into a class")


class Class(metaclass=ClassMeta, root=True):
    """Root of every class built by this package.

    Build subclasses with ``Class.extend({...})``, ``Class.create(...)`` or a
    plain class statement; convert existing classes with ``Class(Existing)``.
    """

    constructor = _constructor


Class.create = create
