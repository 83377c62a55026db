"""Class metadata read from live Python classes via ``inspect``."""

from __future__ import annotations

import abc
import inspect
import logging
import pkgutil
import typing

from classdoc.model import MethodInfo

logger = logging.getLogger(__name__)

# Bases that never count as a parent class.
_ROOT_BASES = (object, abc.ABC, typing.Generic)


def class_name(cls: type) -> str:
    """Return the dotted identifier used for *cls*."""
    return f"{cls.__module__}.{cls.__qualname__}"


def _is_interface(base: type) -> bool:
    """Abstract classes and protocols play the role of interfaces."""
    return inspect.isabstract(base) or bool(getattr(base, "_is_protocol", False))


class InspectMetadataSource:
    """Expose public methods, parent and interfaces of Python classes.

    Classes are addressed by ``"<module>.<qualname>"``.  Names not yet seen
    are imported with :func:`pkgutil.resolve_name`; classes that cannot be
    imported by name (e.g. defined inside a function) can be registered
    up front.
    """

    def __init__(self, classes: typing.Iterable[type] = ()) -> None:
        self._classes: dict[str, type] = {}
        for cls in classes:
            self.register(cls)

    def register(self, cls: type) -> str:
        name = class_name(cls)
        self._classes[name] = cls
        return name

    def resolve(self, name: str) -> type:
        """Return the class called *name*, importing it if needed."""
        cls = self._classes.get(name)
        if cls is not None:
            return cls

        logger.debug("Resolving class %s", name)
        obj = pkgutil.resolve_name(name)
        if not inspect.isclass(obj):
            raise TypeError(f"{name!r} does not name a class")
        self._classes[name] = obj
        return obj

    def resolve_method(self, method_id: str):
        """Return the attribute named by ``"<class>.<method>"``."""
        owner, _, attr = method_id.rpartition(".")
        return getattr(self.resolve(owner), attr)

    def public_methods(self, class_name: str) -> list[MethodInfo]:
        cls = self.resolve(class_name)
        methods: list[MethodInfo] = []
        # vars() keeps definition order and excludes inherited attributes.
        for attr, value in vars(cls).items():
            if attr.startswith("_"):
                continue
            is_static = isinstance(value, (staticmethod, classmethod))
            func = value.__func__ if is_static else value
            if not inspect.isfunction(func):
                continue
            is_final = bool(
                getattr(value, "__final__", False) or getattr(func, "__final__", False)
            )
            methods.append(
                MethodInfo(
                    name=attr,
                    declaring_class=class_name,
                    is_static=is_static,
                    is_final=is_final,
                    raw_comment=func.__doc__,
                )
            )
        return methods

    def parent_of(self, class_name: str) -> str | None:
        cls = self.resolve(class_name)
        for base in cls.__bases__:
            if base in _ROOT_BASES or _is_interface(base):
                continue
            return self.register(base)
        return None

    def interfaces_of(self, class_name: str) -> list[str]:
        cls = self.resolve(class_name)
        return [self.register(base) for base in cls.__bases__ if _is_interface(base)]

    def raw_class_comment(self, class_name: str) -> str | None:
        return vars(self.resolve(class_name)).get("__doc__")
