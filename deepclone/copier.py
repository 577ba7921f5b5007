"""Recursive deep copying that preserves shared references and cycles."""

from __future__ import annotations

import abc
import collections
import datetime
import decimal
import enum
import fractions
import functools
import io
import pathlib
import re
import types
import uuid
from typing import Any, TypeVar

__all__ = [
    "Copier",
    "UnsupportedTypeError",
    "deep_copy",
    "deep_copy_skip_unsupported",
    "must_copy",
]

T = TypeVar("T")

_MISSING = object()

# Values of these types are immutable and are returned as they are.
_ATOMIC: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    frozenset,
    range,
    slice,
    type,
    enum.Enum,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    decimal.Decimal,
    fractions.Fraction,
    uuid.UUID,
    pathlib.PurePath,
    re.Pattern,
    type(Ellipsis),
    type(NotImplemented),
)

# Values of these types carry behaviour or live resources and cannot be copied.
_UNSUPPORTED_VALUES: tuple[type, ...] = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodWrapperType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.ModuleType,
    types.FrameType,
    types.CodeType,
    types.TracebackType,
    functools.partial,
    io.IOBase,
    memoryview,
)


class Copier(abc.ABC):
    """Base for types that provide their own deep copy logic.

    When the value handed to :func:`deep_copy` is a ``Copier``, its
    :meth:`copy` result is returned instead of the generic copy.
    """

    @abc.abstractmethod
    def copy(self):
        """Return a deep copy of this object."""


class UnsupportedTypeError(TypeError):
    """Raised when a value of a type that cannot be copied is met."""

    def __init__(self, message: str, value_type: type) -> None:
        super().__init__(message)
        self.value_type = value_type


@functools.lru_cache(maxsize=None)
def _slot_descriptors(cls: type) -> tuple[Any, ...]:
    """Return the slot member descriptors of ``cls`` and its bases."""
    seen: set[str] = set()
    descriptors: list[Any] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name in seen:
                continue
            descriptor = klass.__dict__.get(name)
            if descriptor is None or not hasattr(descriptor, "__set__"):
                continue
            seen.add(name)
            descriptors.append(descriptor)
    return tuple(descriptors)


def _blank(cls: type) -> Any:
    try:
        return cls.__new__(cls)
    except TypeError:
        return object.__new__(cls)


class _Cloner:
    """Holds the state of one deep copy run."""

    def __init__(self, skip_unsupported: bool) -> None:
        self._skip = skip_unsupported
        self._memo: dict[int, Any] = {}
        # Originals are kept alive so their ids stay unique during the run.
        self._originals: list[Any] = []

    def _remember(self, original: Any, clone: Any) -> Any:
        self._memo[id(original)] = clone
        self._originals.append(original)
        return clone

    def _unsupported(self, value: Any, reason: str) -> None:
        if self._skip:
            return None
        value_type = type(value)
        raise UnsupportedTypeError(f"{reason}: {value_type.__name__}", value_type)

    def clone(self, value: Any) -> Any:
        if isinstance(value, _ATOMIC):
            return value
        found = self._memo.get(id(value), _MISSING)
        if found is not _MISSING:
            return found
        if isinstance(value, _UNSUPPORTED_VALUES):
            return self._unsupported(value, "unsupported non-nil value for type")
        if isinstance(value, tuple):
            return self._clone_tuple(value)
        if isinstance(value, list):
            return self._clone_list(value)
        if isinstance(value, dict):
            return self._clone_dict(value)
        if isinstance(value, set):
            return self._clone_set(value)
        if isinstance(value, collections.deque):
            return self._clone_deque(value)
        if isinstance(value, bytearray):
            return self._clone_bytearray(value)
        if type(value) is object:
            return self._remember(value, object())
        if getattr(value, "__dict__", None) is not None or _slot_descriptors(type(value)):
            return self._clone_object(value)
        return self._unsupported(value, "unsupported type")

    def _copy_attributes(self, src: Any, dst: Any) -> None:
        state = getattr(src, "__dict__", None)
        if state is not None:
            target = dst.__dict__
            for name, item in list(state.items()):
                target[name] = self.clone(item)
        for descriptor in _slot_descriptors(type(src)):
            try:
                item = descriptor.__get__(src, type(src))
            except AttributeError:
                continue
            descriptor.__set__(dst, self.clone(item))

    def _clone_tuple(self, value: tuple) -> tuple:
        items = [self.clone(item) for item in value]
        # A cycle through a mutable member may already have produced a copy.
        found = self._memo.get(id(value), _MISSING)
        if found is not _MISSING:
            return found
        if type(value) is tuple:
            return self._remember(value, tuple(items))
        result = tuple.__new__(type(value), items)
        self._remember(value, result)
        self._copy_attributes(value, result)
        return result

    def _clone_list(self, value: list) -> list:
        exact = type(value) is list
        result = [] if exact else _blank(type(value))
        self._remember(value, result)
        for item in list(value):
            list.append(result, self.clone(item))
        if not exact:
            self._copy_attributes(value, result)
        return result

    def _clone_dict(self, value: dict) -> dict:
        exact = type(value) is dict
        result = {} if exact else _blank(type(value))
        self._remember(value, result)
        if isinstance(value, collections.defaultdict):
            result.default_factory = self.clone(value.default_factory)
        for key, item in list(value.items()):
            result[key] = self.clone(item)
        if not exact:
            self._copy_attributes(value, result)
        return result

    def _clone_set(self, value: set) -> set:
        exact = type(value) is set
        result = set() if exact else _blank(type(value))
        self._remember(value, result)
        set.update(result, value)
        if not exact:
            self._copy_attributes(value, result)
        return result

    def _clone_deque(self, value: collections.deque) -> collections.deque:
        result = collections.deque(maxlen=value.maxlen)
        self._remember(value, result)
        for item in list(value):
            result.append(self.clone(item))
        return result

    def _clone_bytearray(self, value: bytearray) -> bytearray:
        if type(value) is bytearray:
            return self._remember(value, bytearray(value))
        result = _blank(type(value))
        self._remember(value, result)
        bytearray.extend(result, value)
        self._copy_attributes(value, result)
        return result

    def _clone_object(self, value: Any) -> Any:
        result = _blank(type(value))
        self._remember(value, result)
        self._copy_attributes(value, result)
        return result


def _copy(src: T, skip_unsupported: bool) -> T:
    if src is None:
        return src
    if isinstance(src, Copier):
        return src.copy()
    return _Cloner(skip_unsupported).clone(src)


def deep_copy(src: T) -> T:
    """Return a deep copy of ``src``.

    Shared references and cycles are reproduced in the copy. Raises
    :class:`UnsupportedTypeError` when a value that cannot be copied
    (a function, a lock, a generator, ...) is met.
    """
    return _copy(src, False)


def deep_copy_skip_unsupported(src: T) -> T:
    """Return a deep copy of ``src`` with uncopyable values replaced by None."""
    return _copy(src, True)


def must_copy(src: T) -> T:
    """Return a deep copy of ``src``; any failure propagates as an exception."""
    return _copy(src, False)