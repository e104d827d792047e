"""Immutable record types generated from declarative field specifications.

A record type is defined once, at import time, and every instance is
fixed at construction.  Field options are forwarded to
:func:`dataclasses.field` except ``read_only``, which is always forced
to ``True``: callers cannot opt a field into mutability.

Field specification forms
-------------------------
* ``"name"`` — field with default ``None``.
* ``("name", default)`` — field with an explicit default.
* ``("name", default, {"type": int, ...})`` — with options.  ``type``
  becomes the annotation; ``default_factory`` replaces *default*; the
  remaining options go to :func:`dataclasses.field` unchanged.

Example::

    Point = define_readonly_record("Point", "A 2D point.", ("x", 0), ("y", 0))
    p = Point(x=3, y=4)
    p.x = 5  # raises ReadOnlyFieldError
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar, overload

from basekit.exceptions import ReadOnlyFieldError
from basekit.log import get_logger

logger = get_logger("records")

T = TypeVar("T", bound=type)

READ_ONLY_OPTION = "read_only"
"""Field option (and field metadata key) carrying the immutability flag."""

TYPE_OPTION = "type"
"""Field option naming the annotation of the generated field."""

DEFAULT_FIELD_VALUE: Any = None
"""Default of a field declared without one."""

_FORCED_RECORD_OPTIONS: dict[str, Any] = {"frozen": True}
_DEFAULT_RECORD_OPTIONS: dict[str, Any] = {"slots": True}


# ---------------------------------------------------------------------------
# Field specifications
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Normalized description of one record field."""

    name: str
    default: Any = DEFAULT_FIELD_VALUE
    options: Mapping[str, Any] = dataclasses.field(
        default_factory=lambda: MappingProxyType({READ_ONLY_OPTION: True}),
    )
    """Caller options with ``read_only`` forced to ``True``."""


def _force_read_only(options: Mapping[str, Any]) -> Mapping[str, Any]:
    forced = {key: value for key, value in options.items() if key != READ_ONLY_OPTION}
    forced[READ_ONLY_OPTION] = True
    return MappingProxyType(forced)


def parse_field_spec(spec: object) -> FieldSpec:
    """Normalize *spec* into a :class:`FieldSpec`.

    Raises
    ------
    TypeError
        When *spec* matches none of the accepted forms.
    """
    if isinstance(spec, FieldSpec):
        return FieldSpec(spec.name, spec.default, _force_read_only(spec.options))
    if isinstance(spec, str):
        return FieldSpec(spec, DEFAULT_FIELD_VALUE, _force_read_only({}))
    if isinstance(spec, (tuple, list)):
        if not 1 <= len(spec) <= 3:
            raise TypeError(
                f"field specification must be (name, default, options), got {spec!r}"
            )
        name = spec[0]
        if not isinstance(name, str):
            raise TypeError(f"field name must be a string, got {name!r}")
        default = spec[1] if len(spec) > 1 else DEFAULT_FIELD_VALUE
        options = spec[2] if len(spec) > 2 else {}
        if not isinstance(options, Mapping):
            raise TypeError(f"field options for {name!r} must be a mapping, got {options!r}")
        return FieldSpec(name, default, _force_read_only(options))
    raise TypeError(f"invalid field specification: {spec!r}")


def _to_dataclass_field(spec: FieldSpec) -> tuple[str, Any, dataclasses.Field[Any]]:
    kwargs = {
        key: value
        for key, value in spec.options.items()
        if key not in (READ_ONLY_OPTION, TYPE_OPTION)
    }
    if "default_factory" not in kwargs:
        kwargs["default"] = spec.default
    annotation = spec.options.get(TYPE_OPTION, Any)
    return spec.name, annotation, dataclasses.field(**kwargs)


# ---------------------------------------------------------------------------
# Sealing
# ---------------------------------------------------------------------------

def _reject_setattr(self: object, name: str, value: object) -> None:
    raise ReadOnlyFieldError(type(self).__name__, name)


def _reject_delattr(self: object, name: str) -> None:
    raise ReadOnlyFieldError(type(self).__name__, name)


def _seal(cls: T) -> T:
    """Flag every field read-only and reject mutation with ReadOnlyFieldError.

    The generated ``__init__`` of a frozen dataclass writes through
    ``object.__setattr__``, so construction is unaffected.
    """
    for fld in dataclasses.fields(cls):
        fld.metadata = MappingProxyType({**fld.metadata, READ_ONLY_OPTION: True})
    cls.__setattr__ = _reject_setattr  # type: ignore[assignment]
    cls.__delattr__ = _reject_delattr  # type: ignore[assignment]
    return cls


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def _caller_module() -> str:
    """Name of the module that called the public entry point."""
    try:
        return sys._getframe(2).f_globals.get("__name__", "__main__")
    except (AttributeError, ValueError):
        return "__main__"


def _split_doc(
    specs: tuple[object, ...], doc: str | None,
) -> tuple[str | None, tuple[object, ...]]:
    """Separate a leading documentation string from the field specs.

    A leading string is documentation only when it is not a valid
    identifier; ``"x"`` is a field, ``"A 2D point."`` is a docstring.
    """
    if specs and isinstance(specs[0], str) and not specs[0].isidentifier():
        if doc is not None:
            raise TypeError("documentation given both positionally and as doc=")
        return specs[0], specs[1:]
    return doc, specs


def define_readonly_record(
    name: str,
    *specs: object,
    doc: str | None = None,
    **record_options: Any,
) -> type:
    """Create an immutable record type called *name*.

    Parameters
    ----------
    name:
        Class name of the generated type.
    *specs:
        Optional leading documentation string, then field
        specifications in declaration order.
    doc:
        Documentation string, as an explicit alternative to passing it
        positionally.
    **record_options:
        Forwarded to :func:`dataclasses.make_dataclass` (``bases``,
        ``namespace``, ``order``, ``kw_only`` ...).  ``frozen`` is always
        ``True``; ``slots`` defaults to ``True``.

    Raises
    ------
    TypeError, ValueError
        Propagated unchanged from spec parsing or :mod:`dataclasses`
        for malformed specifications.
    """
    doc, field_specs = _split_doc(specs, doc)
    fields = [_to_dataclass_field(parse_field_spec(spec)) for spec in field_specs]
    options = {**_DEFAULT_RECORD_OPTIONS, **record_options, **_FORCED_RECORD_OPTIONS}

    namespace = dict(options.pop("namespace", None) or {})
    if doc is not None:
        namespace["__doc__"] = doc

    cls = dataclasses.make_dataclass(name, fields, namespace=namespace, **options)
    cls.__module__ = _caller_module()

    logger.debug(
        "defined read-only record %s(%s)", name, ", ".join(f[0] for f in fields),
    )
    return _seal(cls)


@overload
def readonly_record(cls: T, /) -> T: ...


@overload
def readonly_record(cls: None = None, /, **options: Any) -> Callable[[T], T]: ...


def readonly_record(cls: T | None = None, /, **options: Any) -> T | Callable[[T], T]:
    """Class decorator form of :func:`define_readonly_record`.

    Usage::

        @readonly_record
        class Span:
            start: int = 0
            end: int = 0

    *options* are forwarded to :func:`dataclasses.dataclass` under the
    same rules as ``record_options``.
    """

    def wrap(target: T) -> T:
        forwarded = {**_DEFAULT_RECORD_OPTIONS, **options, **_FORCED_RECORD_OPTIONS}
        record = dataclass(target, **forwarded)
        logger.debug("sealed read-only record %s", record.__name__)
        return _seal(record)

    if cls is None:
        return wrap
    return wrap(cls)
