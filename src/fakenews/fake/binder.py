"""Binding generated values onto named fields of a seed value.

Rules never poke at their targets directly; they ask a :class:`FieldBinder`
to produce a copy of the target with one field replaced.  The default
:class:`AttributeBinder` understands dataclasses, pydantic models, mappings
and plain objects with a ``__dict__``.  Targets are never mutated in place.
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from fakenews.utils.errors import BindError

S = TypeVar("S")


@runtime_checkable
class FieldBinder(Protocol):
    """Capability setting ``field`` on ``target`` and returning the result."""

    def set(self, target: Any, field: str, value: Any) -> Any:
        """Return ``target`` with ``field`` set to ``value``.

        Raises :class:`~fakenews.utils.errors.BindError` when ``target`` has
        no such field.
        """

        ...


class AttributeBinder:
    """Default binder for common record shapes."""

    def set(self, target: S, field: str, value: Any) -> S:
        if dataclasses.is_dataclass(target) and not isinstance(target, type):
            names = {f.name for f in dataclasses.fields(target)}
            if field not in names:
                raise BindError(f"{type(target).__name__} has no field {field!r}")
            try:
                return dataclasses.replace(target, **{field: value})
            except (TypeError, ValueError) as exc:
                raise BindError(
                    f"cannot set {field!r} on {type(target).__name__}: {exc}"
                ) from exc

        if isinstance(target, BaseModel):
            if field not in type(target).model_fields:
                raise BindError(f"{type(target).__name__} has no field {field!r}")
            return target.model_copy(update={field: value})

        if isinstance(target, Mapping):
            updated = dict(target)
            updated[field] = value
            return updated  # type: ignore[return-value]

        if hasattr(target, "__dict__"):
            if field not in vars(target):
                raise BindError(f"{type(target).__name__} has no field {field!r}")
            clone = copy.copy(target)
            setattr(clone, field, value)
            return clone

        raise BindError(f"cannot bind fields on {type(target).__name__}")


DEFAULT_BINDER: FieldBinder = AttributeBinder()

__all__ = ["AttributeBinder", "DEFAULT_BINDER", "FieldBinder"]
