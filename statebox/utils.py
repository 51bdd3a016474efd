"""Utility functions for the project."""

from __future__ import annotations

import dataclasses
import functools
import os
import warnings
from typing import TYPE_CHECKING, Any

from immutable import Immutable
from str_to_bool import str_to_bool

from statebox.basic_types import StateShapeWarning

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

PRODUCTION_ENV_VAR = 'STATEBOX_PRODUCTION'


def is_production() -> bool:
    """Check whether diagnostics are disabled by the production flag."""
    try:
        return str_to_bool(os.environ.get(PRODUCTION_ENV_VAR, 'false')) == 1
    except ValueError:
        return False


def warning(message: str) -> None:
    """Emit a diagnostic warning about the state or the reducers."""
    warnings.warn(message, StateShapeWarning, stacklevel=3)


def is_plain_object(obj: object) -> bool:
    """Check if the object is a plain record: a `dict` or an immutable dataclass."""
    return isinstance(obj, dict | Immutable)


def record_keys(obj: object) -> Iterable[str]:
    """Return the keys of a plain record."""
    if isinstance(obj, dict):
        return obj.keys()
    return (field.name for field in dataclasses.fields(obj))  # pyright: ignore [reportArgumentType]


def record_get(obj: object, key: str) -> Any:  # noqa: ANN401
    """Read `key` of a plain record, `None` when it is missing."""
    if isinstance(obj, dict):
        return obj.get(key)
    if isinstance(obj, Immutable):
        return getattr(obj, key, None)
    return None


def get_action_type(action: object) -> Any:  # noqa: ANN401
    """Return the `type` of an action, `None` when it has none."""
    return record_get(action, 'type')


def type_name(obj: object) -> str:
    """Describe the type of `obj` for diagnostics."""
    if obj is None:
        return 'None'
    return type(obj).__name__


def compose(*funcs: Callable) -> Callable:
    """Compose single-argument functions from right to left.

    The rightmost function may take any arguments, as it provides the signature
    of the resulting function. `compose(f, g, h)` is `lambda *a: f(g(h(*a)))`.
    """
    if len(funcs) == 0:
        return lambda arg: arg

    if len(funcs) == 1:
        return funcs[0]

    return functools.reduce(
        lambda f, g: lambda *args, **kwargs: f(g(*args, **kwargs)),
        funcs,
    )
