"""
Indirection resolution for values and types, plus type display names.
"""

import types
from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Union, get_args, get_origin

from clistruct.core.types import Ref

_UNION_ORIGINS = (Union, types.UnionType)


def indirect_value(value: Any) -> Any:
    """
    Strip every Ref layer from a value.

    Params:
        value: Any value, possibly wrapped in nested Ref cells

    Returns:
        The innermost value; None when the chain ends in a nil Ref
    """
    while isinstance(value, Ref):
        value = value.value
    return value


def _optional_member(tp: Any) -> Any | None:
    """Return T for Optional[T] / T | None, None for any other annotation."""
    if get_origin(tp) not in _UNION_ORIGINS:
        return None
    members = [arg for arg in get_args(tp) if arg is not type(None)]
    if len(members) != 1:
        return None
    return members[0]


def _sequence_element(tp: Any) -> Any | None:
    """Return T for list[T], tuple[T, ...], set[T] and similar, None otherwise."""
    origin = get_origin(tp)
    if not isinstance(origin, type) or not issubclass(origin, Iterable):
        return None
    if issubclass(origin, (str, bytes, Mapping)):
        return None

    args = get_args(tp)
    if issubclass(origin, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return None
    if len(args) != 1:
        return None
    return args[0]


def indirect_type(tp: Any) -> Any:
    """
    Strip pointer and sequence wrapping from a type annotation.

    Ref[T] and Optional[T] count as pointer layers; list[T], tuple[T, ...],
    set[T] and other single-element iterable generics count as sequence
    layers. Annotated metadata is dropped as well.

    Examples:
        Ref[list[Ref[Config]]] -> Config
        Optional[list[int]] -> int
        dict[str, int] -> dict[str, int]
    """
    while True:
        origin = get_origin(tp)
        if origin is Annotated:
            tp = get_args(tp)[0]
            continue
        if tp is Ref or origin is Ref:
            args = get_args(tp)
            tp = args[0] if args else Any
            continue

        unwrapped = _optional_member(tp)
        if unwrapped is None:
            unwrapped = _sequence_element(tp)
        if unwrapped is None:
            return tp
        tp = unwrapped


def type_display_name(tp: Any) -> str:
    """
    Format a type or annotation for messages.

    Builtins print bare ("int"); other classes print module-qualified
    ("myapp.config.Options"); generic annotations print as written.
    """
    if tp is None or tp is type(None):
        return "None"
    if tp is Any:
        return "Any"
    if isinstance(tp, str):
        return tp
    if isinstance(tp, type) and get_origin(tp) is None:
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp).replace("typing.", "")


def type_name(value: Any) -> str:
    """
    Display name of a value's runtime type.

    Ref cells show their referent, e.g. "Ref[int]".
    """
    if isinstance(value, Ref):
        return f"Ref[{type_name(value.value)}]"
    return type_display_name(type(value))
