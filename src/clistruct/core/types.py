"""
Core type definitions for clistruct.

This module contains the reference cell used to model one layer of
indirection, the Kind classification of runtime values, and the predicate
deciding which classes count as struct shapes.
"""

import dataclasses
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any, Generic, TypeVar

import attrs
from pydantic import BaseModel

T = TypeVar("T")


class Kind(Enum):
    """Coarse classification of a runtime value."""

    POINTER = "pointer"
    STRUCT = "struct"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    STRING = "string"
    BYTES = "bytes"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    NONE = "none"  # Invalid/zero value, e.g. a dereferenced nil Ref
    OTHER = "other"


class Ref(Generic[T]):
    """
    Mutable reference cell standing in for a pointer.

    Passing a struct wrapped in a Ref marks it as addressable: only fields
    reached through a Ref can be set. Refs may be nested; Ref(None) is nil.
    """

    __slots__ = ("value",)

    def __init__(self, value: T | None = None):
        self.value = value

    @property
    def is_nil(self) -> bool:
        return self.value is None

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"


def is_struct_type(cls: Any) -> bool:
    """
    Check whether a class is a struct shape with enumerable fields.

    Dataclasses, attrs classes and pydantic models qualify.
    """
    if not isinstance(cls, type):
        return False
    return (
        dataclasses.is_dataclass(cls) or attrs.has(cls) or issubclass(cls, BaseModel)
    )


def kind_of(value: Any) -> Kind:
    """
    Classify a runtime value.

    Params:
        value: Any value, including Ref cells and None

    Returns:
        The Kind of the value itself (a Ref is POINTER, not its referent)
    """
    if isinstance(value, Ref):
        return Kind.POINTER
    if value is None:
        return Kind.NONE
    if is_struct_type(type(value)):
        return Kind.STRUCT
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray)):
        return Kind.BYTES
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, (list, tuple, Set)):
        return Kind.SEQUENCE
    return Kind.OTHER
