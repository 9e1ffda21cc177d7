"""
clistruct exception classes.

This package provides all exception types raised by the clistruct
introspection helpers for consistent error handling and reporting.
"""

from clistruct.exceptions.core import (
    ClistructError,
    ErrInvalid,
    ErrInvalidKind,
    ErrPtrRequired,
    ErrTypeMismatch,
    InvalidFieldError,
    InvalidKindError,
    PointerRequiredError,
    TypeMismatchError,
)

__all__ = [
    "ClistructError",
    "InvalidFieldError",
    "TypeMismatchError",
    "PointerRequiredError",
    "InvalidKindError",
    "ErrInvalid",
    "ErrTypeMismatch",
    "ErrPtrRequired",
    "ErrInvalidKind",
]
