"""
Exception classes for clistruct field introspection.

This module defines the error taxonomy raised by the field access, shape
validation and pointer checks. Every error is raised straight to the caller;
nothing here is retried or recovered internally.
"""

from typing import Any


def _kind_label(kind: Any) -> str:
    return getattr(kind, "value", str(kind))


class ClistructError(Exception):
    """Base exception for all clistruct errors."""

    pass


class InvalidFieldError(ClistructError):
    """Raised when a field does not exist or cannot be set."""

    def __init__(self, value: Any, field_name: str):
        """
        Initialize the exception.

        Params:
            value: The value the field was looked up on, as supplied by the caller
            field_name: The requested field name
        """
        self.value = value
        self.field_name = field_name
        super().__init__(
            f"Invalid field '{field_name}' on {type(value).__name__}: "
            "field does not exist or is not settable"
        )


class TypeMismatchError(ClistructError):
    """Raised when a new field value's runtime type differs from the declared type."""

    def __init__(self, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            expected: Display name of the field's declared type
            actual: Display name of the supplied value's runtime type
        """
        self.expected = expected
        self.actual = actual
        super().__init__(f"Type mismatch: expected {expected}, got {actual}")


class PointerRequiredError(ClistructError):
    """Raised when a value must be passed by reference but is not a Ref."""

    def __init__(self, value: Any):
        """
        Initialize the exception.

        Params:
            value: The offending value
        """
        self.value = value
        super().__init__(
            f"Pointer required: got {type(value).__name__}, wrap the value in Ref(...)"
        )


class InvalidKindError(ClistructError):
    """Raised when a resolved value is not of the expected kind."""

    def __init__(self, expected: Any, actual: Any):
        """
        Initialize the exception.

        Params:
            expected: The expected kind (usually Kind.STRUCT)
            actual: The kind actually observed
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid kind: expected {_kind_label(expected)}, got {_kind_label(actual)}"
        )


# Short names for the four error kinds
ErrInvalid = InvalidFieldError
ErrTypeMismatch = TypeMismatchError
ErrPtrRequired = PointerRequiredError
ErrInvalidKind = InvalidKindError
