"""
Dynamic field access on struct shapes.

Fields are looked up by exact name on the struct reached through a Ref
chain. A field is settable only if the root value is a Ref, the field is
exported and the field is not read-only.
"""

import logging
import types
from dataclasses import dataclass
from typing import Annotated, Any, Literal, Union, get_args, get_origin

from clistruct.core.config import ReflectConfig
from clistruct.core.types import Kind, Ref, kind_of
from clistruct.exceptions import (
    InvalidFieldError,
    InvalidKindError,
    PointerRequiredError,
    TypeMismatchError,
)
from clistruct.structure.fields import StructField, lookup_struct_field
from clistruct.structure.indirection import (
    indirect_value,
    type_display_name,
    type_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldHandle:
    """
    Settable handle to one field slot on a struct instance.

    Params:
        owner: The resolved struct instance holding the field
        field: Descriptor of the field
    """

    owner: Any
    field: StructField

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def type(self) -> Any:
        return self.field.type

    def get(self) -> Any:
        """Return the field's current value."""
        return getattr(self.owner, self.field.name)

    def set(self, value: Any) -> None:
        """
        Assign the field without a type check.

        Raises:
            InvalidFieldError: When the underlying class rejects the assignment
        """
        try:
            setattr(self.owner, self.field.name, value)
        except (AttributeError, TypeError, ValueError) as e:
            # pydantic ValidationError and attrs validator failures included
            raise InvalidFieldError(self.owner, self.field.name) from e


def get_struct_field(
    value: Any, field_name: str, config: ReflectConfig | None = None
) -> FieldHandle:
    """
    Look up a settable field on the struct behind value.

    Params:
        value: A Ref (possibly nested) to a struct instance
        field_name: Exact field name

    Returns:
        Handle to the field slot

    Raises:
        InvalidFieldError: When the field does not exist or is not settable,
            including when value is not a Ref or does not lead to a struct
    """
    target = indirect_value(value)
    if not isinstance(value, Ref) or kind_of(target) is not Kind.STRUCT:
        raise InvalidFieldError(value, field_name)

    field = lookup_struct_field(target, field_name, config)
    if field is None or not field.exported or field.read_only:
        raise InvalidFieldError(value, field_name)

    return FieldHandle(owner=target, field=field)


def _string_annotation_matches(annotation: str, value: Any) -> bool:
    """Match an unresolved annotation such as "Decimal | None" by type name."""
    names = {part.strip() for part in annotation.split("|")}
    if value is None:
        return "None" in names
    value_type = type(value)
    return bool(
        names & {value_type.__name__, value_type.__qualname__, type_display_name(value_type)}
    )


def _type_matches(annotation: Any, value: Any) -> bool:
    """Check that value's runtime type is exactly the declared type."""
    if annotation is Any:
        return True
    if isinstance(annotation, str):
        return _string_annotation_matches(annotation, value)
    origin = get_origin(annotation)
    if origin is Literal:
        return any(type(value) is type(member) for member in get_args(annotation))
    if origin is Annotated:
        return _type_matches(get_args(annotation)[0], value)
    if origin in (Union, types.UnionType):
        return any(_type_matches(member, value) for member in get_args(annotation))

    expected = origin if origin is not None else annotation
    if expected is None:
        expected = type(None)
    return type(value) is expected


def set_struct_field(
    value: Any,
    field_name: str,
    new_value: Any,
    config: ReflectConfig | None = None,
) -> None:
    """
    Overwrite a field on the struct behind value.

    Type comparison is exact: no coercion, subclassing or numeric widening.
    Generic annotations compare on their origin class only.

    Raises:
        InvalidFieldError: As for get_struct_field
        TypeMismatchError: When new_value's type differs from the declared type
    """
    handle = get_struct_field(value, field_name, config)

    if not _type_matches(handle.type, new_value):
        raise TypeMismatchError(type_display_name(handle.type), type_name(new_value))

    handle.set(new_value)
    logger.debug(
        "Set %s.%s to %r", type(handle.owner).__qualname__, field_name, new_value
    )


def check_value(value: Any) -> None:
    """
    Require value to be a Ref.

    Raises:
        PointerRequiredError: When value is not a Ref
    """
    if not isinstance(value, Ref):
        raise PointerRequiredError(value)


def should_be_struct(value: Any) -> None:
    """
    Require an already-resolved value to be a struct instance.

    Raises:
        InvalidKindError: Carrying Kind.STRUCT and the observed kind
    """
    kind = kind_of(value)
    if kind is not Kind.STRUCT:
        raise InvalidKindError(Kind.STRUCT, kind)
