"""
clistruct - runtime struct introspection for struct-to-CLI binders

clistruct locates, reads and writes named fields on dataclasses, attrs
classes and pydantic models reached through Ref cells, and parses the
struct tags attached to their field metadata.
"""

from importlib.metadata import version

from clistruct.core import Kind, ReflectConfig, Ref, kind_of
from clistruct.exceptions import (
    ClistructError,
    InvalidFieldError,
    InvalidKindError,
    PointerRequiredError,
    TypeMismatchError,
)
from clistruct.parsing import (
    StructTag,
    get_struct_field_tag,
    get_struct_field_tag_slice,
    parse_tag_list,
)
from clistruct.structure import (
    FieldHandle,
    StructField,
    check_value,
    get_struct_field,
    indirect_type,
    indirect_value,
    is_struct_field_exported,
    lookup_struct_field,
    set_struct_field,
    should_be_struct,
    struct_fields,
    type_display_name,
    type_name,
)

__version__ = version("clistruct")

__all__ = [
    "__version__",
    "Kind",
    "Ref",
    "ReflectConfig",
    "kind_of",
    "ClistructError",
    "InvalidFieldError",
    "InvalidKindError",
    "PointerRequiredError",
    "TypeMismatchError",
    "StructTag",
    "get_struct_field_tag",
    "get_struct_field_tag_slice",
    "parse_tag_list",
    "FieldHandle",
    "StructField",
    "check_value",
    "get_struct_field",
    "set_struct_field",
    "should_be_struct",
    "indirect_type",
    "indirect_value",
    "is_struct_field_exported",
    "lookup_struct_field",
    "struct_fields",
    "type_display_name",
    "type_name",
]
