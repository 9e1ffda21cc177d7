"""
clistruct structure components.

This package provides indirection resolution, field enumeration and
dynamic field access for struct shapes.
"""

from clistruct.structure.access import (
    FieldHandle,
    check_value,
    get_struct_field,
    set_struct_field,
    should_be_struct,
)
from clistruct.structure.fields import (
    StructField,
    is_struct_field_exported,
    lookup_struct_field,
    struct_fields,
)
from clistruct.structure.indirection import (
    indirect_type,
    indirect_value,
    type_display_name,
    type_name,
)

__all__ = [
    "FieldHandle",
    "StructField",
    "check_value",
    "get_struct_field",
    "set_struct_field",
    "should_be_struct",
    "is_struct_field_exported",
    "lookup_struct_field",
    "struct_fields",
    "indirect_type",
    "indirect_value",
    "type_display_name",
    "type_name",
]
