"""
clistruct tag parsing.

This package parses struct tags attached to field metadata, in both the
single-value and bracketed list forms.
"""

from clistruct.parsing.tags import (
    StructTag,
    get_struct_field_tag,
    get_struct_field_tag_slice,
    parse_tag_list,
)

__all__ = [
    "StructTag",
    "get_struct_field_tag",
    "get_struct_field_tag_slice",
    "parse_tag_list",
]
