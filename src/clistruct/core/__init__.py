"""
Core clistruct components.

This package provides the reference cell, value kinds and configuration
shared by the structure and parsing packages.
"""

from clistruct.core.config import DEFAULT_CONFIG, ReflectConfig
from clistruct.core.types import Kind, Ref, is_struct_type, kind_of

__all__ = [
    "Kind",
    "Ref",
    "is_struct_type",
    "kind_of",
    "ReflectConfig",
    "DEFAULT_CONFIG",
]
