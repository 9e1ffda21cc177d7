"""
Field descriptors for struct shapes.

Enumerates the fields of dataclasses, attrs classes and pydantic models as
uniform StructField descriptors carrying name, declared type, visibility,
read-only status and struct tag.
"""

import dataclasses
import logging
import sys
import typing
from collections.abc import Mapping
from typing import Any

import attrs
from attrs import frozen
from pydantic import BaseModel

from clistruct.core.config import DEFAULT_CONFIG, ReflectConfig
from clistruct.core.types import Kind, is_struct_type, kind_of
from clistruct.exceptions import InvalidKindError
from clistruct.parsing.tags import StructTag
from clistruct.structure.indirection import indirect_value

logger = logging.getLogger(__name__)


@frozen
class StructField:
    """Metadata for one field of a struct shape."""

    name: str
    type: Any
    index: int
    exported: bool = True
    read_only: bool = False
    tag: StructTag = StructTag()


def is_struct_field_exported(field: StructField) -> bool:
    """Check whether a field belongs to the public surface."""
    return field.exported


def _resolve_hints(cls: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError as e:
        # One unresolvable name fails the whole class; resolve fields one by one
        logger.debug("Cannot resolve type hints for %s: %s", cls.__qualname__, e)
        return {}


def _resolve_annotation(annotation: Any, cls: type) -> Any:
    """
    Evaluate a string annotation in the namespace of the class's module.

    Names that only exist for type checkers stay unresolved and the string
    is returned unchanged.
    """
    if not isinstance(annotation, str):
        return annotation
    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    try:
        return eval(annotation, globalns, dict(vars(cls)))  # noqa: S307
    except (NameError, AttributeError, TypeError, SyntaxError) as e:
        logger.debug(
            "Keeping unresolved annotation %r on %s: %s", annotation, cls.__qualname__, e
        )
        return annotation


def _build_tag(metadata: Mapping[str, Any], config: ReflectConfig) -> StructTag:
    raw = metadata.get(config.tag_metadata_key)
    if isinstance(raw, str):
        return StructTag(raw)
    if isinstance(raw, StructTag):
        return raw
    entries = {
        key: value
        for key, value in metadata.items()
        if key not in (config.tag_metadata_key, config.exported_metadata_key)
    }
    return StructTag.from_mapping(entries)


def _is_exported(name: str, metadata: Mapping[str, Any], config: ReflectConfig) -> bool:
    explicit = metadata.get(config.exported_metadata_key)
    if isinstance(explicit, bool):
        return explicit
    return not name.startswith("_")


def _attrs_class_frozen(cls: type) -> bool:
    # attrs installs this setattr hook on frozen classes
    return getattr(cls.__setattr__, "__name__", "") == "_frozen_setattrs"


def _raw_fields(cls: type) -> list[tuple[str, Any, Mapping[str, Any], bool]]:
    """Return (name, annotation, metadata, read_only) for each declared field."""
    if issubclass(cls, BaseModel):
        model_frozen = bool(cls.model_config.get("frozen", False))
        result = []
        for name, info in cls.model_fields.items():
            extra = info.json_schema_extra
            metadata = extra if isinstance(extra, Mapping) else {}
            read_only = model_frozen or bool(info.frozen)
            result.append((name, info.annotation, metadata, read_only))
        return result

    hints = _resolve_hints(cls)
    if dataclasses.is_dataclass(cls):
        class_frozen = cls.__dataclass_params__.frozen
        return [
            (
                f.name,
                _resolve_annotation(hints.get(f.name, f.type), cls),
                f.metadata,
                class_frozen,
            )
            for f in dataclasses.fields(cls)
        ]

    class_frozen = _attrs_class_frozen(cls)
    result = []
    for a in attrs.fields(cls):
        annotation = _resolve_annotation(hints.get(a.name, a.type), cls)
        if annotation is None:
            annotation = Any
        read_only = class_frozen or a.on_setattr is attrs.setters.frozen
        result.append((a.name, annotation, a.metadata, read_only))
    return result


def _struct_class(target: Any) -> type:
    if isinstance(target, type):
        if not is_struct_type(target):
            raise InvalidKindError(Kind.STRUCT, Kind.OTHER)
        return target

    value = indirect_value(target)
    if not is_struct_type(type(value)):
        raise InvalidKindError(Kind.STRUCT, kind_of(value))
    return type(value)


def struct_fields(
    target: Any, config: ReflectConfig | None = None
) -> list[StructField]:
    """
    Enumerate the fields of a struct shape in declaration order.

    Params:
        target: A struct class, a struct instance, or a Ref chain to one
        config: Optional metadata key configuration

    Returns:
        One StructField per declared field, private fields included

    Raises:
        InvalidKindError: When target does not resolve to a struct shape
    """
    config = config or DEFAULT_CONFIG
    cls = _struct_class(target)
    return [
        StructField(
            name=name,
            type=annotation,
            index=index,
            exported=_is_exported(name, metadata, config),
            read_only=read_only,
            tag=_build_tag(metadata, config),
        )
        for index, (name, annotation, metadata, read_only) in enumerate(
            _raw_fields(cls)
        )
    ]


def lookup_struct_field(
    target: Any, name: str, config: ReflectConfig | None = None
) -> StructField | None:
    """
    Find a field by exact name.

    Returns:
        The field descriptor, or None when no field has that name
    """
    for field in struct_fields(target, config):
        if field.name == name:
            return field
    return None
