"""
Tests for field enumeration across dataclasses, attrs classes and pydantic models.
"""

from dataclasses import dataclass, field
from typing import Any

import attrs
import pytest

from clistruct import (
    InvalidKindError,
    Kind,
    ReflectConfig,
    Ref,
    StructField,
    is_struct_field_exported,
    lookup_struct_field,
    struct_fields,
)
from clistruct.parsing import StructTag


class TestDataclassFields:
    def test_names_in_declaration_order(self, server_options):
        names = [f.name for f in struct_fields(type(server_options))]
        assert names == ["host", "port", "ratio", "tags", "timeout", "_secret"]

    def test_indexes_follow_order(self, server_options):
        fields = struct_fields(server_options)
        assert [f.index for f in fields] == list(range(len(fields)))

    def test_declared_types(self, server_options):
        fields = {f.name: f.type for f in struct_fields(server_options)}
        assert fields["host"] is str
        assert fields["port"] is int
        assert fields["tags"] == list[str]
        assert fields["timeout"] == int | None

    def test_instance_class_and_ref_agree(self, server_options):
        """Fields can be enumerated from the class, an instance or a Ref chain."""
        from_class = struct_fields(type(server_options))
        assert struct_fields(server_options) == from_class
        assert struct_fields(Ref(Ref(server_options))) == from_class

    def test_private_field_not_exported(self, server_options):
        secret = lookup_struct_field(server_options, "_secret")
        assert secret is not None
        assert not is_struct_field_exported(secret)
        assert is_struct_field_exported(lookup_struct_field(server_options, "host"))

    def test_tag_from_metadata(self, server_options):
        host = lookup_struct_field(server_options, "host")
        assert host.tag.get("cli") == "host"
        assert host.tag.get("alias") == "[h, 'addr']"

    def test_untagged_field_has_empty_tag(self, server_options):
        ratio = lookup_struct_field(server_options, "ratio")
        assert ratio.tag == StructTag("")
        assert ratio.tag.get("cli") == ""

    def test_frozen_dataclass_is_read_only(self):
        @dataclass(frozen=True)
        class Frozen:
            name: str = "x"

        assert lookup_struct_field(Frozen, "name").read_only

    def test_explicit_visibility_overrides_naming(self):
        """Metadata can mark fields exported or private regardless of name."""

        @dataclass
        class Explicit:
            internal: int = field(default=0, metadata={"exported": False})
            _public: int = field(default=0, metadata={"exported": True})

        assert not lookup_struct_field(Explicit, "internal").exported
        assert lookup_struct_field(Explicit, "_public").exported

    def test_unresolvable_forward_reference_keeps_raw_annotation(self):
        @dataclass
        class Forward:
            other: "MissingType" = None  # noqa: F821

        assert lookup_struct_field(Forward, "other").type == "MissingType"


class TestPydanticFields:
    def test_names_and_types(self, model_options):
        fields = {f.name: f.type for f in struct_fields(model_options)}
        assert fields == {"name": str, "count": int, "locked": str}

    def test_raw_tag_in_json_schema_extra(self, model_options):
        name = lookup_struct_field(model_options, "name")
        assert name.tag.get("cli") == "name"

    def test_plain_entries_become_tag_keys(self, model_options):
        count = lookup_struct_field(model_options, "count")
        assert count.tag.get("cli") == "count"
        assert count.tag.get("alias") == "[c, n]"

    def test_frozen_field_is_read_only(self, model_options):
        assert lookup_struct_field(model_options, "locked").read_only
        assert not lookup_struct_field(model_options, "name").read_only

    def test_frozen_model_is_read_only(self):
        from pydantic import BaseModel, ConfigDict

        class Frozen(BaseModel):
            model_config = ConfigDict(frozen=True)
            name: str = "x"

        assert lookup_struct_field(Frozen, "name").read_only


class TestAttrsFields:
    def test_names_and_types(self, attrs_options):
        fields = {f.name: f.type for f in struct_fields(attrs_options)}
        assert fields == {"level": int, "label": str, "pinned": str}

    def test_tag_from_metadata(self, attrs_options):
        assert lookup_struct_field(attrs_options, "level").tag.get("cli") == "level"

    def test_frozen_on_setattr_is_read_only(self, attrs_options):
        assert lookup_struct_field(attrs_options, "pinned").read_only
        assert not lookup_struct_field(attrs_options, "level").read_only

    def test_frozen_class_is_read_only(self):
        @attrs.frozen
        class Frozen:
            name: str = "x"

        assert lookup_struct_field(Frozen, "name").read_only

    def test_unannotated_attribute_is_any(self):
        @attrs.define
        class Untyped:
            value = attrs.field(default=None)

        assert lookup_struct_field(Untyped, "value").type is Any


class TestLookupAndErrors:
    def test_missing_field_returns_none(self, server_options):
        assert lookup_struct_field(server_options, "missing") is None

    def test_lookup_is_exact(self, server_options):
        assert lookup_struct_field(server_options, "Host") is None

    @pytest.mark.parametrize(
        "target, kind",
        [(42, Kind.INT), ({"a": 1}, Kind.MAPPING), (Ref(None), Kind.NONE), (dict, Kind.OTHER)],
    )
    def test_non_struct_target_raises(self, target, kind):
        with pytest.raises(InvalidKindError) as exc_info:
            struct_fields(target)
        assert exc_info.value.expected is Kind.STRUCT
        assert exc_info.value.actual is kind

    def test_custom_metadata_keys(self):
        @dataclass
        class Custom:
            name: str = field(default="", metadata={"cli_tag": 'cli:"n"', "public": False})

        config = ReflectConfig(tag_metadata_key="cli_tag", exported_metadata_key="public")
        name = lookup_struct_field(Custom, "name", config)
        assert name.tag.get("cli") == "n"
        assert not name.exported

    def test_descriptor_is_immutable(self, server_options):
        host = lookup_struct_field(server_options, "host")
        assert isinstance(host, StructField)
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            host.name = "other"
