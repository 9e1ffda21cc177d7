"""
Shared test fixtures and struct shapes for the clistruct test suite.
"""

from dataclasses import dataclass, field

import attrs
import pytest
from pydantic import BaseModel, Field

from clistruct import Ref


@dataclass
class ServerOptions:
    """Dataclass shape with tagged, private and generic fields."""

    host: str = field(default="localhost", metadata={"tag": 'cli:"host" alias:"[h, \'addr\']"'})
    port: int = field(default=8080, metadata={"tag": 'cli:"port"'})
    ratio: float = 0.5
    tags: list[str] = field(default_factory=list)
    timeout: int | None = None
    _secret: str = "hidden"


class ModelOptions(BaseModel):
    """Pydantic shape with tags carried in json_schema_extra."""

    name: str = Field(default="model", json_schema_extra={"tag": 'cli:"name"'})
    count: int = Field(default=1, json_schema_extra={"cli": "count", "alias": "[c, n]"})
    locked: str = Field(default="fixed", frozen=True)


@attrs.define
class AttrsOptions:
    level: int = attrs.field(default=0, metadata={"tag": 'cli:"level"'})
    label: str = "attrs"
    pinned: str = attrs.field(default="pin", on_setattr=attrs.setters.frozen)


@pytest.fixture
def server_options():
    """A fresh ServerOptions instance."""
    return ServerOptions()


@pytest.fixture
def server_ref(server_options):
    """A Ref to the server_options instance."""
    return Ref(server_options)


@pytest.fixture
def model_options():
    """A fresh ModelOptions instance."""
    return ModelOptions()


@pytest.fixture
def attrs_options():
    """A fresh AttrsOptions instance."""
    return AttrsOptions()
