"""
Node definitions for the type definitions of a Swagger/OpenAPI document.

These nodes represent the parsed structure of each schema before any
reference resolution or TypeScript-specific processing. Property types are
an explicit tagged variant over primitive, array and reference nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaNode:
    """Base class for all nodes."""

    # Original source location in the document (for error messages)
    source_path: str = ""


@dataclass
class PrimitiveNode(SchemaNode):
    """Represents a primitive type (string, integer, number, boolean)."""

    type_name: str = ""
    format: str | None = None  # e.g. "date-time"


@dataclass
class RefNode(SchemaNode):
    """Represents a $ref (unresolved reference)."""

    ref_path: str | None = None  # e.g. "#/definitions/Pet"


@dataclass
class ArrayNode(SchemaNode):
    """Represents an array type."""

    items: PrimitiveNode | RefNode | None = None


TypeNode = PrimitiveNode | ArrayNode | RefNode


@dataclass
class PropertyDef(SchemaNode):
    """Represents a property in an object schema."""

    name: str = ""
    description: str | None = None
    type_node: TypeNode | None = None
    is_required: bool = False


@dataclass
class ObjectSchema(SchemaNode):
    """An object schema with named properties."""

    properties: list[PropertyDef] = field(default_factory=list)


@dataclass
class EnumSchema(SchemaNode):
    """An enumeration schema with a list of literal values."""

    values: list[Any] = field(default_factory=list)


@dataclass
class DefinitionNode(SchemaNode):
    """Represents a named schema definition."""

    name: str = ""
    description: str | None = None
    body: ObjectSchema | EnumSchema | None = None

    @property
    def is_enum(self) -> bool:
        return isinstance(self.body, EnumSchema)


@dataclass
class SchemaAST:
    """Root of the parsed definitions."""

    definitions: list[DefinitionNode] = field(default_factory=list)

    def names(self) -> list[str]:
        return [d.name for d in self.definitions]
