"""
Type Definition Translator.

Walks the parsed schema definitions and produces one declaration unit per
schema, plus the aggregation manifest re-exporting all of them. Performs
no I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..config import GeneratorConfig
from ..errors import SwaggerToTsError, UnsupportedTypeError
from ..schema_ast.nodes import (
    ArrayNode,
    DefinitionNode,
    EnumSchema,
    ObjectSchema,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaAST,
)
from ..schema_ast.parser import SchemaParser
from .ir_nodes import (
    DeclarationUnit,
    EnumProperty,
    EnumUnit,
    InterfaceImport,
    InterfaceProperty,
    InterfaceUnit,
)
from .reference_resolver import ReferenceResolver

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


class TypeTranslator:
    """Translates schema definitions into declaration units."""

    def __init__(self, ast: SchemaAST, config: GeneratorConfig | None = None):
        self.ast = ast
        self.config = config or GeneratorConfig()
        self.resolver = ReferenceResolver(ast.names(), allow_unresolved=self.config.allow_unresolved_refs)

    @classmethod
    def from_document(cls, document: dict[str, Any], config: GeneratorConfig | None = None) -> TypeTranslator:
        """Build a translator straight from a Swagger 2 or OpenAPI 3 document."""
        return cls(SchemaParser().parse_document(document), config)

    def translate_all(self, on_progress: ProgressCallback | None = None) -> list[DeclarationUnit]:
        """Translate every definition, in input order."""
        total = len(self.ast.definitions)
        units = []
        for i, definition in enumerate(self.ast.definitions):
            units.append(self._translate_with_context(definition))
            if on_progress is not None:
                on_progress(definition.name, i + 1, total)
        return units

    def _translate_with_context(self, definition: DefinitionNode) -> DeclarationUnit:
        """Wrapper that adds the schema name to any translation error"""
        try:
            return self.translate(definition)
        except SwaggerToTsError as e:
            raise type(e)(f"Error translating schema '{definition.name}': {e}") from e

    def translate(self, definition: DefinitionNode) -> DeclarationUnit:
        """Translate one definition, dispatching on its classification."""
        match definition.body:
            case EnumSchema():
                unit = self.translate_enum(definition)
            case ObjectSchema():
                unit = self.translate_object(definition)
            case _:
                raise UnsupportedTypeError(f"Schema '{definition.name}' is neither an object nor an enum")
        logger.debug("translated %s %s", unit.kind, definition.name)
        return unit

    def translate_object(self, definition: DefinitionNode) -> InterfaceUnit:
        body = definition.body
        if not isinstance(body, ObjectSchema):
            raise UnsupportedTypeError(f"Schema '{definition.name}' is not an object schema")

        properties = [
            InterfaceProperty(
                name=prop.name,
                description=prop.description,
                type=self.extract_property_type(prop),
                required=prop.is_required,
            )
            for prop in body.properties
        ]

        imports: list[InterfaceImport] = []
        seen: set[str] = set()
        for prop in body.properties:
            imported = self.extract_import(definition.name, prop)
            if imported is None or imported.imported_name in seen:
                continue
            seen.add(imported.imported_name)
            imports.append(imported)

        return InterfaceUnit(
            name=definition.name,
            description=definition.description,
            properties=properties,
            imports=imports,
        )

    def translate_enum(self, definition: DefinitionNode) -> EnumUnit:
        body = definition.body
        if not isinstance(body, EnumSchema):
            raise UnsupportedTypeError(f"Schema '{definition.name}' is not an enum schema")

        members = []
        for value in body.values:
            if not isinstance(value, str):
                raise UnsupportedTypeError(f"Enum value {value!r} is not a string")
            members.append(EnumProperty(name=value.upper(), value=value))

        return EnumUnit(
            name=definition.name,
            description=definition.description,
            properties=members,
        )

    def extract_property_type(self, prop: PropertyDef) -> str:
        """Return the TypeScript type of a property."""
        node = prop.type_node
        match node:
            case ArrayNode(items=RefNode() as items):
                return f"{self.resolver.resolve(items)}[]"
            case ArrayNode(items=PrimitiveNode() as items):
                return f"{self.parse_type(items.type_name, items.format)}[]"
            case PrimitiveNode():
                return self.parse_type(node.type_name, node.format)
            case RefNode():
                return self.resolver.resolve(node)
        raise UnsupportedTypeError(f"Property '{prop.name}' has no usable type")

    def parse_type(self, type_name: str, format: str | None = None) -> str:
        """
        Map a Swagger primitive to its TypeScript type.

        integer -> number, string(date-time) -> Date, string -> string,
        number and boolean pass through.
        """
        match type_name:
            case "integer":
                return "number"
            case "string":
                if format == "date-time":
                    return self.config.date_time_type
                return "string"
            case "number" | "boolean":
                return type_name
        raise UnsupportedTypeError(f"parse_type called with non-primitive type '{type_name}'")

    def extract_import(self, name: str, prop: PropertyDef) -> InterfaceImport | None:
        """
        Return the import a property needs, if any.

        Primitives and references back to the owning schema need none.
        """
        node = prop.type_node
        if isinstance(node, PrimitiveNode):
            return None

        imported_name = None
        if isinstance(node, ArrayNode) and isinstance(node.items, RefNode):
            imported_name = self.resolver.resolve(node.items)
        if isinstance(node, RefNode):
            imported_name = self.resolver.resolve(node)

        if imported_name is None or imported_name == name:
            return None
        return InterfaceImport(imported_name=imported_name)

    def build_manifest(self) -> str:
        """Build the barrel file re-exporting every schema, sorted by line."""
        lines = [f"export {{ {name} }} from './{name}';\n" for name in self.ast.names()]
        return "".join(sorted(lines))
