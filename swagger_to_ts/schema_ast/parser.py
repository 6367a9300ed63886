"""
Parser that turns the raw type definitions of a Swagger/OpenAPI document
into nodes.

Handles both container shapes: Swagger 2 (`definitions`) and OpenAPI 3
(`components.schemas`), so that the translator never has to know which one
it was given.
"""

from __future__ import annotations

from typing import Any

from ..errors import MalformedReferenceError, SchemaParseError, UnsupportedTypeError
from .nodes import (
    ArrayNode,
    DefinitionNode,
    EnumSchema,
    ObjectSchema,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaAST,
    TypeNode,
)

LEGACY_DEFS_ROOT = "#/definitions"
CURRENT_DEFS_ROOT = "#/components/schemas"


def extract_definitions(document: dict[str, Any]) -> dict[str, Any]:
    """
    Return the schema mapping of a document, whatever its container shape.

    Prefers the legacy `definitions` container when both are present.

    Raises:
        SchemaParseError: If the document has neither container
    """
    if not isinstance(document, dict):
        raise SchemaParseError("Document is not a JSON object")

    definitions = document.get("definitions")
    if definitions is not None:
        return definitions

    components = document.get("components") or {}
    if not isinstance(components, dict):
        raise SchemaParseError("components is not an object")
    schemas = components.get("schemas")
    if schemas is not None:
        return schemas

    raise SchemaParseError("Document has neither 'definitions' nor 'components.schemas'")


class SchemaParser:
    """Parses a schema mapping into a SchemaAST."""

    # Primitive type names
    PRIMITIVE_TYPES = ("string", "integer", "number", "boolean")

    def parse(self, definitions: dict[str, Any], defs_root: str = LEGACY_DEFS_ROOT) -> SchemaAST:
        """
        Parse a schema mapping into an AST.

        Args:
            definitions: Mapping from schema name to schema definition
            defs_root: Container path used in source_path (for error messages)

        Returns:
            SchemaAST with one DefinitionNode per entry, in input order

        Raises:
            SchemaParseError: If a definition is not an object or its name
                cannot be used as a file name
        """
        if not isinstance(definitions, dict):
            raise SchemaParseError(f"{defs_root} is not an object")

        ast = SchemaAST()
        for name, def_schema in definitions.items():
            path = f"{defs_root}/{name}"
            self._check_name(name, path)
            if not isinstance(def_schema, dict):
                raise SchemaParseError(f"Definition at {path} is not an object")

            ast.definitions.append(
                DefinitionNode(
                    name=name,
                    description=self._description(def_schema, path),
                    body=self._parse_definition_body(def_schema, path),
                    source_path=path,
                )
            )
        return ast

    def parse_document(self, document: dict[str, Any]) -> SchemaAST:
        """Normalize a full document and parse its definitions."""
        definitions = extract_definitions(document)
        defs_root = LEGACY_DEFS_ROOT if document.get("definitions") is not None else CURRENT_DEFS_ROOT
        return self.parse(definitions, defs_root)

    def _check_name(self, name: str, path: str) -> None:
        # Each name becomes `<output_dir>/<name>.ts`
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise SchemaParseError(f"Schema name '{name}' at {path} cannot be used as a file name")

    def _description(self, schema: dict[str, Any], path: str) -> str | None:
        description = schema.get("description")
        if description is not None and not isinstance(description, str):
            raise SchemaParseError(f"description at {path} is not a string")
        return description

    def _parse_definition_body(self, schema: dict[str, Any], path: str) -> ObjectSchema | EnumSchema:
        # Classification must come before any property processing
        if schema.get("enum") is not None:
            if not isinstance(schema["enum"], list):
                raise SchemaParseError(f"enum at {path} is not a list")
            return EnumSchema(values=list(schema["enum"]), source_path=path)

        raw_properties = schema.get("properties") or {}
        if not isinstance(raw_properties, dict):
            raise SchemaParseError(f"properties at {path} is not an object")
        raw_required = schema.get("required") or []
        if not isinstance(raw_required, list):
            raise SchemaParseError(f"required at {path} is not a list")

        required = set(raw_required)
        properties = []
        for prop_name, prop_schema in raw_properties.items():
            prop_path = f"{path}/properties/{prop_name}"
            if not isinstance(prop_schema, dict):
                raise SchemaParseError(f"Property at {prop_path} is not an object")
            properties.append(
                PropertyDef(
                    name=prop_name,
                    description=self._description(prop_schema, prop_path),
                    type_node=self._parse_type_node(prop_schema, prop_path),
                    is_required=prop_name in required,
                    source_path=prop_path,
                )
            )
        return ObjectSchema(properties=properties, source_path=path)

    def _parse_type_node(self, schema: dict[str, Any], path: str) -> TypeNode:
        """
        Parse the type of a property.

        A `$ref` always wins over the type tag. A property with neither a type
        nor a `$ref` becomes an empty reference, which fails when cleaned.
        """
        if "$ref" in schema:
            return self._parse_ref(schema["$ref"], path)

        type_name = schema.get("type")
        if type_name == "array":
            return ArrayNode(items=self._parse_items(schema.get("items"), f"{path}/items"), source_path=path)
        if type_name in self.PRIMITIVE_TYPES:
            return PrimitiveNode(type_name=type_name, format=schema.get("format"), source_path=path)
        if type_name is None:
            return RefNode(ref_path=None, source_path=path)

        raise UnsupportedTypeError(f"Unsupported type '{type_name}' at {path}")

    def _parse_items(self, items: dict[str, Any] | None, path: str) -> PrimitiveNode | RefNode:
        if not items:
            return RefNode(ref_path=None, source_path=path)
        if not isinstance(items, dict):
            # Tuple-style item lists have no single TypeScript element type
            raise SchemaParseError(f"items at {path} must be a single schema object")
        if "$ref" in items:
            return self._parse_ref(items["$ref"], path)

        type_name = items.get("type")
        if type_name is None:
            return RefNode(ref_path=None, source_path=path)
        if type_name not in self.PRIMITIVE_TYPES:
            raise UnsupportedTypeError(f"Unsupported array item type '{type_name}' at {path}")
        return PrimitiveNode(type_name=type_name, format=items.get("format"), source_path=path)

    def _parse_ref(self, ref_path: Any, path: str) -> RefNode:
        if ref_path is not None and not isinstance(ref_path, str):
            raise MalformedReferenceError(f"$ref at {path} is not a string: {ref_path!r}")
        return RefNode(ref_path=ref_path, source_path=path)
