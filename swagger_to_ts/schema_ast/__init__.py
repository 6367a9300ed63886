"""
Schema AST - parsed representation of Swagger/OpenAPI type definitions.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    DefinitionNode,
    EnumSchema,
    ObjectSchema,
    PrimitiveNode,
    PropertyDef,
    RefNode,
    SchemaAST,
    SchemaNode,
    TypeNode,
)
from .parser import SchemaParser, extract_definitions

__all__ = [
    "ArrayNode",
    "DefinitionNode",
    "EnumSchema",
    "ObjectSchema",
    "PrimitiveNode",
    "PropertyDef",
    "RefNode",
    "SchemaAST",
    "SchemaNode",
    "SchemaParser",
    "TypeNode",
    "extract_definitions",
]
