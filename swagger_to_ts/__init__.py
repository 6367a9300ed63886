"""Swagger to TypeScript types generator

Translates the type definitions of a Swagger 2 / OpenAPI 3 document into
TypeScript interfaces and enums, one file per schema, plus an index file
re-exporting all of them.
"""

__version__ = "1.0.0"

from .analyzer import EnumUnit, InterfaceUnit, TypeTranslator, clean_ref
from .config import FormatterConfig, GeneratorConfig, OutputConfig, OutputMode
from .errors import (
    CodeWriteError,
    MalformedReferenceError,
    SchemaParseError,
    SwaggerToTsError,
    UnresolvedReferenceError,
    UnsupportedTypeError,
)
from .generator import TypesGenerator
from .schema_ast import SchemaParser, extract_definitions

__all__ = [
    "TypesGenerator",
    "TypeTranslator",
    "SchemaParser",
    "extract_definitions",
    "clean_ref",
    "InterfaceUnit",
    "EnumUnit",
    "GeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "SwaggerToTsError",
    "SchemaParseError",
    "MalformedReferenceError",
    "UnresolvedReferenceError",
    "UnsupportedTypeError",
    "CodeWriteError",
]
