"""
Errors raised while translating a Swagger/OpenAPI document.

Every error aborts the whole translation pass; no partial output is
guaranteed once one is raised.
"""

from __future__ import annotations


class SwaggerToTsError(Exception):
    """Base class for all swagger_to_ts errors."""


class SchemaParseError(SwaggerToTsError):
    """Raised when the input document has no usable schema container."""


class MalformedReferenceError(SwaggerToTsError):
    """Raised when a reference site carries no reference string.

    This happens when a property (or an array's items) is neither a
    primitive nor has a `$ref`, or has an empty `$ref`.
    """


class UnresolvedReferenceError(SwaggerToTsError):
    """Raised when a `$ref` points to a schema name that is not declared."""


class UnsupportedTypeError(SwaggerToTsError):
    """Raised for type tags the translator cannot express."""


class CodeWriteError(SwaggerToTsError):
    """Raised when generated code fails validation before being written."""
