"""
Reference resolver for $ref resolution.

Cleans `$ref` pointers down to bare schema names and checks them against
the set of declared schemas.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import MalformedReferenceError, UnresolvedReferenceError
from ..schema_ast.nodes import RefNode

# Legacy (Swagger 2) and current (OpenAPI 3) schema containers
REF_PREFIXES = ("#/definitions/", "#/components/schemas/")


def clean_ref(ref_path: str | None) -> str:
    """
    Strip the known definitions prefix from a $ref.

    Examples:
        "#/definitions/Widget" -> "Widget"
        "#/components/schemas/Widget" -> "Widget"

    Raises:
        MalformedReferenceError: If the reference is missing, empty or not a string
    """
    if not ref_path:
        raise MalformedReferenceError("No $ref to clean")
    if not isinstance(ref_path, str):
        raise MalformedReferenceError(f"$ref is not a string: {ref_path!r}")
    for prefix in REF_PREFIXES:
        if ref_path.startswith(prefix):
            return ref_path[len(prefix) :]
    return ref_path


class ReferenceResolver:
    """Resolves $ref to declared schema names."""

    def __init__(self, known_names: Iterable[str], allow_unresolved: bool = False):
        """
        Initialize the resolver.

        Args:
            known_names: Names of all schemas in the document
            allow_unresolved: Return dangling names as-is instead of raising
        """
        self.known_names = frozenset(known_names)
        self.allow_unresolved = allow_unresolved

    def resolve(self, ref_node: RefNode) -> str:
        """
        Resolve a RefNode to the name of its target schema.

        Raises:
            MalformedReferenceError: If the node has no reference string
            UnresolvedReferenceError: If the target is not declared
        """
        try:
            name = clean_ref(ref_node.ref_path)
        except MalformedReferenceError as e:
            if ref_node.source_path:
                raise MalformedReferenceError(f"{e} at {ref_node.source_path}") from e
            raise

        if name not in self.known_names and not self.allow_unresolved:
            raise UnresolvedReferenceError(f"Reference '{ref_node.ref_path}' does not resolve to a declared schema")
        return name
