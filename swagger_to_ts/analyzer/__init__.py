"""
Analyzer - turns parsed schema definitions into declaration units.
"""

from __future__ import annotations

from .ir_nodes import (
    DeclarationUnit,
    EnumProperty,
    EnumUnit,
    InterfaceImport,
    InterfaceProperty,
    InterfaceUnit,
)
from .reference_resolver import REF_PREFIXES, ReferenceResolver, clean_ref
from .translator import TypeTranslator

__all__ = [
    "DeclarationUnit",
    "EnumProperty",
    "EnumUnit",
    "InterfaceImport",
    "InterfaceProperty",
    "InterfaceUnit",
    "REF_PREFIXES",
    "ReferenceResolver",
    "TypeTranslator",
    "clean_ref",
]
