"""
Declaration units: the renderer-agnostic output of the translator.

Each unit describes one TypeScript interface or enum, ready to be handed
to the templater.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class InterfaceProperty:
    """A property of a generated interface."""

    name: str
    description: str | None
    type: str  # Resolved TypeScript type, e.g. "string", "Pet[]"
    required: bool = False


@dataclass
class EnumProperty:
    """A member of a generated enum."""

    name: str
    value: str


@dataclass
class InterfaceImport:
    """Another declaration unit this one depends on."""

    imported_name: str


@dataclass
class InterfaceUnit:
    """Declaration unit for an object schema."""

    name: str
    description: str | None = None
    properties: list[InterfaceProperty] = field(default_factory=list)
    imports: list[InterfaceImport] = field(default_factory=list)

    kind = "interface"


@dataclass
class EnumUnit:
    """Declaration unit for an enum schema."""

    name: str
    description: str | None = None
    properties: list[EnumProperty] = field(default_factory=list)

    kind = "enum"


DeclarationUnit = InterfaceUnit | EnumUnit
