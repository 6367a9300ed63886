"""
Renders declaration units to TypeScript source with jinja2 templates.
"""

from __future__ import annotations

import re
from pathlib import Path

import jinja2

from . import __version__
from .analyzer.ir_nodes import EnumUnit, InterfaceUnit
from .cli_utils import reconstruct_command_line
from .config import GeneratorConfig

CURRENT_DIR = Path(__file__).parent.resolve().absolute()
TEMPLATES_DIR = CURRENT_DIR / "templates" / "typescript"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def ts_string(value: str) -> str:
    """Quote a value as a single-quoted TypeScript string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"


def ts_property_name(name: str) -> str:
    """Return a property or member name, quoted if it is not a valid identifier.

    Examples:
        "name" -> "name"
        "x-rate-limit" -> "'x-rate-limit'"
    """
    if _IDENTIFIER.match(name):
        return name
    return ts_string(name)


def jsdoc(description: str | None, indent: str = "") -> str:
    """Format a description as a JSDoc block, one line per description line."""
    if not description:
        return ""
    lines = [f"{indent}/**"]
    for line in description.strip().splitlines():
        line = line.rstrip().replace("*/", "*\\/")
        lines.append(f"{indent} * {line}" if line else f"{indent} *")
    lines.append(f"{indent} */")
    return "\n".join(lines) + "\n"


class Templater:
    """Stamps declaration units into TypeScript file contents."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()
        self.jinja_env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=True)
        # Add custom filters
        self.jinja_env.filters["ts_string"] = ts_string
        self.jinja_env.filters["ts_property_name"] = ts_property_name
        self.jinja_env.filters["jsdoc"] = jsdoc
        self.interface_template = self._load("interface.ts.jinja2")
        self.enum_template = self._load("enum.ts.jinja2")
        self.index_template = self._load("index.ts.jinja2")

    def _load(self, filename: str) -> jinja2.Template:
        return self.jinja_env.from_string((TEMPLATES_DIR / filename).read_text(encoding="utf-8"))

    def render_interface(self, unit: InterfaceUnit) -> str:
        return self.interface_template.render(
            description=unit.description,
            name=unit.name,
            properties=unit.properties,
            imports=unit.imports,
            mark_optional=self.config.mark_optional_properties,
            generation_comment=self._generate_command_comment(),
        )

    def render_enum(self, unit: EnumUnit) -> str:
        return self.enum_template.render(
            description=unit.description,
            name=unit.name,
            properties=unit.properties,
            generation_comment=self._generate_command_comment(),
        )

    def render_index(self, manifest: str) -> str:
        return self.index_template.render(
            manifest=manifest.rstrip("\n"),
            generation_comment=self._generate_command_comment(),
        )

    def render(self, unit: InterfaceUnit | EnumUnit) -> str:
        if isinstance(unit, EnumUnit):
            return self.render_enum(unit)
        return self.render_interface(unit)

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        try:
            from .swagger_to_ts import swagger_to_ts as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "swagger_to_ts"

        return f"// Generated by swagger_to_ts v{__version__} : {command_line}"
