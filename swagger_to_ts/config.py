"""
Configuration for the TypeScript type generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    FORCE = "force"  # Default: overwrite previously generated files
    ERROR_IF_EXISTS = "error"  # Raise error if a file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the prettier post-processing step."""

    # Whether formatting is enabled
    enabled: bool = False

    # Maximum line width passed to prettier
    print_width: int = 100

    # Use single quotes for string literals
    single_quote: bool = True

    # Indentation width
    tab_width: int = 2


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Add generation comment at top of each file
    add_generation_comment: bool = True

    # TypeScript type used for `string` properties with format `date-time`
    date_time_type: str = "Date"

    # Render properties missing from `required` with `?:`
    mark_optional_properties: bool = True

    # Pass dangling $ref names through instead of raising
    allow_unresolved_refs: bool = False

    # Extension of generated files
    file_extension: str = ".ts"

    # Barrel file name (without extension)
    index_file_name: str = "index"

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "date_time_type": self.date_time_type,
            "mark_optional_properties": self.mark_optional_properties,
            "allow_unresolved_refs": self.allow_unresolved_refs,
            "file_extension": self.file_extension,
            "index_file_name": self.index_file_name,
            "formatter": {
                "enabled": self.formatter.enabled,
                "print_width": self.formatter.print_width,
                "single_quote": self.formatter.single_quote,
                "tab_width": self.formatter.tab_width,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
