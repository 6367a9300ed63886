"""
Persistence of generated TypeScript files.

Ensures that file writes are atomic to prevent a half-written type file
from being picked up by a TypeScript build.
"""

from __future__ import annotations

import logging
import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .config import GeneratorConfig, OutputMode
from .errors import CodeWriteError

logger = logging.getLogger(__name__)

# A property rendered as `name: ;` or `name?: ;`
_EMPTY_TYPE = re.compile(r"^\s*\S+\??:\s*;", re.MULTILINE)

# Comments and single-quoted literals, which may carry braces from descriptions and enum values
_COMMENT_OR_STRING = re.compile(r"//[^\n]*|/\*.*?\*/|'(?:\\.|[^'\\\n])*'", re.DOTALL)


def validate_typescript(content: str) -> None:
    """Basic structural checks on generated TypeScript.

    Raises:
        CodeWriteError: If validation fails
    """
    code = _COMMENT_OR_STRING.sub("''", content)

    match = _EMPTY_TYPE.search(code)
    if match:
        raise CodeWriteError(f"Generated TypeScript code has a property without a type: {match.group(0).strip()}")

    # Braces outside comments and string literals must balance
    open_braces = code.count("{")
    close_braces = code.count("}")
    if open_braces != close_braces:
        raise CodeWriteError(f"Generated TypeScript code has unbalanced braces: {open_braces} open, {close_braces} close")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate: Callable[[str], None] | None = None):
        self._validate = validate or validate_typescript

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            CodeWriteError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate(content)

            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise


class TypesWriter:
    """Saves generated type files and the barrel file into one directory."""

    def __init__(self, output_dir: str | Path, config: GeneratorConfig | None = None, writer: AtomicWriter | None = None):
        self.output_dir = Path(output_dir)
        self.config = config or GeneratorConfig()
        self.writer = writer or AtomicWriter()

    def path_for(self, name: str) -> Path:
        file_name = f"{name}{self.config.file_extension}"
        if name in ("", ".", "..") or "/" in name or "\\" in name:
            raise CodeWriteError(f"'{name}' would be written outside {self.output_dir}")
        return self.output_dir / file_name

    def save_interface_file(self, name: str, content: str) -> Path:
        """Save the file for one declaration unit (interface or enum)."""
        return self._save(self.path_for(name), content)

    def save_index_file(self, content: str) -> Path:
        """Save the barrel file re-exporting every declaration."""
        return self._save(self.path_for(self.config.index_file_name), content)

    def _save(self, path: Path, content: str) -> Path:
        output = self.config.output
        if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")

        if output.atomic_write:
            self.writer.write(path, content, validate=output.validate_before_write)
        else:
            if output.validate_before_write:
                validate_typescript(content)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

        logger.debug("wrote %s", path)
        return path
