"""
TypesGenerator - turns a Swagger/OpenAPI document into TypeScript files.

Phases:
1. Parser: normalize the document and parse its type definitions
2. Translator: build one declaration unit per schema, plus the manifest
3. Templater: render each unit to TypeScript
4. Formatter: optional prettier pass
5. Writer: persist one file per schema and the index file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .analyzer.translator import ProgressCallback, TypeTranslator
from .config import GeneratorConfig
from .errors import CodeWriteError, SchemaParseError
from .formatters import Formatter, PrettierFormatter
from .templater import Templater
from .writer import TypesWriter, validate_typescript

logger = logging.getLogger(__name__)


class TypesGenerator:
    """Generates TypeScript interfaces and enums from a Swagger/OpenAPI document."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        templater: Templater | None = None,
        formatter: Formatter | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.templater = templater or Templater(self.config)
        self.formatter = formatter or PrettierFormatter()

    def generate(self, document: dict[str, Any], on_progress: ProgressCallback | None = None) -> dict[str, str]:
        """
        Generate every file in memory.

        Args:
            document: Parsed Swagger 2 or OpenAPI 3 document
            on_progress: Optional callback(name, index, total) called after each schema

        Returns:
            Mapping from schema name to file content. The index file is
            keyed by `config.index_file_name`.
        """
        translator = TypeTranslator.from_document(document, self.config)
        if self.config.index_file_name in translator.ast.names():
            raise SchemaParseError(f"Schema name '{self.config.index_file_name}' collides with the index file")

        units = translator.translate_all(on_progress)

        files = {unit.name: self._format(self.templater.render(unit)) for unit in units}
        files[self.config.index_file_name] = self._format(self.templater.render_index(translator.build_manifest()))

        if self.config.output.validate_before_write:
            for name, code in files.items():
                self._validate(name, code)
        return files

    def make_types(
        self,
        document: dict[str, Any],
        output_dir: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> list[Path]:
        """Generate every file and write it into output_dir."""
        logger.info("writing models in %s", output_dir)

        # Everything is rendered and validated before the first write
        files = self.generate(document, on_progress)
        index_content = files.pop(self.config.index_file_name)

        writer = TypesWriter(output_dir, self.config)
        written = [writer.save_interface_file(name, content) for name, content in files.items()]
        written.append(writer.save_index_file(index_content))

        logger.info("done: %d files written", len(written))
        return written

    def _validate(self, name: str, code: str) -> None:
        try:
            validate_typescript(code)
        except CodeWriteError as e:
            raise CodeWriteError(f"Error in generated file '{name}': {e}") from e

    def _format(self, code: str) -> str:
        if not self.config.formatter.enabled:
            return code
        return self.formatter.format(code, self.config.formatter)
