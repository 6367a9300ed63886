"""
End-to-end tests for TypesGenerator on real-world shaped documents.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from swagger_to_ts import CodeWriteError, GeneratorConfig, MalformedReferenceError, SchemaParseError, TypesGenerator
from swagger_to_ts.formatters import Formatter

TEST_DATA = Path(__file__).parent / "test_data"


def load_document(filename):
    with open(TEST_DATA / filename) as f:
        return json.load(f)


@pytest.fixture
def generator():
    return TypesGenerator(GeneratorConfig(add_generation_comment=False))


class TestGenerate:
    def test_swagger2_petstore(self, generator):
        files = generator.generate(load_document("petstore.json"))

        assert list(files) == ["Pet", "Category", "Tag", "PetStatus", "index"]
        assert files["Pet"] == (
            "import { Category } from './Category';\n"
            "import { Tag } from './Tag';\n"
            "import { PetStatus } from './PetStatus';\n"
            "\n"
            "/**\n"
            " * A pet for sale in the pet store\n"
            " */\n"
            "export interface Pet {\n"
            "  id?: number;\n"
            "  category?: Category;\n"
            "  /**\n"
            "   * Name of the pet\n"
            "   */\n"
            "  name: string;\n"
            "  photoUrls: string[];\n"
            "  tags?: Tag[];\n"
            "  status?: PetStatus;\n"
            "  parent?: Pet;\n"
            "  birthDate?: Date;\n"
            "}\n"
        )
        assert files["PetStatus"] == (
            "/**\n"
            " * Pet status in the store\n"
            " */\n"
            "export enum PetStatus {\n"
            "  AVAILABLE = 'available',\n"
            "  PENDING = 'pending',\n"
            "  SOLD = 'sold',\n"
            "}\n"
        )
        assert files["index"] == (
            "export { Category } from './Category';\n"
            "export { Pet } from './Pet';\n"
            "export { PetStatus } from './PetStatus';\n"
            "export { Tag } from './Tag';\n"
        )

    def test_openapi3_petstore(self, generator):
        files = generator.generate(load_document("petstore_v3.json"))

        assert "import { User } from './User';" in files["Order"]
        assert "  id: number;" in files["Order"]
        assert "  petIds?: number[];" in files["Order"]
        assert "  shipDate?: Date;" in files["Order"]
        assert "import { Order } from './Order';" in files["User"]
        assert "  orders?: Order[];" in files["User"]
        assert "  USER = 'user'," in files["Role"]

    def test_index_is_deterministic(self, generator):
        document = load_document("petstore.json")
        reordered = {"definitions": dict(reversed(list(document["definitions"].items())))}
        assert generator.generate(document)["index"] == generator.generate(reordered)["index"]

    def test_schema_named_like_index_file_raises(self, generator):
        with pytest.raises(SchemaParseError, match="index"):
            generator.generate({"definitions": {"index": {}}})

    def test_malformed_reference_aborts_pass(self, generator):
        document = {"definitions": {"Good": {}, "Bad": {"properties": {"x": {}}}}}
        with pytest.raises(MalformedReferenceError, match="Bad"):
            generator.generate(document)

    def test_formatter_runs_when_enabled(self):
        class UpperFormatter(Formatter):
            def build_command(self, config):
                return []

            def format(self, code, config):
                return code.upper()

            def is_available(self):
                return True

        config = GeneratorConfig(add_generation_comment=False)
        config.formatter.enabled = True
        files = TypesGenerator(config, formatter=UpperFormatter()).generate({"definitions": {"A": {"enum": ["x"]}}})
        assert files["A"] == "EXPORT ENUM A {\n  X = 'X',\n}\n"
        assert files["index"] == "EXPORT { A } FROM './A';\n"

    def test_braces_in_descriptions_and_enum_values(self, generator):
        document = {
            "definitions": {
                "Template": {
                    "description": "Placeholder syntax starts with ${",
                    "properties": {"body": {"type": "string", "description": "Closed by }"}},
                },
                "Bracket": {"enum": ["{", "}}"]},
            }
        }
        files = generator.generate(document)
        assert " * Placeholder syntax starts with ${" in files["Template"]
        assert "  '{' = '{'," in files["Bracket"]

    def test_broken_output_is_rejected_before_writing(self, tmp_path):
        class DanglingBraceFormatter(Formatter):
            def build_command(self, config):
                return []

            def format(self, code, config):
                return code + "{\n"

            def is_available(self):
                return True

        config = GeneratorConfig(add_generation_comment=False)
        config.formatter.enabled = True
        generator = TypesGenerator(config, formatter=DanglingBraceFormatter())
        with pytest.raises(CodeWriteError, match="Error in generated file 'A': .*unbalanced"):
            generator.make_types({"definitions": {"A": {}, "B": {}}}, tmp_path / "models")
        assert not (tmp_path / "models").exists()


class TestMakeTypes:
    def test_writes_one_file_per_schema_plus_index(self, generator, tmp_path):
        written = generator.make_types(load_document("petstore.json"), tmp_path / "models")

        assert [p.name for p in written] == ["Pet.ts", "Category.ts", "Tag.ts", "PetStatus.ts", "index.ts"]
        assert (tmp_path / "models" / "index.ts").read_text().count("export {") == 4
        assert (tmp_path / "models" / "Tag.ts").read_text().startswith("export interface Tag {")

    def test_nothing_written_on_error(self, generator, tmp_path):
        document = {"definitions": {"Good": {}, "Bad": {"properties": {"x": {"$ref": "#/definitions/Nope"}}}}}
        with pytest.raises(Exception):
            generator.make_types(document, tmp_path / "models")
        assert not (tmp_path / "models").exists()

    def test_schema_name_cannot_escape_output_dir(self, generator, tmp_path):
        with pytest.raises(SchemaParseError, match="file name"):
            generator.make_types({"definitions": {"Good": {}, "../Escaped": {}}}, tmp_path / "models")
        assert not (tmp_path / "Escaped.ts").exists()
        assert not (tmp_path / "models").exists()

    def test_progress_and_logging(self, generator, tmp_path, caplog):
        calls = []
        with caplog.at_level("INFO", logger="swagger_to_ts"):
            generator.make_types(load_document("petstore_v3.json"), tmp_path, on_progress=lambda *a: calls.append(a))

        assert calls == [("Order", 1, 3), ("User", 2, 3), ("Role", 3, 3)]
        assert f"writing models in {tmp_path}" in caplog.text
        assert "done: 4 files written" in caplog.text
