import pytest

from swagger_to_ts.analyzer import EnumProperty, EnumUnit, InterfaceImport, InterfaceProperty, InterfaceUnit
from swagger_to_ts.config import GeneratorConfig
from swagger_to_ts.templater import Templater, jsdoc, ts_property_name, ts_string


@pytest.fixture
def templater():
    return Templater(GeneratorConfig(add_generation_comment=False))


class TestFilters:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("name", "name"),
            ("_private", "_private"),
            ("$ref", "$ref"),
            ("x-rate-limit", "'x-rate-limit'"),
            ("1st", "'1st'"),
            ("with space", "'with space'"),
        ],
    )
    def test_ts_property_name(self, name, expected):
        assert ts_property_name(name) == expected

    def test_ts_string_escapes(self):
        assert ts_string("it's a \\ path") == "'it\\'s a \\\\ path'"

    def test_jsdoc_empty(self):
        assert jsdoc(None) == ""
        assert jsdoc("") == ""

    def test_jsdoc_multiline(self):
        assert jsdoc("First line\n\nSecond line", "  ") == "  /**\n   * First line\n   *\n   * Second line\n   */\n"

    def test_jsdoc_cannot_close_comment_early(self):
        assert "*/ evil" not in jsdoc("*/ evil")


class TestTemplater:
    def test_render_interface(self, templater):
        unit = InterfaceUnit(
            name="Pet",
            description="A pet",
            properties=[
                InterfaceProperty(name="name", description=None, type="string", required=True),
                InterfaceProperty(name="owner", description="Who owns it", type="Person"),
                InterfaceProperty(name="tags", description=None, type="Tag[]"),
            ],
            imports=[InterfaceImport(imported_name="Person"), InterfaceImport(imported_name="Tag")],
        )
        assert templater.render_interface(unit) == (
            "import { Person } from './Person';\n"
            "import { Tag } from './Tag';\n"
            "\n"
            "/**\n"
            " * A pet\n"
            " */\n"
            "export interface Pet {\n"
            "  name: string;\n"
            "  /**\n"
            "   * Who owns it\n"
            "   */\n"
            "  owner?: Person;\n"
            "  tags?: Tag[];\n"
            "}\n"
        )

    def test_render_interface_without_imports(self, templater):
        unit = InterfaceUnit(name="Empty")
        assert templater.render_interface(unit) == "export interface Empty {\n}\n"

    def test_render_enum(self, templater):
        unit = EnumUnit(
            name="Person",
            properties=[EnumProperty(name="ADMIN", value="ADMIN"), EnumProperty(name="USER", value="user")],
        )
        assert templater.render_enum(unit) == "export enum Person {\n  ADMIN = 'ADMIN',\n  USER = 'user',\n}\n"

    def test_render_dispatches_on_unit_kind(self, templater):
        assert templater.render(EnumUnit(name="E")).startswith("export enum E")
        assert templater.render(InterfaceUnit(name="I")).startswith("export interface I")

    def test_render_index(self, templater):
        manifest = "export { A } from './A';\nexport { B } from './B';\n"
        assert templater.render_index(manifest) == manifest

    def test_generation_comment(self):
        templater = Templater(GeneratorConfig())
        code = templater.render_enum(EnumUnit(name="E"))
        assert code.startswith("// Generated by swagger_to_ts v")
        assert ": swagger_to_ts\n\nexport enum E {" in code
