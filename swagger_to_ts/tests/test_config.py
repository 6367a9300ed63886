from swagger_to_ts.config import FormatterConfig, GeneratorConfig, OutputConfig, OutputMode


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.date_time_type == "Date"
        assert config.output.mode == OutputMode.FORCE
        assert config.formatter.enabled is False

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "date_time_type": "string",
                "allow_unresolved_refs": True,
                "unknown_key": 1,
                "formatter": {"enabled": True, "print_width": 80},
                "output": {"mode": "error"},
            }
        )
        assert config.date_time_type == "string"
        assert config.allow_unresolved_refs is True
        assert not hasattr(config, "unknown_key")
        assert config.formatter == FormatterConfig(enabled=True, print_width=80)
        assert config.output == OutputConfig(mode=OutputMode.ERROR_IF_EXISTS)

    def test_round_trip(self):
        config = GeneratorConfig(mark_optional_properties=False, index_file_name="models")
        config.output.mode = OutputMode.ERROR_IF_EXISTS
        assert GeneratorConfig.from_dict(config.to_dict()) == config
