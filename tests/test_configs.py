"""
Tests for configuration files, logging setup and the error hierarchy.
"""

import logging

import pytest
import yaml

from codeschema.ast import create_extractor
from codeschema.configs import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    get_data_path,
    get_logger,
    load_language_overrides,
    load_yaml_config,
    save_yaml_config,
    setup_logging,
)
from codeschema.exceptions import (
    CodeSchemaError,
    ConfigurationError,
    ExtractionError,
    ParseError,
    UnsupportedLanguageError,
)


class TestYamlConfig:
    """Test loading and saving config.yaml."""

    def test_data_path_from_env(self, data_dir):
        assert get_data_path() == data_dir
        assert get_config_path() == data_dir / "config.yaml"

    def test_missing_file_is_empty(self, data_dir):
        assert load_yaml_config() == {}
        assert load_language_overrides() == {}

    def test_save_and_load(self, data_dir):
        path = save_yaml_config({"debug": True, "languages": {"java": {"field_types": ["x"]}}})
        assert path == data_dir / "config.yaml"
        assert load_yaml_config()["debug"] is True

    def test_default_config(self, data_dir):
        assert create_default_config() is True
        assert create_default_config() is False
        assert yaml.safe_load(DEFAULT_CONFIG_YAML)["debug"] is False
        # Every language entry in the template is commented out
        assert load_language_overrides() == {}

    def test_invalid_yaml(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("languages: [unclosed\n")
        with pytest.raises(ConfigurationError):
            load_yaml_config(path)

    def test_top_level_must_be_mapping(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("- java\n- python\n")
        with pytest.raises(ConfigurationError):
            load_yaml_config(path)

    def test_language_overrides(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text(
            "languages:\n"
            "  Java:\n"
            "    field_types:\n"
            "      - field_declaration\n"
            "      - constant_declaration\n"
            "  python:\n"
        )
        overrides = load_language_overrides(path)
        assert overrides == {
            "java": {"field_types": ["field_declaration", "constant_declaration"]}
        }

        extractor = create_extractor("java", overrides=overrides)
        assert extractor.config.field_types == ("field_declaration", "constant_declaration")

    def test_language_overrides_must_be_mappings(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("languages:\n  java: [field_declaration]\n")
        with pytest.raises(ConfigurationError):
            load_language_overrides(path)


class TestLogging:
    """Test logging setup."""

    def test_setup_writes_to_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "codeschema.log"
        logger = setup_logging(debug=True, log_file=str(log_file))
        try:
            assert logger.name == "codeschema"
            assert logger.level == logging.DEBUG
            get_logger("tests").debug("hello from tests")
            for handler in logger.handlers:
                handler.flush()
            assert "hello from tests" in log_file.read_text()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_env_controls_level(self, data_dir, monkeypatch):
        monkeypatch.setenv("CODESCHEMA_DEBUG", "false")
        logger = setup_logging()
        try:
            assert logger.level == logging.INFO
            assert (data_dir / "codeschema.log").exists()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_component_logger_name(self):
        assert get_logger("ast.parser").name == "codeschema.ast.parser"


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, CodeSchemaError)
        assert issubclass(UnsupportedLanguageError, ConfigurationError)
        assert issubclass(ParseError, ExtractionError)
        assert issubclass(ExtractionError, CodeSchemaError)

    def test_str_includes_details(self):
        error = CodeSchemaError("Something failed", {"key": "value"})
        assert str(error) == "Something failed ({'key': 'value'})"
        assert str(CodeSchemaError("Plain")) == "Plain"

    def test_unsupported_language_details(self):
        error = UnsupportedLanguageError("cobol", ["java", "python"])
        assert error.details == {"language": "cobol", "supported": "java, python"}
