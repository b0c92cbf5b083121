"""Tests for the conversion configuration."""

import json

import pytest

from xml_structure.shared.config import (
    DEFAULT_NAME_SUBSTITUTIONS,
    ConfigError,
    ConfigValidationError,
    ConversionConfig,
)


class TestConversionConfig:
    """Test suite for ConversionConfig."""

    def test_default_configuration(self):
        """Test default configuration values."""
        config = ConversionConfig()

        assert config.name_substitutions == DEFAULT_NAME_SUBSTITUTIONS
        assert config.default_extension == ".xml"
        assert config.recognized_extensions == (".xml",)
        assert config.append_default_extension is True
        assert config.reserved_keys == ("Attributes", "Text", "Comment", "CDATA")
        assert config.correlation_id is None

    def test_configuration_is_frozen(self):
        """Test that configuration instances are immutable."""
        config = ConversionConfig()
        with pytest.raises(Exception):
            config.text_key = "other"

    def test_default_extension_must_start_with_dot(self):
        """Test validation of the default extension."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ConversionConfig(default_extension="xml")

        assert exc_info.value.field_name == "default_extension"
        assert ".xml" in exc_info.value.suggestions

    def test_recognized_extensions_must_start_with_dot(self):
        """Test validation of recognized extensions."""
        with pytest.raises(ConfigValidationError, match="must start with"):
            ConversionConfig(recognized_extensions=(".xml", "svg"))

    def test_empty_substitution_source_rejected(self):
        """Test that an empty substitution source is rejected."""
        with pytest.raises(ConfigValidationError, match="empty source"):
            ConversionConfig(name_substitutions=(("", "_"),))

    def test_projection_keys_must_be_distinct(self):
        """Test that colliding projection keys are rejected."""
        with pytest.raises(ConfigValidationError, match="distinct"):
            ConversionConfig(text_key="CDATA")

    def test_projection_keys_cannot_be_empty(self):
        """Test that empty projection keys are rejected."""
        with pytest.raises(ConfigValidationError, match="cannot be empty"):
            ConversionConfig(comment_key="")

    def test_validation_error_is_config_error(self):
        """Test exception hierarchy."""
        assert issubclass(ConfigValidationError, ConfigError)

    def test_has_recognized_extension_is_case_insensitive(self):
        """Test extension recognition."""
        config = ConversionConfig()

        assert config.has_recognized_extension("doc.xml")
        assert config.has_recognized_extension("DOC.XML")
        assert not config.has_recognized_extension("doc")
        assert not config.has_recognized_extension("doc.txt")

    def test_override(self):
        """Test creating a configuration with overrides."""
        config = ConversionConfig().override(text_key="#text")

        assert config.text_key == "#text"
        assert config.attributes_key == "Attributes"

    def test_override_unknown_field(self):
        """Test that overriding an unknown field fails."""
        with pytest.raises(ConfigValidationError):
            ConversionConfig().override(unknown_field=True)


class TestConversionConfigSerialization:
    """Test dictionary and JSON serialization."""

    def test_to_dict(self):
        """Test conversion to dictionary."""
        data = ConversionConfig().to_dict()

        assert data["default_extension"] == ".xml"
        assert data["recognized_extensions"] == [".xml"]
        assert data["name_substitutions"][0] == ["-", "_dash_"]

    def test_json_round_trip(self):
        """Test that JSON serialization restores an equal configuration."""
        config = ConversionConfig(text_key="#text", recognized_extensions=(".xml", ".svg"))
        restored = ConversionConfig.from_json(config.to_json())

        assert restored == config

    def test_from_dict_partial(self):
        """Test that missing keys take default values."""
        config = ConversionConfig.from_dict({"cdata_key": "#cdata"})

        assert config.cdata_key == "#cdata"
        assert config.text_key == "Text"

    def test_from_dict_custom_substitutions(self):
        """Test loading a custom substitution table."""
        config = ConversionConfig.from_dict({"name_substitutions": [["-", "_"]]})

        assert config.name_substitutions == (("-", "_"),)

    def test_from_dict_unknown_key(self):
        """Test that unknown keys are reported."""
        with pytest.raises(ConfigValidationError) as exc_info:
            ConversionConfig.from_dict({"text_kye": "x"})

        assert exc_info.value.field_name == "text_kye"
        assert "text_key" in exc_info.value.suggestions

    def test_to_json_is_valid_json(self):
        """Test JSON output parses back to the dictionary form."""
        config = ConversionConfig()
        assert json.loads(config.to_json()) == config.to_dict()
