"""Configuration classes for XML structure conversion.

This module provides an immutable configuration object controlling name
sanitization, input file resolution and the keys used when a structure is
projected to plain dictionaries or JSON.
"""

import json
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional, Tuple

DEFAULT_NAME_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    ("-", "_dash_"),
    (":", "_colon_"),
    (".", "_dot_"),
)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ConversionConfig:
    """Configuration for converting a DOM tree into a structure value.

    Instances are immutable; use override() to derive a changed copy.
    """

    # Name sanitization
    name_substitutions: Tuple[Tuple[str, str], ...] = DEFAULT_NAME_SUBSTITUTIONS

    # Input file resolution
    default_extension: str = ".xml"
    recognized_extensions: Tuple[str, ...] = (".xml",)
    append_default_extension: bool = True

    # Keys used by the dictionary / JSON projection
    attributes_key: str = "Attributes"
    text_key: str = "Text"
    comment_key: str = "Comment"
    cdata_key: str = "CDATA"

    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and validate conversion configuration."""
        object.__setattr__(
            self,
            "name_substitutions",
            tuple((source, replacement) for source, replacement in self.name_substitutions),
        )
        object.__setattr__(
            self, "recognized_extensions", tuple(self.recognized_extensions)
        )

        for source, replacement in self.name_substitutions:
            if not source:
                raise ConfigValidationError(
                    "name_substitutions cannot contain an empty source string",
                    field_name="name_substitutions",
                )
            if not isinstance(replacement, str):
                raise ConfigValidationError(
                    f"Replacement for {source!r} must be a string",
                    field_name="name_substitutions",
                )

        if not self.default_extension.startswith("."):
            raise ConfigValidationError(
                "default_extension must start with '.'",
                field_name="default_extension",
                suggestions=[f".{self.default_extension}"],
            )
        for extension in self.recognized_extensions:
            if not extension.startswith("."):
                raise ConfigValidationError(
                    f"Recognized extension {extension!r} must start with '.'",
                    field_name="recognized_extensions",
                )

        keys = self.reserved_keys
        if not all(keys):
            raise ConfigValidationError("Projection keys cannot be empty")
        if len(set(keys)) != len(keys):
            raise ConfigValidationError(
                f"Projection keys must be distinct, got {list(keys)}",
                suggestions=["Rename one of the colliding keys"],
            )

    @property
    def reserved_keys(self) -> Tuple[str, str, str, str]:
        """Keys taken by attributes and text buckets in the projection."""
        return (self.attributes_key, self.text_key, self.comment_key, self.cdata_key)

    def has_recognized_extension(self, file_name: str) -> bool:
        """Check whether a file name ends with one of the recognized extensions."""
        lowered = file_name.lower()
        return any(lowered.endswith(ext.lower()) for ext in self.recognized_extensions)

    def override(self, **kwargs: Any) -> "ConversionConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ConversionConfig().override(text_key="#text")
        """
        try:
            return replace(self, **kwargs)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if config_field.name == "name_substitutions":
                value = [list(pair) for pair in value]
            elif isinstance(value, tuple):
                value = list(value)
            result[config_field.name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversionConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected.
        """
        known = {config_field.name for config_field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {unknown}",
                field_name=unknown[0],
                suggestions=sorted(known),
            )

        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ConversionConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
