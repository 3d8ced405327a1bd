"""Configuration classes for SVG parsing.

Each layer (charset detection, tokenization, serialization) has its own
frozen dataclass; ``ParserConfig`` groups them and is what the public API
accepts. Invalid values raise ``ConfigValidationError`` at construction time.
"""

import codecs
import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from svgparser.shared.errors import ConfigValidationError

DEFAULT_CHUNK_SIZE = 65536
DEFAULT_TEXT_BUFFER_SIZE = 65536

_COMPONENTS = ("encoding", "tokenizer", "serializer")


@dataclass(frozen=True)
class EncodingConfig:
    """Configuration for charset detection."""

    # Used when the document has neither a BOM nor a declared encoding
    default_encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Validate encoding configuration."""
        try:
            codecs.lookup(self.default_encoding)
        except LookupError as e:
            raise ConfigValidationError(
                f"default_encoding is not a known codec: {self.default_encoding}",
                field_name="default_encoding",
                suggestions=["Use a codec name such as 'utf-8' or 'latin-1'"],
            ) from e


@dataclass(frozen=True)
class TokenizerConfig:
    """Configuration for the expat-backed token source."""

    # Characters handed to expat per feed call
    chunk_size: int = DEFAULT_CHUNK_SIZE
    # Size of the buffer expat collects character data in
    text_buffer_size: int = DEFAULT_TEXT_BUFFER_SIZE

    def __post_init__(self) -> None:
        """Validate tokenizer configuration."""
        if self.chunk_size <= 0:
            raise ConfigValidationError(
                "chunk_size must be > 0", field_name="chunk_size"
            )
        if self.text_buffer_size <= 0:
            raise ConfigValidationError(
                "text_buffer_size must be > 0", field_name="text_buffer_size"
            )


@dataclass(frozen=True)
class SerializerConfig:
    """Configuration for XML output."""

    sort_attributes: bool = False


@dataclass(frozen=True)
class ParserConfig:
    """Complete configuration for parsing and serializing SVG documents.

    Immutable, so a single instance can be shared between parser objects.
    """

    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate component types."""
        expected = {
            "encoding": EncodingConfig,
            "tokenizer": TokenizerConfig,
            "serializer": SerializerConfig,
        }
        for name, config_type in expected.items():
            if not isinstance(getattr(self, name), config_type):
                raise ConfigValidationError(
                    f"{name} must be a {config_type.__name__}", field_name=name
                )

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Component fields use double-underscore notation.

        Example:
            >>> config = ParserConfig().override(
            ...     tokenizer__chunk_size=1024,
            ...     serializer__sort_attributes=True,
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=list(_COMPONENTS),
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = {}
        for component, overrides in nested_overrides.items():
            try:
                new_fields[component] = replace(getattr(self, component), **overrides)
            except TypeError as e:
                raise ConfigValidationError(str(e), field_name=component) from e
        new_fields.update(top_level)

        try:
            return replace(self, **new_fields)
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {"correlation_id": self.correlation_id}
        for component in _COMPONENTS:
            config = getattr(self, component)
            result[component] = {
                name: getattr(config, name) for name in config.__dataclass_fields__
            }
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Missing sections and fields keep their defaults.
        """
        component_types = {
            "encoding": EncodingConfig,
            "tokenizer": TokenizerConfig,
            "serializer": SerializerConfig,
        }
        field_values: Dict[str, Any] = {}
        for name, value in data.items():
            if name in component_types:
                if not isinstance(value, dict):
                    raise ConfigValidationError(
                        f"{name} section must be a mapping", field_name=name
                    )
                try:
                    field_values[name] = component_types[name](**value)
                except TypeError as e:
                    raise ConfigValidationError(str(e), field_name=name) from e
            elif name == "correlation_id":
                field_values[name] = value
            else:
                raise ConfigValidationError(
                    f"Unknown configuration key: {name}", field_name=name
                )
        return cls(**field_values)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))
