"""
Codec configuration.

Values come from the process environment, after loading a .env file if one
is present. Supported variables:

- PRINT_API_JSON_INDENT: indentation for encoded JSON, compact when unset
- PRINT_API_INCLUDE_NULLS: "true" to emit null for absent collections
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from PrintAPI.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

JSON_INDENT_ENV = "PRINT_API_JSON_INDENT"
INCLUDE_NULLS_ENV = "PRINT_API_INCLUDE_NULLS"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class CodecConfig(BaseModel):
    """Settings that shape the JSON produced by the codec."""
    json_indent: Optional[int] = Field(default=None, ge=0, description="None for compact output")
    include_nulls: bool = Field(default=False, description="Emit null for absent collections")


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean", config_field=name, config_value=value)


def load_codec_config() -> CodecConfig:
    """Read codec configuration from the environment."""
    load_dotenv()

    indent_value = os.getenv(JSON_INDENT_ENV)
    json_indent = None
    if indent_value is not None and indent_value.strip():
        try:
            json_indent = int(indent_value)
        except ValueError:
            raise ConfigurationError(
                f"{JSON_INDENT_ENV} must be an integer", config_field=JSON_INDENT_ENV, config_value=indent_value
            )
        if json_indent < 0:
            raise ConfigurationError(
                f"{JSON_INDENT_ENV} must not be negative", config_field=JSON_INDENT_ENV, config_value=indent_value
            )

    include_nulls = _parse_bool(INCLUDE_NULLS_ENV, os.getenv(INCLUDE_NULLS_ENV, "false"))

    config = CodecConfig(json_indent=json_indent, include_nulls=include_nulls)
    logger.debug(f"Loaded codec config: {config.model_dump()}")
    return config


_codec_config: Optional[CodecConfig] = None


def get_codec_config() -> CodecConfig:
    """Return the cached codec configuration, loading it on first use."""
    global _codec_config
    if _codec_config is None:
        _codec_config = load_codec_config()
    return _codec_config


def reset_codec_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    global _codec_config
    _codec_config = None
