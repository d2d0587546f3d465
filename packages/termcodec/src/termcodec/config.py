"""Buffer and parameter limits for the decoders."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

# Environment variable prefix for limit overrides
ENV_PREFIX = "TERMCODEC_"

ENV_MAX_PARAMETERS = f"{ENV_PREFIX}MAX_PARAMETERS"
ENV_MAX_COMMAND_CHARACTERS = f"{ENV_PREFIX}MAX_COMMAND_CHARACTERS"
ENV_MAX_KEY_CHARACTERS = f"{ENV_PREFIX}MAX_KEY_CHARACTERS"
ENV_MAX_PARAMETER_VALUE = f"{ENV_PREFIX}MAX_PARAMETER_VALUE"

DEFAULT_MAX_PARAMETERS = 8
DEFAULT_MAX_COMMAND_CHARACTERS = 4
DEFAULT_MAX_KEY_CHARACTERS = 5
DEFAULT_MAX_PARAMETER_VALUE = 2**31 - 1


class CodecLimits(BaseModel):
    """Fixed capacities used when a decode state allocates its buffers."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Cursor move always writes two parameter slots
    max_parameters: int = Field(
        default=DEFAULT_MAX_PARAMETERS, ge=2, alias="maxParameters"
    )
    max_command_characters: int = Field(
        default=DEFAULT_MAX_COMMAND_CHARACTERS, ge=2, alias="maxCommandCharacters"
    )
    max_key_characters: int = Field(
        default=DEFAULT_MAX_KEY_CHARACTERS, ge=2, alias="maxKeyCharacters"
    )
    max_parameter_value: int = Field(
        default=DEFAULT_MAX_PARAMETER_VALUE, ge=1, alias="maxParameterValue"
    )


_ENV_FIELDS = {
    ENV_MAX_PARAMETERS: "max_parameters",
    ENV_MAX_COMMAND_CHARACTERS: "max_command_characters",
    ENV_MAX_KEY_CHARACTERS: "max_key_characters",
    ENV_MAX_PARAMETER_VALUE: "max_parameter_value",
}


def get_codec_limits() -> CodecLimits:
    """Get the codec limits.

    Starts from the defaults and applies any TERMCODEC_* environment
    overrides. Values are validated by pydantic, so a malformed override
    raises ``pydantic.ValidationError``.

    Returns:
        CodecLimits instance
    """
    overrides: dict[str, str] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        value = os.environ.get(env_name)
        if value:
            overrides[field_name] = value.strip()
    return CodecLimits.model_validate(overrides)
