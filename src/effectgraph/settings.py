"""
Runtime settings for effectgraph.

Settings are read from ``EFFECTGRAPH_*`` environment variables. The CLI
may load a ``.env`` file into the environment before calling
``Settings.from_env``.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from effectgraph.exceptions import ConfigurationError

ENV_PREFIX = "EFFECTGRAPH_"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    rich_tracebacks: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values = {}
        for field_name in cls.model_fields:
            key = f"{ENV_PREFIX}{field_name.upper()}"
            if key in env:
                values[field_name] = env[key]
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError.from_exception(e, details={"variables": sorted(values)})
