import os
from pydantic import BaseModel, Field, field_validator

from misctools.core.enums import EqualityPolicy

__all__ = ["Settings", "settings", "ENV_PREFIX"]

ENV_PREFIX = "MISCTOOLS_"


class Settings(BaseModel):
    PATH_SEPARATOR: str = Field(
        "->", description="Token separating segments of a nested attribute path"
    )
    INTERSECTION_EQUALITY: EqualityPolicy = Field(
        EqualityPolicy.STRICT,
        description="Default equality used when intersecting sequences",
    )
    LOG_LEVEL: str = Field("INFO", description="Level of the misctools logger")

    @field_validator("PATH_SEPARATOR")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("PATH_SEPARATOR must not be empty.")
        return value

    @field_validator("INTERSECTION_EQUALITY", mode="before")
    @classmethod
    def _lowercase_policy(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``MISCTOOLS_*`` environment variables.

        ``LOG_LEVEL`` is read without the prefix so it is shared with the host
        application. Unset variables keep their defaults.
        """
        values = {}
        for name in ("PATH_SEPARATOR", "INTERSECTION_EQUALITY"):
            raw = os.getenv(ENV_PREFIX + name)
            if raw is not None:
                values[name] = raw

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level

        return cls(**values)


settings = Settings.load()
