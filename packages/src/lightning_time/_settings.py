"""Application configuration via pydantic-settings.

Configuration is loaded from environment variables and/or a ``.env``
file.  Every variable carries the ``LIGHTNING_TIME_`` prefix and nested
models use ``__`` as the delimiter, e.g.
``LIGHTNING_TIME_LOGGING__LEVEL=DEBUG``.

The schema covers:

* **Logging** — level, format, optional file sink, rotation.
* **Colors** — the fixed channels of the derived display colors.

Byte pairs are given as JSON arrays::

    LIGHTNING_TIME_COLORS__BOLT=[200,10]
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lightning_time._colors import ColorScheme

Byte = Annotated[int, Field(ge=0, le=255)]

# -------------------------------------------------------------------
# Sub-models (BaseModel, NOT BaseSettings — nested via composition)
# -------------------------------------------------------------------


class LoggingSettings(BaseModel):
    """Logging configuration.

    A command-line tool should stay quiet on success, so the default
    level is ``WARNING`` and the default format is ``"text"``.  Use
    ``"json"`` when the output is collected by a log aggregator.

    When ``file`` is set, logs are also written to a rotating file.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="text",
        description="'text' for terminals, 'json' for NDJSON log lines.",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description="Maximum log file size in megabytes before rotation.",
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class ColorSchemeSettings(BaseModel):
    """Fixed channels of the derived colors.

    Defaults match :class:`~lightning_time._colors.ColorScheme`.
    """

    bolt: tuple[Byte, Byte] = Field(
        default=(161, 0),
        description="Green and blue channels of the bolt color.",
    )
    zap: tuple[Byte, Byte] = Field(
        default=(50, 214),
        description="Red and blue channels of the zap color.",
    )
    spark: tuple[Byte, Byte] = Field(
        default=(246, 133),
        description="Red and green channels of the spark color.",
    )

    def to_scheme(self) -> ColorScheme:
        """Build the immutable scheme passed to ``colors()``."""
        return ColorScheme(bolt=self.bolt, zap=self.zap, spark=self.spark)


# -------------------------------------------------------------------
# Root settings
# -------------------------------------------------------------------


class Settings(BaseSettings):
    """Root settings for the ``lightning-time`` tool.

    Example ``.env``::

        LIGHTNING_TIME_LOGGING__LEVEL=DEBUG
        LIGHTNING_TIME_LOGGING__FORMAT=json
        LIGHTNING_TIME_COLORS__SPARK=[255,128]
    """

    model_config = SettingsConfigDict(
        env_prefix="LIGHTNING_TIME_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
    colors: ColorSchemeSettings = Field(
        default_factory=ColorSchemeSettings,
        description="Base colors for the `colors` command.",
    )
