"""Conversion settings model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fieldtree.models.field_path import FieldPath

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConversionConfig(BaseModel):
    """Settings applied when converting field-error trees.

    Attributes:
        base_path: Segments of the path every converted error is placed under
        ignore_path_prefix: Segments a leaf path must start with to be kept;
            the prefix is stripped from kept paths
        log_level: Level for the ``fieldtree`` logger
    """

    model_config = ConfigDict(extra="forbid")

    base_path: list[str] = Field(default_factory=list)
    ignore_path_prefix: list[str] = Field(default_factory=list)
    log_level: str = "WARNING"

    @field_validator("base_path", "ignore_path_prefix", mode="before")
    @classmethod
    def split_dotted(cls, value: object) -> object:
        """Accept ``a.b.c`` strings as well as segment lists."""
        if isinstance(value, str):
            return [segment for segment in value.split(".") if segment]
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and check the log level name."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def base_field_path(self) -> FieldPath:
        """Return ``base_path`` as a FieldPath."""
        return FieldPath.from_segments(self.base_path)

    def ignore_prefix_field_path(self) -> FieldPath:
        """Return ``ignore_path_prefix`` as a FieldPath."""
        return FieldPath.from_segments(self.ignore_path_prefix)
