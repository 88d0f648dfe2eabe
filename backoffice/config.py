"""Configuration management for backoffice."""

from dataclasses import dataclass, field
from pathlib import Path

from backoffice.exceptions import ConfigurationError
from backoffice.logging import LOG_FORMATS


@dataclass
class ProjectionConfig:
    """Bounds applied when expanding recurring accounts."""

    horizon_months: int = 12
    max_occurrences: int = 24

    def validate(self) -> None:
        """Raise ConfigurationError when a bound is negative."""
        if self.horizon_months < 0:
            raise ConfigurationError(
                f"horizon_months must be >= 0, got {self.horizon_months}"
            )
        if self.max_occurrences < 0:
            raise ConfigurationError(
                f"max_occurrences must be >= 0, got {self.max_occurrences}"
            )


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class BackofficeConfig:
    """Main configuration for backoffice."""

    projection: ProjectionConfig = field(default_factory=ProjectionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"
    locale: str = "pt_BR"

    @classmethod
    def from_env(cls) -> "BackofficeConfig":
        """Create config from environment variables."""
        import os

        try:
            projection = ProjectionConfig(
                horizon_months=int(os.getenv("PROJECTION_HORIZON_MONTHS", "12")),
                max_occurrences=int(os.getenv("PROJECTION_MAX_OCCURRENCES", "24")),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid integer in environment: {exc}") from exc
        projection.validate()

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            projection=projection,
            output=output,
            seed=seed,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
            locale=os.getenv("FAKER_LOCALE", "pt_BR"),
        )
