"""Process-wide defaults loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from pathmeasure.types import CalculationSettings, LengthPrecision, PerpendicularPrecision


class Settings(BaseSettings):
    """Defaults for new paths, loaded from environment variables and .env.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHMEASURE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Precision
    length_precision: LengthPrecision = LengthPrecision.NORMAL
    perpendicular_precision: PerpendicularPrecision = PerpendicularPrecision.NORMAL

    # Decomposition
    close_subpaths: bool = False  # Draw a line back to the subpath start on close

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    def calculation_settings(self) -> CalculationSettings:
        """Precision settings for new paths."""
        return CalculationSettings(
            length_precision=self.length_precision,
            perpendicular_precision=self.perpendicular_precision,
        )


settings = Settings()


def get_default_settings() -> CalculationSettings:
    """Default precision for paths created without explicit settings."""
    return settings.calculation_settings()
