import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "services"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False
    log_level: str = Field("INFO", pattern=r"(?i)^(CRITICAL|ERROR|WARNING|INFO|DEBUG|NOTSET)$")

    fuzzy_token_threshold: float = Field(0.85, ge=0.0, le=1.0)
    fuzzy_token_credit: float = Field(0.8, ge=0.0, le=1.0)
    pattern_coverage_weight: float = Field(0.6, ge=0.0, le=1.0)

    string_similarity_weight: float = Field(0.1, ge=0.0, le=1.0)
    weight_boost_step: float = Field(0.05, ge=0.0, le=1.0)
    max_boosted_confirmations: int = Field(4, ge=0)
    sku_similarity_factor: float = Field(0.8, ge=0.0, le=1.0)

    default_pattern_min_confidence: float = Field(0.5, ge=0.0, le=1.0)
    default_ingredient_min_confidence: float = Field(0.3, ge=0.0, le=1.0)
    default_max_results: int = Field(5, ge=1)


settings = Settings()


def configure_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured level to the matcher loggers.

    ``debug`` forces DEBUG, which turns on the per-call ``[PatternMatch]`` and
    ``[IngredientMatch]`` summaries. Handlers are left to the host application.
    """
    config = config or settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if config.debug else config.log_level.upper())
    return logger
