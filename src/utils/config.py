"""Configuration management for Pain Point Priority Scout."""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings

from ..scoring.market import KeywordLocale


class DemandConfig(BaseModel):
    """Demand intensity configuration."""

    size_multiplier: float = 10.0  # Points per 100% share of the batch
    emotion_weight: float = 1.0  # Max points from emotional intensity


class MarketConfig(BaseModel):
    """Market size configuration."""

    locale: KeywordLocale = KeywordLocale.ZH
    popular_keywords: Optional[List[str]] = None  # Overrides the locale set
    moderate_sample_size: int = 100
    cluster_size_divisor: float = 30.0


class CompetitionConfig(BaseModel):
    """Competition configuration."""

    sentinel_substrings: Optional[List[str]] = None


class SampleConfig(BaseModel):
    """Sample size thresholds shared by market size and data quality."""

    preliminary: int = 50
    reliable: int = 200

    @model_validator(mode="after")
    def check_order(self) -> "SampleConfig":
        if self.preliminary > self.reliable:
            raise ValueError("sample.preliminary must not exceed sample.reliable")
        return self


class ScoringConfig(BaseModel):
    """Scoring configuration."""

    weights: Dict[str, float] = Field(
        default_factory=lambda: {"demand": 0.4, "market": 0.3, "competition": 0.3}
    )
    levels: Dict[str, float] = Field(
        default_factory=lambda: {"high": 3.5, "medium": 2.5}
    )
    demand: DemandConfig = Field(default_factory=DemandConfig)
    market: MarketConfig = Field(default_factory=MarketConfig)
    competition: CompetitionConfig = Field(default_factory=CompetitionConfig)
    sample: SampleConfig = Field(default_factory=SampleConfig)

    @model_validator(mode="after")
    def check_weights_and_levels(self) -> "ScoringConfig":
        missing = {"demand", "market", "competition"} - set(self.weights)
        if missing:
            raise ValueError(f"scoring.weights is missing {sorted(missing)}")
        if abs(sum(self.weights.values()) - 1.0) > 1e-9:
            raise ValueError("scoring.weights must sum to 1.0")
        if {"high", "medium"} - set(self.levels):
            raise ValueError("scoring.levels needs both 'high' and 'medium'")
        if self.levels["high"] < self.levels["medium"]:
            raise ValueError("scoring.levels.high must not be below scoring.levels.medium")
        return self


class APIConfig(BaseModel):
    """API configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = "data/logs/scout.log"


class Config(BaseModel):
    """Main configuration model."""

    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class Settings(BaseSettings):
    """Environment-based settings."""

    # Logging
    log_level: str = ""

    # API
    api_host: str = ""
    api_port: int = 0

    # Scoring
    keyword_locale: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


class ConfigManager:
    """Configuration manager for loading and merging config sources."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to YAML configuration file
        """
        # Load environment variables
        load_dotenv()

        # Load YAML config
        if config_path is None:
            config_path = Path(__file__).parent.parent.parent / "config" / "config.yaml"

        self.config_path = Path(config_path)
        self.yaml_config = self._load_yaml()

        # Load environment settings
        self.env_settings = Settings()

        # Merge configurations
        self.config = self._merge_config()

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not self.config_path.exists():
            return {}

        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _merge_config(self) -> Config:
        """Merge YAML config with environment variables."""
        # Start with YAML config
        merged = self.yaml_config.copy()

        # Override with environment variables where set
        if self.env_settings.log_level:
            merged.setdefault("logging", {})["level"] = self.env_settings.log_level

        if self.env_settings.api_host:
            merged.setdefault("api", {})["host"] = self.env_settings.api_host

        if self.env_settings.api_port:
            merged.setdefault("api", {})["port"] = self.env_settings.api_port

        if self.env_settings.keyword_locale:
            merged.setdefault("scoring", {}).setdefault("market", {})[
                "locale"
            ] = self.env_settings.keyword_locale

        return Config(**merged)


# Global config instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> Config:
    """Get global configuration instance."""
    return get_config_manager().config


def get_settings() -> Settings:
    """Get environment settings."""
    return get_config_manager().env_settings


def get_config_manager() -> ConfigManager:
    """Get configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
