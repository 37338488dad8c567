"""Configuration schema models using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class DataConfig(BaseModel):
    """Locations of the bronze, silver, and gold data layers.

    Each layer defaults to a subdirectory of ``root``; an explicit directory
    overrides that layer only.
    """

    root: Path = Field(Path("data"), description="Base directory for all data layers")
    bronze_dir: Optional[Path] = Field(None, description="Raw input files")
    silver_dir: Optional[Path] = Field(None, description="Per-source normalized output")
    gold_dir: Optional[Path] = Field(None, description="Joined canonical output")

    @property
    def bronze_path(self) -> Path:
        return self.bronze_dir or self.root / "bronze"

    @property
    def silver_path(self) -> Path:
        return self.silver_dir or self.root / "silver"

    @property
    def gold_path(self) -> Path:
        return self.gold_dir or self.root / "gold"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class LLMConfig(BaseModel):
    """Chat-completion settings for the answer step."""

    model: str = Field("gpt-3.5-turbo", min_length=1, description="Model name")
    temperature: float = Field(0.3, ge=0.0, le=2.0, description="Sampling temperature")
    api_url: str = Field(
        "https://api.openai.com/v1/chat/completions",
        description="OpenAI-compatible chat completions endpoint",
    )
    timeout_seconds: int = Field(30, ge=5, le=300, description="HTTP timeout (seconds)")
    max_jobs_in_prompt: int = Field(
        25, ge=1, le=500, description="Matched jobs listed in the prompt, in dataset order"
    )

    @field_validator("model", "api_url")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped


class CacheConfig(BaseModel):
    """Bounded response cache settings."""

    enabled: bool = Field(True, description="Reuse answers for repeated queries")
    capacity: int = Field(100, ge=1, description="Maximum cached answers (LRU eviction)")


class AppConfig(BaseModel):
    """Root configuration object. Every section has defaults."""

    data: DataConfig = Field(default_factory=DataConfig, description="Data layer locations")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    llm: LLMConfig = Field(default_factory=LLMConfig, description="LLM settings")
    cache: CacheConfig = Field(default_factory=CacheConfig, description="Response cache")

    model_config = {"extra": "forbid"}
