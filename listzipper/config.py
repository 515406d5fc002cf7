from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SAMPLES: List[float] = [
    2.0, 1.0, 3.0, 4.0, 5.0, 1.0, 2.0, 6.0, 3.0, 2.0, 4.0, 7.0, 5.0, 3.0, 1.0, 2.0,
]


class RuntimeConfig(BaseModel):
    """Sample series and transform parameters for the demo pipeline.
    """

    samples: List[float] = Field(
        default_factory=lambda: list(DEFAULT_SAMPLES),
        description="Numeric series the transforms run over",
    )
    focus_index: int = Field(0, description="Initial focus position (negative counts from end)")
    window_size: int = Field(3, ge=1, description="Look-back length for the moving max")
    weights: List[float] = Field(
        default_factory=lambda: [1.0, 2.0, 3.0, 2.0, 1.0],
        description="Centered weights for the weighted moving average",
    )
    peak_marker: float = Field(10.0, description="Display magnitude drawn at detected peaks")
    transforms: List[str] = Field(
        default_factory=lambda: ["running_max", "moving_max", "peaks", "wma"],
    )

    @field_validator("samples")
    @classmethod
    def _non_empty(cls, v: List[float]) -> List[float]:
        if not v:
            raise ValueError("samples must contain at least one value")
        return v

    @field_validator("weights")
    @classmethod
    def _odd_weights(cls, v: List[float]) -> List[float]:
        if len(v) % 2 == 0:
            raise ValueError("weights must have odd length")
        if any(w < 0 for w in v) or sum(v) <= 0:
            raise ValueError("weights must be non-negative with a positive sum")
        return v

    @model_validator(mode="after")
    def _focus_in_range(self) -> "RuntimeConfig":
        size = len(self.samples)
        if not -size <= self.focus_index < size:
            raise ValueError(f"focus_index {self.focus_index} out of range for {size} samples")
        return self


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DASH_HOST: str = "127.0.0.1"
    DASH_PORT: int = 8050
    LOG_LEVEL: str = "INFO"


class AppConfig(BaseModel):
    env: EnvSettings
    runtime: RuntimeConfig

    @staticmethod
    def load(config_path: Optional[Path] = None) -> "AppConfig":
        env = EnvSettings()  # loads from environment and .env

        runtime = RuntimeConfig()
        if config_path is None:
            default_path = Path("config.yaml")
            config_path = default_path if default_path.exists() else None
        elif not Path(config_path).exists():
            raise ValueError(f"Config file not found: {config_path}")

        if config_path:
            with open(config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            try:
                runtime = RuntimeConfig(**raw)
            except ValidationError as ve:
                raise ValueError(f"Invalid config file: {ve}")

        return AppConfig(env=env, runtime=runtime)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load merged configuration from environment and optional YAML."""

    return AppConfig.load(config_path)
