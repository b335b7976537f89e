"""Configuration loading for SweepGen.

Settings live in ``~/.config/sweepgen/config.toml``. A missing file is not
an error; built-in defaults are used. Values in the file are merged over the
defaults one section at a time, then validated.
"""

from pathlib import Path
from typing import Any, Optional

import toml
from pydantic import BaseModel, Field, ValidationError

from sweepgen.errors import ConfigError


class OutputSettings(BaseModel):
    """Where sweep output files are written."""

    dir: str = Field(default="./out", min_length=1, description="Output directory")

    model_config = {"strict": True}


class CandleSettings(BaseModel):
    """Candle aggregation settings."""

    interval_ms: int = Field(default=60_000, ge=1, description="Candle width in milliseconds")

    model_config = {"strict": True}


class RankingSettings(BaseModel):
    """Ranking settings."""

    top_k: int = Field(default=5, ge=0, description="Number of top candidates to keep")

    model_config = {"strict": True}


class ParsingSettings(BaseModel):
    """Tick parsing settings."""

    policy: str = Field(default="lenient", description="Parsing policy (lenient or strict)")

    model_config = {"strict": True}


class StrategySettings(BaseModel):
    """Strategy evaluation settings."""

    model: str = Field(default="heuristic", description="Metrics model name")

    model_config = {"strict": True}


class SweepgenConfig(BaseModel):
    """Complete SweepGen configuration. Unknown sections are kept as-is."""

    output: OutputSettings = Field(default_factory=OutputSettings)
    candles: CandleSettings = Field(default_factory=CandleSettings)
    ranking: RankingSettings = Field(default_factory=RankingSettings)
    parsing: ParsingSettings = Field(default_factory=ParsingSettings)
    strategy: StrategySettings = Field(default_factory=StrategySettings)

    model_config = {"extra": "allow"}


DEFAULT_CONFIG: dict[str, dict[str, Any]] = SweepgenConfig().model_dump()


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "sweepgen" / "config.toml"


def validate_config(raw: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Merge raw sections over the defaults and validate the result.

    Raises:
        ConfigError: If a section is not a table or a value is invalid.
    """
    merged = SweepgenConfig().model_dump()
    for section, values in raw.items():
        if not isinstance(values, dict):
            raise ConfigError(f"Config section [{section}] must be a table")
        merged.setdefault(section, {}).update(values)

    try:
        return SweepgenConfig.model_validate(merged).model_dump()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_path: Optional[Path] = None) -> dict[str, dict[str, Any]]:
    """Load configuration merged over the defaults.

    Args:
        config_path: Explicit config file. Defaults to ``get_config_path()``.

    Raises:
        ConfigError: If the file exists but cannot be read, parsed or
            validated.
    """
    path = Path(config_path) if config_path is not None else get_config_path()

    if not path.exists():
        return SweepgenConfig().model_dump()

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Could not load config {path}: {e}") from e

    try:
        return validate_config(loaded)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write a template configuration file with the default values."""
    path = Path(config_path) if config_path is not None else get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return path
