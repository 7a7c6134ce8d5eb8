"""Configuration settings for showdown evaluation."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

MIN_PLAYERS = 2
MAX_PLAYERS = 10


@dataclass
class EvaluationConfig:
    """Hand evaluation configuration."""

    max_workers: int = 1  # >1 evaluates players on a thread pool

    def __post_init__(self) -> None:
        workers = self.max_workers
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise ValueError(f"max_workers must be a positive integer, got {self.max_workers!r}")


@dataclass
class SimulationConfig:
    """Random deal configuration."""

    num_players: int = 2
    num_deals: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"num_players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {self.num_players}"
            )
        if self.num_deals < 1:
            raise ValueError(f"num_deals must be positive, got {self.num_deals}")


@dataclass
class DisplayConfig:
    """Terminal output configuration."""

    show_scores: bool = False
    show_player_views: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.level, str) or not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(f"Unknown log level: {self.level!r}")


@dataclass
class Config:
    """Complete configuration."""

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(data).__name__}")

    config = Config()

    if "evaluation" in data:
        config.evaluation = EvaluationConfig(**data["evaluation"])
    if "simulation" in data:
        config.simulation = SimulationConfig(**data["simulation"])
    if "display" in data:
        config.display = DisplayConfig(**data["display"])
    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "evaluation": asdict(config.evaluation),
        "simulation": asdict(config.simulation),
        "display": asdict(config.display),
        "logging": asdict(config.logging),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
