"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse NAIPE_SEED environment variable."""
    seed = os.getenv("NAIPE_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """War game configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    face_down_cards: int = field(
        default_factory=lambda: int(os.getenv("NAIPE_FACE_DOWN_CARDS", "3"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
