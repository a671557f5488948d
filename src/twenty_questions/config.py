import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import FrozenSet

from dotenv import load_dotenv


load_dotenv()


@dataclass
class Settings:
    """Environment-driven configuration with defaults for local play."""

    questions_csv: str = field(default_factory=lambda: os.getenv("QUESTIONS_CSV", "questions.csv"))
    characters_csv: str = field(default_factory=lambda: os.getenv("CHARACTERS_CSV", "characters.csv"))
    universe_size: int = field(default_factory=lambda: _int_env("UNIVERSE_SIZE", 32))

    @property
    def universe(self) -> FrozenSet[int]:
        return make_universe(self.universe_size)


def _int_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def make_universe(size: int) -> FrozenSet[int]:
    """Character IDs 1..size."""
    if size < 1:
        raise ValueError("universe size must be at least 1")
    return frozenset(range(1, size + 1))


@lru_cache
def get_settings() -> Settings:
    return Settings()
