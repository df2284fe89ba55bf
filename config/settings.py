"""Configuration settings for five-card draw."""

from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

HAND_SIZE = 5
DECK_SIZE = 52
# Bots replace at most three cards, so each seat needs up to eight.
BOT_CARDS_PER_SEAT = 8
# Humans may replace all five.
HUMAN_CARDS_PER_SEAT = 10


def check_deck_supply(humans: int, bots: int) -> None:
    """Raise ValueError if a table could draw more cards than one deck holds."""
    needed = humans * HUMAN_CARDS_PER_SEAT + bots * BOT_CARDS_PER_SEAT
    if needed > DECK_SIZE:
        raise ValueError(
            f"{humans} human(s) and {bots} bot(s) could need {needed} cards, more than the {DECK_SIZE} in a deck"
        )


@dataclass
class GameConfig:
    """Game configuration."""

    starting_chips: int = 100
    min_players: int = 2
    max_players: int = 10
    compare_kickers: bool = False  # Break equal-category ties on card values
    keep_high_bet: bool = False  # A bet below the amount owed leaves the high bet alone
    seed: int | None = None

    def validate(self) -> None:
        if self.starting_chips <= 0:
            raise ValueError(f"starting_chips must be positive, got {self.starting_chips}")
        if self.min_players < 2:
            raise ValueError(f"min_players must be at least 2, got {self.min_players}")
        if self.max_players < self.min_players:
            raise ValueError("max_players must not be below min_players")
        if self.max_players * HAND_SIZE > DECK_SIZE:
            raise ValueError(f"max_players={self.max_players} cannot all be dealt from one deck")


@dataclass
class SimulationConfig:
    """Bot-only batch simulation configuration."""

    num_games: int = 100
    num_players: int = 4
    max_rounds_per_game: int = 200

    def validate(self) -> None:
        if self.num_games <= 0:
            raise ValueError(f"num_games must be positive, got {self.num_games}")
        if self.num_players < 2:
            raise ValueError(f"num_players must be at least 2, got {self.num_players}")
        if self.num_players * BOT_CARDS_PER_SEAT > DECK_SIZE:
            raise ValueError(f"num_players={self.num_players} could exhaust the deck during replacement")
        if self.max_rounds_per_game <= 0:
            raise ValueError(f"max_rounds_per_game must be positive, got {self.max_rounds_per_game}")


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)

    def validate(self) -> None:
        self.game.validate()
        self.simulation.validate()


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "game" in data:
        config.game = GameConfig(**data["game"])
    if "simulation" in data:
        config.simulation = SimulationConfig(**data["simulation"])

    config.validate()
    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": asdict(config.game),
        "simulation": asdict(config.simulation),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
