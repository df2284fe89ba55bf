"""Game runner for playing five-card draw sessions."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Callable

from tqdm import tqdm

from agents.base import ActionSource, BaseAgent, IndexSource, SeatRouter
from config.settings import GameConfig, SimulationConfig
from poker.game import RoundController, RoundResult
from poker.player import Player

logger = logging.getLogger(__name__)

ContinueCallback = Callable[[RoundResult], bool]


@dataclass
class GameResult:
    """Result of a complete game (multiple rounds)."""

    rounds_played: int
    final_chips: dict[str, int]
    eliminated: list[str]  # Player names in elimination order
    winner: str | None  # Last player holding chips, or None if the game was stopped early
    rounds: list[RoundResult] = field(default_factory=list)

    @property
    def winning_hands(self) -> dict[str, int]:
        """Hand category name -> number of showdowns it won."""
        counts: dict[str, int] = {}
        for result in self.rounds:
            showdown = result.showdown
            if showdown.by_default or not showdown.winners:
                continue
            name = showdown.hand_names[showdown.winners[0]]
            counts[name] = counts.get(name, 0) + 1
        return counts


@dataclass
class BatchResult:
    """Aggregated results of many bot games."""

    num_games: int
    total_rounds: int
    games_won: dict[str, int]
    winning_hands: dict[str, int]
    unfinished: int  # Games stopped by the round limit

    @property
    def avg_rounds_per_game(self) -> float:
        return self.total_rounds / self.num_games if self.num_games else 0.0


class GameRunner:
    """Run five-card draw games until one player holds all the chips."""

    def __init__(
        self,
        game_config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.game_config = game_config or GameConfig()
        self.rng = Random(seed if seed is not None else self.game_config.seed)

    def create_players(self, names: list[str]) -> list[Player]:
        if len(set(names)) != len(names):
            raise ValueError("Player names must be unique")
        if not self.game_config.min_players <= len(names) <= self.game_config.max_players:
            raise ValueError(
                f"Need {self.game_config.min_players}-{self.game_config.max_players} players, got {len(names)}"
            )
        return [Player(name=name, chips=self.game_config.starting_chips) for name in names]

    def run_game(
        self,
        players: list[Player],
        action_source: ActionSource,
        index_source: IndexSource,
        should_continue: ContinueCallback | None = None,
        max_rounds: int | None = None,
    ) -> GameResult:
        """Play rounds until fewer than two players have chips.

        Args:
            players: Seated players. Eliminated players are removed in place.
            action_source: Betting decisions for every player.
            index_source: Replacement choices for every player.
            should_continue: Asked after each round while 2+ players remain;
                returning False ends the game.
            max_rounds: Optional hard limit on rounds.

        Returns:
            GameResult with final chips and elimination order.
        """
        controller = RoundController(
            seed=self.rng.getrandbits(32),
            compare_kickers=self.game_config.compare_kickers,
            keep_high_bet=self.game_config.keep_high_bet,
        )
        everyone = list(players)
        eliminated: list[str] = []
        rounds: list[RoundResult] = []

        while len(players) >= 2:
            if max_rounds is not None and len(rounds) >= max_rounds:
                logger.info("Stopping after %d rounds", len(rounds))
                break

            result = controller.play_round(players, action_source, index_source)
            rounds.append(result)
            eliminated.extend(p.name for p in result.eliminated)

            if len(players) >= 2 and should_continue is not None and not should_continue(result):
                break

        winner = players[0].name if len(players) == 1 else None
        return GameResult(
            rounds_played=len(rounds),
            final_chips={p.name: p.chips for p in everyone},
            eliminated=eliminated,
            winner=winner,
            rounds=rounds,
        )

    def run_bot_game(self, agents: list[BaseAgent], max_rounds: int | None = None) -> GameResult:
        """Seat one player per agent and play a full game."""
        players = self.create_players([agent.name for agent in agents])
        router = SeatRouter({agent.name: agent for agent in agents})
        initial = {p.name: p.chips for p in players}

        result = self.run_game(players, router, router, max_rounds=max_rounds)
        for round_result in result.rounds:
            winners = {p.name for p in round_result.showdown.winners}
            for agent in agents:
                if agent.name in round_result.chip_changes:
                    agent.notify_round_result(round_result.chip_changes[agent.name], agent.name in winners)

        logger.debug(
            "Game over after %d rounds: %s",
            result.rounds_played,
            {name: chips - initial[name] for name, chips in result.final_chips.items()},
        )
        return result

    def run_batch(
        self,
        agents: list[BaseAgent],
        sim_config: SimulationConfig | None = None,
        show_progress: bool = True,
    ) -> BatchResult:
        """Run many bot games and collect statistics."""
        sim_config = sim_config or SimulationConfig(num_players=len(agents))
        games_won = {agent.name: 0 for agent in agents}
        winning_hands: dict[str, int] = {}
        total_rounds = 0
        unfinished = 0

        iterator = range(sim_config.num_games)
        if show_progress:
            iterator = tqdm(iterator, desc="Running games", unit="games")

        for _ in iterator:
            result = self.run_bot_game(agents, max_rounds=sim_config.max_rounds_per_game)
            total_rounds += result.rounds_played
            if result.winner is None:
                unfinished += 1
            else:
                games_won[result.winner] += 1
            for name, count in result.winning_hands.items():
                winning_hands[name] = winning_hands.get(name, 0) + count

        return BatchResult(
            num_games=sim_config.num_games,
            total_rounds=total_rounds,
            games_won=games_won,
            winning_hands=winning_hands,
            unfinished=unfinished,
        )
