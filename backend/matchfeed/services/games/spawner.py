from typing import List, Tuple

from matchfeed.models import Game
from .registry import GameRegistry


class GameSpawner:
    """Keeps the fixture list topped up with future scheduled games."""

    def __init__(
        self,
        registry: GameRegistry,
        logger,
        initial_batch: int = 3,
        recurring_batch: int = 2,
        initial_delay_ms: Tuple[int, int] = (5000, 20000),
        recurring_delay_ms: Tuple[int, int] = (15000, 45000),
    ):
        self.registry = registry
        self.logger = logger
        self.initial_batch = initial_batch
        self.recurring_batch = recurring_batch
        self.initial_delay_ms = initial_delay_ms
        self.recurring_delay_ms = recurring_delay_ms

    def _spawn(self, count: int, delay_range: Tuple[int, int]) -> List[Game]:
        low, high = delay_range
        with self.registry.lock:
            games = [self.registry.create_game(self.registry.rng.randint(low, high)) for _ in range(count)]
        self.logger.info(f"[spawn] created={len(games)} total={len(self.registry)}")
        return games

    def spawn_initial(self) -> List[Game]:
        return self._spawn(self.initial_batch, self.initial_delay_ms)

    def spawn_batch(self) -> List[Game]:
        return self._spawn(self.recurring_batch, self.recurring_delay_ms)
