import random
import threading
import time
from typing import Callable, Dict, List, Optional

from matchfeed.models import TEAM_POOL, Game, generate_game_id
from .odds import initial_odds


def epoch_ms() -> int:
    return int(time.time() * 1000)


class GameRegistry:
    """In-memory store of every game, in creation order.

    Games are never removed. ``lock`` serializes the tick pass, spawning and
    connect snapshots when the server runs handlers on separate threads.
    """

    def __init__(self, rng=None, now: Optional[Callable[[], int]] = None, logger=None):
        self.rng = rng or random.Random()
        self.now = now or epoch_ms
        self.logger = logger
        self.lock = threading.RLock()
        self._games: List[Game] = []
        self._by_id: Dict[str, Game] = {}

    def __len__(self) -> int:
        with self.lock:
            return len(self._games)

    def create_game(self, delay_ms: int) -> Game:
        with self.lock:
            home_team, away_team = self.rng.sample(TEAM_POOL, 2)
            game = Game(
                game_id=generate_game_id(self.rng, self._by_id),
                home_team=home_team,
                away_team=away_team,
                start_time=self.now() + int(delay_ms),
                odds=initial_odds(self.rng),
            )
            self._games.append(game)
            self._by_id[game.game_id] = game
        if self.logger:
            self.logger.info(
                f"[game-scheduled] game={game.game_id} {home_team} vs {away_team} "
                f"start_in={int(delay_ms)}ms"
            )
        return game

    def list_games(self) -> List[Game]:
        with self.lock:
            return list(self._games)

    def get(self, game_id: str) -> Optional[Game]:
        with self.lock:
            return self._by_id.get(game_id)

    def snapshot(self) -> List[dict]:
        with self.lock:
            return [g.to_dict() for g in self._games]
