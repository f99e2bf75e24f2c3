from typing import Any, Dict, List, Optional

from matchfeed.models import (
    STATUS_FINISHED,
    STATUS_IN_PROGRESS,
    STATUS_SCHEDULED,
    Game,
)
from .events import determine_event
from .odds import update_odds
from .registry import GameRegistry


class SimulationClock:
    """Advances every live game by one step per tick and publishes the result.

    A tick walks the registry in creation order while holding its lock:
    due scheduled games kick off, in-progress games gain one or two minutes
    plus a random event, and games that reach ``total_minutes`` are
    finished. Finished games are left untouched.
    """

    def __init__(self, registry: GameRegistry, fanout, logger, total_minutes: int = 12):
        self.registry = registry
        self.fanout = fanout
        self.logger = logger
        self.total_minutes = total_minutes
        self.ticks = 0

    @property
    def rng(self):
        return self.registry.rng

    def tick(self) -> int:
        produced = 0
        with self.registry.lock:
            for game in self.registry.list_games():
                if game.status == STATUS_FINISHED:
                    continue
                payloads: List[Dict[str, Any]] = []
                try:
                    self.advance(game, payloads)
                except Exception:
                    self.logger.exception(f"[tick-error] game={game.game_id} payloads={len(payloads)}")
                # Transitions already applied are still announced
                for payload in payloads:
                    self.fanout.publish(payload)
                produced += len(payloads)
        self.ticks += 1
        self.logger.debug(f"[tick] n={self.ticks} games={len(self.registry)} payloads={produced}")
        return produced

    def advance(self, game: Game, payloads: Optional[List[Dict[str, Any]]] = None) -> List[Dict[str, Any]]:
        """Apply one step to ``game`` and return its payloads in emit order.

        Payloads are appended to ``payloads`` as each change is made, so a
        caller holding that list keeps them if a later step raises.
        """
        if payloads is None:
            payloads = []
        now = self.registry.now()

        if game.status == STATUS_SCHEDULED and now >= game.start_time:
            game.status = STATUS_IN_PROGRESS
            self.logger.info(f"[game-start] game={game.game_id}")
            payloads.append(game.lifecycle_payload(f"Game {game.game_id} has started!", now))

        if game.status != STATUS_IN_PROGRESS:
            return payloads

        game.minute += self.rng.randint(1, 2)
        outcome = determine_event(game, self.rng)
        game.home_score, game.away_score = outcome.score
        update_odds(game, outcome.event)
        payloads.append(game.update_payload(outcome.event, outcome.event_team, outcome.message, now))

        if game.minute >= self.total_minutes:
            game.status = STATUS_FINISHED
            self.logger.info(f"[game-finish] game={game.game_id} score={game.score_line} minute={game.minute}")
            payloads.append(game.update_payload(None, None, f"Game finished at {game.score_line}", now))

        return payloads
