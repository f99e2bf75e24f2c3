from typing import List

from .clock import SimulationClock
from .fanout import SubscriberFanout
from .registry import GameRegistry
from .spawner import GameSpawner


class LiveFeed:
    """Everything one application instance needs to run the simulated feed.

    Stored on ``app.extensions['live_feed']`` so handlers and tests reach the
    registry through the app rather than a module global.
    """

    def __init__(self, registry: GameRegistry, fanout: SubscriberFanout,
                 clock: SimulationClock, spawner: GameSpawner):
        self.registry = registry
        self.fanout = fanout
        self.clock = clock
        self.spawner = spawner
        self.tasks: List = []

    @classmethod
    def from_config(cls, config, socketio, logger, rng=None, now=None) -> 'LiveFeed':
        registry = GameRegistry(rng=rng, now=now, logger=logger)
        fanout = SubscriberFanout(socketio, config.get('FEED_NAMESPACE', '/ws'), logger)
        clock = SimulationClock(registry, fanout, logger,
                                total_minutes=int(config.get('TOTAL_GAME_MINUTES', 12)))
        spawner = GameSpawner(
            registry,
            logger,
            initial_batch=int(config.get('INITIAL_BATCH_SIZE', 3)),
            recurring_batch=int(config.get('RECURRING_BATCH_SIZE', 2)),
            initial_delay_ms=tuple(config.get('INITIAL_START_DELAY_MS', (5000, 20000))),
            recurring_delay_ms=tuple(config.get('RECURRING_START_DELAY_MS', (15000, 45000))),
        )
        return cls(registry, fanout, clock, spawner)
