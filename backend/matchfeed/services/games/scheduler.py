import time
from typing import Callable, List, Optional

from matchfeed import socketio


class PeriodicTask:
    """Run ``action`` every ``interval`` seconds until stopped.

    The first run happens one interval after ``run`` is entered. Errors
    raised by the action are logged and the task carries on.
    """

    def __init__(self, name: str, interval: float, action: Callable[[], object], logger,
                 sleep: Optional[Callable[[float], None]] = None, heartbeat: int = 0):
        self.name = name
        self.interval = interval
        self.action = action
        self.logger = logger
        self.sleep = sleep or time.sleep
        self.heartbeat = heartbeat
        self.running = True
        self.runs = 0

    def stop(self) -> None:
        self.running = False

    def _wait(self) -> None:
        if not self.heartbeat or self.heartbeat <= 0:
            self.sleep(self.interval)
            return
        slept = 0.0
        while self.running and slept < self.interval:
            step = min(self.heartbeat, self.interval - slept)
            self.sleep(step)
            slept += step
            self.logger.info(f"[timer-heartbeat] task={self.name} remaining={max(0.0, self.interval - slept)}s")

    def run_once(self) -> None:
        try:
            self.action()
        except Exception:
            self.logger.exception(f"[timer-error] task={self.name}")
        self.runs += 1

    def run(self) -> None:
        self.logger.info(f"[timer-set] task={self.name} interval={self.interval}s")
        while self.running:
            self._wait()
            if not self.running:
                break
            self.run_once()
        self.logger.info(f"[timer-stop] task={self.name} runs={self.runs}")


def start_simulation(app) -> List[PeriodicTask]:
    """Seed the initial fixtures and start the tick and spawn tasks.

    - No-ops in TESTING mode unless ENABLE_SIMULATION_IN_TESTS is set
    - Creates the initial batch of games immediately
    - Runs the clock every TICK_INTERVAL_SEC and the spawner every SPAWN_INTERVAL_SEC
    """
    if app.config.get('TESTING') and not app.config.get('ENABLE_SIMULATION_IN_TESTS'):
        return []

    feed = app.extensions['live_feed']
    if feed.tasks:
        app.logger.info("[timer-skip] simulation already running")
        return feed.tasks

    heartbeat = int(app.config.get('TIMER_HEARTBEAT_SEC', 0))
    feed.spawner.spawn_initial()
    feed.tasks = [
        PeriodicTask('tick', float(app.config.get('TICK_INTERVAL_SEC', 5)), feed.clock.tick,
                     app.logger, sleep=socketio.sleep, heartbeat=heartbeat),
        PeriodicTask('spawn', float(app.config.get('SPAWN_INTERVAL_SEC', 30)), feed.spawner.spawn_batch,
                     app.logger, sleep=socketio.sleep, heartbeat=heartbeat),
    ]
    for task in feed.tasks:
        socketio.start_background_task(task.run)
    return feed.tasks


def stop_simulation(app) -> None:
    feed = app.extensions['live_feed']
    for task in feed.tasks:
        task.stop()
    feed.tasks = []
    feed.fanout.close_all()
    app.logger.info("[shutdown] simulation stopped, subscribers closed")
