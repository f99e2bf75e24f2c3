import os


def _delay_range(name, default):
    low, _, high = os.environ.get(name, default).partition('-')
    return int(low), int(high or low)


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    # Listening endpoint for the Socket.IO server
    FEED_HOST = os.environ.get('FEED_HOST', '0.0.0.0')
    FEED_PORT = int(os.environ.get('FEED_PORT', '9000'))
    FEED_NAMESPACE = os.environ.get('FEED_NAMESPACE', '/ws')
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    # Simulation timers (seconds)
    TICK_INTERVAL_SEC = float(os.environ.get('TICK_INTERVAL_SEC', '5'))
    SPAWN_INTERVAL_SEC = float(os.environ.get('SPAWN_INTERVAL_SEC', '30'))
    # Simulated minutes after which a match is finished
    TOTAL_GAME_MINUTES = int(os.environ.get('TOTAL_GAME_MINUTES', '12'))
    INITIAL_BATCH_SIZE = int(os.environ.get('INITIAL_BATCH_SIZE', '3'))
    RECURRING_BATCH_SIZE = int(os.environ.get('RECURRING_BATCH_SIZE', '2'))
    # Start delays (milliseconds), "min-max"
    INITIAL_START_DELAY_MS = _delay_range('INITIAL_START_DELAY_MS', '5000-20000')
    RECURRING_START_DELAY_MS = _delay_range('RECURRING_START_DELAY_MS', '15000-45000')
    # Optional: heartbeat interval for registry summary logs (sec). 0 disables.
    TIMER_HEARTBEAT_SEC = int(os.environ.get('TIMER_HEARTBEAT_SEC', '0'))
