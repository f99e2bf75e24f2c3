from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(raw):
    if isinstance(raw, (list, tuple)):
        return list(raw)
    if not raw or raw.strip() == '*':
        return '*'
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # The game registry belongs to this app instance
    from matchfeed.services.games.feed import LiveFeed
    flask_app.extensions['live_feed'] = LiveFeed.from_config(flask_app.config, socketio, flask_app.logger)

    from matchfeed.main import main
    flask_app.register_blueprint(main)

    from matchfeed.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from matchfeed.socketio_events import register_socketio_handlers
    register_socketio_handlers(flask_app.config.get('FEED_NAMESPACE', '/ws'))

    return flask_app
