import sys

from matchfeed import create_app, socketio
from matchfeed.services.games.scheduler import start_simulation, stop_simulation


def main(app=None):
    app = app or create_app()
    host = app.config['FEED_HOST']
    port = app.config['FEED_PORT']
    start_simulation(app)
    app.logger.info(f"[startup] live match feed on {host}:{port} namespace={app.config['FEED_NAMESPACE']}")
    try:
        socketio.run(app, host=host, port=port, allow_unsafe_werkzeug=True)
    except OSError as exc:
        app.logger.error(f"[startup] cannot listen on {host}:{port}: {exc}")
        sys.exit(1)
    except SystemExit as exc:
        # werkzeug exits on its own when the port cannot be bound
        if exc.code not in (None, 0):
            app.logger.error(f"[startup] server exited with code {exc.code} on {host}:{port}")
        raise
    finally:
        stop_simulation(app)


if __name__ == '__main__':
    main()
