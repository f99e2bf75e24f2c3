from flask import current_app, request
from matchfeed import socketio


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _feed():
    return current_app.extensions['live_feed']


def handle_connect(auth=None):
    """Register the subscriber and send it the full registry snapshot.

    The registry lock is held so no tick payload can reach the new
    subscriber before its initial_state message.
    """
    feed = _feed()
    sid = _get_sid()
    with feed.registry.lock:
        feed.fanout.add(sid)
        feed.fanout.send_to(sid, {'type': 'initial_state', 'data': feed.registry.snapshot()})


def handle_disconnect(*_args):
    _feed().fanout.discard(_get_sid())


def handle_inbound(data=None):
    # Subscribers are push-only; anything they send is dropped
    current_app.logger.debug(f"[inbound-ignored] sid={_get_sid()}")


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on the feed namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('message', handle_inbound, namespace=namespace)
    socketio.on_event('json', handle_inbound, namespace=namespace)
