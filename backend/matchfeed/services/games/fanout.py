import threading
from typing import Any, Dict, Set


class SubscriberFanout:
    """Best-effort delivery of payloads to connected Socket.IO subscribers.

    Subscribers are tracked by sid. Each send checks that the sid is still
    connected on the feed namespace; closed or unknown sids are skipped and
    nothing is queued for them.
    """

    def __init__(self, socketio, namespace: str, logger):
        self.socketio = socketio
        self.namespace = namespace
        self.logger = logger
        self._sids: Set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sids)

    def add(self, sid: str) -> None:
        with self._lock:
            self._sids.add(sid)
            total = len(self._sids)
        self.logger.info(f"[subscriber-join] sid={sid} total={total}")

    def discard(self, sid: str) -> None:
        with self._lock:
            self._sids.discard(sid)
            total = len(self._sids)
        self.logger.info(f"[subscriber-leave] sid={sid} total={total}")

    def is_open(self, sid: str) -> bool:
        server = self.socketio.server
        if server is None:
            return False
        return server.manager.is_connected(sid, self.namespace)

    def send_to(self, sid: str, payload: Dict[str, Any]) -> bool:
        if not self.is_open(sid):
            return False
        try:
            self.socketio.send(payload, to=sid, namespace=self.namespace)
        except Exception as exc:
            self.logger.warning(f"[fanout-drop] sid={sid} error={exc}")
            return False
        return True

    def publish(self, payload: Dict[str, Any]) -> int:
        """Send ``payload`` to every open subscriber; returns the delivery count."""
        with self._lock:
            sids = list(self._sids)
        return sum(1 for sid in sids if self.send_to(sid, payload))

    def close_all(self) -> None:
        with self._lock:
            sids = list(self._sids)
            self._sids.clear()
        for sid in sids:
            try:
                self.socketio.server.disconnect(sid, namespace=self.namespace)
            except Exception as exc:
                self.logger.warning(f"[subscriber-close] sid={sid} error={exc}")
