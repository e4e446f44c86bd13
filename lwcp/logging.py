import logging
import threading
from collections import deque
from typing import Deque, Dict, List

from lwcp.config import get_settings

LOGGER_NAME = "lwcp"

_setup_lock = threading.Lock()


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: str = "INFO", propagate: bool = True) -> logging.Logger:
    logger = logging.getLogger(name)
    with _setup_lock:
        if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
            return logger
        logger.setLevel(level.upper())
        handler = RingBufferHandler(max_entries=ring_size)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = propagate
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(
        LOGGER_NAME,
        ring_size=settings.log_ring_size,
        level=settings.log_level,
        propagate=settings.log_propagate,
    )


def _ring_handler() -> RingBufferHandler | None:
    for handler in get_logger().handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def recent_diagnostics() -> List[Dict]:
    handler = _ring_handler()
    return handler.get_events() if handler else []


def clear_diagnostics() -> None:
    handler = _ring_handler()
    if handler:
        handler.clear()
