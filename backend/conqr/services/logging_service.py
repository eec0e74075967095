import logging
import os
from collections import deque
from logging.handlers import RotatingFileHandler
from typing import Any, Deque, Dict, Optional


LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "..", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
RING_BUFFER_SIZE = int(os.getenv("RING_BUFFER_SIZE", "2000"))
LOG_FILE_NAME = "conqr.log"


class RingBufferHandler(logging.Handler):
    def __init__(self, maxlen: int = 2000):
        super().__init__()
        self.buffer: Deque[Dict[str, Any]] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.buffer.append({
                "ts": record.created,
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
                "lineno": record.lineno,
            })
        except Exception:
            self.handleError(record)

    def get_recent(self, limit: int = 500):
        if limit <= 0:
            return list(self.buffer)
        return list(self.buffer)[-limit:]


_ring_handler: Optional[RingBufferHandler] = None
_file_handler: Optional[RotatingFileHandler] = None


def get_ring_handler() -> RingBufferHandler:
    global _ring_handler
    if _ring_handler is None:
        _ring_handler = RingBufferHandler(maxlen=RING_BUFFER_SIZE)
    return _ring_handler


def init_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Attach a rotating file handler and the in-memory ring buffer to the root
    logger. Safe to call more than once; handlers are only added the first
    time.
    """
    global _file_handler

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    root = logging.getLogger()
    level_name = (level or LOG_LEVEL).upper()
    if level is not None or root.level == logging.NOTSET:
        root.setLevel(getattr(logging, level_name, logging.INFO))

    if _file_handler is None:
        target_dir = log_dir or LOG_DIR
        os.makedirs(target_dir, exist_ok=True)
        _file_handler = RotatingFileHandler(
            os.path.join(target_dir, LOG_FILE_NAME),
            maxBytes=5_000_000,
            backupCount=5,
            encoding="utf-8",
        )
        _file_handler.setFormatter(fmt)
        root.addHandler(_file_handler)

    ring = get_ring_handler()
    ring.setFormatter(fmt)
    min_level_name = os.getenv("RING_BUFFER_MIN_LEVEL", "INFO").upper()
    ring.setLevel(getattr(logging, min_level_name, logging.INFO))
    if ring not in root.handlers:
        root.addHandler(ring)

    # GEOS/pyproj internals are chatty at DEBUG
    logging.getLogger("shapely").setLevel(logging.WARNING)
    logging.getLogger("pyproj").setLevel(logging.WARNING)
