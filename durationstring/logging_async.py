"""Non-blocking logging for the HTTP server.

Request handlers push formatted messages onto an ``asyncio.Queue`` and a
single background task writes them out, so a slow terminal never stalls the
event loop.
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s> %(message)s"
DATE_FORMAT = "%H:%M:%S"


class AsyncQueueHandler(logging.Handler):
    """Handler that enqueues ``(level, logger name, message)`` tuples."""

    def __init__(self, queue: asyncio.Queue):
        super().__init__()
        self.queue = queue

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait((record.levelno, record.name, self.format(record)))
        except Exception:
            self.handleError(record)


async def log_worker(
    queue: asyncio.Queue,
    stop_event: asyncio.Event,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> None:
    """Drain ``queue`` to ``stream`` (stdout by default) until stopped.

    Messages still queued when ``stop_event`` is set are written before the
    worker returns. Records below ``level`` are dropped.
    """

    out = logging.StreamHandler(stream or sys.stdout)
    out.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    out.setLevel(level)

    while not stop_event.is_set() or not queue.empty():
        try:
            lvl, name, msg = await asyncio.wait_for(queue.get(), timeout=0.5)
        except asyncio.TimeoutError:
            continue
        try:
            if lvl >= level:
                out.emit(logging.LogRecord(name, lvl, "", 0, msg, None, None))
        except Exception as e:
            sys.stderr.write(f"[log_worker error] {e}\n")
        finally:
            queue.task_done()

    out.flush()


def get_logger(queue: asyncio.Queue, name: str = "durationstring") -> logging.Logger:
    """Return ``name``'s logger with a single queue handler writing to ``queue``."""
    logger = logging.getLogger(name)
    for handler in logger.handlers:
        if isinstance(handler, AsyncQueueHandler):
            handler.queue = queue
            return logger
    handler = AsyncQueueHandler(queue)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    return logger
