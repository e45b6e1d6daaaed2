import asyncio
import logging
import sys
from typing import Iterable, List, Optional

import uvicorn

from .cli import parse_args
from .duration import DurationString, construct, parse
from .errors import DurationError
from .logging_async import get_logger, log_worker
from .units import UNITS
from .webapp import create_app


def parse_texts(texts: Iterable[str], as_nanos: bool = False) -> List[str]:
    results = []
    for text in texts:
        value = parse(text)
        results.append(str(value.nanoseconds) if as_nanos else str(value))
    return results


def format_counts(counts: Iterable[str]) -> List[str]:
    values: List[DurationString] = [construct(int(count)) for count in counts]
    return [str(value) for value in values]


def unit_lines() -> List[str]:
    return [f"{suffix:>3}: {nanos} ns" for suffix, nanos, _ in UNITS]


async def serve_async(params) -> None:
    level = getattr(logging, params.log_level.upper(), logging.INFO)

    log_queue: asyncio.Queue = asyncio.Queue()
    stop_event = asyncio.Event()
    log_task = asyncio.create_task(log_worker(log_queue, stop_event, level=level))
    logger = get_logger(log_queue)

    app = create_app(logger)
    config = uvicorn.Config(
        app, host=params.host, port=params.port, loop="asyncio", log_level=params.log_level
    )
    server = uvicorn.Server(config)

    logger.info(f"[start] serving on http://{params.host}:{params.port}")
    try:
        await server.serve()
    finally:
        stop_event.set()
        await log_queue.join()
        await log_task
        print("[exit] done.")


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        if params.command == "parse":
            for line in parse_texts(params.text, params.nanos):
                print(line)
        elif params.command == "format":
            for line in format_counts(params.nanoseconds):
                print(line)
        elif params.command == "units":
            for line in unit_lines():
                print(line)
        elif params.command == "serve":
            try:
                asyncio.run(serve_async(params))
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except (DurationError, TypeError, ValueError) as exc:
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
