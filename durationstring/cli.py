import argparse
from typing import List, Optional


LOG_LEVELS: List[str] = ["critical", "error", "warning", "info", "debug"]


def add_serve_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--host", default="0.0.0.0", help="Host interface for the API")
    parser.add_argument(
        "--port", type=int, default=8000, help="Port to bind the HTTP server"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Minimum level written by the request logger",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ds", description="Convert between duration strings and durations"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Parse duration strings (e.g. 1h30m)")
    parse.add_argument("text", nargs="+", help="Duration strings to parse")
    parse.add_argument(
        "--nanos",
        action="store_true",
        help="Print the nanosecond count instead of the canonical string",
    )

    fmt = subparsers.add_parser("format", help="Format nanosecond counts")
    fmt.add_argument("nanoseconds", nargs="+", help="Non-negative nanosecond counts")

    subparsers.add_parser("units", help="List the supported unit suffixes")

    serve = subparsers.add_parser("serve", help="Run the conversion HTTP API")
    add_serve_arguments(serve)

    return parser


def parse_args(argv: Optional[List[str]]):
    parser = create_parser()
    return parser.parse_args(argv)
