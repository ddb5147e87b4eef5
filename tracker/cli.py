from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence

from tracker.config.constants import load_config
from tracker.config.logging import setup_logger
from tracker.service import TrackerService
from tracker.tools.activity_utils import estimate_calories
from tracker.tools.stats import aggregate


def _serve(args: argparse.Namespace, service: TrackerService) -> None:
    import uvicorn

    from python_backend.app import create_app

    uvicorn.run(create_app(service), host=args.host, port=args.port)


def _estimate(args: argparse.Namespace, service: TrackerService) -> None:
    if args.offline:
        calories = estimate_calories(args.workout, args.duration)
    else:
        calories = service.gateway.estimate(args.workout, args.duration)
    print(calories)


def _stats(args: argparse.Namespace, service: TrackerService) -> None:
    stats = aggregate(service.store.list_by_owner(args.name))
    print(json.dumps(stats.to_dict(), indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Track workouts and the calories they burn.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default="127.0.0.1", help="Host to bind.")
    serve.add_argument("--port", default=8000, type=int, help="Port to bind.")
    serve.set_defaults(func=_serve)

    estimate = subparsers.add_parser("estimate", help="Estimate calories for a workout.")
    estimate.add_argument("workout", help="Workout type, e.g. running.")
    estimate.add_argument("duration", type=int, help="Duration in minutes.")
    estimate.add_argument("--offline", action="store_true", help="Skip the language model.")
    estimate.set_defaults(func=_estimate)

    stats = subparsers.add_parser("stats", help="Print workout stats for a name.")
    stats.add_argument("name", help="Whose workouts to summarize.")
    stats.set_defaults(func=_stats)

    return parser


def main(argv: Optional[Sequence[str]] = None, service: Optional[TrackerService] = None) -> None:
    args = build_parser().parse_args(argv)
    if service is None:
        config = load_config()
        setup_logger(config)
        service = TrackerService.from_config(config)
    args.func(args, service)


if __name__ == "__main__":
    main()
