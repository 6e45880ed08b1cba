"""Entry point: ``python -m src``.

Subcommands:
  - ``python -m src run SCENARIO.json``  → Execute a scenario file's plan
  - ``python -m src demo``               → Execute the built-in demo scenario
"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--max-turns", type=int, default=500)
    parser.add_argument("--replay", type=str, default=None, help="Write a JSON replay to this path")
    parser.add_argument("--on-failure", type=str, default="skip", choices=["skip", "abort"])
    parser.add_argument("--id-binding", type=str, default="ordinal", choices=["ordinal", "identity"])
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based plan execution engine")
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Execute the plan in a scenario file")
    run.add_argument("scenario", type=str, help="Path to a scenario JSON file")
    _add_common(run)

    demo = sub.add_parser("demo", help="Execute the built-in demo scenario")
    _add_common(demo)

    return parser


def _execute(args: argparse.Namespace) -> int:
    from pydantic import ValidationError

    from src.config import ExecutorConfig
    from src.engine.errors import ExecutorError
    from src.engine.executor import PlanExecutor
    from src.engine.session import ExecutionSession
    from src.planning.actions import PlanError
    from src.utils.logging import setup_logging
    from src.utils.replay import ReplayRecorder

    setup_logging(args.log_level)

    if args.command == "run":
        from src.planning.loader import load_scenario
        try:
            scenario = load_scenario(args.scenario)
        except (OSError, ValidationError, PlanError) as exc:
            logger.error("Cannot load scenario %s: %s", args.scenario, exc)
            return 1
    else:
        from src.planning.demo import demo_scenario
        scenario = demo_scenario()

    config = ExecutorConfig(
        player_num=scenario.player,
        on_failure=args.on_failure,
        id_binding=args.id_binding,
        max_turns=args.max_turns,
        log_level=args.log_level,
        replay_file=args.replay,
    )
    runtime = scenario.build_runtime()
    executor = PlanExecutor(config, scenario.build_plan())
    recorder = ReplayRecorder(config.replay_file, config.player_num) if config.replay_file else None
    session = ExecutionSession(runtime, executor, recorder=recorder)

    try:
        report = session.run(config.max_turns)
    except ExecutorError:
        logger.exception("Execution aborted")
        return 1

    logger.info("Final stock: gold=%d wood=%d", runtime.gold, runtime.wood)
    return 0 if report.finished else 2


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    return _execute(args)


if __name__ == "__main__":
    sys.exit(main())
