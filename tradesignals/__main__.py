"""Command-line entry point for tradesignals."""

import argparse
import logging
import sys

log = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(message)s"


def _evaluate(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="tradesignals evaluate",
        description="Evaluate all strategies on a price list (oldest first)",
    )
    p.add_argument("--prices", nargs="*", type=float, default=[], help="Prices, oldest first")
    p.add_argument("--config", default=None, help="Optional YAML file with an 'engine' block")
    p.add_argument("-v", "--verbose", action="store_true", help="Log engine internals")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=_LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    import yaml
    from tradesignals.engine import EngineConfig, SignalEngine

    engine_cfg = EngineConfig()
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            engine_cfg = EngineConfig.from_dict((yaml.safe_load(f) or {}).get("engine"))

    decision = SignalEngine.from_config(engine_cfg).evaluate(args.prices)
    for name, signal in decision.signals.items():
        print(
            f"{name:<16} {signal.action.value.upper():<5} "
            f"strength={signal.strength:6.2f} confidence={signal.confidence:.2f}  {signal.reason}"
        )
    print(
        f"{'AGGREGATE':<16} {decision.action.value.upper():<5} "
        f"strength={decision.strength:6.2f} confidence={decision.confidence:.2f}  {decision.reason}"
    )
    return 0


def _replay(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT, datefmt="%H:%M:%S")
    p = argparse.ArgumentParser(
        prog="tradesignals replay",
        description="Replay the signal engine over a CSV bar snapshot",
    )
    p.add_argument("--config", required=True, help="Path to YAML config file")
    args = p.parse_args(argv)

    from tradesignals.engine.runner import run_replay
    run_id = run_replay(args.config)
    log.info("Finished — run_id: %s", run_id)
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        logging.basicConfig(level=logging.INFO)
        log.error("Usage: python -m tradesignals <command> [args...]")
        log.error("Available commands:")
        log.error("  evaluate  - Evaluate strategies on a list of prices")
        log.error("  replay    - Replay the engine over a CSV snapshot")
        return 1

    command, rest = argv[0], argv[1:]
    try:
        if command == "evaluate":
            return _evaluate(rest)
        elif command == "replay":
            return _replay(rest)
    except (ValueError, FileNotFoundError) as exc:
        log.error("%s", exc)
        return 1

    logging.basicConfig(level=logging.INFO)
    log.error(f"Unknown command: {command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
