"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import signal
import sys
from types import FrameType

from pacprune.config import PurgeConfig, load_config, validate_config_file
from pacprune.exceptions import ConfigError
from pacprune.exceptions.validation import format_errors
from pacprune.purge import PurgeScheduler, purge_old_files, run_purge
from pacprune.reporting import SweepReporter


def _load_or_report(args: argparse.Namespace) -> PurgeConfig | None:
    try:
        return load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return None


def handle_purge(args: argparse.Namespace) -> int:
    """Run a single sweep for the configured strategy."""
    config = _load_or_report(args)
    if config is None:
        return 2

    report = run_purge(config)

    if not args.no_stdout:
        reporter = SweepReporter(report, color=not args.no_color and sys.stdout.isatty(), verbose=args.verbose)
        print(reporter.render_json() if args.json else reporter.render())

    return 1 if report.has_failures else 0


def handle_prune_package(args: argparse.Namespace) -> int:
    """Apply count-based retention to the group of one cached file."""
    if args.keep < 1:
        print("Configuration error: --keep must be a positive integer", file=sys.stderr)
        return 2

    outcomes = purge_old_files(args.file, args.keep)
    return 0 if all(outcome.ok for outcome in outcomes) else 1


def handle_watch(args: argparse.Namespace) -> int:
    """Run the scheduler in the foreground until interrupted."""
    config = _load_or_report(args)
    if config is None:
        return 2

    scheduler = PurgeScheduler(lambda: config)

    def _on_sigterm(signum: int, frame: FrameType | None) -> None:
        scheduler.stop(timeout=0)

    previous_handler = signal.signal(signal.SIGTERM, _on_sigterm)
    scheduler.start()
    try:
        scheduler.wait()
    except KeyboardInterrupt:
        print("Stopping.", file=sys.stderr)
    finally:
        scheduler.stop()
        signal.signal(signal.SIGTERM, previous_handler)
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run collect-all config validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
