"""CLI entrypoint for pacprune."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pacprune import __version__
from pacprune.cli.handlers import handle_prune_package, handle_purge, handle_validate_config, handle_watch
from pacprune.constants.branding import CLI_DESCRIPTION
from pacprune.constants.config import CONFIG_FILENAME


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="pacprune",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    purge = subparsers.add_parser("purge", help="Run one sweep for the configured purge strategy")
    purge.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")
    purge.add_argument("--json", action="store_true", help="Print the sweep report as JSON")
    purge.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    purge.add_argument("--no-color", action="store_true", help="Disable colored output")

    prune = subparsers.add_parser(
        "prune-package",
        help="Keep only the newest versions of the package a cached file belongs to",
    )
    prune.add_argument("file", type=Path, help="Path of a freshly cached package file")
    prune.add_argument("-k", "--keep", type=int, required=True, help="Number of versions to keep")

    watch = subparsers.add_parser("watch", help="Run the stale sweep now and then once a day")
    watch.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without purging")
    validate.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    if args.command == "purge":
        return handle_purge(args)
    if args.command == "prune-package":
        return handle_prune_package(args)
    if args.command == "watch":
        return handle_watch(args)
    if args.command == "validate-config":
        return handle_validate_config(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
