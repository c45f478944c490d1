# SPDX-License-Identifier: MIT
"""Command line helpers: write noise buffers and show resolved settings."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from factlens import __version__
from factlens.config import load_settings
from factlens.errors import FactSettingsError
from factlens.generator import noise

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the factlens CLI."""
    parser = argparse.ArgumentParser(
        prog="factlens",
        description="factlens: composable facts for checking and generating data",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    noise_parser = subparsers.add_parser(
        "noise",
        help="Write a seeded buffer of pseudo-random bytes",
    )
    noise_parser.add_argument("--size", type=int, default=None, help="Buffer size in bytes")
    noise_parser.add_argument("--seed", type=int, default=None, help="Seed (defaults to settings, else fresh)")
    noise_parser.add_argument("--out", type=Path, required=True, help="Output file")

    settings_parser = subparsers.add_parser(
        "settings",
        help="Print the resolved factlens settings",
    )
    settings_parser.add_argument("--config", type=Path, default=None, help="Settings YAML file")
    settings_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def _cmd_noise(args: argparse.Namespace) -> int:
    if args.size is not None and args.size < 0:
        sys.stderr.write(f"Size must be non-negative: {args.size}\n")
        return 2
    if args.seed is not None and args.seed < 0:
        sys.stderr.write(f"Seed must be non-negative: {args.seed}\n")
        return 2
    try:
        data = noise(args.size, args.seed)
    except FactSettingsError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), args.out)
    return 0


def _cmd_settings(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.config)
    except FactSettingsError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    payload = settings.model_dump(mode="json")
    if args.json:
        sys.stdout.write(json.dumps(payload, sort_keys=True) + "\n")
        return 0
    for key in sorted(payload):
        sys.stdout.write(f"{key}: {payload[key]}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.WARNING
    if args.verbose >= 1:
        log_level = logging.INFO
    if args.verbose >= 2:
        log_level = logging.DEBUG
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    if args.command == "noise":
        return _cmd_noise(args)
    if args.command == "settings":
        return _cmd_settings(args)
    parser.error(f"Unknown command: {args.command}")
    return 2
