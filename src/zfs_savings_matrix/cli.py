from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from zfs_savings_matrix import __version__
from zfs_savings_matrix.application.app import SavingsMatrixApp
from zfs_savings_matrix.config.logging_setup import configure_logging
from zfs_savings_matrix.config.settings_loader import SettingsLoader
from zfs_savings_matrix.domain.models.app_config import AppConfig
from zfs_savings_matrix.errors import SavingsMatrixError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zfs-savings-matrix",
        description=(
            "Show how much space destroying each range of snapshots of a "
            "dataset would reclaim. Only dry-run queries are issued."
        ),
    )
    parser.add_argument("--name", default="", help="The name of the dataset to scan")
    parser.add_argument(
        "--host",
        default=None,
        help="If set, the hostname which we should ssh into to do the commands",
    )
    parser.add_argument("--cmd", default=None, help="The path to the zfs cmd (default /sbin/zfs)")
    parser.add_argument(
        "--raw",
        action="store_true",
        default=None,
        help="If set, print exact byte counts",
    )
    parser.add_argument(
        "--recurse",
        action="store_true",
        default=None,
        help="Calculate as if snapshots were recursively deleted",
    )
    parser.add_argument(
        "--trim-suffix",
        action="store_true",
        default=None,
        help="Also strip the longest common suffix from the snapshot labels",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help=f"Settings file (default ${SettingsLoader.ENV_VAR} or ~/.config/zfs-savings-matrix/settings.ini)",
    )
    parser.add_argument(
        "--log-level",
        choices=("debug", "info", "warning", "error"),
        default=None,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.name:
        parser.print_usage()
        return 0

    try:
        user = SettingsLoader.load(args.settings)
    except ValidationError as exc:
        print(f"invalid settings: {exc}", file=sys.stderr)
        return 2

    config = AppConfig.from_settings(
        dataset=args.name,
        user=user,
        host=args.host,
        zfs_cmd=args.cmd,
        raw=args.raw,
        recursive=args.recurse,
        trim_suffix=args.trim_suffix,
        log_level=args.log_level,
    )
    configure_logging(config.log_level, config.log_file)
    log = logging.getLogger("zfs_savings_matrix.cli")

    try:
        output = SavingsMatrixApp(config).run()
    except (SavingsMatrixError, ValueError) as exc:
        log.error("saving matrix: %s", exc)
        return 1

    sys.stdout.write(output)
    return 0
