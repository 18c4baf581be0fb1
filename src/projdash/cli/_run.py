"""``projdash`` — build the dashboard from CLI arguments and serve it."""

import argparse
import logging
import sys
from pathlib import Path

from projdash.app import Dashboard
from projdash.config import DashboardConfig
from projdash.errors import ConfigurationError


def config_from_args(args: argparse.Namespace) -> DashboardConfig:
    """Overlay CLI flags on the config defaults."""
    defaults = DashboardConfig()
    return DashboardConfig(
        root=Path(args.root),
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        debug=args.debug,
        scheme=args.scheme,
        show_dir_listing=args.dir_listing,
        log_level=args.log_level,
    )


def run_dashboard(args: argparse.Namespace) -> None:
    """Validate the arguments, configure logging, and start serving.

    Exits with status 1 when the root is not a directory or the
    configuration is invalid.
    """
    config = config_from_args(args)

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = Path(config.root)
    if not root.is_dir():
        print(f"Error: {root} is not a directory", file=sys.stderr)
        raise SystemExit(1)

    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    Dashboard(config).run()
