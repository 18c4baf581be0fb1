"""projdash CLI — serve a directory of projects as a dashboard.

Entry point registered as ``projdash`` in ``pyproject.toml``::

    [project.scripts]
    projdash = "projdash.cli:main"
"""

import argparse

from projdash.config import SCHEMES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projdash",
        description="Browse a directory of project folders grouped by model.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory whose sub-directories are the projects (default: cwd)",
    )
    parser.add_argument("--host", default=None, help="Bind host address")
    parser.add_argument("--port", type=int, default=None, help="Bind port number")
    parser.add_argument(
        "--scheme",
        choices=SCHEMES,
        default="index",
        help="Project URL scheme: obfuscated index pairs, model labels, or both",
    )
    parser.add_argument(
        "--dir-listing",
        action="store_true",
        help="Show directory listings for folders without an index file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Detailed error pages and template reloading",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=("debug", "info", "warning", "error"),
        help="Logging level (default: info)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``projdash`` command."""
    args = build_parser().parse_args(argv)

    from projdash.cli._run import run_dashboard

    run_dashboard(args)
