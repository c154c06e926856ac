"""CLI entry point for logdeck."""

import argparse
import logging
import sys

from rich.console import Console

import logdeck.io.logging_setup
import logdeck.settings
from logdeck.core.modules import DEFAULT_RESOLVER
from logdeck.core.navigation import build_cursor
from logdeck.core.output_limits import max_rows
from logdeck.core.selection import PanelFilterConfig
from logdeck.tui.app import PanelBrowserApp
from logdeck.tui.panel_renderers import render_panel_table

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def display_version() -> None:
    print("logdeck - {}.".format(VERSION))
    print("Report panel selection and navigation for web log dashboards.")


def display_storage() -> None:
    print("Built using the default in-memory storage.")


def display_default_config_file() -> None:
    path = logdeck.settings.get_config_path()
    if not path.is_file():
        print("No default config file found.")
        print("You may create one at `{}`".format(path))
    else:
        print(path)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logdeck", description="Select and browse web log report panels"
    )
    parser.add_argument(
        "--enable-panel",
        action="append",
        default=[],
        metavar="PANEL",
        help="Enable a panel even if it is ignored. Repeatable. ({})".format(
            ", ".join(DEFAULT_RESOLVER.names())
        ),
    )
    parser.add_argument(
        "--ignore-panel",
        action="append",
        default=[],
        metavar="PANEL",
        help="Hide a panel. Repeatable.",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Maximum rows per panel (default: settings file, else unset)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        help="Log-format descriptor; panels whose fields are missing are hidden",
    )
    parser.add_argument(
        "-o",
        "--output",
        action="append",
        default=[],
        metavar="FORMAT",
        help="Requested output: csv, json, html, or a file name with that extension. Repeatable.",
    )
    parser.add_argument(
        "--real-time-html",
        action="store_true",
        default=None,
        help="Real-time HTML output is active",
    )
    parser.add_argument(
        "--list-panels",
        action="store_true",
        default=False,
        help="Print the active panels and exit.",
    )
    parser.add_argument("-V", "--version", action="store_true", help="Display version and exit.")
    parser.add_argument("--storage", action="store_true", help="Display storage backend and exit.")
    parser.add_argument(
        "--dcf", action="store_true", help="Display the default settings file path and exit."
    )
    return parser


def _panel_filter(args) -> PanelFilterConfig:
    """Settings-file lists extended with command-line entries."""
    stored = logdeck.settings.load_panel_filter()
    return PanelFilterConfig(
        enable_panels=stored.enable_panels + tuple(args.enable_panel),
        ignore_panels=stored.ignore_panels + tuple(args.ignore_panel),
    )


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        display_version()
        return 0
    if args.storage:
        display_storage()
        return 0
    if args.dcf:
        display_default_config_file()
        return 0

    flags = logdeck.settings.load_output_flags(
        extra_formats=tuple(args.output),
        max_items=args.max_items,
        real_time_html=args.real_time_html,
        batch=args.list_panels,
        stdout_isatty=sys.stdout.isatty(),
    )
    # A report on stdout (listing, -o, or a pipe) never starts the dashboard.
    batch = flags.output_stdout

    # [LAW:single-enforcer] Runtime logger configuration is centralized in io.logging_setup.
    log_runtime = logdeck.io.logging_setup.configure(interactive=not batch)
    logger.info(
        "logging configured level=%s file=%s",
        log_runtime.level_name,
        log_runtime.file_path,
    )

    panel_filter = _panel_filter(args)
    logger.info(
        "panel filter enable=%s ignore=%s",
        list(panel_filter.enable_panels),
        list(panel_filter.ignore_panels),
    )
    log_format = args.log_format or logdeck.settings.load_log_format()
    cursor = build_cursor(panel_filter, log_format)
    rows = max_rows(flags)
    logger.info("active panels=%d max_rows=%d batch=%s", cursor.count(), rows, batch)

    if batch:
        Console().print(render_panel_table(cursor.registry, rows))
        return 0

    PanelBrowserApp(cursor, flags).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
