"""Application entry point for nospam."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from art import tprint
from rich.console import Console
from rich.markup import escape

import settings
from adapters.json_settings_store import JsonSettingsStore
from adapters.linkedin_html_entry import load_page, query_all_entries
from adapters.text_entry import TextEntry
from core.filter_engine import FilterEngine
from core.models import Decision, DecisionKind
from core.processor import FeedProcessor, should_filter_url
from core.settings_migrations import SettingsError, UnknownSettingsVersionError

NAME = "NOSPAM"
FONT = "tarty-1"

EXIT_MISSING_INPUT = 1
EXIT_SETTINGS_ERROR = 2

_DECISION_STYLES = {
    DecisionKind.HIDE: "bold magenta",
    DecisionKind.SHOW: "bold green",
    DecisionKind.NOTHING: "dim",
}


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # stdout may carry filtered HTML, so logs go to stderr.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/nospam.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _load_engine(console: Console) -> Optional[FilterEngine]:
    store = JsonSettingsStore(settings.SETTINGS_PATH)
    try:
        return FilterEngine(store.load())
    except UnknownSettingsVersionError as exc:
        console.print(
            f"[red]{escape(str(exc))}.[/red] The settings file was written by a newer nospam; "
            "please upgrade before filtering."
        )
    except SettingsError as exc:
        console.print(f"[red]Could not read settings:[/red] {escape(str(exc))}")
    return None


def _format_decision(decision: Decision) -> str:
    style = _DECISION_STYLES[decision.kind]
    label = f"[{style}]{decision.kind.value}[/{style}]"
    if decision.reason:
        return f"{label} ({escape(decision.reason)})"
    return label


def _filter(page: str, output: Optional[str], url: Optional[str]) -> int:
    err = Console(stderr=True)
    logger = logging.getLogger(__name__)

    page_path = Path(page)
    if not page_path.exists():
        err.print(f"[red]Input not found:[/red] {escape(str(page_path))}")
        return EXIT_MISSING_INPUT

    html = page_path.read_text(encoding="utf-8")
    if not should_filter_url(url, settings.HOST):
        logger.info("Skipping filter for %s", url)
        rendered = html
    else:
        engine = _load_engine(err)
        if engine is None:
            return EXIT_SETTINGS_ERROR
        document = load_page(html)
        entries = query_all_entries(document)
        summary = FeedProcessor(engine).process(entries)
        err.print(
            f"{len(entries)} entries: {summary.hidden} removed, {summary.highlighted} highlighted, "
            f"{summary.shown} allowed, {summary.untouched} untouched"
        )
        rendered = str(document)

    if output:
        Path(output).write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)
    return 0


def _check(text: str, reacted_by: Optional[str], suggested: bool, credentials: bool) -> int:
    console = Console()
    engine = _load_engine(console)
    if engine is None:
        return EXIT_SETTINGS_ERROR
    entry = TextEntry(
        text=text,
        reacted_by_name=reacted_by,
        suggested=suggested,
        content_credentials=credentials,
    )
    console.print(_format_decision(engine.decide(entry)))
    return 0


def _setup() -> None:
    _print_banner()
    from frontend.app import ConfigPanelApp

    ConfigPanelApp().run()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="nospam")
    subparsers = parser.add_subparsers(dest="command")

    filter_parser = subparsers.add_parser("filter", help="Filter a saved feed page")
    filter_parser.add_argument("page", help="Path to the saved HTML page")
    filter_parser.add_argument("-o", "--output", help="Write filtered HTML here instead of stdout")
    filter_parser.add_argument("--url", help="Original page URL, used to skip single-post pages")

    check_parser = subparsers.add_parser("check", help="Show the decision for a piece of text")
    check_parser.add_argument("text")
    check_parser.add_argument("--reacted-by", help="Name of the person who reacted")
    check_parser.add_argument("--suggested", action="store_true")
    check_parser.add_argument("--credentials", action="store_true", help="Entry has content credentials")

    subparsers.add_parser("config", help="Launch the settings TUI")

    args = parser.parse_args(argv)
    if args.command == "config":
        _setup()
        return

    _configure_logging()
    if args.command == "filter":
        sys.exit(_filter(args.page, args.output, args.url))
    if args.command == "check":
        sys.exit(_check(args.text, args.reacted_by, args.suggested, args.credentials))
    parser.print_help()


if __name__ == "__main__":
    main()
