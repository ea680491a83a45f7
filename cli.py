"""CLI entry point: drive the sample architecture from a Rich console.

Usage:
  python cli.py demo                        # Add 1 once, print the event log
  python cli.py demo --add 5 --add 3        # Several AddScore commands
  python cli.py demo --add 5 --threshold 3  # Also run IsScoreAbove(3)
  python cli.py inspect                     # Registered components and events
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from architecture import Architecture
from config.settings import Settings
from core.unregister import UnregisterList, add_to_unregister_list, unregister_all
from demo.score import (
    AddScore,
    BestScoreBeaten,
    IsScoreAbove,
    ScoreArchitecture,
    ScoreChanged,
    ScoreModel,
)

console = Console()


def setup_logging(settings: Settings) -> None:
    """Configure logging from settings (file when LOG_FILE is set, else stderr)."""
    handlers: list[logging.Handler] = []
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=settings.LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    if settings.TRACE_EVENTS:
        logging.getLogger("core.event_bus").setLevel(logging.DEBUG)


class EventLog(UnregisterList):
    """Collects rendered event lines while subscribed."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def on_score_changed(self, e: ScoreChanged) -> None:
        sign = "+" if e.delta >= 0 else ""
        self.lines.append(f"ScoreChanged  score={e.score} ({sign}{e.delta})")

    def on_best_beaten(self, e: BestScoreBeaten) -> None:
        self.lines.append(f"BestScoreBeaten  best={e.best}")


def cmd_demo(args, settings: Settings) -> None:
    """Run AddScore commands and print what the architecture emitted."""
    arch = ScoreArchitecture.get_or_create()

    log = EventLog()
    add_to_unregister_list(arch.register_event(ScoreChanged, log.on_score_changed), log)
    add_to_unregister_list(arch.register_event(BestScoreBeaten, log.on_best_beaten), log)

    for amount in args.add or [1]:
        arch.send_command(AddScore(amount))

    unregister_all(log)

    console.print(Panel(
        "\n".join(log.lines) if log.lines else "[dim](no events)[/]",
        title="Event Log",
        border_style="green",
    ))
    score = arch.get_model(ScoreModel).score.value
    console.print(f"[bold]Score:[/] {score}")

    if args.threshold is not None:
        above = arch.send_query(IsScoreAbove(args.threshold))
        colour = "green" if above else "yellow"
        console.print(f"[bold]Above {args.threshold}:[/] [{colour}]{above}[/]")


def render_snapshot(arch: Architecture) -> None:
    snapshot = arch.snapshot()
    console.print(Panel(
        f"[bold]{snapshot.name}[/]  state={snapshot.state.value}\n"
        f"[dim]pending models={snapshot.pending_models} "
        f"pending systems={snapshot.pending_systems}[/]",
        title="Architecture",
        border_style="cyan",
    ))

    table = Table(title="Components")
    table.add_column("Kind", style="bold")
    table.add_column("Key")
    table.add_column("Implementation")
    for entry in snapshot.components:
        table.add_row(entry.kind, entry.key, entry.implementation)
    console.print(table)

    events = Table(title="Event Subscriptions")
    events.add_column("Event")
    events.add_column("Handlers", justify="right")
    for entry in snapshot.events:
        events.add_row(entry.event_type, str(entry.handler_count))
    console.print(events)


def cmd_inspect(args, settings: Settings) -> None:
    """Show the sample architecture's registrations."""
    render_snapshot(ScoreArchitecture.get_or_create())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="packagekit",
        description="PackageKit architecture core sample driver",
    )
    subparsers = parser.add_subparsers(dest="command")

    # demo
    p_demo = subparsers.add_parser("demo", help="Run the score sample")
    p_demo.add_argument(
        "--add", type=int, action="append", help="Score to add (repeatable)",
    )
    p_demo.add_argument("--threshold", type=int, default=None, help="Run IsScoreAbove")

    # inspect
    subparsers.add_parser("inspect", help="Show registered components and events")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)

    if args.command is None:
        parser.print_help()
        return

    cmd_map = {
        "demo": cmd_demo,
        "inspect": cmd_inspect,
    }

    handler = cmd_map.get(args.command)
    if handler:
        handler(args, settings)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
