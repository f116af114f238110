#!/usr/bin/env python3
"""
dBm ⇄ Watt converter — terminal app.

Usage:
    python app.py to-watts 20           # dBm → W with calculation steps
    python app.py to-dbm 0.5            # W → dBm with calculation steps
    python app.py interactive           # Two-field converter session
"""

import sys
import argparse
import logging

from rfpower.utils.constants import FIELD_DBM, FIELD_WATTS

logger = logging.getLogger("rfpower.app")

FIELD_ALIASES = {
    "dbm": FIELD_DBM,
    "d": FIELD_DBM,
    "watts": FIELD_WATTS,
    "watt": FIELD_WATTS,
    "w": FIELD_WATTS,
}

INTERACTIVE_HELP = """\
[bold]Commands[/bold]
  dbm <value>      edit the dBm field       (alias: d)
  w <value>        edit the Watt field      (alias: watts)
  copy dbm|w       copy a field to the clipboard
  clear            clear both fields
  show             redraw the converter
  help             this text
  quit             leave (alias: q, exit)"""


def render_session(console, session, show_steps=True):
    """Draw both fields and, when present, the calculation steps."""
    from rich.markup import escape
    from rich.panel import Panel
    from rich.table import Table

    table = Table(title="dBm ⇄ Watt Converter", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("dBm", escape(session.dbm_text) or "[dim]Enter dBm value...[/dim]")
    table.add_row("Watt (W)", escape(session.watts_text) or "[dim]Enter watt value...[/dim]")
    console.print(table)

    if show_steps and session.explanation:
        console.print(Panel(
            session.explanation,
            title="📊 Calculation Steps",
            border_style="blue" if session.last_modified == FIELD_DBM else "green",
            expand=False,
        ))


def _convert_once(args, field_name):
    from rich.console import Console
    from rich.markup import escape

    from rfpower.engine import ConverterSession

    console = Console()
    session = ConverterSession()
    session.on_edited(field_name, args.value)

    if not session.synced:
        console.print(f"[bold red]Cannot convert {escape(repr(args.value))}[/bold red]"
                      + (" (power must be > 0 W)" if field_name == FIELD_WATTS else ""))
        return 1

    result = session.watts_text if field_name == FIELD_DBM else session.dbm_text
    if args.quiet:
        console.print(result, highlight=False)
        return 0

    render_session(console, session, show_steps=not args.no_steps)
    return 0


def cmd_to_watts(args):
    """Convert a dBm level to Watts."""
    return _convert_once(args, FIELD_DBM)


def cmd_to_dbm(args):
    """Convert a power in Watts to dBm."""
    return _convert_once(args, FIELD_WATTS)


def handle_command(line, session, console, clipboard, show_steps=True):
    """
    Apply one interactive command to the session.

    Returns False when the user asked to leave. Field text is taken verbatim
    after the first space, so "dbm -" keeps the lone minus sign.
    """
    command, _, rest = line.partition(" ")
    command = command.strip().lower()

    if command in ("quit", "exit", "q"):
        return False

    if not command:
        return True

    if command in FIELD_ALIASES:
        session.on_edited(FIELD_ALIASES[command], rest)
        render_session(console, session, show_steps)
    elif command == "copy":
        target = FIELD_ALIASES.get(rest.strip().lower())
        if target is None:
            console.print("[yellow]Usage: copy dbm|w[/yellow]")
        elif not session.can_copy(target):
            console.print("[yellow]Nothing to copy.[/yellow]")
        else:
            message = session.copy(target, clipboard)
            style = "red" if message == "Copy failed" else "green"
            console.print(f"[{style}]{message}[/{style}]")
            session.dismiss_feedback()
    elif command == "clear":
        if session.show_clear:
            session.on_clear()
        render_session(console, session, show_steps)
    elif command == "show":
        render_session(console, session, show_steps)
    elif command == "help":
        console.print(INTERACTIVE_HELP)
    else:
        console.print(f"[yellow]Unknown command '{command}'. Type 'help'.[/yellow]")
    return True


def cmd_interactive(args):
    """Interactive two-field converter session."""
    from rich.console import Console
    from rich.panel import Panel

    from rfpower.clipboard import system_clipboard
    from rfpower.engine import ConverterSession

    console = Console()
    session = ConverterSession()

    console.print(Panel.fit(
        "[bold blue]dBm ⇄ Watt Converter[/bold blue]\n"
        "Edit either field; the other one follows. Type 'help' for commands.",
        border_style="blue",
    ))

    while True:
        try:
            line = console.input("\n[bold green]>[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            break

        if not handle_command(line, session, console, system_clipboard,
                              show_steps=not args.no_steps):
            break

    console.print("\n[dim]Session ended.[/dim]")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="dBm ⇄ Watt power converter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python app.py to-watts 20            # 20 dBm → 0.100000 W
  python app.py to-dbm 1               # 1 W → 30.000000 dBm
  python app.py to-watts -30           # -30 dBm → 0.000001 W
  python app.py interactive            # two-field session
        """,
    )
    parser.add_argument("--log-level", type=str, default="warning",
                        help="Logging level (debug, info, warning, error)")
    parser.add_argument("--log-file", type=str, default=None, dest="log_file",
                        help="Also write logs to this file")
    parser.add_argument("--no-steps", action="store_true", dest="no_steps",
                        help="Hide the calculation steps")

    subparsers = parser.add_subparsers(dest="command", help="Command")

    watts_parser = subparsers.add_parser("to-watts", help="Convert dBm to W")
    watts_parser.add_argument("value", type=str, help="Power level in dBm")
    watts_parser.add_argument("-q", "--quiet", action="store_true",
                              help="Print only the result")

    dbm_parser = subparsers.add_parser("to-dbm", help="Convert W to dBm")
    dbm_parser.add_argument("value", type=str, help="Power in Watts (> 0)")
    dbm_parser.add_argument("-q", "--quiet", action="store_true",
                            help="Print only the result")

    subparsers.add_parser("interactive", help="Interactive converter session")

    return parser


def main(argv=None):
    from rfpower.logging_config import parse_level, setup_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = parse_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))
    setup_logging(level, args.log_file)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "to-watts": cmd_to_watts,
        "to-dbm": cmd_to_dbm,
        "interactive": cmd_interactive,
    }

    logger.debug("Running command %s", args.command)
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
