"""Command-line interface for avatarmenu."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from avatarmenu.core.config.loader import configure_logging, load_app_config
from avatarmenu.core.config.models import AppConfig
from avatarmenu.core.osc import AvatarOscTransport, RecordingTransport, parse_target
from avatarmenu.core.osc.protocols import ParameterTransport
from avatarmenu.core.params.models import FloatValue, ParameterValue
from avatarmenu.core.session import AvatarSession

console = Console()
logger = logging.getLogger(__name__)


def _format_value(value: ParameterValue) -> str:
    if isinstance(value, FloatValue):
        return f"{value.value:.3f}"
    return str(value.value)


def _load_app_config(args: argparse.Namespace) -> AppConfig | None:
    try:
        return load_app_config(Path(args.app_config) if args.app_config else None)
    except (FileNotFoundError, ValueError, ValidationError) as e:
        console.print(f"[red]ERROR: Could not load app config: {escape(str(e))}[/red]")
        return None


def _load_session(
    args: argparse.Namespace, app_config: AppConfig, transport: ParameterTransport
) -> AvatarSession | None:
    session = AvatarSession(transport, vrchat_root=app_config.vrchat_root)
    saved = Path(args.saved).resolve() if args.saved else None
    try:
        session.load(Path(args.config).resolve(), saved)
    except OSError as e:
        logger.debug("Avatar load failed", exc_info=True)
        console.print(f"[red]ERROR: Could not load avatar parameters: {escape(str(e))}[/red]")
        return None
    return session


def build_parameter_table(session: AvatarSession, prefix: str = "") -> Table:
    """Render the session's visible parameters as a table."""
    table = Table(title=f"Avatar ID: {session.avatar_id}")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Value", justify="right")

    for name, value in session.visible_parameters(prefix):
        table.add_row(name, value.type.value, _format_value(value))

    return table


def show_parameters(args: argparse.Namespace) -> int:
    """Print the parameters of an avatar config."""
    app_config = _load_app_config(args)
    if app_config is None:
        return 1
    configure_logging(app_config)

    session = _load_session(args, app_config, RecordingTransport())
    if session is None:
        return 1

    console.print(f"Found {session.parameter_count} params")
    console.print(build_parameter_table(session, args.filter))
    return 0


def set_parameter(args: argparse.Namespace) -> int:
    """Send one parameter value to the avatar."""
    app_config = _load_app_config(args)
    if app_config is None:
        return 1
    configure_logging(app_config)

    transport: ParameterTransport
    if args.dry_run:
        transport = RecordingTransport()
    else:
        try:
            host, port = (
                parse_target(args.target)
                if args.target is not None
                else (app_config.osc.host, app_config.osc.port)
            )
            transport = AvatarOscTransport(host, port, app_config.osc.address_prefix)
        except (ValueError, OSError) as e:
            console.print(f"[red]ERROR: Could not open OSC target: {escape(str(e))}[/red]")
            return 1

    session = _load_session(args, app_config, transport)
    if session is None:
        return 1

    try:
        session.value(args.name)
    except KeyError:
        console.print(f"[red]ERROR: Unknown parameter: {args.name}[/red]")
        return 1

    try:
        sent = session.set_value(args.name, args.value)
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    new_value = session.value(args.name)
    if sent:
        console.print(f"[green]Sent[/green] {args.name} = {_format_value(new_value)}")
        return 0

    if session.changed().get(args.name) is None:
        console.print(f"{args.name} already {_format_value(new_value)}, nothing sent")
        return 0

    console.print(f"[red]ERROR: Failed to send {args.name}[/red]")
    return 1


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="avatarmenu",
        description="avatarmenu - inspect and drive VRChat avatar parameters over OSC",
    )
    p.add_argument(
        "--app-config",
        default=None,
        help="Path to app config JSON/YAML (default: config.json if present)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    show = sub.add_parser("show", help="List avatar parameters and their saved values")
    show.add_argument("--config", required=True, help="Path to the avatar OSC config")
    show.add_argument("--saved", default=None, help="Path to the saved-state file")
    show.add_argument("--filter", default="", help="Only show names with this prefix")

    set_cmd = sub.add_parser("set", help="Send one parameter value")
    set_cmd.add_argument("--config", required=True, help="Path to the avatar OSC config")
    set_cmd.add_argument("--saved", default=None, help="Path to the saved-state file")
    set_cmd.add_argument("--name", required=True, help="Parameter name")
    set_cmd.add_argument("--value", required=True, help="Value (number or true/false)")
    set_cmd.add_argument("--target", default=None, help="OSC target host:port")
    set_cmd.add_argument(
        "--dry-run", action="store_true", help="Resolve the value without sending it"
    )

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "show":
        sys.exit(show_parameters(args))
    if args.cmd == "set":
        sys.exit(set_parameter(args))
