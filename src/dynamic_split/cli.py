"""CLI entry point and subcommand definitions."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dynamic_split.config import ConfigError, Settings, get_config_path, load_settings
from dynamic_split.geometry import Axis, Rect, SplitSpec, compute
from dynamic_split.session import SplitSession


def _parse_size(value: str) -> tuple[int, int]:
    """Parse WIDTHxHEIGHT into (width, height)."""
    width, sep, height = value.lower().partition("x")
    if not sep or not width.isdigit() or not height.isdigit():
        msg = f"invalid size {value!r}, expected WIDTHxHEIGHT"
        raise argparse.ArgumentTypeError(msg)
    return int(width), int(height)


def _parse_origin(value: str) -> tuple[int, int]:
    """Parse X,Y into (x, y)."""
    x, sep, y = value.partition(",")
    if not sep or not x.strip().isdigit() or not y.strip().isdigit():
        msg = f"invalid origin {value!r}, expected X,Y"
        raise argparse.ArgumentTypeError(msg)
    return int(x), int(y)


def _parse_axis(value: str) -> Axis:
    try:
        return Axis.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _load_settings(args: argparse.Namespace) -> Settings:
    path = Path(args.config) if args.config else get_config_path()
    try:
        settings = load_settings(path)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.axis is not None:
        settings.axis = args.axis
    return settings


def _format_rect(rect: Rect) -> str:
    return f"x={rect.x} y={rect.y} width={rect.width} height={rect.height}"


def _cmd_areas(args: argparse.Namespace) -> None:
    """Print the two pane rectangles for a container."""
    settings = _load_settings(args)
    width, height = args.size
    x, y = args.origin
    session = SplitSession(offset=args.offset)
    first, second = compute(SplitSpec(settings.axis, Rect(x, y, width, height)), session)
    if args.json:
        print(
            json.dumps(
                {
                    "axis": settings.axis.value,
                    "offset": session.offset,
                    "first": first.as_dict(),
                    "second": second.as_dict(),
                },
                indent=2,
            )
        )
    else:
        print(f"axis:   {settings.axis.value}")
        print(f"offset: {session.offset}")
        print(f"first:  {_format_rect(first)}")
        print(f"second: {_format_rect(second)}")


def _launch_tui(args: argparse.Namespace) -> None:
    """Launch the Textual demo.

    Imports are deferred to avoid loading Textual for CLI-only commands.
    """
    from dynamic_split.tui.app import DemoApp  # noqa: PLC0415

    DemoApp(_load_settings(args)).run()


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate subcommand."""
    parser = argparse.ArgumentParser(
        prog="dynamic-split",
        description="Resizable two-pane split layouts for the terminal",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help="Path to config.toml")
    parser.add_argument("--axis", type=_parse_axis, help="Split axis: vertical or horizontal")
    subparsers = parser.add_subparsers(dest="command")

    # areas
    areas_parser = subparsers.add_parser("areas", help="Print the pane rectangles for a container")
    areas_parser.add_argument("size", type=_parse_size, help="Container size as WIDTHxHEIGHT")
    areas_parser.add_argument(
        "--origin", type=_parse_origin, default=(0, 0), help="Container origin as X,Y"
    )
    areas_parser.add_argument("--offset", type=int, help="Divider offset (default: midpoint)")
    areas_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        _launch_tui(args)
        return

    dispatch = {
        "areas": _cmd_areas,
    }
    dispatch[args.command](args)
