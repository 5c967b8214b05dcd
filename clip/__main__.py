"""
Clip Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from clip.config import find_clip_config, loader
from clip.console import console, error_console
from clip.exceptions import ClipError
from clip.parser_types import Input
from clip.parsers import get_root_parser
from clip.utils import setup_logging


def render_inputs(inputs: list[Input], program_name: str) -> Table:
    table = Table(title=escape(program_name), show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Argument", style="bold cyan")
    table.add_column("Values")
    for index, item in enumerate(inputs, start=1):
        table.add_row(str(index), escape(item.name), escape(" ".join(item.values)))
    return table


def render_error(error: Exception) -> None:
    error_console.print(
        Panel(
            escape(str(error)),
            title=type(error).__name__,
            border_style="red",
            expand=False,
        )
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode="cli",
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    config_path = Path(args.config) if args.config else find_clip_config()
    if config_path is None:
        error_console.print("[bold red]No definition file found.[/] Use --config PATH.")
        return 2

    tokens = list(args.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    try:
        registry = loader(config_path)
    except (ClipError, ValueError, OSError) as error:
        render_error(error)
        return 2

    try:
        if args.line is not None:
            inputs = registry.parse(args.line)
        else:
            inputs = registry.resolve(tokens)
    except ClipError as error:
        render_error(error)
        return 1

    if args.json:
        console.print_json(
            json.dumps([{"name": item.name, "values": item.values} for item in inputs])
        )
    else:
        console.print(render_inputs(inputs, registry.program_name))
    return 0


if __name__ == "__main__":
    sys.exit(main())
