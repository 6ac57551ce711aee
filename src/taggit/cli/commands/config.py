"""Config command - Show or change the saved defaults."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from ...config import Config


def _split_order(text: str):
    return [name.strip() for name in text.split(",") if name.strip()]


def apply_settings(config: Config, args: argparse.Namespace) -> bool:
    """Apply the requested changes to *config*; True if anything was set.

    Raises:
        ValueError: if a value is not accepted by the config
    """
    if args.default_log_level:
        config.set_log_level(args.default_log_level)
    if args.default_format:
        config.set_output_format(args.default_format)
    for file_type, order in args.read_order or []:
        config.set_read_order(file_type, _split_order(order))
    for file_type, order in args.write_order or []:
        config.set_write_order(file_type, _split_order(order))
    return config.is_dirty()


def _print_settings(console: Console, config: Config) -> None:
    table = Table(title=f"Settings ({config.config_path})", title_justify="left")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("log level", config.get_log_level())
    table.add_row("output format", config.get_output_format())
    for file_type, impls in sorted(config.get_read_map().items()):
        table.add_row(f"read order ({file_type})", ", ".join(impls))
    for file_type, impls in sorted(config.get_write_map().items()):
        table.add_row(f"write order ({file_type})", ", ".join(impls))
    console.print(table)


def cmd_config(args: argparse.Namespace) -> None:
    """Save the given defaults, then show the settings in effect.

    Args:
        args: Parsed command-line arguments; ``args.settings`` is the loaded Config
    """
    console = Console()
    config = args.settings

    try:
        changed = apply_settings(config, args)
    except ValueError as e:
        logging.error(str(e))
        sys.exit(1)

    if changed:
        if not config.save():
            sys.exit(1)
        console.print(f"[green]✓[/green] Saved to config: {config.config_path}")

    _print_settings(console, config)
