"""Types command - Show supported file types and their tag policy."""

import argparse

from rich.console import Console
from rich.table import Table

from ...tagging.filetypes import FileType, extensions_for_type, name_from_type
from ...tagging.policy import name_from_tag_impl


def cmd_types(args: argparse.Namespace) -> None:
    """Print each supported file type with its extensions and tag types.

    The read and write orders reflect the configured policy.

    Args:
        args: Parsed command-line arguments
    """
    policy = args.policy

    table = Table(title="Supported File Types")
    table.add_column("Type", style="cyan")
    table.add_column("Extensions", style="magenta")
    table.add_column("Multitag")
    table.add_column("Read Order", style="green")
    table.add_column("Write Default", style="yellow")

    for file_type in FileType:
        if file_type is FileType.INVALID:
            continue
        multitag = policy.is_multitag_capable(file_type)
        read_order = ", ".join(name_from_tag_impl(i) for i in policy.read_order(file_type))
        table.add_row(
            name_from_type(file_type),
            ", ".join(f".{ext}" for ext in extensions_for_type(file_type)),
            "yes" if multitag else "no",
            read_order or "-",
            name_from_tag_impl(policy.default_write_impl(file_type)) if multitag else "-",
        )

    Console().print(table)
