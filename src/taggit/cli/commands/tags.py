"""Tags command - List the tag names taggit understands."""

import argparse

from rich.console import Console
from rich.table import Table

from ...tagging.schema import list_tag_names, name_to_type


def cmd_tags(args: argparse.Namespace) -> None:
    """Print the supported tag names, one per line.

    With ``--verbose`` a table with the value type of each tag is shown.

    Args:
        args: Parsed command-line arguments
    """
    if not args.verbose:
        for name in list_tag_names():
            print(name)
        return

    table = Table(title="Supported Tags")
    table.add_column("Tag", style="cyan")
    table.add_column("Type", style="magenta")
    for name in list_tag_names():
        table.add_row(name, name_to_type(name).value)
    Console().print(table)
