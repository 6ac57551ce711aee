"""CLI command implementations.

Each module in this package implements a specific taggit subcommand:
    list.py: List tags and stream properties of audio files
    check.py: Validate tag definitions and show where they would be written
    tags.py: List the known tag names
    types.py: List the supported file types and their tag policy
    config.py: Show or change the saved defaults
"""

from .list import cmd_list
from .check import cmd_check
from .tags import cmd_tags
from .types import cmd_types
from .config import cmd_config

__all__ = [
    "cmd_list",
    "cmd_check",
    "cmd_tags",
    "cmd_types",
    "cmd_config",
]
