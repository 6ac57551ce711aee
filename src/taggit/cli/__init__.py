"""Command-line interface for taggit.

This package provides the 'taggit' command-line tool with these subcommands:
    list: Show tags and stream properties of audio files
    check: Validate tag definitions and show where they would be written
    tags: List the known tag names
    types: List the supported file types and their tag policy
    config: Show or change the saved defaults

Modules:
    commands/: Command implementations
    machine.py: STX/ETX framed reports
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from ..constants import LOG_LEVELS, OUTPUT_FORMATS, PROJECT
from ..tagging.policy import TagFormatPolicy
from .utils import setup_logging
from .commands import (
    cmd_list,
    cmd_check,
    cmd_tags,
    cmd_types,
    cmd_config,
)

__all__ = [
    "main",
    "cmd_list",
    "cmd_check",
    "cmd_tags",
    "cmd_types",
    "cmd_config",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def build_parser() -> argparse.ArgumentParser:
    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Set logging level (default from config: warning)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: ~/.taggit/.taggit_config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog=PROJECT,
        usage="taggit <command> [options]",
        description=(
            "taggit - Inspect audio file tags\n\n"
            "Supported files: .mp3 (ID3v2, APE, ID3v1), .flac/.flc, .ogg/.oga"
        ),
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # list
    # ──────────────────────────────
    list_parser = subparsers.add_parser(
        "list",
        help="Show tags and audio properties of files",
        usage="taggit list [options] <file> [<file> ...]",
        description=(
            "Show the tags and stream properties of each file. For MP3 files "
            "the tags are read from the preferred tag type present."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    list_parser.add_argument("files", nargs="+", metavar="file", help="Audio files to list")
    list_format = list_parser.add_mutually_exclusive_group()
    list_format.add_argument(
        "-m",
        "--machine",
        dest="output_format",
        action="store_const",
        const="machine",
        help="Machine readable output (STX/ETX framed fields)",
    )
    list_format.add_argument(
        "-j",
        "--json",
        dest="output_format",
        action="store_const",
        const="json",
        help="Output as JSON",
    )
    list_parser.set_defaults(func=cmd_list)

    # ──────────────────────────────
    # check
    # ──────────────────────────────
    check_parser = subparsers.add_parser(
        "check",
        help="Validate tag definitions against files",
        usage="taggit check -s <tag>=<value> [-s ...] [options] <file> [<file> ...]",
        description=(
            "Validate tag definitions such as artist=Radiohead and show, per "
            "file, which tag type they would be written to. Nothing is written."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    check_parser.add_argument("files", nargs="+", metavar="file", help="Audio files to check")
    check_parser.add_argument(
        "-s",
        "--set",
        action="append",
        metavar="TAG=VALUE",
        help="Tag definition (repeatable; a later definition of a tag wins)",
    )
    check_parser.add_argument(
        "-t",
        "--type",
        default=None,
        help="Tag type to target (id3v2, apetag, id3v1; default from the write policy)",
    )
    check_parser.add_argument(
        "-j",
        "--json",
        dest="output_format",
        action="store_const",
        const="json",
        help="Output as JSON",
    )
    check_parser.set_defaults(func=cmd_check)

    # ──────────────────────────────
    # tags
    # ──────────────────────────────
    tags_parser = subparsers.add_parser(
        "tags",
        help="List the supported tag names",
        usage="taggit tags [options]",
        description="List the tag names accepted by check",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    tags_parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="Show the value type of each tag",
    )
    tags_parser.set_defaults(func=cmd_tags)

    # ──────────────────────────────
    # types
    # ──────────────────────────────
    types_parser = subparsers.add_parser(
        "types",
        help="List the supported file types",
        usage="taggit types [options]",
        description="List the supported file types, their extensions and tag types",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    types_parser.set_defaults(func=cmd_types)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show or change the saved defaults",
        usage="taggit config [options]",
        description=(
            "Show the settings in effect. Options change a default and save it "
            "to the config file (see -c)."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    config_parser.add_argument(
        "--default-log-level",
        choices=LOG_LEVELS,
        help="Log level used when -l is not given",
    )
    config_parser.add_argument(
        "--default-format",
        choices=OUTPUT_FORMATS,
        help="Report format used when no format option is given",
    )
    config_parser.add_argument(
        "--read-order",
        nargs=2,
        action="append",
        metavar=("FILETYPE", "TAGTYPES"),
        help="Read precedence for a file type, e.g. mp3 apetag,id3v2 (repeatable)",
    )
    config_parser.add_argument(
        "--write-order",
        nargs=2,
        action="append",
        metavar=("FILETYPE", "TAGTYPES"),
        help="Write targets for a file type; the first is the default (repeatable)",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute command
    try:
        config = Config(args.config)
        setup_logging(args.log_level or config.get_log_level())

        args.settings = config
        args.policy = TagFormatPolicy.from_config(config)
        if getattr(args, "output_format", None) is None:
            args.output_format = config.get_output_format()
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
