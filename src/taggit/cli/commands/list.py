"""List command - Show the tags and stream properties of audio files."""

import argparse
import logging
import sys
from typing import List, Union

from rich.console import Console
from rich.table import Table

from ...errors import FileError
from ...listing import collect_groups, flatten_groups
from ...tagging.record import try_open
from ...tagging.value import TagType, TypedValue
from ..machine import render_record
from ..schemas import ErrorResponse, FileReport, ListResponse
from ..utils import error_code


def _display_value(value: TypedValue) -> str:
    if value.type is TagType.BOOLEAN:
        return "yes" if value.as_bool() else "no"
    return str(value)


def _print_table(console: Console, name: str, groups) -> None:
    table = Table(title=name, show_header=False, title_justify="left")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="magenta")

    for index, group in enumerate(groups):
        if index and group:
            table.add_section()
        for key, value in sorted(group.items()):
            table.add_row(key, _display_value(value))

    console.print(table)


def _file_report(name: str, groups) -> FileReport:
    file_fields, tags, audio = groups
    tagimpl = file_fields.get("tagimpl")
    return FileReport(
        filename=name,
        filetype=file_fields["filetype"].as_str(),
        multitag=file_fields["multitag"].as_bool(),
        tagtypes=file_fields["tagtypes"].as_str(),
        tagimpl=tagimpl.as_str() if tagimpl is not None else None,
        tags={key: value.value for key, value in sorted(tags.items())},
        audio={key: value.as_int() for key, value in sorted(audio.items())},
    )


def _error_report(name: str, error: FileError) -> ErrorResponse:
    return ErrorResponse(error=error_code(error), message=str(error), filename=name)


def cmd_list(args: argparse.Namespace) -> None:
    """List tags and audio properties of every file given.

    A file that cannot be opened is reported and skipped; the exit status
    is 1 if any file failed.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    output_format = args.output_format
    reports: List[Union[FileReport, ErrorResponse]] = []
    failed = 0
    first = True

    for name in args.files:
        result = try_open(name, args.policy)
        if not result.ok:
            failed += 1
            if output_format == "human":
                console.print(f"[red]Error:[/red] {result.error}")
            else:
                logging.error(str(result.error))
            if output_format == "json":
                reports.append(_error_report(name, result.error))
            continue

        try:
            with result.record as record:
                groups = collect_groups(record)
        except FileError as e:
            failed += 1
            if output_format == "human":
                console.print(f"[red]Error:[/red] {e}")
            else:
                logging.error(str(e))
            if output_format == "json":
                reports.append(_error_report(name, e))
            continue

        if output_format == "machine":
            sys.stdout.write(render_record(name, flatten_groups(groups), first=first))
            first = False
        elif output_format == "json":
            reports.append(_file_report(name, groups))
        else:
            _print_table(console, name, groups)

    if output_format == "json":
        response = ListResponse(
            status="completed_with_errors" if failed else "success",
            files=reports,
        )
        print(response.model_dump_json(indent=2, exclude_none=True))

    if failed:
        sys.exit(1)
