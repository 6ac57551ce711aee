"""Check command - Validate tag definitions against a set of files."""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Union

from rich.console import Console
from rich.table import Table

from ...errors import FileError
from ...tagging.filetypes import name_from_type
from ...tagging.parser import TagChangeSet
from ...tagging.policy import TagImpl, name_from_tag_impl, tag_impl_from_name
from ...tagging.record import FileRecord, try_open
from ...tagging.schema import TAG_SCHEMA
from ..schemas import CheckResponse, ErrorResponse, FilePlan, TagChange
from ..utils import error_code


def resolve_target(record: FileRecord, requested: Optional[TagImpl]) -> TagImpl:
    """Tag type the changes for *record* would be written to.

    Raises:
        ValueError: if *requested* is not allowed for the file's type
    """
    policy = record.policy
    if requested is None:
        return policy.default_write_impl(record.type)
    if not policy.impl_allowed(record.type, requested):
        raise ValueError(
            f"Tag type {name_from_tag_impl(requested)} not allowed for "
            f"{name_from_type(record.type)} files: {record.name}"
        )
    return requested


def current_values(record: FileRecord, target: TagImpl) -> Dict[str, List[str]]:
    handle = record.require_handle()
    if record.is_multitag:
        return handle.block_properties(target)
    return handle.properties()


def plan_for(record: FileRecord, changes: TagChangeSet, target: TagImpl) -> FilePlan:
    existing = current_values(record, target)
    planned = []
    for definition in changes:
        current = existing.get(TAG_SCHEMA[definition.name].property_key)
        planned.append(
            TagChange(
                tag=definition.name,
                type=definition.type.value,
                value=definition.value.value,
                current=", ".join(current) if current else None,
            )
        )
    return FilePlan(
        filename=record.name,
        filetype=name_from_type(record.type),
        target=name_from_tag_impl(target),
        changes=planned,
    )


def _print_plan(console: Console, plan: FilePlan) -> None:
    table = Table(
        title=f"{plan.filename} ({plan.filetype} -> {plan.target})",
        title_justify="left",
    )
    table.add_column("Tag", style="cyan")
    table.add_column("Current", style="dim")
    table.add_column("New", style="green")
    for change in plan.changes:
        table.add_row(change.tag, change.current or "", str(change.value))
    console.print(table)


def cmd_check(args: argparse.Namespace) -> None:
    """Validate ``key=value`` tag definitions and plan them per file.

    Nothing is written. Rejected definitions and files that cannot take the
    changes are reported; the exit status is 1 if there were any.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()
    as_json = args.output_format == "json"

    requested = None
    if args.type:
        try:
            requested = tag_impl_from_name(args.type)
        except ValueError as e:
            logging.error(str(e))
            sys.exit(1)

    changes = TagChangeSet.from_assignments(args.set or [])
    failed = len(changes.errors)
    if not len(changes):
        logging.error("No valid tag definitions given")
        sys.exit(1)

    files: List[Union[FilePlan, ErrorResponse]] = []
    for name in args.files:
        result = try_open(name, args.policy)
        if not result.ok:
            failed += 1
            logging.error(str(result.error))
            files.append(
                ErrorResponse(error=error_code(result.error), message=str(result.error), filename=name)
            )
            continue

        with result.record as record:
            try:
                target = resolve_target(record, requested)
            except ValueError as e:
                failed += 1
                logging.error(str(e))
                files.append(ErrorResponse(error="tag_type_not_allowed", message=str(e), filename=name))
                continue
            try:
                files.append(plan_for(record, changes, target))
            except FileError as e:
                failed += 1
                logging.error(str(e))
                files.append(ErrorResponse(error=error_code(e), message=str(e), filename=name))

    if as_json:
        response = CheckResponse(
            status="completed_with_errors" if failed else "success",
            assignment_errors=[
                ErrorResponse(error=error_code(e), message=str(e)) for e in changes.errors
            ],
            files=files,
        )
        print(response.model_dump_json(indent=2, exclude_none=True))
    else:
        # errors were already logged
        for entry in files:
            if isinstance(entry, FilePlan):
                _print_plan(console, entry)

    if failed:
        sys.exit(1)
