"""Pydantic schemas for JSON output.

Every ``--json`` report is one of the response models below, so the output
structure stays consistent across commands and is validated before it is
printed.

Commands using these models:
- list: ListResponse
- check: CheckResponse
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


# ============================================================================
# Shared Models
# ============================================================================


class ErrorResponse(BaseModel):
    """A file or assignment that could not be processed.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g. "no_tags_present")
        message: Human-readable error message
        filename: The file concerned, if any
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=[
            "unsupported_file_type",
            "corrupt_or_unreadable_file",
            "no_tags_present",
            "malformed_tag_assignment",
            "unknown_tag_name",
            "invalid_tag_value",
        ],
    )
    message: str = Field(description="Human-readable error description")
    filename: Optional[str] = Field(default=None, description="File concerned")


# ============================================================================
# List Command Responses
# ============================================================================


class FileReport(BaseModel):
    """Tags and stream properties of one file.

    Attributes:
        status: Always "success"
        filename: Path as given on the command line
        filetype: Container type name (mp3, ogg-flac, ogg-vorbis)
        multitag: Whether the container may carry several tag types
        tagtypes: Comma separated tag types present, or "none"
        tagimpl: Tag type the tags were read from (multitag files only)
        tags: Schema tags found in the file
        audio: Stream properties
    """

    status: Literal["success"] = "success"
    filename: str
    filetype: str
    multitag: bool
    tagtypes: str = Field(examples=["id3v2,id3v1", "none"])
    tagimpl: Optional[str] = Field(default=None, examples=["id3v2"])
    tags: Dict[str, Union[int, str]] = Field(default_factory=dict)
    audio: Dict[str, int] = Field(default_factory=dict)


class ListResponse(BaseModel):
    """Response for the list command.

    Attributes:
        status: "success" or "completed_with_errors"
        files: One entry per file, report or error
    """

    status: Literal["success", "completed_with_errors"]
    files: List[Union[FileReport, ErrorResponse]]


# ============================================================================
# Check Command Responses
# ============================================================================


class TagChange(BaseModel):
    """One tag assignment as it would apply to a file."""

    tag: str
    type: str = Field(examples=["string", "integer"])
    value: Union[int, str]
    current: Optional[str] = Field(
        default=None, description="Current value in the target tag type"
    )


class FilePlan(BaseModel):
    """Where and what would be written for one file.

    Attributes:
        status: Always "success"
        filename: Path as given on the command line
        filetype: Container type name
        target: Tag type receiving the changes ("none" for single-tag files)
        changes: The validated assignments
    """

    status: Literal["success"] = "success"
    filename: str
    filetype: str
    target: str
    changes: List[TagChange]


class CheckResponse(BaseModel):
    """Response for the check command.

    Attributes:
        status: "success" or "completed_with_errors"
        assignment_errors: Rejected tag definitions
        files: One entry per file, plan or error
    """

    status: Literal["success", "completed_with_errors"]
    assignment_errors: List[ErrorResponse] = Field(default_factory=list)
    files: List[Union[FilePlan, ErrorResponse]]
