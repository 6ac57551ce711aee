"""Error kinds raised by the tagging core.

File errors carry the file name, assignment errors carry the offending
assignment text. All of them are recoverable: batch loops log the error and
carry on with the next file or assignment.
"""


class TaggitError(Exception):
    """Base class for all taggit errors."""


class FileError(TaggitError):
    """An audio file could not be opened for tag access."""

    reason = "Cannot open file"

    def __init__(self, filename: str, detail: str = ""):
        self.filename = filename
        self.detail = detail
        message = f"{self.reason}: `{filename}'"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class UnsupportedFileType(FileError):
    reason = "Unsupported file type"


class CorruptOrUnreadableFile(FileError):
    reason = "Could not open file"


class NoTagsPresent(FileError):
    reason = "No tags in file"


class AssignmentError(TaggitError):
    """A tag assignment given on the command line was rejected."""

    reason = "Invalid tag definition"

    def __init__(self, text: str, detail: str = ""):
        self.text = text
        self.detail = detail
        message = f"{self.reason}: {text!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class MalformedTagAssignment(AssignmentError):
    reason = "Broken tag definition"


class UnknownTagName(AssignmentError):
    reason = "Unknown tag name"


class InvalidTagValue(AssignmentError):
    reason = "Invalid tag value"
