"""taggit - audio file tag inspection.

Reads the tags of MP3, FLAC and Ogg Vorbis files, resolves which tag format
of a multi-format container (ID3v2, APE, ID3v1 in MP3) to read from, and
validates typed ``key=value`` tag definitions.

Main modules:
    cli: Command-line interface (taggit command)
    tagging: File types, tag format policy, typed values and the tag schema
    listing: Report fields for one file

Core modules:
    config: Configuration management
    constants: Constants and definitions
    errors: Exception hierarchy
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("taggit")
except PackageNotFoundError:
    # Package not installed; read directly from pyproject.toml
    from pathlib import Path
    import tomllib

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        __version__ = "unknown"
