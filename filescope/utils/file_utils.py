"""File utility functions for format detection."""
from enum import Enum
from pathlib import PurePath


class FormatKind(Enum):
    """File format categories."""
    PLAIN_TEXT = "Plain Text"
    MARKDOWN = "Markdown"
    LOG = "Log File"
    SOURCE_CODE = "Rust Source Code"
    UNKNOWN = "Unknown"

    @property
    def label(self) -> str:
        """Human-readable name for display."""
        return self.value

    @property
    def analyzed_as(self) -> "FormatKind":
        """Format whose analyzer handles this kind (unknown files are read as text)."""
        if self is FormatKind.UNKNOWN:
            return FormatKind.PLAIN_TEXT
        return self


# Extension (lowercase, no dot) to format mapping
EXTENSION_MAP = {
    "txt": FormatKind.PLAIN_TEXT,
    "md": FormatKind.MARKDOWN,
    "log": FormatKind.LOG,
    "rs": FormatKind.SOURCE_CODE,
}


def get_extension(filename: str) -> str:
    """Return the text after the last '.' of the file name, or '' if none.

    Dotfiles such as '.bashrc' have no extension.
    """
    name = PurePath(filename).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext


def detect_file_type(filename: str) -> FormatKind:
    """Detect file format from extension.

    Args:
        filename: File name or path

    Returns:
        Detected FormatKind (UNKNOWN when the extension is missing or unrecognized)
    """
    ext = get_extension(filename).lower()
    return EXTENSION_MAP.get(ext, FormatKind.UNKNOWN)


def supported_extensions() -> list[tuple[str, FormatKind]]:
    """List recognized extensions with their formats."""
    return [(f".{ext}", kind) for ext, kind in EXTENSION_MAP.items()]
