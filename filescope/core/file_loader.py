"""Read files into memory before analysis."""
from dataclasses import dataclass
from pathlib import Path

from ..logging_setup import get_logger


logger = get_logger("loader")


class FileLoadError(RuntimeError):
    """Raised when a file cannot be read as UTF-8 text."""


@dataclass(frozen=True)
class RawDocument:
    """Full decoded content of a file plus its original path."""
    path: str
    content: str


def load_document(file_path: str) -> RawDocument:
    """Read a whole file as UTF-8 text.

    The handle is closed before this returns; analysis only sees the string.

    Args:
        file_path: Path to file

    Returns:
        RawDocument with the decoded content

    Raises:
        FileLoadError: If the file is missing, not a regular file, unreadable
            or not valid UTF-8
    """
    path = Path(file_path).expanduser()

    if not path.exists():
        raise FileLoadError(f"File '{file_path}' does not exist.")
    if path.is_dir():
        raise FileLoadError(f"'{file_path}' is a directory, not a file.")

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise FileLoadError(f"File '{file_path}' is not valid UTF-8 text: {e.reason}") from e
    except OSError as e:
        raise FileLoadError(f"Error reading file '{file_path}': {e.strerror or e}") from e

    logger.debug("Loaded %s (%d chars)", file_path, len(content))
    return RawDocument(path=file_path, content=content)
