"""Line, word and character statistics shared by every format."""
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class BasicStats:
    """Basic statistics for a document."""
    line_count: int
    word_count: int
    char_count: int
    avg_word_length: float
    avg_line_length: float

    @classmethod
    def empty(cls) -> "BasicStats":
        return cls(0, 0, 0, 0.0, 0.0)


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines of text without their terminators.

    Lines end at '\\n' (a preceding '\\r' belongs to the terminator). A trailing
    terminator does not produce an extra empty line.

    Args:
        text: Document content

    Yields:
        Each line, in order
    """
    start = 0
    length = len(text)
    while start < length:
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        line_end = end - 1 if end > start and text[end - 1] == "\r" else end
        yield text[start:line_end]
        start = end + 1


def compute_basic_stats(text: str) -> BasicStats:
    """Compute counts and averages in a single pass over the lines.

    Args:
        text: Document content

    Returns:
        BasicStats (all zeros for empty text)
    """
    if not text:
        return BasicStats.empty()

    line_count = 0
    word_count = 0
    word_chars = 0

    for line in iter_lines(text):
        line_count += 1
        for word in line.split():
            word_count += 1
            word_chars += len(word)

    # len() counts code points, not bytes
    char_count = len(text)

    return BasicStats(
        line_count=line_count,
        word_count=word_count,
        char_count=char_count,
        avg_word_length=word_chars / word_count if word_count else 0.0,
        avg_line_length=char_count / line_count if line_count else 0.0,
    )
