"""Display formatting using Rich library."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import DEFAULT_SAMPLE_WIDTH
from ..core.summary import FileSummary
from .file_utils import FormatKind, supported_extensions


console = Console()


def display_summary(summary: FileSummary, sample_width: int = DEFAULT_SAMPLE_WIDTH) -> None:
    """Display the analysis of a single file.

    Args:
        summary: FileSummary object
        sample_width: Insight lines longer than this are cut with '...'
    """
    # Header
    console.print(f"\n[bold cyan]File Summary:[/] {escape(summary.display_name)} "
                  f"([dim]{escape(summary.display_path)}[/])")
    type_line = f"[dim]Type:[/] {summary.format_kind.label}"
    if summary.format_kind is FormatKind.UNKNOWN:
        type_line += f" [dim](analyzed as {FormatKind.PLAIN_TEXT.label})[/]"
    console.print(type_line)

    _display_basic_stats(summary)

    if summary.detailed_stats:
        console.print("\n[bold green]Detailed Statistics:[/]")
        for label, value in summary.detailed_stats.items():
            console.print(f"  {humanize_label(label)}: [magenta]{escape(value)}[/]")

    if summary.key_insights:
        console.print("\n[bold yellow]Key Insights:[/]")
        for insight in summary.key_insights:
            console.print(f"  • {escape(truncate(insight, sample_width))}")

    console.print()  # Final newline


def display_supported_types() -> None:
    """Display the extension table."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Extension", style="cyan")
    table.add_column("Format", style="green")

    for ext, kind in supported_extensions():
        table.add_row(ext, kind.label)

    console.print(table)
    console.print("[dim]Any other extension is analyzed as plain text.[/]")


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message
    """
    console.print(f"\n[bold red]Error:[/] {escape(message)}\n")


def humanize_label(label: str) -> str:
    """Turn a stat key like 'avg_word_length' into 'Average word length'."""
    text = label.replace("avg_", "average_").replace("_", " ")
    return text[:1].upper() + text[1:]


def truncate(text: str, width: int) -> str:
    """Cut text to width characters, marking the cut with '...'."""
    if len(text) <= width:
        return text
    return text[:width] + "..."


def _display_basic_stats(summary: FileSummary) -> None:
    """Display basic statistics lines.

    Args:
        summary: FileSummary object
    """
    stats = summary.basic_stats
    console.print("\n[bold cyan]Basic Statistics:[/]")
    parts = [
        f"lines:  [blue]{stats.line_count:>7,}[/]",
        f"words:  [yellow]{stats.word_count:>7,}[/]",
        f"chars:  [green]{stats.char_count:>7,}[/]",
    ]
    console.print("  " + "  │  ".join(parts))

    rate_parts = [
        f"avg word:  [yellow]{stats.avg_word_length:>5.1f}[/]",
        f"avg line:  [green]{stats.avg_line_length:>5.1f}[/]",
    ]
    console.print("  " + "  │  ".join(rate_parts))
