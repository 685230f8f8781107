"""CLI entry point for filescope."""
from __future__ import annotations

import json
from pathlib import Path

import click

from . import __version__
from .config import Config, ConfigError, get_default_config_path
from .core.file_analyzer import FileAnalyzer
from .core.file_loader import FileLoadError
from .logging_setup import configure_logging, get_logger
from .utils.display import display_error, display_summary, display_supported_types


logger = get_logger("cli")


@click.group()
@click.version_option(version=__version__, prog_name="filescope")
def main():
    """filescope - Summarize text, markdown, log and Rust source files."""
    pass


@main.command()
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config file",
)
@click.option("--top-k", "-k", type=click.IntRange(min=1), help="Entries shown per insight list")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs to this file",
)
def analyze(
    file: Path,
    config: Path | None,
    top_k: int | None,
    as_json: bool,
    verbose: bool,
    log_file: Path | None,
):
    """Analyze FILE and print its summary."""
    try:
        cfg = Config.load(config or get_default_config_path())
    except ConfigError as e:
        display_error(str(e))
        raise SystemExit(1)

    configure_logging(
        verbose=verbose or cfg.logging.verbose,
        log_file=log_file or cfg.logging.log_file,
    )

    analyzer = FileAnalyzer(top_k=top_k or cfg.limits.top_k)
    try:
        summary = analyzer.analyze_file(str(file))
    except FileLoadError as e:
        logger.debug("Load failed: %s", e)
        display_error(str(e))
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    else:
        display_summary(summary, sample_width=cfg.display.sample_width)


@main.command()
def types():
    """List supported file extensions."""
    display_supported_types()


@main.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to config file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(config: Path | None, force: bool):
    """Write a default configuration file."""
    config_path = config or get_default_config_path()

    if config_path.exists() and not force:
        click.echo(f"Config already exists at {config_path}")
        if not click.confirm("Overwrite?"):
            return

    Config.default().save(config_path)
    click.echo(f"Created config at {config_path}")


if __name__ == "__main__":
    main()
