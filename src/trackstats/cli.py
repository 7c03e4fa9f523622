"""Command line entry point: trackstats PATH."""

import logging
from typing import Optional

import typer

from .config import RunOptions, setup_logging
from .errors import TrackStatsError
from .runner import run

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Summarize GPX tracks: samples, start time, duration, elevation gain and distance.",
)


@app.command()
def summarize(
    path: str = typer.Argument(..., help="A .gpx file, or a .zip archive of .gpx files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Optional log file path for diagnostics"),
) -> None:
    """Print a report per track; archives also get a final JSON aggregate line."""
    options = RunOptions(path=path, verbose=verbose, log_file=log_file)
    setup_logging(options.verbose, log_file=options.log_file)
    try:
        run(options.path, echo=typer.echo)
    except TrackStatsError as exc:
        logger.debug("Run aborted", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
