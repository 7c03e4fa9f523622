"""Run driver: summarize a single GPX file or every GPX entry of a zip archive."""

import logging
import zipfile
import zlib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Optional

from .core.gpx import load_track
from .core.metrics import summarize
from .core.models import AggregateSummary, TrackReport
from .errors import InputError

logger = logging.getLogger(__name__)


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputError(f"couldn't read file {path}: {exc.strerror or exc}") from exc


def is_archive(path: str | Path) -> bool:
    path = Path(path)
    if not path.exists():
        raise InputError(f"couldn't open file {path}: no such file")
    try:
        return zipfile.is_zipfile(path)
    except OSError as exc:
        raise InputError(f"couldn't open file {path}: {exc.strerror or exc}") from exc


def iter_documents(path: str | Path) -> Iterator[tuple[str, bytes]]:
    """Yield (name, bytes) for the file at path, or for each file entry of a zip archive.

    Archive entries come in archive order; directory entries are skipped.
    """
    path = Path(path)
    if not is_archive(path):
        yield str(path), _read_file(path)
        return

    try:
        with zipfile.ZipFile(path) as zf:
            for info in zf.infolist():
                if info.is_dir():
                    logger.debug("Skipping archive directory %s", info.filename)
                    continue
                try:
                    data = zf.read(info)
                except (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError, NotImplementedError) as exc:
                    raise InputError(f"couldn't read archive entry {info.filename}: {exc}") from exc
                yield info.filename, data
    except (zipfile.BadZipFile, OSError) as exc:
        raise InputError(f"couldn't read archive {path}: {exc}") from exc


def summarize_document(data: bytes, source: str) -> TrackReport:
    return summarize(load_track(data, source))


def iter_reports(
    path: str | Path, aggregate: Optional[AggregateSummary] = None
) -> Iterator[TrackReport]:
    """Summarize each document under path in order, folding each into aggregate if given."""
    for source, data in iter_documents(path):
        logger.debug("Processing %s", source)
        report = summarize_document(data, source)
        if aggregate is not None:
            aggregate.add(report)
        yield report


def run(path: str | Path, echo: Callable[[str], None] = print) -> Optional[AggregateSummary]:
    """Print per-track reports for path; for an archive also print and return the aggregate.

    Reports are printed as each track is computed. The first failure aborts
    the run, including in the middle of an archive.
    """
    aggregate = AggregateSummary() if is_archive(path) else None
    for report in iter_reports(path, aggregate):
        for line in report.lines():
            echo(line)
    if aggregate is not None:
        echo(aggregate.to_json())
    return aggregate


def collect(path: str | Path) -> tuple[list[TrackReport], Optional[AggregateSummary]]:
    """Like run, but returns the reports instead of printing them."""
    aggregate = AggregateSummary() if is_archive(path) else None
    reports = list(iter_reports(path, aggregate))
    return reports, aggregate
