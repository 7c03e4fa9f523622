"""Summary tool: summarize_tracks."""

import json
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..errors import TrackStatsError
from ..runner import collect

logger = logging.getLogger(__name__)


def summary_payload(file_path: str) -> dict:
    reports, aggregate = collect(file_path)
    return {
        "tracks": [r.as_dict() for r in reports],
        "aggregate": aggregate.as_dict() if aggregate is not None else None,
    }


def register_summary_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def summarize_tracks(file_path: str) -> str:
        """Summarize a GPX file, or every GPX file in a zip archive.

        Returns JSON with one entry per track (title, samples, start_time,
        duration in seconds, elevation and distance in meters) and, for
        archives, an aggregate with ride count and summed totals.

        Args:
            file_path: Absolute path to a .gpx file or a .zip of .gpx files.
        """
        try:
            payload = summary_payload(file_path)
        except TrackStatsError as e:
            logger.debug("summarize_tracks failed for %s", file_path, exc_info=True)
            return f"Error: {e}"
        return json.dumps(payload, indent=2)
