"""GPX document parsing.

Reads the track subset of GPX: root -> trk -> name, and
root -> trk -> trkseg -> trkpt (lat/lon attributes, ele and time children).
Tags are matched on their local name so namespaced GPX 1.0/1.1 documents
and bare documents are handled alike. Only the first trk and its first
trkseg are read.
"""

import logging
from datetime import datetime, timezone
from xml.etree.ElementTree import Element, ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ..errors import EmptyTrack, MalformedDocument
from ..models import Sample, Track

logger = logging.getLogger(__name__)

UNNAMED_TITLE = "Unnamed Activity"
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def parse_document(data: bytes, source: str = "<document>") -> Element:
    """Parse raw GPX bytes into an element tree root."""
    try:
        return ET.fromstring(data)
    except (ParseError, DefusedXmlException) as exc:
        raise MalformedDocument(f"{source}: not a valid GPX document ({exc})") from exc


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(element: Element, name: str) -> Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _require_child(element: Element, name: str, where: str) -> Element:
    child = _child(element, name)
    if child is None:
        raise MalformedDocument(f"{where}: missing <{name}> element")
    return child


def _text(element: Element) -> str | None:
    if element.text is None:
        return None
    text = element.text.strip()
    return text or None


def _parse_float(raw: str) -> float:
    # float() also takes digit separators and padding; GPX numbers carry neither.
    if "_" in raw or raw != raw.strip():
        raise ValueError(raw)
    return float(raw)


def _track_element(document: Element) -> Element:
    return _require_child(document, "trk", "gpx")


def _elevation(point: Element, where: str) -> float:
    text = _text(_require_child(point, "ele", where))
    if text is None:
        return 0.0
    try:
        return _parse_float(text)
    except ValueError:
        raise MalformedDocument(f"{where}: invalid elevation {text!r}") from None


def _timestamp(point: Element, where: str) -> datetime:
    text = _text(_require_child(point, "time", where))
    if text is None:
        raise MalformedDocument(f"{where}: empty <time> element")
    # A trailing Z only restates UTC; anything else past the seconds is rejected.
    value = text[:-1] if text.endswith("Z") else text
    try:
        parsed = datetime.strptime(value, TIME_FORMAT)
    except ValueError:
        raise MalformedDocument(f"{where}: invalid time {text!r}") from None
    return parsed.replace(tzinfo=timezone.utc)


def _coordinate(point: Element, attribute: str, where: str) -> float:
    raw = point.get(attribute)
    if raw is None:
        raise MalformedDocument(f"{where}: missing '{attribute}' attribute")
    try:
        return _parse_float(raw)
    except ValueError:
        raise MalformedDocument(f"{where}: invalid {attribute} {raw!r}") from None


def extract_title(document: Element) -> str:
    """Return the track name, or the placeholder when it is absent or blank."""
    name = _child(_track_element(document), "name")
    if name is None:
        return UNNAMED_TITLE
    if _text(name) is None:
        return UNNAMED_TITLE
    return name.text


def extract_samples(document: Element) -> list[Sample]:
    """Convert every trkpt of the first track segment into a Sample, in document order."""
    segment = _require_child(_track_element(document), "trkseg", "trk")

    samples = []
    points = (child for child in segment if _local_name(child.tag) == "trkpt")
    for index, point in enumerate(points, 1):
        where = f"trkpt {index}"
        samples.append(Sample(
            elevation=_elevation(point, where),
            timestamp=_timestamp(point, where),
            latitude=_coordinate(point, "lat", where),
            longitude=_coordinate(point, "lon", where),
        ))
    return samples


def extract_track(document: Element) -> Track:
    title = extract_title(document)
    samples = extract_samples(document)
    if not samples:
        raise EmptyTrack(f"Track '{title}' has no samples.")
    return Track(title=title, samples=samples)


def load_track(data: bytes, source: str = "<document>") -> Track:
    """Parse GPX bytes and extract the track they describe."""
    document = parse_document(data, source)
    try:
        track = extract_track(document)
    except MalformedDocument as exc:
        raise MalformedDocument(f"{source}: {exc}") from exc
    except EmptyTrack as exc:
        raise EmptyTrack(f"{source}: {exc}") from exc
    logger.debug("Loaded '%s' from %s: %d samples", track.title, source, len(track.samples))
    return track
