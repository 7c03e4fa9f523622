"""Shared GPX fixtures."""

import zipfile

import pytest

GPX_NS = "http://www.topografix.com/GPX/1/1"

POINTS = [
    # lat, lon, ele, time
    ("47.600000", "-122.300000", "100.0", "2016-05-01T10:00:00Z"),
    ("47.601000", "-122.300000", "110.0", "2016-05-01T10:01:30Z"),
]


def trkpt(lat="47.6", lon="-122.3", ele="100.0", time="2016-05-01T10:00:00Z"):
    parts = [f'<trkpt lat="{lat}" lon="{lon}">']
    if ele is not None:
        parts.append(f"<ele>{ele}</ele>")
    if time is not None:
        parts.append(f"<time>{time}</time>")
    parts.append("</trkpt>")
    return "".join(parts)


def gpx_document(points=None, name="Morning Ride", namespace=GPX_NS) -> bytes:
    if points is None:
        points = [trkpt(*p) for p in POINTS]
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    name_xml = f"<name>{name}</name>" if name is not None else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<gpx version="1.1" creator="test"{xmlns}>'
        f"<trk>{name_xml}<trkseg>{''.join(points)}</trkseg></trk>"
        "</gpx>"
    ).encode()


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "ride.gpx"
    path.write_bytes(gpx_document())
    return path


@pytest.fixture
def gpx_archive(tmp_path):
    second = gpx_document(
        points=[
            trkpt("47.600000", "-122.300000", "200.0", "2016-05-02T08:00:00Z"),
            trkpt("47.600000", "-122.301000", "190.0", "2016-05-02T08:00:30Z"),
            trkpt("47.600000", "-122.302000", "195.0", "2016-05-02T08:01:00Z"),
        ],
        name="Evening Ride",
    )
    path = tmp_path / "rides.zip"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("activities/", "")
        zf.writestr("activities/1.gpx", gpx_document())
        zf.writestr("activities/2.gpx", second)
    return path


@pytest.fixture
def anyio_backend():
    return "asyncio"
