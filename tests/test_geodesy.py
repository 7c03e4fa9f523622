"""Tests for haversine distance."""
import math
from datetime import datetime, timezone

import pytest


def _sample(lat, lon):
    from trackstats.models import Sample
    return Sample(
        elevation=0.0,
        timestamp=datetime(2016, 5, 1, tzinfo=timezone.utc),
        latitude=lat,
        longitude=lon,
    )


class TestDistance:
    def test_coincident_points_are_zero(self):
        from trackstats.core.geodesy import distance
        a = _sample(47.6, -122.3)
        assert distance(a, a) == 0.0

    def test_deterministic(self):
        from trackstats.core.geodesy import distance
        a, b = _sample(47.6, -122.3), _sample(40.7, -74.0)
        assert distance(a, b) == distance(a, b)

    def test_symmetric(self):
        from trackstats.core.geodesy import distance
        a, b = _sample(47.6, -122.3), _sample(-33.9, 151.2)
        assert distance(a, b) == pytest.approx(distance(b, a))

    def test_one_degree_longitude_at_equator(self):
        from trackstats.core.geodesy import distance
        d = distance(_sample(0.0, 0.0), _sample(0.0, 1.0))
        assert d == pytest.approx(111_320, rel=0.01)

    def test_quarter_meridian(self):
        from trackstats.core.geodesy import EARTH_RADIUS_M, distance
        d = distance(_sample(0.0, 0.0), _sample(90.0, 0.0))
        assert d == pytest.approx(EARTH_RADIUS_M * math.pi / 2)

    def test_antipodal_points_do_not_fail(self):
        from trackstats.core.geodesy import EARTH_RADIUS_M, haversine_m
        d = haversine_m(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(EARTH_RADIUS_M * math.pi)

    def test_out_of_range_input_is_not_rejected(self):
        from trackstats.core.geodesy import haversine_m
        d = haversine_m(95.0, 200.0, 10.0, -200.0)
        assert math.isfinite(d)
