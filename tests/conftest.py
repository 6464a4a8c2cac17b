import math

import pytest

from tourroute.geometry import Coordinate

# Degrees of arc for 1 km on the haversine sphere
KM_IN_DEGREES = math.degrees(1 / 6371.0)


def equator_track(length_km: float, n_points: int, elevation: float = 0.0):
    """Evenly spaced points along the equator, starting at (0, 0)."""
    step = length_km * KM_IN_DEGREES / (n_points - 1)
    return [Coordinate(0.0, i * step, elevation) for i in range(n_points)]


SAMPLE_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tourroute-tests" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="46.5600" lon="7.9100">
    <ele>2100</ele>
    <name>Mountain hut</name>
    <desc>Overnight stop</desc>
  </wpt>
  <wpt lat="46.5700" lon="7.9200"/>
  <trk>
    <name>Test trek</name>
    <trkseg>
      <trkpt lat="46.5500" lon="7.9000"><ele>1800</ele></trkpt>
      <trkpt lat="46.5550" lon="7.9050"><ele>1900</ele></trkpt>
      <trkpt lat="46.5600" lon="7.9100"><ele>2100</ele></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="46.5650" lon="7.9150"><ele>2000</ele></trkpt>
      <trkpt lat="46.5700" lon="7.9200"><ele>1950</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


@pytest.fixture
def sample_gpx_file(tmp_path):
    path = tmp_path / "trek.gpx"
    path.write_text(SAMPLE_GPX, encoding="utf-8")
    return path
