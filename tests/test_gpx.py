import io

import gpxpy.gpx
import pytest

from conftest import SAMPLE_GPX
from tourroute.geometry import Coordinate
from tourroute.gpx import Waypoint, load_gpx, parse_gpx


def test_parse_concatenates_segments():
    track = parse_gpx(io.StringIO(SAMPLE_GPX))
    assert len(track.trackpoints) == 5
    assert track.trackpoints[0] == Coordinate(46.55, 7.9, 1800.0)
    assert track.trackpoints[-1] == Coordinate(46.57, 7.92, 1950.0)
    assert track.has_elevation_data


def test_parse_waypoints():
    track = parse_gpx(io.StringIO(SAMPLE_GPX))
    assert track.waypoints[0] == Waypoint(
        name="Mountain hut",
        lat=46.56,
        lng=7.91,
        elevation=2100.0,
        description="Overnight stop",
    )
    assert track.waypoints[1].name == "Unnamed"
    assert track.waypoints[1].elevation == 0.0


def test_missing_elevation_becomes_zero():
    gpx_text = """<?xml version="1.0"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><trkseg>
    <trkpt lat="1.0" lon="2.0"></trkpt>
    <trkpt lat="1.1" lon="2.1"></trkpt>
  </trkseg></trk>
</gpx>
"""
    track = parse_gpx(io.StringIO(gpx_text))
    assert [p.elevation for p in track.trackpoints] == [0.0, 0.0]
    assert not track.has_elevation_data


def test_route_points_used_without_tracks():
    gpx_text = """<?xml version="1.0"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <rte>
    <rtept lat="1.0" lon="2.0"><ele>10</ele></rtept>
    <rtept lat="1.1" lon="2.1"><ele>20</ele></rtept>
  </rte>
</gpx>
"""
    track = parse_gpx(io.StringIO(gpx_text))
    assert track.trackpoints == [Coordinate(1.0, 2.0, 10.0), Coordinate(1.1, 2.1, 20.0)]


def test_no_trackpoints_raises():
    gpx_text = """<?xml version="1.0"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
</gpx>
"""
    with pytest.raises(ValueError, match="No trackpoints"):
        parse_gpx(io.StringIO(gpx_text))


def test_malformed_gpx_raises():
    with pytest.raises(gpxpy.gpx.GPXException):
        parse_gpx(io.StringIO("this is not xml"))


def test_load_gpx_from_file(sample_gpx_file):
    track = load_gpx(str(sample_gpx_file))
    assert len(track.trackpoints) == 5


def test_load_gpx_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gpx(str(tmp_path / "missing.gpx"))
