from conftest import equator_track
from tourroute.geometry import Coordinate
from tourroute.simplify import simplify_route


def test_straight_line_collapses_to_endpoints():
    track = equator_track(5.0, 50, elevation=300.0)
    simplified = simplify_route(track, tolerance_m=10.0)
    assert simplified == [track[0], track[-1]]


def test_corners_are_kept_with_elevation():
    track = [
        Coordinate(0.0, 0.0, 100.0),
        Coordinate(0.0, 0.005, 110.0),
        Coordinate(0.0, 0.01, 120.0),
        Coordinate(0.01, 0.01, 400.0),
        Coordinate(0.02, 0.01, 700.0),
    ]
    simplified = simplify_route(track, tolerance_m=10.0)
    assert simplified == [track[0], track[2], track[4]]
    assert [p.elevation for p in simplified] == [100.0, 120.0, 700.0]


def test_short_routes_are_unchanged():
    track = [Coordinate(0.0, 0.0), Coordinate(0.0, 0.001)]
    assert simplify_route(track) == track
    assert simplify_route([]) == []


def test_zero_tolerance_is_unchanged():
    track = equator_track(1.0, 10)
    assert simplify_route(track, tolerance_m=0.0) == track


def test_input_is_not_modified():
    track = equator_track(5.0, 20)
    original = list(track)
    simplify_route(track, tolerance_m=50.0)
    assert track == original
