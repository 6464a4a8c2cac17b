import json
import logging
import sys
from unittest.mock import patch

import pytest

from conftest import equator_track
from tourroute import cli
from tourroute.config import TourRouteConfig
from tourroute.route import Route


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def run_main(*argv):
    with patch.object(sys, "argv", ["tourroute", *argv]):
        cli.main()


def test_text_plan(sample_gpx_file, capsys):
    run_main(str(sample_gpx_file), "--days", "2")

    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert lines[0].startswith("Route: ")
    assert "+300 m / -150 m" in lines[0]
    assert "(5 points)" in lines[0]
    assert lines[1].startswith("Day 1: ")
    assert lines[2].startswith("Day 2: ")
    assert len(lines) == 3


def test_json_plan(sample_gpx_file, capsys):
    run_main(str(sample_gpx_file), "--days", "2", "--json")

    plan = json.loads(capsys.readouterr().out)
    assert plan["route"]["points"] == 5
    assert plan["route"]["elevation_gain_m"] == 300
    assert plan["route"]["has_elevation_data"] is True
    assert [d["day"] for d in plan["days"]] == [1, 2]
    assert plan["days"][0]["start_index"] == 0
    assert plan["days"][0]["end_index"] == plan["days"][1]["start_index"]
    assert plan["days"][1]["end_index"] == 4


def test_output_file(sample_gpx_file, tmp_path, capsys):
    output = tmp_path / "plan.json"
    run_main(str(sample_gpx_file), "--json", "--output", str(output))

    assert capsys.readouterr().out == ""
    plan = json.loads(output.read_text(encoding="utf-8"))
    assert len(plan["days"]) == 1


def test_too_many_days_are_capped(sample_gpx_file, capsys):
    run_main(str(sample_gpx_file), "--days", "10", "--json")

    plan = json.loads(capsys.readouterr().out)
    assert len(plan["days"]) == 4


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(tmp_path / "missing.gpx"))
    assert exc_info.value.code == 1


def test_invalid_gpx_exits(tmp_path):
    bad = tmp_path / "bad.gpx"
    bad.write_text("not a gpx file", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(bad))
    assert exc_info.value.code == 1


def test_no_filename_exits():
    with pytest.raises(SystemExit) as exc_info:
        run_main()
    assert exc_info.value.code == 1


def test_zero_days_exits(sample_gpx_file):
    with pytest.raises(SystemExit) as exc_info:
        run_main(str(sample_gpx_file), "--days", "0")
    assert exc_info.value.code == 1


def test_config_from_args_defaults():
    args = cli.create_argument_parser().parse_args(["route.gpx"])
    assert cli.config_from_args(args) == TourRouteConfig()


def test_format_plan_without_elevation():
    route = Route(equator_track(6.0, 9))
    config = TourRouteConfig(days=2)
    analysis = route.analyze()
    plan = cli.build_plan(route, analysis, route.split_into_days(2), config)

    text = cli.format_plan(plan)

    lines = text.splitlines()
    assert lines[1] == "No elevation data in track"
    assert lines[2] == "Day 1: points 0-4  3.00 km  +0 m / -0 m  ~1 hrs"
    assert lines[3] == "Day 2: points 4-8  3.00 km  +0 m / -0 m  ~1 hrs"


def test_fill_elevation_falls_back_to_interpolation():
    route = Route(equator_track(2.0, 3))
    route = Route([route[0]._replace(elevation=100.0), route[1], route[2]._replace(elevation=300.0)])

    with patch("tourroute.cli.fetch_elevations", side_effect=lambda coords, **kwargs: list(coords)):
        filled = cli.fill_elevation(route, TourRouteConfig())

    assert [c.elevation for c in filled] == [100.0, 200.0, 300.0]
