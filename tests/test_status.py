import json

from babaengine.status import StatusReport


def make_report():
    return StatusReport(
        level_id=2,
        level_name="volcano",
        level_size=(10, 8),
        level_completed=True,
        blocks={"BABA": [(1, 2), (3, 4)]},
        rules={"BABA": [{"subject": "BABA", "verb": "IS", "object": "YOU"}]},
    )


def test_top_level_fields():
    data = make_report().to_json()
    assert data["levelId"] == 2
    assert data["levelName"] == "volcano"
    assert data["levelSize"] == [10, 8]
    assert data["levelCompleted"] is True


def test_blocks_become_xy_objects():
    data = make_report().to_json()
    assert data["blocks"] == {"BABA": [{"x": 1, "y": 2}, {"x": 3, "y": 4}]}


def test_rules_are_copied():
    report = make_report()
    data = report.to_json()
    assert data["rules"] == report.rules
    data["rules"]["BABA"][0]["object"] = "WIN"
    assert report.rules["BABA"][0]["object"] == "YOU"


def test_json_serialisable_round_trip():
    data = make_report().to_json()
    assert json.loads(json.dumps(data)) == data


def test_default_report_is_empty():
    data = StatusReport().to_json()
    assert data["blocks"] == {}
    assert data["rules"] == {}
    assert data["levelCompleted"] is False