import json

import pytest

from zbp.epidemic import Area, find_city, format_report, parse_areas

SAMPLE = {
    "data": {
        "diseaseh5Shelf": {
            "lastUpdateTime": "2022-06-16 10:00:00",
            "areaTree": [
                {
                    "name": "中国",
                    "today": {"confirm": 100, "wzz_add": 20},
                    "total": {"nowConfirm": 5, "confirm": 6, "dead": 1, "heal": 4, "grade": "", "wzz": 2},
                    "children": [
                        {
                            "name": "上海",
                            "today": {"confirm": 7, "wzz_add": 3},
                            "total": {"nowConfirm": 8, "confirm": 9, "dead": 0, "heal": 1, "wzz": 4},
                            "children": [
                                {
                                    "name": "浦东",
                                    "today": {"confirm": 2, "wzz_add": None},
                                    "total": {"nowConfirm": 1, "confirm": 3, "dead": 0, "heal": 2, "wzz": 0},
                                    "children": [],
                                }
                            ],
                        },
                        {"name": "北京", "today": {}, "total": {}, "children": None},
                    ],
                }
            ],
        }
    }
}


def test_parse_from_bytes_and_dict_agree():
    raw = json.dumps(SAMPLE).encode()
    assert parse_areas(raw) == parse_areas(SAMPLE)


def test_parse_reads_fields():
    areas, updated = parse_areas(json.dumps(SAMPLE))
    assert updated == "2022-06-16 10:00:00"
    root = areas[0]
    assert root.name == "中国"
    assert root.today_confirm == 100
    assert [c.name for c in root.children] == ["上海", "北京"]


def test_find_nested_city():
    areas, _ = parse_areas(SAMPLE)
    found = find_city(areas[0], "浦东")
    assert found is not None
    assert found.confirm == 3


def test_find_root_and_missing():
    areas, _ = parse_areas(SAMPLE)
    assert find_city(areas[0], "中国") is areas[0]
    assert find_city(areas[0], "火星") is None
    assert find_city(None, "上海") is None


def test_format_report():
    area = Area(name="上海", today_confirm=7, today_wzz_add=3, now_confirm=8,
                confirm=9, dead=0, heal=1, wzz=4)
    text = format_report(area, "T")
    lines = text.split("\n")
    assert lines[0] == "【上海】疫情数据"
    assert lines[1] == "新增人数：7"
    assert lines[7] == "新增无症状：3"
    assert lines[-1] == "『T』"


def test_format_missing_wzz_add():
    areas, _ = parse_areas(SAMPLE)
    text = format_report(find_city(areas[0], "浦东"), "x")
    assert "新增无症状：<nil>" in text


def test_parse_rejects_non_object():
    with pytest.raises(ValueError):
        parse_areas("[1, 2]")