import json

import pytest

from zbp.bilibili_parse import (
    CARD_API,
    ORIGIN,
    VIDEO_API,
    cuturl,
    find_ids,
    format_video,
    parse,
    row,
    video_query,
)


def test_row_small():
    assert row(9999) == "9999"


def test_row_large():
    assert row(12345) == "1.23万"
    assert row(10000) == "1.00万"


def test_cuturl():
    assert cuturl("https://www.bilibili.com/video/BV1xx411c7BF?p=1") == "BV1xx411c7BF"
    assert cuturl("https://example.com/") == ""


def test_find_ids():
    assert find_ids("看看 av1605 和 BV1xx411c7BF") == ["av1605", "BV1xx411c7BF"]


def test_find_ids_ignores_forward():
    assert find_ids("[CQ:forward,id=1] av1605") == []


def test_video_query():
    assert video_query("av1605") == VIDEO_API + "aid=1605"
    assert video_query("BV1xx411c7BF") == VIDEO_API + "bvid=BV1xx411c7BF"


def _video(coop):
    data = {
        "title": "T",
        "pic": "http://example.com/p.jpg",
        "rights": {"is_cooperation": 1 if coop else 0},
        "owner": {"mid": 7, "name": "N"},
        "stat": {"view": 5, "danmaku": 6, "like": 1, "coin": 2, "favorite": 3, "share": 4},
        "staff": [{"title": "UP", "name": "A", "follower": 9}, {"title": "Staff", "name": "B", "follower": 8}],
    }
    return json.dumps({"data": data})


def test_parse_single_owner():
    responses = {
        video_query("av1605"): _video(False),
        CARD_API + "mid=7": json.dumps({"data": {"card": {"fans": 123}}}),
    }
    segments = parse("av1605", responses.__getitem__)
    assert segments[0]["data"]["text"] == "标题: T\n"
    assert segments[1]["data"]["text"] == "UP主: N, 粉丝: 123\n"
    assert segments[2]["data"]["text"] == "播放: 5, 弹幕: 6\n"
    assert segments[3] == {"type": "image", "data": {"file": "http://example.com/p.jpg"}}
    assert segments[4]["data"]["text"] == "\n点赞: 1, 投币: 2\n收藏: 3, 分享: 4\n" + ORIGIN + "av1605"


def test_parse_cooperation_skips_card():
    def fetch(url):
        if url.startswith(CARD_API):
            raise AssertionError("card should not be fetched")
        return _video(True)

    segments = parse("BV1xx411c7BF", fetch)
    assert segments[1]["data"]["text"] == "UP: A, 粉丝: 9\n"
    assert segments[2]["data"]["text"] == "Staff: B, 粉丝: 8\n"
    assert len(segments) == 6


def test_parse_bad_json():
    with pytest.raises(ValueError):
        parse("av1", lambda url: b"not json")


def test_format_video_missing_fields():
    segments = format_video({}, None, "av1")
    assert segments[1]["data"]["text"] == "UP主: , 粉丝: 0\n"
    assert segments[-1]["data"]["text"].endswith(ORIGIN + "av1")