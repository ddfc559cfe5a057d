"""Summaries of video links: ids, query addresses and the formatted report."""

from __future__ import annotations

import json
import re
import urllib.request
from typing import Any, Callable

VIDEO_API = "https://api.bilibili.com/x/web-interface/view?"
CARD_API = "http://api.bilibili.com/x/web-interface/card?"
ORIGIN = "https://www.bilibili.com/video/"

_URL_RE = re.compile(r"https://www.bilibili.com/video/([0-9a-zA-Z]+)")
_ID_RE = re.compile(r"av[0-9]+|BV[0-9a-zA-Z]{10}")

Segment = dict[str, Any]
Fetch = Callable[[str], "bytes | str"]


def _http_get(url: str) -> bytes:
    with urllib.request.urlopen(url, timeout=30) as response:
        return response.read()


def _text(text: str) -> Segment:
    return {"type": "text", "data": {"text": text}}


def _image(file: str) -> Segment:
    return {"type": "image", "data": {"file": file}}


def row(n: int) -> str:
    """Counts of ten thousand or more are shown in units of 万."""
    if abs(n) >= 10000:
        return f"{n / 10000:.2f}万"
    return str(n)


def cuturl(url: str) -> str:
    """The video id in a full video address, or an empty string."""
    found = _URL_RE.search(url)
    return found.group(1) if found else ""


def find_ids(text: str) -> list[str]:
    """The av and BV ids in a message; forwarded messages are ignored."""
    if "[CQ:forward" in text:
        return []
    return _ID_RE.findall(text)


def video_query(video_id: str) -> str:
    """The address that describes the video with this id."""
    prefix = video_id[:2]
    if prefix == "av":
        return VIDEO_API + "aid=" + video_id[2:]
    if prefix == "BV":
        return VIDEO_API + "bvid=" + video_id
    return VIDEO_API


def _obj(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def format_video(data: dict[str, Any], owner_fans: int | None, video_id: str) -> list[Segment]:
    """The message segments describing a video."""
    stat = _obj(data.get("stat"))
    segments = [_text(f"标题: {data.get('title', '')}\n")]
    if _obj(data.get("rights")).get("is_cooperation") == 1:
        for staff in data.get("staff") or []:
            staff = _obj(staff)
            segments.append(
                _text(
                    f"{staff.get('title', '')}: {staff.get('name', '')}, "
                    f"粉丝: {row(staff.get('follower', 0))}\n"
                )
            )
    else:
        owner = _obj(data.get("owner"))
        segments.append(
            _text(f"UP主: {owner.get('name', '')}, 粉丝: {row(owner_fans or 0)}\n")
        )
    segments.append(
        _text(f"播放: {row(stat.get('view', 0))}, 弹幕: {row(stat.get('danmaku', 0))}\n")
    )
    segments.append(_image(data.get("pic", "")))
    segments.append(
        _text(
            f"\n点赞: {row(stat.get('like', 0))}, 投币: {row(stat.get('coin', 0))}\n"
            f"收藏: {row(stat.get('favorite', 0))}, 分享: {row(stat.get('share', 0))}\n"
            f"{ORIGIN}{video_id}"
        )
    )
    return segments


def _load(raw: bytes | str) -> dict[str, Any]:
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError("expected a JSON object")
    return value


def parse(video_id: str, fetch: Fetch = _http_get) -> list[Segment]:
    """Look a video up and build its summary."""
    data = _obj(_load(fetch(video_query(video_id))).get("data"))
    fans = None
    if _obj(data.get("rights")).get("is_cooperation") != 1:
        mid = _obj(data.get("owner")).get("mid", 0)
        card = _load(fetch(f"{CARD_API}mid={mid}"))
        fans = _obj(_obj(card.get("data")).get("card")).get("fans", 0)
    return format_video(data, fans, video_id)