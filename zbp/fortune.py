"""Layout helpers for the daily fortune picture."""

from __future__ import annotations

# Background sets in the order their indices are stored per session.
TABLE = (
    "车万", "DC4", "爱因斯坦", "星空列车", "樱云之恋", "富婆妹", "李清歌", "公主连结", "原神",
    "明日方舟", "碧蓝航线", "碧蓝幻想", "战双", "阴阳师", "赛马娘", "东方归言录", "奇异恩典",
    "夏日口袋", "ASoul",
)
DEFAULT_KIND = "车万"

COLUMN_HEIGHT = 9
TEXT_LEFT = 115
TEXT_TOP = 320.0

_INDEX = {name: i for i, name in enumerate(TABLE)}


def kind_index(name: str) -> int:
    """The stored index of a background set; raises for an unknown set."""
    try:
        return _INDEX[name]
    except KeyError:
        raise ValueError("没有这个底图哦～") from None


def offset(total: int, now: int, distance: float) -> float:
    """Position of item ``now`` (1-based) of ``total`` items centred on the origin."""
    if total % 2 == 0:
        return (float(now - total // 2) - 1) * distance
    return (float(now - total // 2) - 1.5) * distance


def rows_num(total: int, div: int) -> int:
    """How many groups of ``div`` are needed to hold ``total`` items."""
    return -(-total // div)


def text_layout(text: str, tw: float, th: float) -> list[tuple[str, float, float]]:
    """Place each character of vertical text, right to left in columns.

    ``tw`` and ``th`` are the column and row spacing. Returns
    ``(character, x, y)`` for every character in order.
    """
    count = len(text)
    xsum = rows_num(count, COLUMN_HEIGHT)
    placed: list[tuple[str, float, float]] = []
    if xsum != 2:
        for i, char in enumerate(text):
            xnow = rows_num(i + 1, COLUMN_HEIGHT)
            ysum = min(count - (xnow - 1) * COLUMN_HEIGHT, COLUMN_HEIGHT)
            ynow = i % COLUMN_HEIGHT + 1
            placed.append(
                (char, -offset(xsum, xnow, tw) + TEXT_LEFT, offset(ysum, ynow, th) + TEXT_TOP)
            )
        return placed
    div = rows_num(count, 2)
    for i, char in enumerate(text):
        xnow = rows_num(i + 1, div)
        ysum = min(count - (xnow - 1) * div, div)
        ynow = i % div + 1
        x = -offset(xsum, xnow, tw) + TEXT_LEFT
        if xnow == 1:
            placed.append((char, x, offset(COLUMN_HEIGHT, ynow, th) + TEXT_TOP))
        elif xnow == 2:
            row = ynow + (COLUMN_HEIGHT - ysum)
            placed.append((char, x, offset(COLUMN_HEIGHT, row, th) + TEXT_TOP))
    return placed