"""City epidemic figures: parsing the area tree and formatting a report."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Area:
    """Figures for one region and its sub-regions."""

    name: str = ""
    today_confirm: int = 0
    today_wzz_add: Any = None
    now_confirm: int = 0
    confirm: int = 0
    dead: int = 0
    heal: int = 0
    grade: str = ""
    wzz: int = 0
    children: list[Area] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Area:
        today = data.get("today") or {}
        total = data.get("total") or {}
        return cls(
            name=data.get("name", ""),
            today_confirm=today.get("confirm", 0),
            today_wzz_add=today.get("wzz_add"),
            now_confirm=total.get("nowConfirm", 0),
            confirm=total.get("confirm", 0),
            dead=total.get("dead", 0),
            heal=total.get("heal", 0),
            grade=total.get("grade", ""),
            wzz=total.get("wzz", 0),
            children=[cls.from_dict(c) for c in data.get("children") or [] if c is not None],
        )


def parse_areas(data: bytes | str | dict[str, Any]) -> tuple[list[Area], str]:
    """The area tree and last update time from a query response."""
    doc = json.loads(data) if isinstance(data, (bytes, str)) else data
    if not isinstance(doc, dict):
        raise ValueError("expected a JSON object")
    shelf = (doc.get("data") or {}).get("diseaseh5Shelf") or {}
    areas = [Area.from_dict(a) for a in shelf.get("areaTree") or [] if a is not None]
    return areas, shelf.get("lastUpdateTime", "")


def find_city(area: Area | None, name: str) -> Area | None:
    """Depth-first search for the region with the given name."""
    if area is None:
        return None
    if area.name == name:
        return area
    for child in area.children:
        if child.name == name:
            return child
        found = find_city(child, name)
        if found is not None:
            return found
    return None


def _show(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_report(area: Area, update_time: str) -> str:
    """The message describing one region's figures."""
    return (
        f"【{area.name}】疫情数据\n"
        f"新增人数：{area.today_confirm}\n"
        f"现有确诊：{area.now_confirm}\n"
        f"累计确诊：{area.confirm}\n"
        f"治愈人数：{area.heal}\n"
        f"死亡人数：{area.dead}\n"
        f"无症状人数：{area.wzz}\n"
        f"新增无症状：{_show(area.today_wzz_add)}\n"
        f"更新时间：\n『{update_time}』"
    )