"""Host status report and the packed default rate-limit setting."""

from __future__ import annotations

import math
import re

import psutil

_LIMIT_RE = re.compile(
    r"^设置默认限速为每\s*(\d+)\s*(分钟|秒)\s*(\d+)\s*次触发$", re.ASCII
)
_INT64_MAX = (1 << 63) - 1


def pack_limit(seconds: int, burst: int) -> int:
    """Pack interval seconds into the low and burst into the high 16 bits."""
    return (seconds & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(data: int) -> tuple[int, int]:
    """Split packed data into (seconds, burst)."""
    return data & 0xFFFF, (data >> 16) & 0xFFFF


def _parse_int64(text: str) -> int:
    value = int(text)
    if value > _INT64_MAX:
        raise ValueError(f"value out of range: {text}")
    return value


def parse_limit_command(text: str) -> tuple[int, int]:
    """Read (seconds, burst) from a set-default-limit command."""
    found = _LIMIT_RE.match(text)
    if found is None:
        raise ValueError("not a limit command")
    seconds = _parse_int64(found.group(1))
    if found.group(2) == "分钟":
        seconds *= 60
    if seconds >= 65536 or seconds <= 0:
        raise ValueError("interval too big")
    burst = _parse_int64(found.group(3))
    if burst >= 65536 or burst <= 0:
        raise ValueError("burst too big")
    return seconds, burst


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


def cpu_percent() -> float:
    """CPU usage over one second, rounded; -1 when unavailable."""
    try:
        return _round(psutil.cpu_percent(interval=1.0))
    except (OSError, psutil.Error):
        return -1.0


def mem_percent() -> float:
    """Memory usage, rounded; -1 when unavailable."""
    try:
        return _round(psutil.virtual_memory().percent)
    except (OSError, psutil.Error):
        return -1.0


def disk_report() -> str:
    """One line per mounted partition that is in use."""
    try:
        parts = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as err:
        return str(err)
    lines = []
    for part in parts:
        try:
            usage = psutil.disk_usage(part.mountpoint)
        except (OSError, psutil.Error) as err:
            lines.append("\n  - " + str(err))
            continue
        pc = int(_round(usage.percent))
        if pc > 0:
            lines.append(f"\n  - {part.mountpoint}({usage.total // 1024 // 1024}M) {pc}%")
    return "".join(lines)


def status_text() -> str:
    """The full host status message."""
    return (
        f"* CPU占用: {_number(cpu_percent())}%\n"
        f"* RAM占用: {_number(mem_percent())}%\n"
        f"* 硬盘使用: {disk_report()}"
    )