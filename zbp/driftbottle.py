"""Drift bottles: messages thrown into a channel and picked up at random."""

from __future__ import annotations

import os
import re
import sqlite3
import threading
from dataclasses import dataclass

DEFAULT_CHANNEL = "global"

_ISO_POLY = 0xD800000000000000
_MASK64 = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _make_table(poly: int) -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_ISO_TABLE = _make_table(_ISO_POLY)

_THROW_RE = re.compile(r"^(在群\d+)?丢漂流瓶(到频道\w+)?\s+(.*)\Z", re.ASCII)
_FETCH_RE = re.compile(r"^(从频道\w+)?捡漂流瓶\Z", re.ASCII)


def crc64_iso(data: bytes) -> int:
    """CRC-64 with the ISO polynomial, reflected, inverted in and out."""
    crc = _MASK64
    for byte in data:
        crc = _ISO_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


def _signed64(value: int) -> int:
    return value - (1 << 64) if value > _INT64_MAX else value


@dataclass(frozen=True)
class Bottle:
    """A thrown message; grp limits where it can be picked (0 = anywhere)."""

    id: int
    qq: int
    grp: int
    name: str
    msg: str

    @classmethod
    def new(cls, qq: int, grp: int, name: str, msg: str) -> Bottle:
        key = f"{qq}_{grp}_{name}_{msg}".encode("utf-8")
        return cls(_signed64(crc64_iso(key)), qq, grp, name, msg)


def parse_throw(text: str, group_id: int) -> tuple[int, str, str] | None:
    """Read (grp, channel, msg) from a throw command, or None if it is not one."""
    found = _THROW_RE.match(text)
    if found is None:
        return None
    grp = group_id
    if found.group(1):
        grp = int(found.group(1)[len("在群"):])
        if not _INT64_MIN <= grp <= _INT64_MAX:
            raise ValueError("群号非法!")
    channel = found.group(2)[len("到频道"):] if found.group(2) else DEFAULT_CHANNEL
    msg = found.group(3)
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def parse_fetch(text: str) -> str | None:
    """The channel of a pick-up command, or None if it is not one."""
    found = _FETCH_RE.match(text)
    if found is None:
        return None
    return found.group(1)[len("从频道"):] if found.group(1) else DEFAULT_CHANNEL


def _quote(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


class Sea:
    """Channels of bottles kept in an SQLite file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._conn = sqlite3.connect(os.fspath(path), check_same_thread=False)
        self._lock = threading.RLock()
        self.create_channel(DEFAULT_CHANNEL)

    def __enter__(self) -> Sea:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _require(self, channel: str) -> str:
        found = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (channel,)
        ).fetchone()
        if found is None:
            raise LookupError(f"no such channel: {channel}")
        return _quote(channel)

    def create_channel(self, channel: str) -> None:
        """Create a channel if it does not exist yet."""
        channel = channel.rstrip(" ")
        if not channel:
            raise ValueError("频道名为空!")
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(channel)} "
                "(id INTEGER PRIMARY KEY, qq INTEGER, grp INTEGER, name TEXT, msg TEXT)"
            )

    def throw(self, bottle: Bottle, channel: str) -> None:
        """Put a bottle into a channel."""
        with self._lock, self._conn:
            table = self._require(channel)
            self._conn.execute(
                f"INSERT OR REPLACE INTO {table} (id, qq, grp, name, msg) VALUES (?, ?, ?, ?, ?)",
                (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
            )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """A random bottle that may be picked by ``grp``."""
        if grp == 0:
            raise ValueError("找不到对象!")
        with self._lock:
            table = self._require(channel)
            row = self._conn.execute(
                f"SELECT id, qq, grp, name, msg FROM {table} "
                "WHERE grp = 0 OR grp = ? ORDER BY RANDOM() LIMIT 1",
                (grp,),
            ).fetchone()
        if row is None:
            raise LookupError("no bottle in the sea")
        return Bottle(*row)

    def destroy(self, bottle: Bottle, channel: str) -> None:
        """Remove a picked bottle."""
        with self._lock, self._conn:
            table = self._require(channel)
            self._conn.execute(f"DELETE FROM {table} WHERE id = ?", (bottle.id,))

    def count(self, channel: str) -> int:
        """How many bottles float in a channel."""
        with self._lock:
            table = self._require(channel)
            (total,) = self._conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()
        return total

    def close(self) -> None:
        with self._lock:
            self._conn.close()