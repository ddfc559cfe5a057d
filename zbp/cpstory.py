"""Short couple stories with the two names filled in."""

from __future__ import annotations

import os
import sqlite3
import threading
from dataclasses import dataclass

TABLE = "cp_story"


@dataclass(frozen=True)
class CpStory:
    """A story template; gong and shou are the names it was written with."""

    id: int
    gong: str
    shou: str
    story: str


def fill_story(story: CpStory, gong: str, shou: str) -> str:
    """Put the given names into a story."""
    text = story.story.replace("<攻>", gong)
    text = text.replace("<受>", shou)
    text = text.replace(story.gong, gong)
    return text.replace(story.shou, gong)


def split_names(args: str) -> tuple[str, str]:
    """The two space-separated names of a command."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError("请用空格分开两个人名")
    return params[0], params[1]


class StoryDB:
    """The story collection kept in an SQLite file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._conn = sqlite3.connect(os.fspath(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {TABLE} "
                "(id INTEGER PRIMARY KEY, gong TEXT, shou TEXT, story TEXT)"
            )

    def __enter__(self) -> StoryDB:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __len__(self) -> int:
        with self._lock:
            (count,) = self._conn.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()
        return count

    def pick(self) -> CpStory:
        """A randomly chosen story."""
        with self._lock:
            found = self._conn.execute(
                f"SELECT id, gong, shou, story FROM {TABLE} ORDER BY RANDOM() LIMIT 1"
            ).fetchone()
        if found is None:
            raise LookupError("no stories")
        return CpStory(*found)

    def close(self) -> None:
        with self._lock:
            self._conn.close()