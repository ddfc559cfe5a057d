"""Turn Chinese text into emoji by matching the pronunciation of its characters."""

from __future__ import annotations

import os
import sqlite3
import threading


class PinyinDB:
    """Character pronunciations and the emoji that sound alike, kept in SQLite."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._conn = sqlite3.connect(os.fspath(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS pinyin (word TEXT, pronunciation TEXT)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS emoji (pronunciation TEXT, emoji TEXT)"
            )

    def __enter__(self) -> PinyinDB:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _lookup(self, query: str, key: str) -> str:
        with self._lock:
            found = self._conn.execute(query, (key,)).fetchone()
        if found is None or found[0] is None:
            return ""
        return found[0]

    def pinyin(self, word: str) -> str:
        """The pronunciation of a character, or an empty string."""
        return self._lookup("SELECT pronunciation FROM pinyin WHERE word = ? LIMIT 1", word)

    def emoji(self, pronun: str) -> str:
        """The emoji that sounds like a pronunciation, or an empty string."""
        return self._lookup(
            "SELECT emoji FROM emoji WHERE pronunciation = ? LIMIT 1", pronun
        )

    def close(self) -> None:
        with self._lock:
            self._conn.close()


def translate(db: PinyinDB, text: str) -> str:
    """Replace character pairs, then single characters, by sound-alike emoji."""
    out: list[str] = []
    i = 0
    while i < len(text):
        if i + 1 < len(text):
            pair = db.emoji(db.pinyin(text[i]) + db.pinyin(text[i + 1]))
            if pair:
                out.append(pair)
                i += 2
                continue
        single = db.emoji(db.pinyin(text[i]))
        out.append(single or text[i])
        i += 1
    return "".join(out)