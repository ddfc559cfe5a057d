"""Reply-mode and voice-mode selection kept per chat session."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

REPLY_MODES = ("青云客", "小爱")
DEFAULT_REPLY_MODE = "青云客"

SOUND_MODES = ("拟声鸟阿梓", "拟声鸟文静", "拟声鸟药水哥", "百度女声", "百度男声", "百度度逍遥", "百度度丫丫")
DEFAULT_SOUND_MODE = "拟声鸟阿梓"


def session_id(group_id: int, user_id: int) -> int:
    """Group chats are keyed by group id, private chats by the negated user id."""
    return group_id if group_id != 0 else -user_id


@dataclass
class ModeStore:
    """Per-session integer settings; unset sessions read as 0."""

    data: dict[int, int] = field(default_factory=dict)

    def get(self, gid: int) -> int:
        return self.data.get(gid, 0)

    def set(self, gid: int, value: int) -> None:
        self.data[gid] = value


def set_reply_mode(store: ModeStore | None, gid: int, name: str) -> None:
    """Store the reply mode for a session; raises on an unknown mode."""
    if name not in REPLY_MODES:
        raise ValueError("no such mode")
    if store is None:
        raise LookupError("no such plugin")
    store.set(gid, REPLY_MODES.index(name))


def get_reply_mode(store: ModeStore | None, gid: int) -> str:
    """The reply mode of a session, falling back to the default."""
    if store is not None:
        index = store.get(gid)
        if 0 <= index < len(REPLY_MODES):
            return REPLY_MODES[index]
    return DEFAULT_REPLY_MODE


class TTSModes:
    """The ordered list of voice modes; its first entry is the default."""

    def __init__(self, modes: tuple[str, ...] | list[str] = SOUND_MODES) -> None:
        self._lock = threading.RLock()
        self._modes = list(modes)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._modes

    def list(self) -> list[str]:
        """A copy of the voice modes in their current order."""
        with self._lock:
            return list(self._modes)

    def set_sound_mode(self, store: ModeStore, gid: int, name: str) -> None:
        """Store a session's voice mode; an unknown name selects the default."""
        with self._lock:
            index = self._modes.index(name) if name in self._modes else 0
        store.set(gid, index)

    def get_sound_mode(self, store: ModeStore | None, gid: int) -> str:
        """The voice mode of a session."""
        if store is not None:
            index = store.get(gid)
            with self._lock:
                if 0 <= index < len(self._modes):
                    return self._modes[index]
        return DEFAULT_SOUND_MODE

    def set_default_sound_mode(self, name: str) -> None:
        """Make a voice mode the default by swapping it to the front."""
        with self._lock:
            if name not in self._modes:
                raise ValueError(f"no such sound mode: {name}")
            index = self._modes.index(name)
            self._modes[0], self._modes[index] = self._modes[index], self._modes[0]