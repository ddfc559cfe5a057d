"""Small talk: answering to the bot's name, pokes and a per-group air conditioner."""

from __future__ import annotations

import random
import threading
import time
from typing import Callable

DEFAULT_TEMPERATURE = 26
POKE_INTERVAL = 300.0
POKE_BURST = 8

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def name_reply(nickname: str, rng: random.Random) -> str:
    """The answer when someone calls the bot by name."""
    return rng.choice(
        (
            nickname + "在此，有何贵干~",
            "(っ●ω●)っ在~",
            "这里是" + nickname + "(っ●ω●)っ",
            nickname + "不在呢~",
        )
    )


class TokenBucket:
    """A bucket of ``burst`` tokens refilled evenly over ``interval`` seconds."""

    def __init__(
        self,
        interval: float,
        burst: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0 or burst <= 0:
            raise ValueError("interval and burst must be positive")
        self._interval = float(interval)
        self._burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    def _refill(self) -> None:
        now = self._clock()
        elapsed = max(0.0, now - self._last)
        self._last = now
        self._tokens = min(
            float(self._burst), self._tokens + elapsed * self._burst / self._interval
        )

    def acquire(self, n: int = 1) -> bool:
        """Take ``n`` tokens if that many are available."""
        with self._lock:
            self._refill()
            if self._tokens >= n:
                self._tokens -= n
                return True
            return False


class PokeResponder:
    """Answers pokes, growing quiet when a group pokes too often."""

    def __init__(
        self,
        interval: float = POKE_INTERVAL,
        burst: int = POKE_BURST,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval
        self._burst = burst
        self._clock = clock
        self._buckets: dict[int, TokenBucket] = {}
        self._lock = threading.Lock()

    def _bucket(self, gid: int) -> TokenBucket:
        with self._lock:
            bucket = self._buckets.get(gid)
            if bucket is None:
                bucket = TokenBucket(self._interval, self._burst, self._clock)
                self._buckets[gid] = bucket
            return bucket

    def respond(self, gid: int, nickname: str) -> str | None:
        """The answer to a poke, or None when the group pokes too often."""
        bucket = self._bucket(gid)
        if bucket.acquire(3):
            return "请不要戳" + nickname + " >_<"
        if bucket.acquire():
            return "喂(#`O′) 戳" + nickname + "干嘛！"
        return None


def _atoi(value: str | int) -> int:
    try:
        number = int(value)
    except ValueError:
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, number))


class AirConditioner:
    """A make-believe air conditioner for each group."""

    def __init__(self) -> None:
        self._temperature: dict[int, int] = {}
        self._on: dict[int, bool] = {}

    def turn_on(self, gid: int) -> str:
        self._on[gid] = True
        return "❄️哔~"

    def turn_off(self, gid: int) -> str:
        self._on[gid] = False
        self._temperature.pop(gid, None)
        return "💤哔~"

    def set_temperature(self, gid: int, value: str | int) -> str:
        """Set the temperature if the conditioner is on, then report."""
        self._temperature.setdefault(gid, DEFAULT_TEMPERATURE)
        if self._on.get(gid, False):
            self._temperature[gid] = _atoi(value)
        return self._status(gid)

    def report(self, gid: int) -> str:
        self._temperature.setdefault(gid, DEFAULT_TEMPERATURE)
        return self._status(gid)

    def _status(self, gid: int) -> str:
        head = "❄️风速中" if self._on.get(gid, False) else "💤"
        return f"{head}\n群温度 {self._temperature[gid]}℃"