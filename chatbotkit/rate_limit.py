"""Sliding-window rate limiting keyed by an arbitrary hashable value."""

from __future__ import annotations

from collections.abc import Hashable


class RateLimiter:
    """Allow at most ``limit`` events per ``duration`` seconds for each key."""

    def __init__(self, limit: int, duration: int) -> None:
        self.limit = limit
        self.duration = duration
        self._history: dict[Hashable, list[int]] = {}

    def update_rate_limit(self, key: Hashable, time: int) -> int | None:
        """Record an event at ``time``.

        Returns the remaining cooldown in seconds if the key is over its limit,
        in which case the event is not recorded, or ``None`` otherwise.
        """
        history = self._history.get(key)
        if history is None:
            self._history[key] = [time]
            return None

        cooldown = None
        if len(history) >= self.limit:
            del history[self.limit:]
            elapsed = time - history[-1]
            if elapsed < self.duration:
                cooldown = self.duration - elapsed

        if cooldown is None:
            history.insert(0, time)
        return cooldown