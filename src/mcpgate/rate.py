"""Per-capability admission control.

Each registered tool and prompt owns one RateGate. A gate is a token bucket:
it holds up to ``burst`` tokens, refills continuously at ``rate`` tokens per
second, and every admitted call spends one token. ``allow()`` never waits for
a token to become available; a caller that finds the bucket empty is turned
away immediately.
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable


class RateGate:
    """A non-blocking token bucket that is safe to share between concurrent callers.

    Example:
        gate = RateGate(rate=10, burst=1)
        gate.allow()  # True, spends the only token
        gate.allow()  # False until 100ms have passed
    """

    def __init__(self, rate: float, burst: int, *, clock: Callable[[], float] = time.monotonic):
        """Create a full bucket.

        Args:
            rate: Tokens added per second. ``math.inf`` admits every call.
            burst: Bucket capacity, i.e. how many calls may pass back-to-back.
            clock: Monotonic time source in seconds, replaceable in tests.
        """
        if rate < 0:
            raise ValueError(f"rate must not be negative, got {rate}")
        if burst < 0:
            raise ValueError(f"burst must not be negative, got {burst}")
        self.rate = rate
        self.burst = burst
        self._clock = clock
        self._tokens = float(burst)
        self._last = clock()
        self._lock = threading.Lock()

    @classmethod
    def unlimited(cls) -> RateGate:
        return cls(rate=math.inf, burst=0)

    def allow(self) -> bool:
        """Spend one token if one is available. Never blocks."""
        if self.rate == math.inf:
            return True
        with self._lock:
            now = self._clock()
            elapsed = max(0.0, now - self._last)
            self._last = now
            self._tokens = min(float(self.burst), self._tokens + elapsed * self.rate)
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False

    def __repr__(self) -> str:
        return f"RateGate(rate={self.rate!r}, burst={self.burst!r})"
