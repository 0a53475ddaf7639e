"""
Rate limiter utility for API rate limiting.
"""
import time
from collections import OrderedDict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single hit against the limiter."""

    allowed: bool
    limit: int
    remaining: int
    reset_after: float


class SlidingWindowRateLimiter:
    """
    Sliding-window request counter keyed by client.

    Each key may make at most ``max_requests`` hits inside any window of
    ``window_seconds``. Rejected hits are not counted.

    Expired keys are swept at most once per window. At most
    ``max_tracked_keys`` keys are held; beyond that the least recently seen
    key is forgotten.

    Example:
        limiter = SlidingWindowRateLimiter(max_requests=100, window_seconds=900)
        decision = limiter.hit("203.0.113.7")
        if not decision.allowed:
            ...  # reject the request
    """

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 900.0,
        clock: Callable[[], float] = time.monotonic,
        max_tracked_keys: int = 10_000,
    ):
        """
        Initialize rate limiter.

        Args:
            max_requests: Maximum number of hits allowed per window and key
            window_seconds: Length of the sliding window
            clock: Monotonic time source, replaceable in tests
            max_tracked_keys: Upper bound on the number of keys kept in memory
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.max_tracked_keys = max_tracked_keys
        self._clock = clock
        # Least recently seen key first
        self._hits: "OrderedDict[str, Deque[float]]" = OrderedDict()
        self._last_prune: Optional[float] = None

    def hit(self, key: str) -> RateLimitDecision:
        """Record a hit for ``key`` if it still fits in the window."""
        now = self._clock()
        if self._last_prune is None or now - self._last_prune >= self.window_seconds:
            self._prune(now)

        hits = self._hits.get(key)
        if hits is None:
            hits = self._hits[key] = deque()
        else:
            self._hits.move_to_end(key)
        self._evict(hits, now)

        while len(self._hits) > self.max_tracked_keys:
            self._hits.popitem(last=False)

        allowed = len(hits) < self.max_requests
        if allowed:
            hits.append(now)

        reset_after = (hits[0] + self.window_seconds - now) if hits else self.window_seconds
        return RateLimitDecision(
            allowed=allowed,
            limit=self.max_requests,
            remaining=max(self.max_requests - len(hits), 0),
            reset_after=max(reset_after, 0.0),
        )

    def _evict(self, hits: Deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()

    def _prune(self, now: float) -> None:
        for key in list(self._hits):
            self._evict(self._hits[key], now)
            if not self._hits[key]:
                del self._hits[key]
        self._last_prune = now

    def prune(self) -> None:
        """Drop keys whose hits have all expired."""
        self._prune(self._clock())

    def reset(self):
        """Reset the rate limiter (forget every key)."""
        self._hits.clear()
        self._last_prune = None

    def __len__(self) -> int:
        return len(self._hits)
