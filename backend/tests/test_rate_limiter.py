"""
Tests for the sliding-window rate limiter
"""
from senior_care.utils.rate_limiter import SlidingWindowRateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_then_rejects():
    limiter = SlidingWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())

    decisions = [limiter.hit("a") for _ in range(4)]

    assert [d.allowed for d in decisions] == [True, True, True, False]
    assert [d.remaining for d in decisions] == [2, 1, 0, 0]


def test_window_slides():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    limiter.hit("a")
    clock.now += 30
    limiter.hit("a")
    assert not limiter.hit("a").allowed

    clock.now += 31  # first hit is now outside the window
    decision = limiter.hit("a")
    assert decision.allowed
    assert decision.reset_after == 29

    assert not limiter.hit("a").allowed


def test_rejected_hits_do_not_extend_the_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)

    limiter.hit("a")
    for _ in range(5):
        clock.now += 1
        assert not limiter.hit("a").allowed

    clock.now += 5
    assert limiter.hit("a").allowed


def test_keys_are_independent():
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())

    assert limiter.hit("a").allowed
    assert not limiter.hit("a").allowed
    assert limiter.hit("b").allowed


def test_prune_forgets_expired_keys():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)
    limiter.hit("a")

    clock.now += 11
    limiter.prune()

    assert len(limiter) == 0


def test_reset_clears_all_keys():
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    limiter.hit("a")

    limiter.reset()

    assert limiter.hit("a").allowed


def test_expired_keys_are_swept_once_per_window():
    clock = FakeClock()
    limiter = SlidingWindowRateLimiter(max_requests=5, window_seconds=10, clock=clock)
    for ip in ("a", "b", "c"):
        limiter.hit(ip)

    clock.now += 5
    limiter.hit("d")
    assert len(limiter) == 4

    clock.now += 10  # a, b, c and d have all expired
    limiter.hit("e")
    assert len(limiter) == 1


def test_tracked_keys_are_capped_by_evicting_least_recently_seen():
    limiter = SlidingWindowRateLimiter(
        max_requests=1, window_seconds=60, clock=FakeClock(), max_tracked_keys=2
    )
    limiter.hit("a")
    limiter.hit("b")
    assert not limiter.hit("a").allowed  # a is now the most recently seen

    limiter.hit("c")

    assert len(limiter) == 2
    assert not limiter.hit("a").allowed
    assert limiter.hit("b").allowed  # b was forgotten, so it starts over
