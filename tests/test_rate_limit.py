from chatbotkit.rate_limit import RateLimiter


def test_first_use_is_allowed():
    limiter = RateLimiter(1, 20)
    assert limiter.update_rate_limit(1, 0) is None


def test_second_use_within_window_reports_cooldown():
    limiter = RateLimiter(1, 20)
    limiter.update_rate_limit(1, 0)
    assert limiter.update_rate_limit(1, 5) == 15


def test_use_after_window_is_allowed():
    limiter = RateLimiter(1, 20)
    limiter.update_rate_limit(1, 0)
    assert limiter.update_rate_limit(1, 20) is None


def test_blocked_use_is_not_recorded():
    limiter = RateLimiter(1, 20)
    limiter.update_rate_limit(1, 0)
    first = limiter.update_rate_limit(1, 5)
    assert limiter.update_rate_limit(1, 5) == first
    assert limiter.update_rate_limit(1, 20) is None
    assert limiter.update_rate_limit(1, 25) == first


def test_keys_are_independent():
    limiter = RateLimiter(1, 20)
    limiter.update_rate_limit("a", 0)
    assert limiter.update_rate_limit("b", 1) is None
    assert limiter.update_rate_limit("a", 1) is not None


def test_limit_counts_several_uses():
    limiter = RateLimiter(3, 60)
    results = [limiter.update_rate_limit(7, t) for t in (0, 1, 2)]
    assert results == [None, None, None]
    cooldown = limiter.update_rate_limit(7, 3)
    assert cooldown is not None
    assert 0 < cooldown <= 60


def test_cooldown_never_exceeds_duration():
    limiter = RateLimiter(2, 30)
    limiter.update_rate_limit(0, 100)
    limiter.update_rate_limit(0, 100)
    cooldown = limiter.update_rate_limit(0, 100)
    assert cooldown == limiter.duration