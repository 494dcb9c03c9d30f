"""
Property-based tests for the TLD cache.

Time is controlled through an injected clock, so expiry is checked exactly at
the TTL boundary.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_finder.tld_cache import DEFAULT_TTL_SECONDS, TldCache


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


names_strategy = st.lists(
    st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz"), min_size=2, max_size=8).map(
        lambda label: f".{label}"
    ),
    max_size=50,
)


class TestCacheFreshnessProperty:
    """A stored list is served until it is TTL seconds old."""

    @given(
        names=names_strategy,
        ttl=st.floats(min_value=1, max_value=10_000),
        elapsed_fraction=st.floats(min_value=0, max_value=0.999),
    )
    @settings(max_examples=100)
    def test_fresh_within_ttl(self, names: list[str], ttl: float, elapsed_fraction: float) -> None:
        clock = FakeClock(500.0)
        cache = TldCache(ttl, clock=clock)

        cache.put(names)
        clock.now += ttl * elapsed_fraction

        assert cache.is_fresh()
        assert cache.get() == names

    @given(names=names_strategy, extra=st.floats(min_value=0, max_value=10_000))
    @settings(max_examples=100)
    def test_stale_at_or_after_ttl(self, names: list[str], extra: float) -> None:
        clock = FakeClock(500.0)
        cache = TldCache(60, clock=clock)

        cache.put(names)
        clock.now += 60 + extra

        assert not cache.is_fresh()
        assert cache.get() is None

    def test_empty_cache_is_not_fresh(self) -> None:
        cache = TldCache()
        assert not cache.is_fresh()
        assert cache.get() is None
        assert cache.ttl_seconds == DEFAULT_TTL_SECONDS == 3600


class TestCacheReplacementProperty:
    """Refreshes replace the list outright; readers get copies."""

    @given(first=names_strategy, second=names_strategy)
    @settings(max_examples=100)
    def test_put_replaces(self, first: list[str], second: list[str]) -> None:
        cache = TldCache(60, clock=FakeClock())
        cache.put(first)
        cache.put(second)
        assert cache.get() == second

    def test_put_restarts_ttl(self) -> None:
        clock = FakeClock()
        cache = TldCache(60, clock=clock)

        cache.put([".com"])
        clock.now = 50
        cache.put([".net"])
        clock.now = 100

        assert cache.get() == [".net"]

    def test_get_returns_copy(self) -> None:
        cache = TldCache(60, clock=FakeClock())
        stored = [".com", ".net"]
        cache.put(stored)

        stored.append(".org")
        cache.get().append(".de")

        assert cache.get() == [".com", ".net"]

    def test_clear(self) -> None:
        cache = TldCache(60, clock=FakeClock())
        cache.put([".com"])
        cache.clear()
        assert cache.get() is None

    @pytest.mark.parametrize("ttl", [0, -1, -3600])
    def test_non_positive_ttl_rejected(self, ttl: float) -> None:
        with pytest.raises(ValueError):
            TldCache(ttl)
