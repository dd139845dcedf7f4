"""Tests for the Fibonacci engine and its caches."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from zeck.config import ZeckConfig
from zeck.fibonacci import (
    FibonacciEngine,
    default_engine,
    effective_fibonacci,
    fast_doubling_fibonacci,
    fibonacci,
    iterative_fibonacci,
    recursive_fibonacci,
)

FIRST_FIBONACCI = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377]


@pytest.fixture
def engine():
    """Fresh engine so cache assertions do not depend on test order."""
    return FibonacciEngine()


class TestStrategies:
    """Every strategy agrees on the values it supports."""

    @pytest.mark.parametrize("strategy", ["fast_doubling", "iterative", "recursive"])
    def test_first_values(self, engine, strategy):
        """F(0)..F(14) match the textbook sequence."""
        values = [engine.fibonacci(i, strategy) for i in range(len(FIRST_FIBONACCI))]
        assert values == FIRST_FIBONACCI

    def test_fast_doubling_matches_iterative(self, engine):
        """Fast doubling agrees with the dense iterative reference on 0..200."""
        for i in range(201):
            assert engine.fast_doubling_fibonacci(i) == engine.iterative_fibonacci(i)

    def test_recursive_matches_iterative(self, engine):
        """Recursive agrees with iterative across its whole u64 domain."""
        for i in range(94):
            assert engine.recursive_fibonacci(i) == engine.iterative_fibonacci(i)

    def test_known_large_values(self, engine):
        """Spot-check big-integer values."""
        assert engine.fibonacci(93) == 12200160415121876738
        assert engine.fibonacci(100) == 354224848179261915075
        assert engine.fast_doubling_fibonacci(1000) == engine.iterative_fibonacci(1000)

    def test_fast_doubling_out_of_order(self, engine):
        """Large index first, then smaller ones, still correct."""
        big = engine.fast_doubling_fibonacci(5000)
        assert big == engine.iterative_fibonacci(5000)
        for i in (4999, 2500, 1250, 3, 1, 0):
            assert engine.fast_doubling_fibonacci(i) == engine.iterative_fibonacci(i)

    def test_recursive_overflow(self, engine):
        """Recursive strategy refuses values past the u64 accumulator."""
        assert engine.recursive_fibonacci(93) < 2**64
        with pytest.raises(OverflowError):
            engine.recursive_fibonacci(94)

    @pytest.mark.parametrize("strategy", ["fast_doubling", "iterative", "recursive"])
    def test_negative_index(self, engine, strategy):
        """Negative indices are rejected."""
        with pytest.raises(ValueError):
            engine.fibonacci(-1, strategy)

    def test_unknown_strategy(self, engine):
        with pytest.raises(ValueError, match="Unknown Fibonacci strategy"):
            engine.fibonacci(5, "golden_ratio")

    def test_config_rejects_unknown_strategy(self):
        with pytest.raises(ValueError):
            ZeckConfig(fibonacci_strategy="golden_ratio")

    def test_config_default_strategy(self):
        """The engine honours the configured default strategy."""
        engine = FibonacciEngine(ZeckConfig(fibonacci_strategy="iterative"))
        assert engine.fibonacci(50) == 12586269025
        assert engine.cache_info()["dense"] == 51
        assert engine.cache_info()["sparse"] == 2


class TestEffectiveFibonacci:
    def test_values(self, engine):
        """EF(efi) == F(efi + 2)."""
        assert engine.effective_fibonacci(0) == 1
        assert engine.effective_fibonacci(1) == 2
        assert engine.effective_fibonacci(8) == 55

    def test_negative(self, engine):
        with pytest.raises(ValueError):
            engine.effective_fibonacci(-1)


class TestCaches:
    """Cache growth, isolation and clearing."""

    def test_fresh_engine_is_empty(self, engine):
        assert engine.cache_info() == {
            "dense": 2,
            "recursive": 0,
            "sparse": 2,
            "zeckendorf_small": 0,
            "zeckendorf_big": 0,
        }

    def test_dense_cache_grows_by_appending(self, engine):
        engine.iterative_fibonacci(30)
        assert engine.cache_info()["dense"] == 31
        engine.iterative_fibonacci(10)
        assert engine.cache_info()["dense"] == 31

    def test_sparse_cache_stores_walk(self, engine):
        """Fast doubling records intermediate pairs, not every index."""
        engine.fast_doubling_fibonacci(1000)
        sparse = engine.cache_info()["sparse"]
        assert 2 < sparse < 1000
        assert engine._sparse[1000] == engine.iterative_fibonacci(1000)
        assert engine._sparse[500] == engine.iterative_fibonacci(500)

    def test_engines_are_isolated(self, engine):
        other = FibonacciEngine()
        engine.iterative_fibonacci(100)
        assert other.cache_info()["dense"] == 2

    def test_clear(self, engine):
        engine.iterative_fibonacci(50)
        engine.fast_doubling_fibonacci(50)
        engine.recursive_fibonacci(50)
        engine.clear()
        assert engine.cache_info()["dense"] == 2
        assert engine.cache_info()["recursive"] == 0
        assert engine.cache_info()["sparse"] == 2
        assert engine.fibonacci(50) == 12586269025

    def test_module_helpers_use_default_engine(self):
        assert fibonacci(20) == 6765
        assert fast_doubling_fibonacci(20) == 6765
        assert iterative_fibonacci(20) == 6765
        assert recursive_fibonacci(20) == 6765
        assert effective_fibonacci(18) == 6765
        assert default_engine().cache_info()["dense"] >= 21


class TestConcurrency:
    """Concurrent callers observe identical results."""

    def test_threads_agree_fast_doubling(self, engine):
        indices = list(range(0, 3000, 7)) * 4
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(engine.fast_doubling_fibonacci, indices))
        reference = FibonacciEngine()
        assert results == [reference.iterative_fibonacci(i) for i in indices]

    def test_threads_agree_iterative(self, engine):
        indices = list(range(2000, 0, -13)) * 4
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(engine.iterative_fibonacci, indices))
        reference = FibonacciEngine()
        assert results == [reference.fast_doubling_fibonacci(i) for i in indices]
        assert engine.cache_info()["dense"] == 2001
