"""Fibonacci engine with three interchangeable strategies.

Indexing follows F(0)=0, F(1)=1, F(2)=1, F(3)=2, ...

Strategies:
  - fast_doubling: O(log n) big-int multiplications, sparse dict cache.
    The Zeckendorf codec always uses this one; the configured strategy
    only picks the default for direct fibonacci() calls.
  - iterative: builds F(0)..F(n) into a dense list cache that only grows
    by appending. Used as the correctness reference in tests.
  - recursive: textbook recurrence over a dense dict cache. Restricted to
    indices whose value fits a 64-bit unsigned accumulator (n <= 93).

All caches belong to a FibonacciEngine instance. A process-wide default
engine backs the module-level helpers; tests and long-running services can
build their own engine to control cache lifetime.
"""

import threading
from typing import Optional

from .config import DEFAULT_CONFIG, FIBONACCI_STRATEGIES, ZeckConfig

# Keys below this bound go into the fixed-width Zeckendorf-list cache.
SMALL_INT_LIMIT = 1 << 64


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {index}")


class FibonacciEngine:
    """Owns the Fibonacci and Zeckendorf-list caches.

    Every cache has its own lock. Lookups check under the lock, compute
    outside it, and commit with setdefault so the first value written for a
    key is the one every caller sees. Two threads missing on the same key may
    both compute it; the loser's result is discarded.

    Caches grow monotonically and are never evicted.
    """

    def __init__(self, config: Optional[ZeckConfig] = None):
        self.config = config or DEFAULT_CONFIG

        self._dense: list[int] = [0, 1]
        self._dense_lock = threading.Lock()

        self._small: dict[int, int] = {}
        self._small_lock = threading.Lock()

        self._sparse: dict[int, int] = {0: 0, 1: 1}
        self._sparse_lock = threading.Lock()

        self._zl_small: dict[int, tuple] = {}
        self._zl_small_lock = threading.Lock()

        self._zl_big: dict[int, tuple] = {}
        self._zl_big_lock = threading.Lock()

    # ---- strategies ----

    def recursive_fibonacci(self, index: int) -> int:
        """F(index) by memoized recursion.

        Raises OverflowError past ``config.recursive_max_index`` since the
        value would no longer fit a u64. Deep recursion is not guarded.
        """
        _check_index(index)
        if index > self.config.recursive_max_index:
            raise OverflowError(
                f"F({index}) overflows a 64-bit accumulator; "
                "use the iterative or fast_doubling strategy"
            )

        with self._small_lock:
            cached = self._small.get(index)
        if cached is not None:
            return cached

        if index < 2:
            result = index
        else:
            result = self.recursive_fibonacci(index - 1) + self.recursive_fibonacci(index - 2)

        with self._small_lock:
            return self._small.setdefault(index, result)

    def iterative_fibonacci(self, index: int) -> int:
        """F(index) from the dense list cache, extending it on a miss."""
        _check_index(index)

        with self._dense_lock:
            if index < len(self._dense):
                return self._dense[index]

        # Another thread may have extended the list in between; the loop
        # condition re-checks.
        with self._dense_lock:
            dense = self._dense
            while len(dense) <= index:
                dense.append(dense[-1] + dense[-2])
            return dense[index]

    def fast_doubling_fibonacci(self, index: int) -> int:
        """F(index) via fast doubling.

        Walks the bits of ``index`` from the most significant end while
        holding (F(m), F(m+1)):

            F(2k)   = F(k) * (2*F(k+1) - F(k))
            F(2k+1) = F(k+1)^2 + F(k)^2

        Every pair produced along the way is written to the sparse cache in
        a single batch once the walk is done.
        """
        _check_index(index)

        with self._sparse_lock:
            cached = self._sparse.get(index)
        if cached is not None:
            return cached

        a, b = 0, 1  # F(m), F(m+1)
        m = 0
        computed = []
        for bit in bin(index)[2:]:
            c = a * ((b << 1) - a)  # F(2m)
            d = a * a + b * b       # F(2m+1)
            m <<= 1
            if bit == "1":
                a, b = d, c + d
                m += 1
            else:
                a, b = c, d
            computed.append((m, a))
            computed.append((m + 1, b))

        with self._sparse_lock:
            for key, value in computed:
                self._sparse.setdefault(key, value)
            return self._sparse[index]

    def fibonacci(self, index: int, strategy: Optional[str] = None) -> int:
        """F(index) using the named strategy (config default if None)."""
        strategy = strategy or self.config.fibonacci_strategy
        if strategy == "fast_doubling":
            return self.fast_doubling_fibonacci(index)
        elif strategy == "iterative":
            return self.iterative_fibonacci(index)
        elif strategy == "recursive":
            return self.recursive_fibonacci(index)
        raise ValueError(
            f"Unknown Fibonacci strategy: {strategy!r}. Choose from: {list(FIBONACCI_STRATEGIES)}"
        )

    def effective_fibonacci(self, efi: int) -> int:
        """F(efi + 2): the Fibonacci value at an effective index."""
        if efi < 0:
            raise ValueError(f"Effective Fibonacci index must be non-negative, got {efi}")
        return self.fibonacci(efi + 2)

    # ---- Zeckendorf-list caches ----

    def _zeckendorf_cache(self, value: int):
        if value < SMALL_INT_LIMIT:
            return self._zl_small, self._zl_small_lock
        return self._zl_big, self._zl_big_lock

    def lookup_zeckendorf(self, value: int) -> Optional[list[int]]:
        """Cached descending Zeckendorf list for ``value``, or None."""
        cache, lock = self._zeckendorf_cache(value)
        with lock:
            cached = cache.get(value)
        return list(cached) if cached is not None else None

    def store_zeckendorf(self, value: int, indices: list[int]) -> list[int]:
        """Commit a Zeckendorf list; returns whichever list won the race."""
        cache, lock = self._zeckendorf_cache(value)
        with lock:
            stored = cache.setdefault(value, tuple(indices))
        return list(stored)

    # ---- housekeeping ----

    def cache_info(self) -> dict:
        """Entry counts per cache."""
        with self._dense_lock:
            dense = len(self._dense)
        with self._small_lock:
            small = len(self._small)
        with self._sparse_lock:
            sparse = len(self._sparse)
        with self._zl_small_lock:
            zl_small = len(self._zl_small)
        with self._zl_big_lock:
            zl_big = len(self._zl_big)
        return {
            "dense": dense,
            "recursive": small,
            "sparse": sparse,
            "zeckendorf_small": zl_small,
            "zeckendorf_big": zl_big,
        }

    def clear(self) -> None:
        """Drop every cached value."""
        with self._dense_lock:
            self._dense[:] = [0, 1]
        with self._small_lock:
            self._small.clear()
        with self._sparse_lock:
            self._sparse.clear()
            self._sparse.update({0: 0, 1: 1})
        with self._zl_small_lock:
            self._zl_small.clear()
        with self._zl_big_lock:
            self._zl_big.clear()


_DEFAULT_ENGINE = FibonacciEngine()


def default_engine() -> FibonacciEngine:
    """The process-wide engine used when no engine is passed explicitly."""
    return _DEFAULT_ENGINE


def fibonacci(index: int, strategy: Optional[str] = None) -> int:
    return _DEFAULT_ENGINE.fibonacci(index, strategy)


def fast_doubling_fibonacci(index: int) -> int:
    return _DEFAULT_ENGINE.fast_doubling_fibonacci(index)


def iterative_fibonacci(index: int) -> int:
    return _DEFAULT_ENGINE.iterative_fibonacci(index)


def recursive_fibonacci(index: int) -> int:
    return _DEFAULT_ENGINE.recursive_fibonacci(index)


def effective_fibonacci(efi: int) -> int:
    return _DEFAULT_ENGINE.effective_fibonacci(efi)
