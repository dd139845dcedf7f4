"""Zeckendorf representation of arbitrary-precision integers.

Every non-negative integer is a unique sum of non-consecutive Fibonacci
numbers. A Zeckendorf list (ZL) holds the Fibonacci indices of that sum,
largest first:

    10 = 8 + 2 = F(6) + F(3)  ->  [6, 3]

Indices 0 and 1 never appear (F(0)=0 adds nothing, F(1) duplicates F(2)),
so lists are usually shifted into effective Fibonacci indices, EFI = FI - 2.

The bit form (EZBA, effective Zeckendorf bits ascending) walks EFIs upward
from 0. A use bit (1) includes that Fibonacci number and skips the next
index, so two consecutive indices can never both be set. A skip bit (0)
moves on by one. Zero encodes as the single bit ``[0]``; trailing skip
bits never change the value.

Fibonacci values here always come from fast doubling, whatever default
strategy the engine is configured with.
"""

from typing import Optional, Sequence

from .fibonacci import FibonacciEngine, default_engine

USE_BIT = 1
SKIP_BIT = 0


def bit_count_for_number(n: int) -> int:
    """Number of binary digits in ``n``; 0 for n <= 0."""
    if n <= 0:
        return 0
    return n.bit_length()


def efi_to_fi(efi: int) -> int:
    if efi < 0:
        raise ValueError(f"Effective Fibonacci index must be non-negative, got {efi}")
    return efi + 2


def fi_to_efi(fi: int) -> int:
    if fi < 2:
        raise ValueError(f"Fibonacci index {fi} has no effective index (must be >= 2)")
    return fi - 2


def zl_to_ezl(zl: Sequence[int]) -> list[int]:
    """Shift every index to its EFI, keeping the list's direction."""
    return [fi_to_efi(fi) for fi in zl]


def ezl_to_zl(ezl: Sequence[int]) -> list[int]:
    return [efi_to_fi(efi) for efi in ezl]


def _largest_index_at_most(value: int, engine: FibonacciEngine) -> int:
    """Largest index i >= 2 with F(i) <= value. Requires value >= 1.

    Exponential search doubles the upper bound until F(hi) > value, then a
    binary search narrows (lo, hi] down to the first index past value.
    """
    lo, hi = 2, 4
    while engine.fast_doubling_fibonacci(hi) <= value:
        lo, hi = hi, hi * 2

    # F(lo) <= value < F(hi)
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if engine.fast_doubling_fibonacci(mid) <= value:
            lo = mid
        else:
            hi = mid
    return lo


def zeckendorf_list_descending(value: int, engine: Optional[FibonacciEngine] = None) -> list[int]:
    """Descending Zeckendorf list of Fibonacci indices summing to ``value``.

    Examples:
        >>> zeckendorf_list_descending(0)
        []
        >>> zeckendorf_list_descending(4)
        [4, 2]
        >>> zeckendorf_list_descending(10)
        [6, 3]
    """
    if value < 0:
        raise ValueError(f"Zeckendorf representation requires a non-negative value, got {value}")
    if value == 0:
        return []

    engine = engine or default_engine()
    cached = engine.lookup_zeckendorf(value)
    if cached is not None:
        return cached

    index = _largest_index_at_most(value, engine)
    current = engine.fast_doubling_fibonacci(index)
    following = engine.fast_doubling_fibonacci(index + 1)

    remainder = value
    indices = []
    while remainder:
        if current <= remainder:
            remainder -= current
            indices.append(index)
            # The next admissible index is at least two below.
            current, following = following - current, current
            current, following = following - current, current
            index -= 2
        else:
            current, following = following - current, current
            index -= 1

    return engine.store_zeckendorf(value, indices)


def zl_to_int(zl: Sequence[int], engine: Optional[FibonacciEngine] = None) -> int:
    """Sum of F(i) over the list. Direction does not matter."""
    if not zl:
        return 0
    engine = engine or default_engine()

    ascending = sorted(zl)
    index = ascending[0]
    current = engine.fast_doubling_fibonacci(index)
    following = engine.fast_doubling_fibonacci(index + 1)

    total = 0
    for target in ascending:
        while index < target:
            current, following = following, current + following
            index += 1
        total += current
    return total


def ezba_from_ezld(ezld: Sequence[int]) -> list[int]:
    """Bits ascending from an effective Zeckendorf list in descending order."""
    if not ezld:
        return [SKIP_BIT]

    ascending = list(reversed(ezld))
    max_efi = ezld[0]

    bits = []
    position = 0
    efi = 0
    while efi <= max_efi:
        if efi == ascending[position]:
            bits.append(USE_BIT)
            efi += 2
            position += 1
        else:
            bits.append(SKIP_BIT)
            efi += 1
    return bits


def ezba_to_ezla(bits: Sequence[int]) -> list[int]:
    """Effective Zeckendorf list, ascending, from a use/skip bit sequence."""
    ezla = []
    efi = 0
    for bit in bits:
        if bit == USE_BIT:
            ezla.append(efi)
            efi += 2
        else:
            efi += 1
    return ezla


def int_to_ezba(value: int, engine: Optional[FibonacciEngine] = None) -> list[int]:
    return ezba_from_ezld(zl_to_ezl(zeckendorf_list_descending(value, engine)))


def ezba_to_int(bits: Sequence[int], engine: Optional[FibonacciEngine] = None) -> int:
    return zl_to_int(ezl_to_zl(ezba_to_ezla(bits)), engine)


def all_ones_zeckendorf(n: int, engine: Optional[FibonacciEngine] = None) -> int:
    """Value whose EZBA is ``n`` use bits: F(2) + F(4) + ... + F(2n).

    That sum telescopes to F(2n + 1) - 1.
    """
    if n < 0:
        raise ValueError(f"Bit count must be non-negative, got {n}")
    engine = engine or default_engine()
    return engine.fast_doubling_fibonacci(2 * n + 1) - 1


def is_zeckendorf_list(indices: Sequence[int]) -> bool:
    """True if the indices are unique, >= 2 and pairwise non-consecutive."""
    ordered = sorted(indices)
    if ordered and ordered[0] < 2:
        return False
    return all(b - a >= 2 for a, b in zip(ordered, ordered[1:]))
