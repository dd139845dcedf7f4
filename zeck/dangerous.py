"""Header-less Zeckendorf compression.

These functions work on bare byte buffers. The integer round trip drops
leading zero bytes (big endian) or trailing zero bytes (little endian), and
nothing here records the original length, so callers must track sizes
themselves. Prefer :mod:`zeck.container`, which stores the length in a
header and restores the buffer exactly.
"""

from dataclasses import dataclass
from typing import Optional

from .bitpack import pack, unpack
from .fibonacci import FibonacciEngine
from .zeckendorf import ezba_to_int, int_to_ezba

_BYTE_ORDERS = ("big", "little")


@dataclass
class PadlessCompressionResult:
    """Outcome of trying both byte orders on a bare buffer.

    ``endian`` is ``"big"``, ``"little"`` or None when neither order beat the
    input length; ``compressed_data`` is None in that last case.
    """
    endian: Optional[str]
    compressed_data: Optional[bytes]
    be_size: int
    le_size: int


def _check_order(endian: str) -> None:
    if endian not in _BYTE_ORDERS:
        raise ValueError(f"Unknown byte order: {endian!r}. Use 'big' or 'little'.")


def _int_to_minimal_bytes(value: int, endian: str) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, endian)


def encode(data: bytes, endian: str = "big", engine: Optional[FibonacciEngine] = None) -> list[int]:
    """EZBA bits for ``data`` read as one unsigned integer."""
    _check_order(endian)
    return int_to_ezba(int.from_bytes(data, endian), engine)


def decode(bits, engine: Optional[FibonacciEngine] = None) -> int:
    """Integer carried by an EZBA bit sequence (trailing zeros ignored)."""
    return ezba_to_int(bits, engine)


def compress_dangerous(data: bytes, endian: str, engine: Optional[FibonacciEngine] = None) -> bytes:
    return pack(encode(data, endian, engine))


def decompress_dangerous(compressed_data: bytes, endian: str,
                         engine: Optional[FibonacciEngine] = None) -> bytes:
    """Minimal-length bytes for the decoded integer; zero becomes ``b""``."""
    _check_order(endian)
    return _int_to_minimal_bytes(decode(unpack(compressed_data), engine), endian)


def compress_be_dangerous(data: bytes, engine: Optional[FibonacciEngine] = None) -> bytes:
    return compress_dangerous(data, "big", engine)


def compress_le_dangerous(data: bytes, engine: Optional[FibonacciEngine] = None) -> bytes:
    return compress_dangerous(data, "little", engine)


def decompress_be_dangerous(compressed_data: bytes, engine: Optional[FibonacciEngine] = None) -> bytes:
    return decompress_dangerous(compressed_data, "big", engine)


def decompress_le_dangerous(compressed_data: bytes, engine: Optional[FibonacciEngine] = None) -> bytes:
    return decompress_dangerous(compressed_data, "little", engine)


def compress_best_dangerous(data: bytes, engine: Optional[FibonacciEngine] = None) -> PadlessCompressionResult:
    """Compress with both byte orders and keep the smaller payload.

    Ties go to little endian. When neither payload is shorter than the
    input, no data is returned.
    """
    be = compress_dangerous(data, "big", engine)
    le = compress_dangerous(data, "little", engine)
    be_size, le_size = len(be), len(le)

    if be_size >= len(data) and le_size >= len(data):
        return PadlessCompressionResult(None, None, be_size, le_size)
    if be_size < le_size:
        return PadlessCompressionResult("big", be, be_size, le_size)
    return PadlessCompressionResult("little", le, be_size, le_size)
