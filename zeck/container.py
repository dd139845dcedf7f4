"""Binary .zeck container: a small header wrapping a packed EZBA payload.

HEADER (10 bytes fixed):
    version: uint8             # must be 1
    original_size: uint64      # little endian, exact input length
    flags: uint8               # bit 0: big endian source order; bits 1-7 reserved, must be 0

PAYLOAD:
    packed EZBA bytes, immediately after the header

The integer round trip is not size preserving, so decompression pads the
decoded bytes back to ``original_size``: on the left for big endian, on the
right for little endian.
"""

import struct
from dataclasses import dataclass
from typing import Optional, Union

from .dangerous import compress_best_dangerous, compress_dangerous, decompress_dangerous
from .errors import (
    CompressionFailedError,
    DataSizeTooLargeError,
    DecompressedTooLargeError,
    HeaderTooShortError,
    ReservedFlagsSetError,
    UnsupportedVersionError,
)
from .fibonacci import FibonacciEngine

ZECK_FORMAT_VERSION = 1
ZECK_HEADER_SIZE = 10
ZECK_HEADER_FORMAT = "<BQB"  # total = 1+8+1 = 10
ZECK_FLAG_BIG_ENDIAN = 0b0000_0001
ZECK_FLAG_RESERVED_MASK = 0b1111_1110

_MAX_ORIGINAL_SIZE = 0xFFFF_FFFF_FFFF_FFFF


@dataclass
class ZeckFile:
    """In-memory representation of a .zeck file."""
    version: int
    original_size: int
    flags: int
    compressed_data: bytes

    @classmethod
    def new(cls, original_size: int, compressed_data: bytes, big_endian: bool) -> "ZeckFile":
        flags = ZECK_FLAG_BIG_ENDIAN if big_endian else 0
        return cls(ZECK_FORMAT_VERSION, original_size, flags, compressed_data)

    @property
    def is_big_endian(self) -> bool:
        return bool(self.flags & ZECK_FLAG_BIG_ENDIAN)

    @property
    def endian(self) -> str:
        return "big" if self.is_big_endian else "little"

    @property
    def total_size(self) -> int:
        return ZECK_HEADER_SIZE + len(self.compressed_data)

    def to_bytes(self) -> bytes:
        header = struct.pack(ZECK_HEADER_FORMAT, self.version, self.original_size, self.flags)
        return header + bytes(self.compressed_data)

    @classmethod
    def from_bytes(cls, data: bytes) -> "ZeckFile":
        return deserialize(data)

    def __str__(self) -> str:
        return (
            f"ZeckFile {{ version: {self.version}, original_size: {self.original_size} bytes, "
            f"compressed_size: {len(self.compressed_data)} bytes, endianness: {self.endian} }}"
        )


@dataclass
class BigEndianBest:
    """Big endian won; ``le_size`` is the little endian payload length."""
    zeck_file: ZeckFile
    le_size: int


@dataclass
class LittleEndianBest:
    """Little endian won (or tied); ``be_size`` is the big endian payload length."""
    zeck_file: ZeckFile
    be_size: int


@dataclass
class Neither:
    """Neither byte order produced a payload shorter than the input."""
    be_size: int
    le_size: int


BestCompressionResult = Union[BigEndianBest, LittleEndianBest, Neither]


def _original_size(data: bytes) -> int:
    size = len(data)
    if size > _MAX_ORIGINAL_SIZE:
        raise DataSizeTooLargeError(size)
    return size


def compress(data: bytes, endian: str = "big", engine: Optional[FibonacciEngine] = None) -> ZeckFile:
    """Compress ``data`` read as an integer in the given byte order."""
    original_size = _original_size(data)
    payload = compress_dangerous(data, endian, engine)
    return ZeckFile.new(original_size, payload, big_endian=(endian == "big"))


def compress_be(data: bytes, engine: Optional[FibonacciEngine] = None) -> ZeckFile:
    return compress(data, "big", engine)


def compress_le(data: bytes, engine: Optional[FibonacciEngine] = None) -> ZeckFile:
    return compress(data, "little", engine)


def compress_best(data: bytes, engine: Optional[FibonacciEngine] = None) -> BestCompressionResult:
    """Try both byte orders and keep the smaller payload.

    Ties prefer little endian. Returns :class:`Neither` rather than a
    container when both payloads are at least as long as the input.

    Example:
        >>> result = compress_best(bytes([1, 0]))
        >>> isinstance(result, LittleEndianBest)
        True
        >>> decompress(result.zeck_file)
        b'\\x01\\x00'
    """
    original_size = _original_size(data)
    result = compress_best_dangerous(data, engine)

    if result.endian == "big":
        return BigEndianBest(ZeckFile.new(original_size, result.compressed_data, True), result.le_size)
    elif result.endian == "little":
        return LittleEndianBest(ZeckFile.new(original_size, result.compressed_data, False), result.be_size)
    return Neither(result.be_size, result.le_size)


def compress_zeck(data: bytes, endian: str = "best",
                  engine: Optional[FibonacciEngine] = None) -> tuple[ZeckFile, int, int]:
    """Route to a byte order by name.

    Returns (zeck_file, be_size, le_size). For a fixed byte order the size of
    the untried order is reported as the input length.

    Raises:
        CompressionFailedError: ``endian="best"`` and neither order helped.
    """
    if endian == "best":
        result = compress_best(data, engine)
        if isinstance(result, BigEndianBest):
            return result.zeck_file, len(result.zeck_file.compressed_data), result.le_size
        if isinstance(result, LittleEndianBest):
            return result.zeck_file, result.be_size, len(result.zeck_file.compressed_data)
        raise CompressionFailedError(len(data), result.be_size, result.le_size)
    elif endian in ("big", "little"):
        zeck_file = compress(data, endian, engine)
        size = len(zeck_file.compressed_data)
        if endian == "big":
            return zeck_file, size, len(data)
        return zeck_file, len(data), size
    raise ValueError(f"Invalid endianness {endian!r}. Must be 'big', 'little', or 'best'")


def decompress(zeck_file: ZeckFile, engine: Optional[FibonacciEngine] = None) -> bytes:
    """Invert a container back to the exact original bytes."""
    if zeck_file.flags & ZECK_FLAG_RESERVED_MASK:
        raise ReservedFlagsSetError(zeck_file.flags)

    if zeck_file.version == 1:
        return _decompress_v1(zeck_file, engine)
    raise UnsupportedVersionError(zeck_file.version, ZECK_FORMAT_VERSION)


def _decompress_v1(zeck_file: ZeckFile, engine: Optional[FibonacciEngine]) -> bytes:
    endian = zeck_file.endian
    decompressed = decompress_dangerous(zeck_file.compressed_data, endian, engine)

    expected = zeck_file.original_size
    if len(decompressed) > expected:
        raise DecompressedTooLargeError(expected, len(decompressed))

    padding = b"\x00" * (expected - len(decompressed))
    if endian == "big":
        return padding + decompressed
    return decompressed + padding


def serialize(zeck_file: ZeckFile) -> bytes:
    return zeck_file.to_bytes()


def deserialize(data: bytes) -> ZeckFile:
    """Parse header and payload. Version and flags are checked on decompress."""
    if len(data) < ZECK_HEADER_SIZE:
        raise HeaderTooShortError(len(data), ZECK_HEADER_SIZE)

    version, original_size, flags = struct.unpack(ZECK_HEADER_FORMAT, data[:ZECK_HEADER_SIZE])
    return ZeckFile(
        version=version,
        original_size=original_size,
        flags=flags,
        compressed_data=bytes(data[ZECK_HEADER_SIZE:]),
    )
