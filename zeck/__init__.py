"""Zeckendorf codec: bytes -> one big integer -> sum of non-consecutive Fibonacci numbers.

The output is sometimes smaller than the input and sometimes larger; the
round trip is always exact.

    import zeck
    zeck_file = zeck.compress_le(data)
    blob = zeck_file.to_bytes()
    recovered = zeck.decompress(zeck.deserialize(blob))

Inputs larger than about 10 KB are slow and memory hungry.
"""

__version__ = "0.1.0"

import time
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG, ZeckConfig
from .container import (
    ZECK_FORMAT_VERSION,
    ZECK_HEADER_SIZE,
    BestCompressionResult,
    BigEndianBest,
    LittleEndianBest,
    Neither,
    ZeckFile,
    compress,
    compress_be,
    compress_best,
    compress_le,
    compress_zeck,
    decompress,
    deserialize,
    serialize,
)
from .errors import (
    CompressionFailedError,
    DataSizeTooLargeError,
    DecompressedTooLargeError,
    HeaderTooShortError,
    ReservedFlagsSetError,
    UnsupportedVersionError,
    ZeckFormatError,
)
from .fibonacci import FibonacciEngine, default_engine, fibonacci
from .zeckendorf import all_ones_zeckendorf, zeckendorf_list_descending


def compress_file(
    input_path: str,
    output_path: Optional[str] = None,
    endian: str = "best",
    config: ZeckConfig = DEFAULT_CONFIG,
) -> dict:
    """Compress a file into a .zeck container.

    Args:
        input_path: Path to any file.
        output_path: Destination; defaults to the input path plus
            ``config.file_extension``.
        endian: 'best', 'big' or 'little'.

    Returns:
        Dict with compression stats (original_bytes, compressed_bytes, ratio, ...).

    Raises:
        ValueError: The input file is empty.
        CompressionFailedError: ``endian='best'`` and neither order helped.
    """
    input_p = Path(input_path)
    data = input_p.read_bytes()
    if not data:
        raise ValueError("Cannot compress empty data")

    start = time.perf_counter()
    zeck_file, be_size, le_size = compress_zeck(data, endian)
    blob = zeck_file.to_bytes()
    elapsed = time.perf_counter() - start

    out_p = Path(output_path) if output_path else input_p.with_name(input_p.name + config.file_extension)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    out_p.write_bytes(blob)

    return {
        "input_path": str(input_p),
        "output_path": str(out_p),
        "original_bytes": len(data),
        "compressed_bytes": len(zeck_file.compressed_data),
        "file_bytes": len(blob),
        "ratio": len(zeck_file.compressed_data) / len(data),
        "endian": zeck_file.endian,
        "requested_endian": endian,
        "be_size": be_size,
        "le_size": le_size,
        "elapsed_sec": elapsed,
    }


def decompress_file(
    input_path: str,
    output_path: Optional[str] = None,
    config: ZeckConfig = DEFAULT_CONFIG,
) -> dict:
    """Decompress a .zeck container back to the original file.

    The default output drops ``config.file_extension`` from the input name,
    or appends ``config.decompressed_extension`` when it is missing.
    """
    input_p = Path(input_path)
    blob = input_p.read_bytes()

    start = time.perf_counter()
    zeck_file = deserialize(blob)
    data = decompress(zeck_file)
    elapsed = time.perf_counter() - start

    if output_path:
        out_p = Path(output_path)
    elif input_p.name.endswith(config.file_extension) and input_p.name != config.file_extension:
        out_p = input_p.with_name(input_p.name[: -len(config.file_extension)])
    else:
        out_p = input_p.with_name(input_p.name + config.decompressed_extension)
    out_p.parent.mkdir(parents=True, exist_ok=True)
    out_p.write_bytes(data)

    return {
        "input_path": str(input_p),
        "output_path": str(out_p),
        "file_bytes": len(blob),
        "compressed_bytes": len(zeck_file.compressed_data),
        "decompressed_bytes": len(data),
        "endian": zeck_file.endian,
        "version": zeck_file.version,
        "elapsed_sec": elapsed,
    }


__all__ = [
    "__version__",
    "ZeckConfig",
    "DEFAULT_CONFIG",
    "ZECK_FORMAT_VERSION",
    "ZECK_HEADER_SIZE",
    "ZeckFile",
    "BestCompressionResult",
    "BigEndianBest",
    "LittleEndianBest",
    "Neither",
    "compress",
    "compress_be",
    "compress_le",
    "compress_best",
    "compress_zeck",
    "decompress",
    "serialize",
    "deserialize",
    "compress_file",
    "decompress_file",
    "ZeckFormatError",
    "HeaderTooShortError",
    "UnsupportedVersionError",
    "ReservedFlagsSetError",
    "DecompressedTooLargeError",
    "DataSizeTooLargeError",
    "CompressionFailedError",
    "FibonacciEngine",
    "default_engine",
    "fibonacci",
    "zeckendorf_list_descending",
    "all_ones_zeckendorf",
]
