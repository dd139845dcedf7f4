"""Bit <-> byte transcoding for EZBA bit sequences.

Bit 0 of each byte is its least significant bit and bytes are emitted in
ascending significance. The final byte is zero-padded on its high bits, so
``unpack(pack(bits))`` returns ``bits`` right-padded with zeros to a
multiple of 8.
"""

from typing import Sequence, Union

import numpy as np


def pack(bits: Union[Sequence[int], np.ndarray]) -> bytes:
    """Pack bits into bytes, 8 per byte, LSB first."""
    arr = np.asarray(bits, dtype=np.int64).ravel()
    if arr.size and (arr.min() < 0 or arr.max() > 1):
        raise ValueError("Bit sequence may only contain 0 and 1")
    return np.packbits(arr.astype(np.uint8), bitorder="little").tobytes()


def unpack(data: bytes) -> list[int]:
    """Expand every byte into its 8 bits, least significant first."""
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.unpackbits(arr, bitorder="little").tolist()
