"""Errors raised while building, parsing or inverting .zeck containers.

All of them derive from ``ValueError`` so callers that already guard codec
calls with ``except ValueError`` keep working.
"""


class ZeckFormatError(ValueError):
    """Base class for every recoverable container error."""


class HeaderTooShortError(ZeckFormatError):
    def __init__(self, actual_length: int, required_length: int):
        self.actual_length = actual_length
        self.required_length = required_length
        super().__init__(
            f"Header too short: got {actual_length} bytes, "
            f"need at least {required_length} bytes"
        )


class UnsupportedVersionError(ZeckFormatError):
    def __init__(self, found_version: int, supported_version: int):
        self.found_version = found_version
        self.supported_version = supported_version
        super().__init__(
            f"Unsupported file format version: found {found_version}, "
            f"maximum supported is {supported_version}"
        )


class ReservedFlagsSetError(ZeckFormatError):
    def __init__(self, flags: int):
        self.flags = flags
        super().__init__(
            f"Reserved flags are set in header (flags: 0x{flags:02x}), "
            "indicating a newer format version"
        )


class DecompressedTooLargeError(ZeckFormatError):
    def __init__(self, expected_size: int, actual_size: int):
        self.expected_size = expected_size
        self.actual_size = actual_size
        super().__init__(
            f"Decompressed data is too large: expected {expected_size} bytes, "
            f"got {actual_size} bytes"
        )


class DataSizeTooLargeError(ZeckFormatError):
    def __init__(self, size: int):
        self.size = size
        super().__init__(
            f"Data size {size} bytes is too large to be represented "
            "in the file format header"
        )


class CompressionFailedError(ZeckFormatError):
    """Neither byte order produced output smaller than the input."""

    def __init__(self, original_size: int, be_size: int, le_size: int):
        self.original_size = original_size
        self.be_size = be_size
        self.le_size = le_size
        super().__init__(
            f"Compression failed: original size {original_size} bytes, "
            f"big endian compressed size {be_size} bytes, "
            f"little endian compressed size {le_size} bytes"
        )
