"""Tests for the top-level zeck.compress_file() / zeck.decompress_file() API."""

import pytest

import zeck
from zeck.config import ZeckConfig


COMPRESSIBLE = b"\x00" * 10 + b"\x05"


class TestCompressFile:
    """Test zeck.compress_file()."""

    def test_default_output_path(self, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(COMPRESSIBLE)
        stats = zeck.compress_file(str(src))
        assert stats["output_path"] == str(tmp_path / "data.bin.zeck")
        assert (tmp_path / "data.bin.zeck").exists()

    def test_stats(self, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(COMPRESSIBLE)
        stats = zeck.compress_file(str(src))
        assert stats["original_bytes"] == 11
        assert stats["compressed_bytes"] == 1
        assert stats["file_bytes"] == 11
        assert stats["endian"] == "big"
        assert stats["requested_endian"] == "best"
        assert stats["be_size"] == 1
        assert stats["ratio"] == pytest.approx(1 / 11)
        assert stats["elapsed_sec"] >= 0

    def test_explicit_output_creates_parents(self, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(COMPRESSIBLE)
        out = tmp_path / "nested" / "out.zeck"
        zeck.compress_file(str(src), str(out))
        assert zeck.decompress(zeck.deserialize(out.read_bytes())) == COMPRESSIBLE

    def test_fixed_endian_always_writes(self, tmp_path):
        src = tmp_path / "ff.bin"
        src.write_bytes(b"\xff")
        stats = zeck.compress_file(str(src), endian="little")
        assert stats["endian"] == "little"
        assert stats["compressed_bytes"] == 2

    def test_empty_input(self, tmp_path):
        src = tmp_path / "empty.bin"
        src.write_bytes(b"")
        with pytest.raises(ValueError, match="empty"):
            zeck.compress_file(str(src))

    def test_best_fails_on_incompressible(self, tmp_path):
        src = tmp_path / "ff.bin"
        src.write_bytes(b"\xff")
        with pytest.raises(zeck.CompressionFailedError):
            zeck.compress_file(str(src))
        assert not (tmp_path / "ff.bin.zeck").exists()

    def test_custom_extension(self, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(COMPRESSIBLE)
        stats = zeck.compress_file(str(src), config=ZeckConfig(file_extension=".zk"))
        assert stats["output_path"].endswith("data.bin.zk")


class TestDecompressFile:
    """Test zeck.decompress_file()."""

    def test_roundtrip_strips_extension(self, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(COMPRESSIBLE)
        zeck.compress_file(str(src))
        src.unlink()

        stats = zeck.decompress_file(str(tmp_path / "data.bin.zeck"))
        assert stats["output_path"] == str(src)
        assert src.read_bytes() == COMPRESSIBLE
        assert stats["decompressed_bytes"] == 11
        assert stats["compressed_bytes"] == 1
        assert stats["file_bytes"] == 11
        assert stats["endian"] == "big"
        assert stats["version"] == 1

    def test_other_suffix_gets_out(self, tmp_path):
        blob = zeck.compress_le(bytes([1, 0])).to_bytes()
        src = tmp_path / "payload.bin"
        src.write_bytes(blob)
        stats = zeck.decompress_file(str(src))
        assert stats["output_path"] == str(tmp_path / "payload.bin.out")
        assert (tmp_path / "payload.bin.out").read_bytes() == bytes([1, 0])

    def test_explicit_output(self, tmp_path):
        src = tmp_path / "x.zeck"
        src.write_bytes(zeck.compress_be(b"\x00\x09").to_bytes())
        out = tmp_path / "restored.dat"
        zeck.decompress_file(str(src), str(out))
        assert out.read_bytes() == b"\x00\x09"

    def test_short_header(self, tmp_path):
        src = tmp_path / "bad.zeck"
        src.write_bytes(b"\x01\x00")
        with pytest.raises(zeck.HeaderTooShortError):
            zeck.decompress_file(str(src))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            zeck.decompress_file(str(tmp_path / "nope.zeck"))


class TestPublicApi:
    def test_exports(self):
        for name in zeck.__all__:
            assert hasattr(zeck, name)

    def test_version(self):
        assert zeck.__version__ == "0.1.0"
