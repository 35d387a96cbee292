"""Reading and writing the canonical 44-byte PCM WAV header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

HEADER_SIZE = 44
_LAYOUT = struct.Struct("<4sI4s4sIHHIIHH4sI")


class WavFormatError(ValueError):
    """Raised when a WAV header cannot be decoded."""


@dataclass
class WavHeader:
    """The fixed RIFF/fmt/data header that precedes the PCM samples."""

    riff: bytes = b"RIFF"
    chunk_size: int = 36
    wave: bytes = b"WAVE"
    fmt: bytes = b"fmt "
    fmt_size: int = 16
    audio_format: int = 1
    num_channels: int = 1
    sample_rate: int = 44100
    byte_rate: int = 88200
    block_align: int = 2
    bits_per_sample: int = 16
    data_id: bytes = b"data"
    data_size: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "WavHeader":
        """Decode a header from the first 44 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise WavFormatError(
                f"WAV header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode the header as 44 little-endian bytes."""
        return _LAYOUT.pack(
            self.riff,
            self.chunk_size & 0xFFFFFFFF,
            self.wave,
            self.fmt,
            self.fmt_size & 0xFFFFFFFF,
            self.audio_format & 0xFFFF,
            self.num_channels & 0xFFFF,
            self.sample_rate & 0xFFFFFFFF,
            self.byte_rate & 0xFFFFFFFF,
            self.block_align & 0xFFFF,
            self.bits_per_sample & 0xFFFF,
            self.data_id,
            self.data_size & 0xFFFFFFFF,
        )


def read_header(stream: BinaryIO) -> WavHeader:
    """Read a header from the current position of a binary stream."""
    return WavHeader.from_bytes(stream.read(HEADER_SIZE))


def write_header(stream: BinaryIO, header: WavHeader) -> None:
    """Write a header at the current position of a binary stream."""
    stream.write(header.to_bytes())