"""Reading RIFF/WAVE files holding linear PCM into per-channel sample lists."""

from __future__ import annotations

import struct
import warnings
from dataclasses import dataclass, field
from enum import Enum
from os import PathLike
from typing import BinaryIO, Union

_PathType = Union[str, "PathLike[str]"]


class DataFormat(Enum):
    """Sample encoding of the waveform data; only linear PCM is handled."""

    PCM = 0


class WavError(Exception):
    """Raised when a WAV file cannot be read, e.g. because it ends too early."""


class WavFormatError(WavError):
    """Raised when the content is not a supported WAV layout."""


@dataclass(frozen=True, kw_only=True)
class WavFormat:
    """Layout of a WAV file's waveform data."""

    num_channels: int
    sampling_rate: int
    bits_per_sample: int
    num_samples: int
    data_format: DataFormat = DataFormat.PCM


@dataclass
class WavFile:
    """Waveform held as signed integers, one list of samples per channel."""

    format: WavFormat
    data: list[list[int]] = field(default_factory=list)

    @classmethod
    def create(cls, format: WavFormat) -> "WavFile":
        """Make a silent waveform of the given format."""
        if format.data_format is not DataFormat.PCM:
            raise WavFormatError(f"unsupported data format: {format.data_format}")
        data = [[0] * format.num_samples for _ in range(format.num_channels)]
        return cls(format, data)

    def pcm(self, sample: int, channel: int) -> int:
        """Return one sample of one channel."""
        return self.data[channel][sample]


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if chunk is None or len(chunk) < size:
        raise WavError(f"unexpected end of data: wanted {size} bytes")
    return chunk


def _read_uint(stream: BinaryIO, size: int) -> int:
    return int.from_bytes(_read_exact(stream, size), "little")


def _expect_signature(stream: BinaryIO, signature: bytes) -> None:
    found = _read_exact(stream, len(signature))
    if found != signature:
        raise WavFormatError(f"expected {signature!r} but found {found!r}")


def _skip(stream: BinaryIO, size: int) -> None:
    if size <= 0:
        return
    # Skipping past the end is not an error in itself; the next read reports it.
    stream.read(size)


def parse_format(stream: BinaryIO) -> WavFormat:
    """Read the header of a WAV stream up to the start of its sample data."""
    _expect_signature(stream, b"RIFF")
    _read_uint(stream, 4)  # file size - 8
    _expect_signature(stream, b"WAVE")
    _expect_signature(stream, b"fmt ")

    fmt_chunk_size = _read_uint(stream, 4)
    format_id = _read_uint(stream, 2)
    if format_id != 1:
        raise WavFormatError(f"unsupported format id {format_id}")
    num_channels = _read_uint(stream, 2)
    sampling_rate = _read_uint(stream, 4)
    _read_uint(stream, 4)  # bytes per second
    _read_uint(stream, 2)  # block align
    bits_per_sample = _read_uint(stream, 2)

    if fmt_chunk_size > 16:
        warnings.warn("skip fmt chunk extension (unsupported)", stacklevel=2)
        _skip(stream, fmt_chunk_size - 16)

    while True:
        chunk_id = _read_exact(stream, 4)
        if chunk_id == b"data":
            break
        _skip(stream, _read_uint(stream, 4))

    data_size = _read_uint(stream, 4)
    frame_size = (bits_per_sample // 8) * num_channels
    if frame_size == 0:
        raise WavFormatError(
            f"invalid frame layout: {num_channels} channels of {bits_per_sample} bits")
    if data_size % frame_size != 0:
        raise WavFormatError(
            f"data size {data_size} is not a multiple of frame size {frame_size}")

    return WavFormat(
        num_channels=num_channels,
        sampling_rate=sampling_rate,
        bits_per_sample=bits_per_sample,
        num_samples=data_size // frame_size,
    )


def _decode_samples(raw: bytes, bits_per_sample: int) -> list[int]:
    if bits_per_sample == 8:
        return [byte - 128 for byte in raw]
    if bits_per_sample == 16:
        return [value for (value,) in struct.iter_unpack("<h", raw)]
    if bits_per_sample == 24:
        return [int.from_bytes(raw[pos:pos + 3], "little", signed=True)
                for pos in range(0, len(raw), 3)]
    if bits_per_sample == 32:
        return [value for (value,) in struct.iter_unpack("<i", raw)]
    raise WavFormatError(f"unsupported bits per sample: {bits_per_sample}")


def parse_wav(stream: BinaryIO) -> WavFile:
    """Read a whole WAV stream: header and samples."""
    wav_format = parse_format(stream)
    if wav_format.bits_per_sample not in (8, 16, 24, 32):
        raise WavFormatError(
            f"unsupported bits per sample: {wav_format.bits_per_sample}")
    wavfile = WavFile.create(wav_format)
    channels = wav_format.num_channels
    size = wav_format.num_samples * channels * (wav_format.bits_per_sample // 8)
    interleaved = _decode_samples(_read_exact(stream, size), wav_format.bits_per_sample)
    wavfile.data = [interleaved[ch::channels] for ch in range(channels)]
    return wavfile


def read_format(path: _PathType) -> WavFormat:
    """Read only the format of the WAV file at ``path``."""
    with open(path, "rb") as stream:
        return parse_format(stream)


def read_wav(path: _PathType) -> WavFile:
    """Read the WAV file at ``path``."""
    with open(path, "rb") as stream:
        return parse_wav(stream)