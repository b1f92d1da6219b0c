"""Writing per-channel PCM samples as RIFF/WAVE files."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Union

from .wav_file import DataFormat, WavFile, WavFormat, WavFormatError

_PathType = Union[str, "PathLike[str]"]

_HEADER_SIZE = 44
"""Bytes from "RIFF" through the data chunk size, with no fmt extension."""


def _u16(value: int) -> int:
    return value & 0xFFFF


def _u32(value: int) -> int:
    return value & 0xFFFFFFFF


def encode_header(format: WavFormat) -> bytes:
    """Build the 44-byte RIFF/WAVE header for a linear PCM waveform."""
    if format.data_format is not DataFormat.PCM:
        raise WavFormatError(f"unsupported data format: {format.data_format}")

    bytes_per_sample = format.bits_per_sample // 8
    block_align = bytes_per_sample * format.num_channels
    pcm_data_size = format.num_samples * block_align
    file_size = pcm_data_size + _HEADER_SIZE

    return struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        b"RIFF",
        _u32(file_size - 8),
        b"WAVE",
        b"fmt ",
        16,
        1,
        _u16(format.num_channels),
        _u32(format.sampling_rate),
        _u32(format.sampling_rate * block_align),
        _u16(block_align),
        _u16(format.bits_per_sample),
        b"data",
        _u32(pcm_data_size),
    )


def _interleave(wavfile: WavFile) -> list[int]:
    wav_format = wavfile.format
    num_samples = wav_format.num_samples
    if len(wavfile.data) < wav_format.num_channels:
        raise WavFormatError(
            f"expected {wav_format.num_channels} channels, "
            f"found {len(wavfile.data)}")
    channels = [wavfile.data[ch][:num_samples]
                for ch in range(wav_format.num_channels)]
    for ch, samples in enumerate(channels):
        if len(samples) < num_samples:
            raise WavFormatError(
                f"channel {ch} holds {len(samples)} samples, "
                f"expected {num_samples}")
    return [value for frame in zip(*channels) for value in frame]


def encode_pcm(wavfile: WavFile) -> bytes:
    """Interleave the channels and encode them as little-endian PCM."""
    bits = wavfile.format.bits_per_sample
    if bits not in (8, 16, 24, 32):
        raise WavFormatError(f"unsupported bits per sample: {bits}")

    samples = _interleave(wavfile)
    if bits == 8:
        return bytes((value + 128) & 0xFF for value in samples)
    if bits == 16:
        return struct.pack(f"<{len(samples)}H", *(v & 0xFFFF for v in samples))
    if bits == 24:
        return b"".join((v & 0xFFFFFF).to_bytes(3, "little") for v in samples)
    return struct.pack(f"<{len(samples)}I", *(v & 0xFFFFFFFF for v in samples))


def write_wav(path: _PathType, wavfile: WavFile) -> None:
    """Write ``wavfile`` to ``path`` as a RIFF/WAVE file."""
    content = encode_header(wavfile.format) + encode_pcm(wavfile)
    with open(path, "wb") as stream:
        stream.write(content)