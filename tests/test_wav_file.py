import io
import struct

import pytest

from srla.wav_file import (
    DataFormat,
    WavError,
    WavFile,
    WavFormat,
    WavFormatError,
    parse_format,
    parse_wav,
    read_format,
    read_wav,
)


def _wav_bytes(payload, *, channels, rate, bits, format_id=1,
               fmt_extension=b"", extra_chunks=b"", data_size=None):
    block = (bits // 8) * channels
    fmt = struct.pack("<HHIIHH", format_id, channels, rate, rate * block, block, bits)
    fmt += fmt_extension
    body = b"WAVE" + b"fmt " + struct.pack("<I", len(fmt)) + fmt + extra_chunks
    size = len(payload) if data_size is None else data_size
    body += b"data" + struct.pack("<I", size) + payload
    return b"RIFF" + struct.pack("<I", len(body)) + body


def test_parse_format_reads_fields():
    payload = struct.pack("<4h", 1, 2, 3, 4)
    fmt = parse_format(io.BytesIO(_wav_bytes(payload, channels=2, rate=44100, bits=16)))
    assert fmt.num_channels == 2
    assert fmt.sampling_rate == 44100
    assert fmt.bits_per_sample == 16
    assert fmt.num_samples == len(payload) // 4
    assert fmt.data_format is DataFormat.PCM


def test_parse_wav_16bit_values_and_deinterleave():
    left = [-32768, -1, 0, 1, 32767]
    right = [5, -5, 100, -100, 7]
    interleaved = [v for pair in zip(left, right) for v in pair]
    payload = struct.pack(f"<{len(interleaved)}h", *interleaved)
    wav = parse_wav(io.BytesIO(_wav_bytes(payload, channels=2, rate=8000, bits=16)))
    assert wav.data == [left, right]
    assert wav.pcm(4, 0) == left[4]
    assert wav.pcm(1, 1) == right[1]


def test_parse_wav_8bit_is_offset_by_128():
    wav = parse_wav(io.BytesIO(_wav_bytes(bytes([0, 128, 255]),
                                          channels=1, rate=8000, bits=8)))
    assert wav.data == [[-128, 0, 127]]


def test_parse_wav_24bit_sign_extends():
    values = [-(1 << 23), -1, 0, 1, (1 << 23) - 1]
    payload = b"".join(v.to_bytes(3, "little", signed=True) for v in values)
    wav = parse_wav(io.BytesIO(_wav_bytes(payload, channels=1, rate=48000, bits=24)))
    assert wav.data == [values]
    assert wav.format.num_samples == len(values)


def test_parse_wav_32bit_values():
    values = [-(1 << 31), -7, 0, (1 << 31) - 1]
    payload = struct.pack(f"<{len(values)}i", *values)
    wav = parse_wav(io.BytesIO(_wav_bytes(payload, channels=1, rate=48000, bits=32)))
    assert wav.data == [values]


def test_fmt_extension_and_other_chunks_are_skipped():
    payload = struct.pack("<3h", 10, 20, 30)
    extra = b"LIST" + struct.pack("<I", 6) + b"abcdef"
    raw = _wav_bytes(payload, channels=1, rate=22050, bits=16,
                     fmt_extension=b"\x00\x00", extra_chunks=extra)
    with pytest.warns(UserWarning):
        wav = parse_wav(io.BytesIO(raw))
    assert wav.data == [[10, 20, 30]]
    assert wav.format.sampling_rate == 22050


def test_bad_riff_signature():
    raw = b"RIFX" + _wav_bytes(b"", channels=1, rate=8000, bits=16)[4:]
    with pytest.raises(WavFormatError):
        parse_format(io.BytesIO(raw))


def test_bad_wave_signature():
    raw = bytearray(_wav_bytes(b"", channels=1, rate=8000, bits=16))
    raw[8:12] = b"AVI "
    with pytest.raises(WavFormatError):
        parse_format(io.BytesIO(bytes(raw)))


def test_non_pcm_format_id_rejected():
    raw = _wav_bytes(b"\x00" * 4, channels=1, rate=8000, bits=32, format_id=3)
    with pytest.raises(WavFormatError):
        parse_format(io.BytesIO(raw))


def test_truncated_samples_raise_io_error():
    raw = _wav_bytes(b"\x01\x00", channels=1, rate=8000, bits=16, data_size=8)
    with pytest.raises(WavError) as info:
        parse_wav(io.BytesIO(raw))
    assert not isinstance(info.value, WavFormatError)


def test_missing_data_chunk_raises():
    raw = _wav_bytes(b"", channels=1, rate=8000, bits=16)
    raw = raw[: raw.index(b"data")]
    with pytest.raises(WavError):
        parse_format(io.BytesIO(raw))


def test_read_wav_and_read_format_from_file(tmp_path):
    values = [3, -3, 9, -9]
    payload = struct.pack(f"<{len(values)}h", *values)
    path = tmp_path / "sample.wav"
    path.write_bytes(_wav_bytes(payload, channels=1, rate=16000, bits=16))
    assert read_format(path) == WavFormat(
        num_channels=1, sampling_rate=16000, bits_per_sample=16, num_samples=len(values))
    wav = read_wav(path)
    assert wav.data == [values]


def test_read_wav_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_wav(tmp_path / "absent.wav")


def test_create_makes_silence():
    fmt = WavFormat(num_channels=3, sampling_rate=8000, bits_per_sample=16, num_samples=5)
    wav = WavFile.create(fmt)
    assert wav.format == fmt
    assert len(wav.data) == 3
    assert all(channel == [0] * 5 for channel in wav.data)
    wav.data[2][4] = 42
    assert wav.pcm(4, 2) == 42
    assert wav.pcm(4, 1) == 0