# srla

Pure-Python building blocks for the SRLA lossless audio format. The package
has no third-party dependencies and needs Python 3.10 or later.

## What it contains

- `srla.format` holds the format constants: `FORMAT_VERSION`,
  `CODEC_VERSION`, `HEADER_SIZE`, `MAX_NUM_CHANNELS`, `MAX_COEFFICIENT_ORDER`
  and `NUM_PARAMETER_PRESETS`. It also holds the frozen records that describe
  a stream and its coder:
  - `Header`
  - `EncodeParameter`
  - `EncoderConfig`
  - `DecoderConfig`

  Each record checks that its integer fields fit their unsigned bit widths. If
  one does not, it raises `SrlaError` with `result` set to
  `ApiResult.INVALID_ARGUMENT`. `ApiResult` lists every outcome code.
- `srla.byte_array` packs and unpacks unsigned integers of 8, 16, 24 and 32
  bits, big- or little-endian.
  - The functions `read_uint16be(data, offset)`,
    `write_uint32le(buffer, offset, value)` and their siblings read or write
    at an offset.
  - `ByteReader` and `ByteWriter` are cursors that advance their `offset` as
    they read or write.
  - Writes keep only the low bits of the value.
  - An access outside the sequence raises `IndexError`.
- `srla.wav_file` reads RIFF/WAVE files that hold linear PCM.
  - `read_wav(path)` and `parse_wav(stream)` return a `WavFile`. Its `data`
    holds one list of signed integer samples per channel, and
    `WavFile.pcm(sample, channel)` returns a single sample.
  - `read_format(path)` and `parse_format(stream)` read only the
    `WavFormat`.
  - `WavFile.create(format)` makes a silent waveform.
  - Chunks other than `fmt ` and `data` are skipped. An extended `fmt ` chunk
    is skipped with a warning.
  - Data that ends too early raises `WavError`. An unsupported or malformed
    layout raises `WavFormatError`.
- `srla.wav_writer` writes PCM WAV files.
  - `write_wav(path, wavfile)` writes a file.
  - `encode_header(format)` produces the 44-byte header.
  - `encode_pcm(wavfile)` produces the interleaved little-endian sample bytes.

WAV data is limited to linear PCM with 8, 16, 24 or 32 bits per sample.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from srla.wav_file import WavFile, WavFormat, read_wav
from srla.wav_writer import write_wav

fmt = WavFormat(num_channels=2, sampling_rate=44100,
                bits_per_sample=16, num_samples=4)
wav = WavFile.create(fmt)
wav.data[0][:] = [0, 100, -100, 32767]
wav.data[1][:] = [0, -1, 1, -32768]
write_wav("out.wav", wav)

again = read_wav("out.wav")
assert again.pcm(3, 1) == -32768
```

```python
from srla.byte_array import ByteWriter, read_uint24le

buffer = bytearray(6)
writer = ByteWriter(buffer)
writer.put_uint24le(0x123456)
writer.put_uint24be(0x123456)
assert read_uint24le(buffer, 0) == 0x123456
assert bytes(buffer[3:]) == b"\x12\x34\x56"
```

## What it does not do

The package describes SRLA streams but does not compress or decompress them.
It has no encoder or decoder for SRLA data, no entropy coder, no checksum, and
no command-line tool. Its `Header`, `EncodeParameter`, `EncoderConfig` and
`DecoderConfig` records are data only, and nothing in the package turns them
into bytes.