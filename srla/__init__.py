"""Building blocks for the SRLA lossless audio format: stream records, byte packing and PCM WAV I/O."""

__version__ = "0.1.0"

__all__ = ["format", "byte_array", "wav_file", "wav_writer"]