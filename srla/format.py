"""Format constants, result codes and parameter records of the SRLA codec."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum

FORMAT_VERSION = 5
"""Version of the bitstream format."""

CODEC_VERSION = 8
"""Version of the codec."""

HEADER_SIZE = 29
"""Size of an encoded header in bytes."""

MAX_NUM_CHANNELS = 8
"""Largest number of channels the codec handles."""

MAX_COEFFICIENT_ORDER = 256
"""Largest number of predictor coefficients."""

NUM_PARAMETER_PRESETS = 5
"""Number of encoding parameter presets."""


class ApiResult(IntEnum):
    """Outcome of a codec operation."""

    OK = 0
    INVALID_ARGUMENT = 1
    INVALID_FORMAT = 2
    INSUFFICIENT_BUFFER = 3
    INSUFFICIENT_DATA = 4
    PARAMETER_NOT_SET = 5
    DETECT_DATA_CORRUPTION = 6
    NG = 7


class SrlaError(Exception):
    """Raised when a codec operation fails; ``result`` tells why."""

    def __init__(self, result: ApiResult, message: str = "") -> None:
        self.result = ApiResult(result)
        self.message = message
        text = f"{self.result.name}: {message}" if message else self.result.name
        super().__init__(text)


def _check_widths(record: object, widths: dict[str, int]) -> None:
    """Reject fields that do not fit their unsigned bit width."""
    for field in fields(record):  # type: ignore[arg-type]
        bits = widths.get(field.name)
        if bits is None:
            continue
        value = getattr(record, field.name)
        if not isinstance(value, int) or isinstance(value, bool):
            raise SrlaError(ApiResult.INVALID_ARGUMENT,
                            f"{field.name} must be an integer")
        if not 0 <= value < (1 << bits):
            raise SrlaError(ApiResult.INVALID_ARGUMENT,
                            f"{field.name}={value} does not fit in {bits} bits")


@dataclass(frozen=True, kw_only=True)
class Header:
    """Stream header information."""

    num_channels: int
    num_samples: int
    sampling_rate: int
    bits_per_sample: int
    max_num_samples_per_block: int
    preset: int
    format_version: int = FORMAT_VERSION
    codec_version: int = CODEC_VERSION

    def __post_init__(self) -> None:
        _check_widths(self, {
            "format_version": 32,
            "codec_version": 32,
            "num_channels": 16,
            "num_samples": 32,
            "sampling_rate": 32,
            "bits_per_sample": 16,
            "max_num_samples_per_block": 32,
            "preset": 8,
        })


@dataclass(frozen=True, kw_only=True)
class EncodeParameter:
    """Description of the input waveform and the chosen preset."""

    num_channels: int
    bits_per_sample: int
    sampling_rate: int
    min_num_samples_per_block: int
    max_num_samples_per_block: int
    preset: int

    def __post_init__(self) -> None:
        _check_widths(self, {
            "num_channels": 16,
            "bits_per_sample": 16,
            "sampling_rate": 32,
            "min_num_samples_per_block": 32,
            "max_num_samples_per_block": 32,
            "preset": 8,
        })


@dataclass(frozen=True, kw_only=True)
class EncoderConfig:
    """Capacity limits of an encoder."""

    min_num_samples_per_block: int
    max_num_samples_per_block: int
    max_num_channels: int = MAX_NUM_CHANNELS
    max_num_parameters: int = MAX_COEFFICIENT_ORDER

    def __post_init__(self) -> None:
        _check_widths(self, {
            "max_num_channels": 32,
            "min_num_samples_per_block": 32,
            "max_num_samples_per_block": 32,
            "max_num_parameters": 32,
        })


@dataclass(frozen=True, kw_only=True)
class DecoderConfig:
    """Capacity limits of a decoder and whether checksums are verified."""

    max_num_channels: int = MAX_NUM_CHANNELS
    max_num_parameters: int = MAX_COEFFICIENT_ORDER
    check_checksum: bool = True

    def __post_init__(self) -> None:
        _check_widths(self, {
            "max_num_channels": 32,
            "max_num_parameters": 32,
        })