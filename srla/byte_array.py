"""Fixed-width unsigned integer access to byte sequences."""

from __future__ import annotations

from typing import Literal

_Order = Literal["big", "little"]


def _span(data, offset: int, size: int) -> None:
    if offset < 0 or offset + size > len(data):
        raise IndexError(
            f"cannot access {size} bytes at offset {offset} of {len(data)}")


def _read(data, offset: int, size: int, order: _Order) -> int:
    _span(data, offset, size)
    return int.from_bytes(bytes(data[offset:offset + size]), order)


def _write(buffer, offset: int, size: int, order: _Order, value: int) -> None:
    _span(buffer, offset, size)
    masked = value & ((1 << (8 * size)) - 1)
    buffer[offset:offset + size] = masked.to_bytes(size, order)


def read_uint8(data, offset: int = 0) -> int:
    """Read one byte."""
    return _read(data, offset, 1, "big")


def read_uint16be(data, offset: int = 0) -> int:
    """Read a big-endian 16-bit value."""
    return _read(data, offset, 2, "big")


def read_uint24be(data, offset: int = 0) -> int:
    """Read a big-endian 24-bit value."""
    return _read(data, offset, 3, "big")


def read_uint32be(data, offset: int = 0) -> int:
    """Read a big-endian 32-bit value."""
    return _read(data, offset, 4, "big")


def read_uint16le(data, offset: int = 0) -> int:
    """Read a little-endian 16-bit value."""
    return _read(data, offset, 2, "little")


def read_uint24le(data, offset: int = 0) -> int:
    """Read a little-endian 24-bit value."""
    return _read(data, offset, 3, "little")


def read_uint32le(data, offset: int = 0) -> int:
    """Read a little-endian 32-bit value."""
    return _read(data, offset, 4, "little")


def write_uint8(buffer, offset: int, value: int) -> None:
    """Write the low byte of ``value``."""
    _write(buffer, offset, 1, "big", value)


def write_uint16be(buffer, offset: int, value: int) -> None:
    """Write the low 16 bits of ``value`` big-endian."""
    _write(buffer, offset, 2, "big", value)


def write_uint24be(buffer, offset: int, value: int) -> None:
    """Write the low 24 bits of ``value`` big-endian."""
    _write(buffer, offset, 3, "big", value)


def write_uint32be(buffer, offset: int, value: int) -> None:
    """Write the low 32 bits of ``value`` big-endian."""
    _write(buffer, offset, 4, "big", value)


def write_uint16le(buffer, offset: int, value: int) -> None:
    """Write the low 16 bits of ``value`` little-endian."""
    _write(buffer, offset, 2, "little", value)


def write_uint24le(buffer, offset: int, value: int) -> None:
    """Write the low 24 bits of ``value`` little-endian."""
    _write(buffer, offset, 3, "little", value)


def write_uint32le(buffer, offset: int, value: int) -> None:
    """Write the low 32 bits of ``value`` little-endian."""
    _write(buffer, offset, 4, "little", value)


class ByteReader:
    """Reads consecutive integers from a byte sequence, advancing ``offset``."""

    def __init__(self, data, offset: int = 0) -> None:
        self.data = data
        self.offset = offset

    def _get(self, size: int, order: _Order) -> int:
        value = _read(self.data, self.offset, size, order)
        self.offset += size
        return value

    def get_uint8(self) -> int:
        return self._get(1, "big")

    def get_uint16be(self) -> int:
        return self._get(2, "big")

    def get_uint24be(self) -> int:
        return self._get(3, "big")

    def get_uint32be(self) -> int:
        return self._get(4, "big")

    def get_uint16le(self) -> int:
        return self._get(2, "little")

    def get_uint24le(self) -> int:
        return self._get(3, "little")

    def get_uint32le(self) -> int:
        return self._get(4, "little")


class ByteWriter:
    """Writes consecutive integers into a bytearray, advancing ``offset``."""

    def __init__(self, buffer: bytearray, offset: int = 0) -> None:
        self.buffer = buffer
        self.offset = offset

    def _put(self, size: int, order: _Order, value: int) -> None:
        _write(self.buffer, self.offset, size, order, value)
        self.offset += size

    def put_uint8(self, value: int) -> None:
        self._put(1, "big", value)

    def put_uint16be(self, value: int) -> None:
        self._put(2, "big", value)

    def put_uint24be(self, value: int) -> None:
        self._put(3, "big", value)

    def put_uint32be(self, value: int) -> None:
        self._put(4, "big", value)

    def put_uint16le(self, value: int) -> None:
        self._put(2, "little", value)

    def put_uint24le(self, value: int) -> None:
        self._put(3, "little", value)

    def put_uint32le(self, value: int) -> None:
        self._put(4, "little", value)