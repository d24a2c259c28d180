# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Streaming CRC-32 digest used for SFV checksums."""

from __future__ import annotations

import os
import zlib
from typing import BinaryIO, Final

DEFAULT_CHUNK_SIZE: Final[int] = 8192
CRC32_MASK: Final[int] = 0xFFFFFFFF


class Crc32Digest:
    """Accumulate an IEEE CRC-32 checksum over sequential byte chunks.

    The accumulator starts at ``0`` and is only ever advanced. ``zlib.crc32``
    implements the reflected ``0xEDB88320`` polynomial with a 256-entry lookup
    table, so any chunking of the same byte sequence yields the same value.
    """

    __slots__ = ("_value", "_chunk_size")

    def __init__(self, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        """Create a zero-state digest.

        Args:
            chunk_size: Maximum number of bytes requested per read in :meth:`update`.

        Raises:
            ValueError: If ``chunk_size`` is not positive.
        """

        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._value = 0
        self._chunk_size = chunk_size

    @property
    def value(self) -> int:
        """Return the current unsigned 32-bit checksum."""

        return self._value

    def update_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Fold one in-memory chunk into the accumulator."""

        self._value = zlib.crc32(data, self._value) & CRC32_MASK

    def update(self, stream: BinaryIO) -> int:
        """Consume ``stream`` to exhaustion and fold every chunk into the digest.

        The stream is advanced but never closed. An ``OSError`` raised while
        reading stops the update and propagates; the value accumulated so far
        is left in place and must be treated as invalid by the caller.

        Args:
            stream: Binary stream positioned where hashing should begin.

        Returns:
            int: Number of bytes consumed from ``stream``.
        """

        consumed = 0
        while chunk := stream.read(self._chunk_size):
            self.update_bytes(chunk)
            consumed += len(chunk)
        return consumed

    def hexdigest(self) -> str:
        """Return the checksum as lowercase hex without padding or prefix."""

        return f"{self._value:x}"

    def __str__(self) -> str:
        return self.hexdigest()

    def __repr__(self) -> str:
        return f"Crc32Digest({self.hexdigest()})"


def checksum_file(path: str | os.PathLike[str], *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Return the CRC-32 of the file at ``path``.

    Args:
        path: Filesystem location to read.
        chunk_size: Read size used while streaming the file.

    Returns:
        int: Unsigned 32-bit checksum of the file contents.

    Raises:
        OSError: If the file cannot be opened or read.
    """

    digest = Crc32Digest(chunk_size=chunk_size)
    with open(path, "rb") as handle:
        digest.update(handle)
    return digest.value


__all__ = ["CRC32_MASK", "DEFAULT_CHUNK_SIZE", "Crc32Digest", "checksum_file"]
