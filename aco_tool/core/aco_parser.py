"""Decoder for Photoshop ACO colour swatch streams (versions 1 and 2).

Every field is a big-endian 16-bit word. A stream may hold several documents
back to back: Photoshop >= 7.0 writes a version 1 section followed by a
version 2 section carrying the same colours plus names.

Only RGB records (colorspace 0) are decoded. Records in any other colorspace
are consumed and reported in ``Palette.skipped``.
"""

from __future__ import annotations

import io
import struct
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

import numpy as np

from aco_tool.core.palette import narrow_channel
from aco_tool.core.types import COLORSPACE_RGB, ColorEntry, Palette


class AcoFormatError(ValueError):
    """Raised when an ACO stream is truncated or carries an unknown version."""


SUPPORTED_VERSIONS = (1, 2)
MAX_NAME_LENGTH = 255
NAME_PLACEHOLDER = 0x20  # stands in for code units above 0xFF


def read_aco(stream: BinaryIO) -> Palette | None:
    """Decode one ACO document from ``stream``.

    Returns None when the stream is exhausted at a document boundary.
    Raises AcoFormatError on any other missing data or an unknown version.
    """
    return _AcoReader(stream).read()


def iter_aco(stream: BinaryIO) -> Iterator[Palette]:
    """Yield every ACO document in ``stream`` until end of input."""
    while True:
        palette = read_aco(stream)
        if palette is None:
            return
        yield palette


def read_last_aco(stream: BinaryIO) -> Palette | None:
    """Decode every document in ``stream`` and return the last one."""
    last = None
    for palette in iter_aco(stream):
        last = palette
    return last


def parse_aco_bytes(data: bytes) -> Palette | None:
    """Parse an in-memory ACO stream, returning its last document."""
    return read_last_aco(io.BytesIO(data))


def parse_aco_file(path: str | Path) -> Palette | None:
    """Parse an ACO file from disk, returning its last document."""
    with open(path, 'rb') as f:
        return read_last_aco(f)


class _AcoReader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self) -> Palette | None:
        version = self._read_word_optional()
        if version is None:
            return None
        if version not in SUPPORTED_VERSIONS:
            raise AcoFormatError(f'Unknown ACO file version {version}')

        count = self._read_word()
        entries: list[ColorEntry] = []
        skipped: list[int] = []
        for _ in range(count):
            colorspace = self._read_word()
            if colorspace != COLORSPACE_RGB:
                self._skip_foreign(version)
                skipped.append(colorspace)
                continue
            entries.append(self._read_rgb(version))

        return Palette(
            version=version,
            entries=tuple(entries),
            declared_count=count,
            skipped=tuple(skipped),
        )

    def _skip_foreign(self, version: int) -> None:
        # four component words, then for v2 a reserved word and a length-prefixed name
        self._skip_words(4)
        if version == 2:
            self._skip_words(1)
            self._skip_words(self._read_word())

    def _read_rgb(self, version: int) -> ColorEntry:
        r, g, b, _unused = (narrow_channel(int(w)) for w in self._read_words(4))
        if version == 1:
            return ColorEntry(r, g, b)

        self._skip_words(1)  # reserved
        length = self._read_word()  # includes the terminator
        units = self._read_words(max(length - 1, 0))
        self._skip_words(1)  # terminator
        return ColorEntry(r, g, b, _decode_name(units))

    def _read_word_optional(self) -> int | None:
        data = self._stream.read(2)
        if not data:
            return None
        if len(data) < 2:
            raise AcoFormatError('Unexpected end of file')
        return struct.unpack('>H', data)[0]

    def _read_word(self) -> int:
        return struct.unpack('>H', self._read_exact(2))[0]

    def _read_words(self, count: int) -> np.ndarray:
        return np.frombuffer(self._read_exact(2 * count), dtype='>u2')

    def _skip_words(self, count: int) -> None:
        self._read_exact(2 * count)

    def _read_exact(self, length: int) -> bytes:
        data = self._stream.read(length)
        if len(data) < length:
            raise AcoFormatError('Unexpected end of file')
        return data


def _decode_name(units: np.ndarray) -> str | None:
    """Turn UTF-16 code units into an 8-bit name.

    Units above 0xFF become a single space; a NUL unit ends the name. At most
    MAX_NAME_LENGTH characters are kept. Returns None for an empty name.
    """
    units = np.where(units > 0xFF, NAME_PLACEHOLDER, units)[:MAX_NAME_LENGTH]
    name = units.astype(np.uint8).tobytes().decode('latin-1')
    name = name.split('\x00', 1)[0]
    return name or None
