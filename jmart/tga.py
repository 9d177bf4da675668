"""Uncompressed TGA image reading."""

from __future__ import annotations

import os
from dataclasses import dataclass

HEADER_SIZE = 18
SUPPORTED_DEPTHS = (24, 32)


class TgaError(ValueError):
    """Raised when TGA data cannot be read."""


@dataclass(frozen=True)
class TgaImage:
    """Raw pixel data of a TGA image, stored bottom-up in BGR or BGRA order."""

    width: int
    height: int
    bytes_per_pixel: int
    pixels: bytes

    @property
    def has_alpha(self) -> bool:
        """True for 32-bit images carrying an alpha channel."""
        return self.bytes_per_pixel == 4


def parse_tga(data: bytes) -> TgaImage:
    """Decode the header and pixel block of an uncompressed 24- or 32-bit TGA."""
    if len(data) < HEADER_SIZE:
        raise TgaError("file header error: header is truncated")
    header = data[:HEADER_SIZE]
    width = header[12] + header[13] * 256
    height = header[14] + header[15] * 256
    depth = header[16]
    if width <= 0 or height <= 0 or depth not in SUPPORTED_DEPTHS:
        raise TgaError("file header error")
    bytes_per_pixel = depth // 8
    size = width * height * bytes_per_pixel
    pixels = data[HEADER_SIZE:HEADER_SIZE + size]
    if len(pixels) < size:
        raise TgaError("pixel data is truncated")
    return TgaImage(width, height, bytes_per_pixel, bytes(pixels))


def load_tga(path: str | os.PathLike[str]) -> TgaImage:
    """Read a TGA file from disk; see :func:`parse_tga`."""
    with open(path, "rb") as stream:
        return parse_tga(stream.read())