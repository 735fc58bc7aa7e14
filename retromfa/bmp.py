"""Reading and writing BMP images."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

BMP_SIGNATURE = b"BM"


class BmpError(ValueError):
    """Raised when a BMP image cannot be read."""


@dataclass(frozen=True)
class BmpHeader:
    """The BMP file header."""

    signature: bytes
    file_size: int
    reserved1: int
    reserved2: int
    offset: int

    FORMAT: ClassVar[str] = "<2sIHHI"
    SIZE: ClassVar[int] = struct.calcsize("<2sIHHI")

    @classmethod
    def from_bytes(cls, data: bytes) -> BmpHeader:
        """Parse a header from the first bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise BmpError("truncated BMP header")
        return cls(*struct.unpack_from(cls.FORMAT, data))

    def to_bytes(self) -> bytes:
        """Serialise the header."""
        return struct.pack(
            self.FORMAT,
            self.signature,
            self.file_size,
            self.reserved1,
            self.reserved2,
            self.offset,
        )


@dataclass(frozen=True)
class BmpImage:
    """A BMP header together with its pixel data."""

    header: BmpHeader
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def read_bmp(stream: BinaryIO) -> BmpImage:
    """Read a BMP image starting at the stream's current position.

    The pixel data offset is taken relative to where the image starts.
    """
    start = stream.tell()
    header = BmpHeader.from_bytes(stream.read(BmpHeader.SIZE))
    if header.signature != BMP_SIGNATURE:
        raise BmpError("invalid BMP signature")
    data_size = header.file_size - header.offset
    if data_size < 1:
        raise BmpError("BMP header declares no image data")
    stream.seek(start + header.offset, os.SEEK_SET)
    data = stream.read(data_size)
    if len(data) != data_size:
        raise BmpError("failed to read image data")
    return BmpImage(header, data)


def write_bmp(image: BmpImage, path: str | os.PathLike[str]) -> None:
    """Write the header followed by the pixel data to ``path``."""
    with open(path, "wb") as out:
        out.write(image.header.to_bytes())
        out.write(image.data)