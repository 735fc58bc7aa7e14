"""Scanning container files for embedded images."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass, replace
from typing import BinaryIO, Iterator

from .bmp import BMP_SIGNATURE, BmpError, BmpImage, read_bmp

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"

_log = logging.getLogger(__name__)


class FileKind(enum.IntEnum):
    """Kind of an extracted file."""

    NO_FILE = 0
    BMP = 1
    UNKNOWN = 2


class ReaderError(Exception):
    """Raised when a container file cannot be scanned."""


@dataclass(frozen=True)
class ScanResult:
    """Signature counts and the images extracted from a file."""

    png: int = 0
    jpeg: int = 0
    bmp: int = 0
    images: tuple[BmpImage, ...] = ()

    @property
    def count(self) -> int:
        return self.png + self.jpeg + self.bmp


def _chunks(stream: BinaryIO, size: int) -> Iterator[bytes]:
    for chunk in iter(lambda: stream.read(size), b""):
        if len(chunk) == size:
            yield chunk


def count_signatures(path: str | os.PathLike[str]) -> ScanResult:
    """Count image signatures found at 8-byte aligned positions of a file."""
    png = jpeg = bmp = 0
    try:
        with open(path, "rb") as stream:
            for chunk in _chunks(stream, len(PNG_SIGNATURE)):
                if chunk.startswith(PNG_SIGNATURE):
                    png += 1
                elif chunk.startswith(JPEG_SIGNATURE):
                    jpeg += 1
                elif chunk.startswith(BMP_SIGNATURE):
                    bmp += 1
    except OSError as exc:
        raise ReaderError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return ScanResult(png=png, jpeg=jpeg, bmp=bmp)


def read_images(path: str | os.PathLike[str], count: int) -> list[BmpImage]:
    """Extract the first BMP image found at a 2-byte aligned position.

    Nothing is read when ``count`` is not positive.
    """
    images: list[BmpImage] = []
    if count < 1:
        return images
    try:
        with open(path, "rb") as stream:
            for chunk in _chunks(stream, len(BMP_SIGNATURE)):
                if chunk == BMP_SIGNATURE:
                    stream.seek(-len(chunk), os.SEEK_CUR)
                    try:
                        images.append(read_bmp(stream))
                    except BmpError as exc:
                        _log.warning("skipping unreadable BMP: %s", exc)
                    break
    except OSError as exc:
        raise ReaderError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return images


def scan(path: str | os.PathLike[str]) -> ScanResult:
    """Count signatures in a file and extract its images."""
    counts = count_signatures(path)
    if counts.count == 0:
        raise ReaderError("no files found")
    return replace(counts, images=tuple(read_images(path, counts.count)))