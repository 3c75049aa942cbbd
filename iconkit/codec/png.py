"""PNG encoder (8-bit RGBA, filter 0) and a small reader for verification. No Pillow."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass
from typing import Callable

from iconkit.codec.crc import crc32
from iconkit.render.canvas import Canvas

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

BIT_DEPTH = 8
COLOR_TYPE_RGBA = 6
BYTES_PER_PIXEL = 4

Compressor = Callable[[bytes, int], bytes]


@dataclass(frozen=True)
class Chunk:
    """One PNG chunk: length, 4-byte type tag, payload, CRC over tag + payload."""

    type: bytes
    data: bytes = b""

    def __post_init__(self) -> None:
        if len(self.type) != 4 or not self.type.isascii() or not self.type.isalpha():
            raise ValueError(f"Chunk type must be 4 ASCII letters, got {self.type!r}")

    @property
    def crc(self) -> int:
        return crc32(self.type + self.data)

    def to_bytes(self) -> bytes:
        return struct.pack(">I", len(self.data)) + self.type + self.data + struct.pack(">I", self.crc)


def ihdr_payload(width: int, height: int) -> bytes:
    # compression, filter, interlace methods are all 0
    return struct.pack(">IIBBBBB", width, height, BIT_DEPTH, COLOR_TYPE_RGBA, 0, 0, 0)


def scanlines(canvas: Canvas) -> bytes:
    """Raw image data: filter byte 0 then the row's RGBA bytes, for every row."""
    return b"".join(b"\x00" + canvas.row(y) for y in range(canvas.height))


def encode_png(canvas: Canvas, level: int = 9, compress: Compressor = zlib.compress) -> bytes:
    """
    Encode canvas as a PNG byte stream.
    Errors from the compressor propagate; nothing is returned in that case.
    """
    idat = compress(scanlines(canvas), level)
    return (
        PNG_SIGNATURE
        + Chunk(b"IHDR", ihdr_payload(canvas.width, canvas.height)).to_bytes()
        + Chunk(b"IDAT", idat).to_bytes()
        + Chunk(b"IEND").to_bytes()
    )


def read_chunks(data: bytes) -> list[Chunk]:
    """Split a PNG stream into chunks, checking the signature, framing and every CRC."""
    if not data.startswith(PNG_SIGNATURE):
        raise ValueError("Not a PNG stream: bad signature")
    chunks: list[Chunk] = []
    pos = len(PNG_SIGNATURE)
    while pos < len(data):
        if pos + 8 > len(data):
            raise ValueError(f"Truncated chunk header at offset {pos}")
        (length,) = struct.unpack_from(">I", data, pos)
        chunk_type = data[pos + 4 : pos + 8]
        end = pos + 8 + length
        if end + 4 > len(data):
            raise ValueError(f"Truncated {chunk_type!r} chunk at offset {pos}")
        chunk = Chunk(chunk_type, data[pos + 8 : end])
        (stored_crc,) = struct.unpack_from(">I", data, end)
        if stored_crc != chunk.crc:
            raise ValueError(
                f"CRC mismatch in {chunk_type!r}: stored {stored_crc:#010x}, computed {chunk.crc:#010x}"
            )
        chunks.append(chunk)
        pos = end + 4
        if chunk_type == b"IEND":
            break
    if not chunks or chunks[0].type != b"IHDR":
        raise ValueError("PNG stream must start with IHDR")
    if chunks[-1].type != b"IEND":
        raise ValueError("PNG stream must end with IEND")
    return chunks


def _paeth(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _unfilter(filter_type: int, line: bytearray, prev: bytes) -> None:
    bpp = BYTES_PER_PIXEL
    if filter_type == 0:
        return
    for i in range(len(line)):
        left = line[i - bpp] if i >= bpp else 0
        up = prev[i]
        if filter_type == 1:
            pred = left
        elif filter_type == 2:
            pred = up
        elif filter_type == 3:
            pred = (left + up) >> 1
        elif filter_type == 4:
            pred = _paeth(left, up, prev[i - bpp] if i >= bpp else 0)
        else:
            raise ValueError(f"Unknown scanline filter type {filter_type}")
        line[i] = (line[i] + pred) & 0xFF


def decode_png(data: bytes) -> Canvas:
    """Decode an 8-bit RGBA, non-interlaced PNG into a Canvas. All five filter types are handled."""
    chunks = read_chunks(data)
    if len(chunks[0].data) != 13:
        raise ValueError(f"IHDR payload is {len(chunks[0].data)} bytes, expected 13")
    width, height, depth, color_type, _comp, _filt, interlace = struct.unpack(
        ">IIBBBBB", chunks[0].data
    )
    if depth != BIT_DEPTH or color_type != COLOR_TYPE_RGBA or interlace != 0:
        raise ValueError(
            f"Unsupported PNG: depth={depth} color_type={color_type} interlace={interlace}"
        )
    idat = [c.data for c in chunks if c.type == b"IDAT"]
    if not idat:
        raise ValueError("PNG stream has no IDAT chunk")
    try:
        raw = zlib.decompress(b"".join(idat))
    except zlib.error as e:
        raise ValueError(f"Corrupt image data: {e}") from e
    stride = width * BYTES_PER_PIXEL
    if len(raw) != (stride + 1) * height:
        raise ValueError(f"Image data is {len(raw)} bytes, expected {(stride + 1) * height}")
    canvas = Canvas(width, height)
    prev = bytes(stride)
    for y in range(height):
        start = y * (stride + 1)
        line = bytearray(raw[start + 1 : start + 1 + stride])
        _unfilter(raw[start], line, prev)
        canvas.pixels[y * stride : (y + 1) * stride] = line
        prev = bytes(line)
    return canvas
