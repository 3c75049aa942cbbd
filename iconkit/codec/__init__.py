"""Binary encoders: CRC-32, PNG, ICO."""

from iconkit.codec.crc import crc32
from iconkit.codec.ico import IconDirEntry, encode_ico, read_ico
from iconkit.codec.png import Chunk, decode_png, encode_png, read_chunks

__all__ = [
    "crc32",
    "IconDirEntry",
    "encode_ico",
    "read_ico",
    "Chunk",
    "decode_png",
    "encode_png",
    "read_chunks",
]
