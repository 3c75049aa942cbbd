"""CRC-32 as used by PNG chunks (ISO-HDLC, reflected polynomial 0xEDB88320)."""

from __future__ import annotations

POLYNOMIAL = 0xEDB88320
_MASK = 0xFFFFFFFF


def crc32(data: bytes | bytearray | memoryview, crc: int = 0) -> int:
    """
    Bit-serial CRC-32 of data.
    Pass a previous result as crc to continue it: crc32(b, crc32(a)) == crc32(a + b).
    """
    reg = (crc ^ _MASK) & _MASK
    for byte in bytes(data):
        reg ^= byte
        for _ in range(8):
            if reg & 1:
                reg = (reg >> 1) ^ POLYNOMIAL
            else:
                reg >>= 1
    return (reg ^ _MASK) & _MASK
