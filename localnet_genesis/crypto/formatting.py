"""Byte string encodings used in genesis documents."""

import hashlib

import base58


CHECKSUM_LEN = 4


def hex_encode(data: bytes) -> str:
    """
    Encode bytes as 0x-prefixed lowercase hex without checksum.

    Args:
        data: Bytes to encode

    Returns:
        Hex string, e.g. "0x00ff"
    """
    return "0x" + bytes(data).hex()


def hex_decode(value: str) -> bytes:
    """Decode a hex string, with or without 0x prefix."""
    if value.startswith(("0x", "0X")):
        value = value[2:]
    return bytes.fromhex(value)


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(payload).digest()[-CHECKSUM_LEN:]


def cb58_encode(payload: bytes) -> str:
    """
    Encode bytes as CB58: base58 of payload followed by the last four
    bytes of its SHA-256 digest.
    """
    return base58.b58encode(bytes(payload) + _checksum(payload)).decode('ascii')


def cb58_decode(value: str) -> bytes:
    """
    Decode a CB58 string and verify its checksum.

    Raises:
        ValueError: If the string is not base58 or the checksum does not match
    """
    raw = base58.b58decode(value)
    if len(raw) < CHECKSUM_LEN:
        raise ValueError("cb58 input too short")
    payload, checksum = raw[:-CHECKSUM_LEN], raw[-CHECKSUM_LEN:]
    if _checksum(payload) != checksum:
        raise ValueError("cb58 checksum mismatch")
    return payload
