"""Shared hex and integer helpers."""

from __future__ import annotations

from n2k_decoder.core.errors import InvalidHexDigit

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def check_hex(hex_str: str) -> None:
    """Raise InvalidHexDigit for the first non-hex character, if any."""
    for position, char in enumerate(hex_str):
        if char not in HEX_DIGITS:
            raise InvalidHexDigit(char, position)


def hex_to_bytes(hex_str: str) -> bytes:
    # Strict: no 0x prefix, no whitespace
    check_hex(hex_str)
    return bytes.fromhex(hex_str)


def read_uint_be(data: bytes, start: int, length: int) -> int:
    return int.from_bytes(data[start : start + length], byteorder="big", signed=False)


def format_fixed(value: float, places: int = 4) -> str:
    """Round to `places` decimals and drop trailing zeros (0.4660 -> "0.466")."""
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
