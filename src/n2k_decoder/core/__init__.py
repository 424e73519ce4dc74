"""Identifier and payload decoding."""

from n2k_decoder.core.errors import (
    DecodeError,
    InvalidLength,
    InvalidHexDigit,
    InvalidPayloadLength,
    UnknownPgn,
    SchemaRangeError,
)
from n2k_decoder.core.identifier import CanIdentifier, PduFormat, decode_identifier

__all__ = [
    "DecodeError",
    "InvalidLength",
    "InvalidHexDigit",
    "InvalidPayloadLength",
    "UnknownPgn",
    "SchemaRangeError",
    "CanIdentifier",
    "PduFormat",
    "decode_identifier",
]
