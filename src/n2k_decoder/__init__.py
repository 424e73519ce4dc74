"""n2k-decoder - NMEA 2000 / J1939 CAN identifier and payload decoding."""

__version__ = "0.1.0"

from n2k_decoder.core.errors import (
    DecodeError,
    InvalidLength,
    InvalidHexDigit,
    InvalidPayloadLength,
    UnknownPgn,
    SchemaRangeError,
    SchemaError,
    CatalogError,
)
from n2k_decoder.core.identifier import CanIdentifier, PduFormat, decode_identifier
from n2k_decoder.core.payload import DecodedField, decode_fields, decode_payload
from n2k_decoder.core.frame import FrameDecode, FrameStatus, decode_frame
from n2k_decoder.schema import (
    FieldSchema,
    PgnSchema,
    Unit,
    SchemaRegistry,
    builtin_registry,
    load_registry,
)
from n2k_decoder.catalog import PgnCatalog
from n2k_decoder.config import DecoderConfig

__all__ = [
    "DecodeError",
    "InvalidLength",
    "InvalidHexDigit",
    "InvalidPayloadLength",
    "UnknownPgn",
    "SchemaRangeError",
    "SchemaError",
    "CatalogError",
    "CanIdentifier",
    "PduFormat",
    "decode_identifier",
    "DecodedField",
    "decode_fields",
    "decode_payload",
    "FrameDecode",
    "FrameStatus",
    "decode_frame",
    "FieldSchema",
    "PgnSchema",
    "Unit",
    "SchemaRegistry",
    "builtin_registry",
    "load_registry",
    "PgnCatalog",
    "DecoderConfig",
]
