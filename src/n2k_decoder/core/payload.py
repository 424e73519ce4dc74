"""Schema-driven payload decoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from n2k_decoder.core.errors import InvalidPayloadLength, SchemaRangeError, UnknownPgn
from n2k_decoder.core.hexutil import format_fixed, hex_to_bytes, read_uint_be
from n2k_decoder.schema.schema import PAYLOAD_BYTES, FieldSchema, PgnSchema, Unit

PAYLOAD_HEX_LEN = PAYLOAD_BYTES * 2
SCALED_DECIMALS = 4

DecodedPayload = dict[str, str]


@dataclass(frozen=True)
class DecodedField:
    """A decoded payload field with its raw count and scaled value."""
    
    name: str
    raw: int
    value: Union[int, float]
    unit: Unit = Unit.NONE
    
    @property
    def text(self) -> str:
        if isinstance(self.value, float):
            return format_fixed(self.value, SCALED_DECIMALS)
        return str(self.value)
    
    def __repr__(self) -> str:
        unit = f" {self.unit.value}" if self.unit.value else ""
        return f"{self.name}={self.text}{unit}"


def _decode_field(data: bytes, field: FieldSchema) -> DecodedField:
    if field.end_byte > len(data):
        raise SchemaRangeError(field.name, field.start_byte, field.length_bytes, len(data))
    
    raw = read_uint_be(data, field.start_byte, field.length_bytes)
    scale = field.scale
    if scale is None:
        return DecodedField(name=field.name, raw=raw, value=raw, unit=field.unit)
    return DecodedField(
        name=field.name,
        raw=raw,
        value=round(raw * scale, SCALED_DECIMALS),
        unit=field.unit,
    )


def decode_fields(
    pgn: int,
    hex_str: str,
    registry: Mapping[int, PgnSchema],
) -> list[DecodedField]:
    """Decode every field of the PGN's schema, in declaration order.
    
    Raises:
        InvalidPayloadLength: payload is not 16 characters (checked first).
        UnknownPgn: no schema registered for `pgn`.
        InvalidHexDigit: payload contains a non-hex character.
        SchemaRangeError: a field reaches past the 8-byte payload.
    """
    if len(hex_str) != PAYLOAD_HEX_LEN:
        raise InvalidPayloadLength(len(hex_str))
    
    schema = registry.get(pgn)
    if schema is None:
        raise UnknownPgn(pgn)
    
    data = hex_to_bytes(hex_str)
    return [_decode_field(data, field) for field in schema.fields]


def decode_payload(
    pgn: int,
    hex_str: str,
    registry: Mapping[int, PgnSchema],
) -> DecodedPayload:
    """Decode a payload into an ordered mapping of field name to text.
    
    Radian fields are scaled by 1e-4 and rounded to 4 decimal places;
    everything else is the raw unsigned integer.
    """
    return {f.name: f.text for f in decode_fields(pgn, hex_str, registry)}
