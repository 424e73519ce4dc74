"""PGN field schema definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from n2k_decoder.core.errors import SchemaError


PAYLOAD_BYTES = 8


class Unit(Enum):
    """Unit tag of a payload field."""
    
    NONE = ""
    RADIANS = "rad"


# Fixed-point scale per unit: one raw count = scale units.
# Units missing here are rendered as the raw integer.
UNIT_SCALES: dict[Unit, float] = {
    Unit.RADIANS: 0.0001,
}


@dataclass(frozen=True)
class FieldSchema:
    """Schema definition for a single field within an 8-byte payload.
    
    Fields are byte aligned and read as big-endian unsigned integers.
    Whether the range fits inside the payload is checked when decoding,
    not here.
    """
    
    name: str
    start_byte: int
    length_bytes: int = 1
    unit: Unit = Unit.NONE
    
    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("field name must be a non-empty string")
        if not (0 <= self.start_byte < PAYLOAD_BYTES):
            raise SchemaError(f"start_byte must be 0-7, got {self.start_byte}")
        if not (1 <= self.length_bytes <= PAYLOAD_BYTES):
            raise SchemaError(f"length_bytes must be 1-8, got {self.length_bytes}")
    
    @property
    def end_byte(self) -> int:
        """One past the last byte of the field."""
        return self.start_byte + self.length_bytes
    
    @property
    def scale(self) -> Optional[float]:
        return UNIT_SCALES.get(self.unit)
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start": self.start_byte,
            "length": self.length_bytes,
            "units": self.unit.value,
        }
    
    @staticmethod
    def from_dict(d: dict[str, Any]) -> "FieldSchema":
        # Inverse of to_dict(); keys follow the PGN table file format
        if not isinstance(d, dict):
            raise SchemaError(f"field definition must be an object, got {d!r}")
        try:
            name = str(d["name"])
            start = d["start"]
            length = d["length"]
        except KeyError as exc:
            raise SchemaError(f"malformed field definition {d!r}: missing {exc}") from exc
        for key, value in (("start", start), ("length", length)):
            # bool is an int subclass; floats would truncate silently
            if isinstance(value, bool) or not isinstance(value, int):
                raise SchemaError(f"malformed field definition {d!r}: {key!r} must be an integer")
        try:
            unit = Unit(d.get("units", ""))
        except ValueError:
            raise SchemaError(f"unknown unit {d.get('units')!r} for field {name!r}") from None
        return FieldSchema(name=name, start_byte=start, length_bytes=length, unit=unit)


@dataclass(frozen=True)
class PgnSchema:
    """Schema definition for a complete PGN payload.
    
    A PGN schema maps a parameter group number to an ordered set of
    field definitions, enabling data-driven decoding of raw payloads.
    """
    
    pgn: int
    name: str
    fields: tuple[FieldSchema, ...] = field(default_factory=tuple)
    
    def __post_init__(self) -> None:
        if not (0 <= self.pgn <= 0x3FFFF):
            raise SchemaError(f"PGN must be an 18-bit value, got {self.pgn}")
        # Accept any iterable of fields but store a tuple
        object.__setattr__(self, "fields", tuple(self.fields))
    
    def get_field(self, name: str) -> Optional[FieldSchema]:
        """Get a field by name."""
        for field_schema in self.fields:
            if field_schema.name == name:
                return field_schema
        return None
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "fields": [f.to_dict() for f in self.fields],
        }
    
    @staticmethod
    def from_dict(pgn: int, d: dict[str, Any]) -> "PgnSchema":
        if not isinstance(d, dict) or "fields" not in d:
            raise SchemaError(f"PGN {pgn}: definition must be an object with 'fields'")
        fields = d["fields"]
        if not isinstance(fields, list):
            raise SchemaError(f"PGN {pgn}: 'fields' must be a list")
        return PgnSchema(
            pgn=pgn,
            name=str(d.get("name", "")),
            fields=tuple(FieldSchema.from_dict(f) for f in fields),
        )
