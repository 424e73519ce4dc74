"""Built-in PGN schema definitions."""

from n2k_decoder.schema.registry import SchemaRegistry
from n2k_decoder.schema.schema import FieldSchema, PgnSchema, Unit


VESSEL_HEADING = PgnSchema(
    pgn=127508,
    name="Vessel Heading",
    fields=(
        FieldSchema(name="SID", start_byte=0, length_bytes=1),
        FieldSchema(name="Heading", start_byte=1, length_bytes=2, unit=Unit.RADIANS),
        FieldSchema(name="Deviation", start_byte=3, length_bytes=2, unit=Unit.RADIANS),
        FieldSchema(name="Variation", start_byte=5, length_bytes=2, unit=Unit.RADIANS),
        FieldSchema(name="Reference", start_byte=7, length_bytes=1),
    ),
)

BUILTIN_SCHEMAS = (VESSEL_HEADING,)


def builtin_registry() -> SchemaRegistry:
    """Registry populated from the static definitions above."""
    return SchemaRegistry(BUILTIN_SCHEMAS)
