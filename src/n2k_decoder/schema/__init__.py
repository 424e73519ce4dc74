"""PGN schema model and registry."""

from n2k_decoder.schema.schema import FieldSchema, PgnSchema, Unit, UNIT_SCALES
from n2k_decoder.schema.registry import SchemaRegistry, load_registry
from n2k_decoder.schema.builtin import builtin_registry

__all__ = [
    "FieldSchema",
    "PgnSchema",
    "Unit",
    "UNIT_SCALES",
    "SchemaRegistry",
    "load_registry",
    "builtin_registry",
]
