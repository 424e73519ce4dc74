"""Read-only PGN schema registry."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Optional

from n2k_decoder.core.errors import SchemaError
from n2k_decoder.schema.schema import PgnSchema

logger = logging.getLogger(__name__)


class SchemaRegistry(Mapping[int, PgnSchema]):
    """Immutable mapping from PGN number to its schema.
    
    The registry is built once from static definitions and never changes
    afterwards, so decoders can share it freely.
    """
    
    def __init__(self, schemas: Iterable[PgnSchema] = ()) -> None:
        table: dict[int, PgnSchema] = {}
        for schema in schemas:
            if schema.pgn in table:
                raise SchemaError(f"duplicate schema for PGN {schema.pgn}")
            table[schema.pgn] = schema
        self._schemas = table
    
    def __getitem__(self, pgn: int) -> PgnSchema:
        return self._schemas[pgn]
    
    def __iter__(self) -> Iterator[int]:
        return iter(self._schemas)
    
    def __len__(self) -> int:
        return len(self._schemas)
    
    def __repr__(self) -> str:
        return f"SchemaRegistry(pgns={sorted(self._schemas)})"
    
    @property
    def registered_pgns(self) -> set[int]:
        """Set of PGNs with registered schemas."""
        return set(self._schemas)
    
    def merged(self, other: Mapping[int, PgnSchema]) -> "SchemaRegistry":
        """Return a new registry; definitions in `other` override ours."""
        combined = dict(self._schemas)
        combined.update(other)
        return SchemaRegistry(combined.values())
    
    @classmethod
    def from_dict(cls, d: dict) -> "SchemaRegistry":
        """Build from a PGN table: {"127508": {"name": ..., "fields": [...]}}."""
        if not isinstance(d, dict):
            raise SchemaError("schema table must be a JSON object keyed by PGN")
        schemas = []
        for key, definition in d.items():
            try:
                pgn = int(key)
            except (TypeError, ValueError):
                raise SchemaError(f"schema key {key!r} is not a PGN number") from None
            schemas.append(PgnSchema.from_dict(pgn, definition))
        return cls(schemas)
    
    def to_dict(self) -> dict[str, dict]:
        return {str(pgn): schema.to_dict() for pgn, schema in self._schemas.items()}


def load_registry(path: Path, base: Optional[SchemaRegistry] = None) -> SchemaRegistry:
    """Load a schema table file, optionally layered over `base`."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaError(f"{path}: invalid JSON ({exc})") from exc
    
    loaded = SchemaRegistry.from_dict(data)
    logger.info("Loaded %d PGN schemas from %s", len(loaded), path)
    
    if base is None:
        return loaded
    return base.merged(loaded)
