"""PGN name catalog with name search."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from n2k_decoder.core.errors import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One PGN/name pair."""
    
    pgn: int
    name: str
    
    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CatalogEntry":
        return CatalogEntry(pgn=int(d["PGN"]), name=str(d["Name"]))


class PgnCatalog:
    """Read-only list of known PGN names.
    
    The catalog file is a JSON array of {"PGN": int, "Name": str}
    objects. Entries keep file order; a PGN may appear more than once.
    """
    
    def __init__(self, entries: Optional[list[CatalogEntry]] = None) -> None:
        self._entries = tuple(entries or ())
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def __iter__(self):
        return iter(self._entries)
    
    @property
    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries
    
    @classmethod
    def from_list(cls, data: Any) -> "PgnCatalog":
        if not isinstance(data, list) or not all(
            isinstance(item, dict) and "PGN" in item and "Name" in item for item in data
        ):
            raise CatalogError("Invalid data structure: expected a list of {PGN, Name} objects")
        try:
            return cls([CatalogEntry.from_dict(item) for item in data])
        except (TypeError, ValueError) as exc:
            raise CatalogError(f"Invalid catalog entry: {exc}") from exc
    
    @classmethod
    def load(cls, path: Path) -> "PgnCatalog":
        """Load a catalog file."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise CatalogError(f"{path}: invalid JSON ({exc})") from exc
        
        catalog = cls.from_list(data)
        logger.info("Loaded %d PGN names from %s", len(catalog), path)
        return catalog
    
    def search(self, term: str = "") -> list[CatalogEntry]:
        """Entries whose name contains `term`, ignoring case."""
        needle = term.strip().lower()
        if not needle:
            return list(self._entries)
        return [e for e in self._entries if needle in e.name.lower()]
    
    def name_for(self, pgn: int) -> Optional[str]:
        for entry in self._entries:
            if entry.pgn == pgn:
                return entry.name
        return None
