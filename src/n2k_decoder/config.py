"""Decoder configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from n2k_decoder.catalog.catalog import PgnCatalog
from n2k_decoder.schema.builtin import builtin_registry
from n2k_decoder.schema.registry import SchemaRegistry, load_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecoderConfig:
    """Where schemas and PGN names come from.
    
    Schema files are layered in order over the built-in table; a PGN
    defined in a later file replaces the earlier definition.
    """
    
    schema_files: tuple[Path, ...] = field(default_factory=tuple)
    catalog_file: Optional[Path] = None
    include_builtin: bool = True
    
    def build_registry(self) -> SchemaRegistry:
        registry = builtin_registry() if self.include_builtin else SchemaRegistry()
        for path in self.schema_files:
            registry = load_registry(path, base=registry)
        logger.debug("Registry ready: %d PGNs", len(registry))
        return registry
    
    def load_catalog(self) -> PgnCatalog:
        if self.catalog_file is None:
            return PgnCatalog()
        return PgnCatalog.load(self.catalog_file)
