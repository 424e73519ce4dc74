"""PGN name catalog."""

from n2k_decoder.catalog.catalog import CatalogEntry, PgnCatalog

__all__ = ["CatalogEntry", "PgnCatalog"]
