"""Command-line interface for the NMEA 2000 decoder."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.logging import RichHandler

from n2k_decoder import __version__
from n2k_decoder.catalog.catalog import PgnCatalog
from n2k_decoder.config import DecoderConfig
from n2k_decoder.core.errors import CatalogError, SchemaError
from n2k_decoder.core.frame import FrameStatus, decode_frame
from n2k_decoder.schema.registry import SchemaRegistry
from n2k_decoder.visualization.console import ConsoleVisualizer


console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("n2k_decoder")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _registry(config: DecoderConfig) -> SchemaRegistry:
    try:
        return config.build_registry()
    except (SchemaError, OSError) as exc:
        raise click.ClickException(f"Cannot load schemas: {exc}") from exc


def _catalog(config: DecoderConfig) -> PgnCatalog:
    try:
        return config.load_catalog()
    except (CatalogError, OSError) as exc:
        raise click.ClickException(f"Failed to load PGN data. Error: {exc}") from exc


def _split_line(line: str) -> tuple[str, Optional[str]]:
    # Accepts "ID DATA", "ID#DATA" (candump style) or a bare "ID"
    if "#" in line:
        id_hex, data_hex = line.split("#", 1)
        return id_hex.strip(), data_hex.strip()
    parts = line.split()
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    raise ValueError(f"expected 'ID [DATA]', got {len(parts)} tokens")


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--schema-file",
    "schema_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="N2K_SCHEMA_FILE",
    help="JSON PGN schema table layered over the built-in schemas (repeatable).",
)
@click.option(
    "--catalog",
    "catalog_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="N2K_PGN_CATALOG",
    help="JSON list of {PGN, Name} entries.",
)
@click.option("--no-builtin", is_flag=True, help="Do not load the built-in schemas.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    schema_files: tuple[Path, ...],
    catalog_file: Optional[Path],
    no_builtin: bool,
    verbose: bool,
) -> None:
    """NMEA 2000 / J1939 frame decoder."""
    _setup_logging(verbose)
    ctx.obj = DecoderConfig(
        schema_files=tuple(schema_files),
        catalog_file=catalog_file,
        include_builtin=not no_builtin,
    )


@main.command()
@click.argument("identifier")
@click.argument("data", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_obj
def decode(config: DecoderConfig, identifier: str, data: Optional[str], as_json: bool) -> None:
    """Decode an 8-hex-digit IDENTIFIER and optional 16-hex-digit DATA."""
    registry = _registry(config)
    result = decode_frame(identifier, data, registry)
    
    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        pgn_name = None
        if result.identifier is not None and result.schema is None:
            pgn_name = _catalog(config).name_for(result.identifier.pgn)
        ConsoleVisualizer(console).print_frame(result, pgn_name)
    
    if result.status is FrameStatus.DECODE_ERROR:
        click.get_current_context().exit(1)


@main.command()
@click.argument("source", type=click.File("r"), default="-")
@click.pass_obj
def batch(config: DecoderConfig, source: TextIO) -> None:
    """Decode frames from SOURCE (one per line) and print JSON lines."""
    registry = _registry(config)
    counts = {status: 0 for status in FrameStatus}
    
    for lineno, raw_line in enumerate(source, start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        
        try:
            id_hex, data_hex = _split_line(line)
        except ValueError as exc:
            counts[FrameStatus.DECODE_ERROR] += 1
            click.echo(json.dumps({
                "line": lineno,
                "status": FrameStatus.DECODE_ERROR.value,
                "error": str(exc),
            }))
            continue
        
        result = decode_frame(id_hex, data_hex, registry)
        counts[result.status] += 1
        click.echo(json.dumps({"line": lineno, **result.to_dict()}))
    
    logger.info(
        "Decoded %s",
        ", ".join(f"{status.value}: {n}" for status, n in counts.items()),
    )


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the schema table as JSON.")
@click.pass_obj
def schemas(config: DecoderConfig, as_json: bool) -> None:
    """List registered PGN schemas."""
    registry = _registry(config)
    
    if as_json:
        click.echo(json.dumps(registry.to_dict(), indent=2))
        return
    
    ConsoleVisualizer(console).print_schemas(registry)


@main.command()
@click.argument("term", required=False, default="")
@click.pass_obj
def pgns(config: DecoderConfig, term: str) -> None:
    """Search the PGN name catalog for TERM."""
    if config.catalog_file is None:
        raise click.UsageError("No PGN catalog configured; pass --catalog or set N2K_PGN_CATALOG")
    
    catalog = _catalog(config)
    term = term.strip()
    ConsoleVisualizer(console).print_catalog(catalog.search(term), term)


if __name__ == "__main__":
    main()
