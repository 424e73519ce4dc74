"""Console-based rendering using Rich."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from n2k_decoder.catalog.catalog import CatalogEntry
from n2k_decoder.core.frame import FrameDecode, FrameStatus
from n2k_decoder.core.identifier import CanIdentifier
from n2k_decoder.schema.registry import SchemaRegistry


class ConsoleVisualizer:
    """Renders decode results to the console using Rich."""
    
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
    
    def print_identifier(self, identifier: CanIdentifier, pgn_name: Optional[str] = None) -> None:
        """Print the decomposed identifier fields."""
        table = Table(title=f"Identifier {identifier.raw:#010x}", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right")
        
        pgn_str = f"{identifier.pgn} ({identifier.pgn:#07x})"
        if pgn_name:
            pgn_str += f" {escape(pgn_name)}"
        
        table.add_row("Priority", str(identifier.priority))
        table.add_row("PGN", pgn_str)
        table.add_row("PDU Format", identifier.pdu_format.value)
        table.add_row("Data Page", str(identifier.data_page))
        table.add_row("PF / PS", f"{identifier.pdu_format_byte:#04x} / {identifier.pdu_specific:#04x}")
        table.add_row("Source", str(identifier.source_address))
        table.add_row("Destination", str(identifier.destination_address))
        
        self.console.print(table)
    
    def print_payload(self, result: FrameDecode) -> None:
        """Print decoded payload fields."""
        title = result.schema.name if result.schema else "Payload"
        table = Table(title=escape(title))
        
        table.add_column("Field", style="cyan")
        table.add_column("Raw", justify="right", style="dim")
        table.add_column("Value", justify="right", style="green")
        table.add_column("Unit")
        
        for decoded in result.fields:
            table.add_row(escape(decoded.name), str(decoded.raw), decoded.text, decoded.unit.value)
        
        self.console.print(table)
    
    def print_error(self, message: str, title: str = "Decode Error") -> None:
        self.console.print(Panel(escape(message), title=title, border_style="red"))
    
    def print_frame(self, result: FrameDecode, pgn_name: Optional[str] = None) -> None:
        """Print a full frame decode, including any error."""
        if result.identifier is None:
            self.print_error(result.error_message or "", title="Identifier Error")
            return
        
        name = result.schema.name if result.schema else pgn_name
        self.print_identifier(result.identifier, name)
        
        if result.status is FrameStatus.UNKNOWN_PGN:
            self.console.print(f"[yellow]{escape(result.error_message or '')}[/yellow]")
        elif result.status is FrameStatus.DECODE_ERROR:
            self.print_error(result.error_message or "", title="Payload Error")
        elif result.fields:
            self.print_payload(result)
    
    def print_schemas(self, registry: SchemaRegistry) -> None:
        """Print a table of registered PGN schemas."""
        table = Table(title="PGN Schemas")
        
        table.add_column("PGN", style="cyan", justify="right")
        table.add_column("Name")
        table.add_column("Fields")
        
        for pgn in sorted(registry):
            schema = registry[pgn]
            fields = ", ".join(
                f"{f.name}[{f.start_byte}:{f.end_byte}]" + (f" {f.unit.value}" if f.unit.value else "")
                for f in schema.fields
            )
            table.add_row(str(pgn), escape(schema.name), escape(fields))
        
        self.console.print(table)
    
    def print_catalog(self, entries: Iterable[CatalogEntry], term: str = "") -> None:
        """Print catalog entries, highlighting the search term."""
        table = Table(title="PGN List")
        table.add_column("PGN", style="cyan", justify="right")
        table.add_column("Name")
        
        count = 0
        for entry in entries:
            table.add_row(str(entry.pgn), self._highlight(entry.name, term))
            count += 1
        
        self.console.print(table)
        self.console.print(f"[dim]{count} match(es)[/dim]")
    
    @staticmethod
    def _highlight(name: str, term: str) -> Text:
        text = Text(name)
        if term:
            text.highlight_words([term], style="black on yellow", case_sensitive=False)
        return text
