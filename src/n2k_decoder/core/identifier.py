"""29-bit NMEA 2000 / J1939 identifier decoding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from n2k_decoder.core.errors import InvalidLength
from n2k_decoder.core.hexutil import check_hex


# -----------------------------
# Constants
# -----------------------------
IDENTIFIER_HEX_LEN = 8
CAN_EXT_ID_MASK = 0x1FFFFFFF     # 29-bit
PDU2_THRESHOLD = 0xF0
BROADCAST_ADDRESS = 0xFF


class PduFormat(Enum):
    """Addressing mode derived from the PF byte."""
    
    PDU1 = "PDU1"  # peer-to-peer, PS is a destination address
    PDU2 = "PDU2"  # broadcast, PS is a group extension


@dataclass(frozen=True, slots=True)
class CanIdentifier:
    """Decoded fields of an extended CAN identifier.
    
    Attributes:
        priority: Message priority, 0 (highest) to 7.
        pdu_format: PDU1 (addressed) or PDU2 (broadcast).
        pgn: 18-bit Parameter Group Number.
        source_address: Address of the transmitting node.
        destination_address: Target address; 255 for PDU2 frames.
        data_page: The reserved and data-page bits (bits 25-24).
        pdu_format_byte: The PF byte (bits 23-16).
        pdu_specific: The PS byte (bits 15-8).
        raw: The 29 significant identifier bits.
    """
    
    priority: int
    pdu_format: PduFormat
    pgn: int
    source_address: int
    destination_address: int
    data_page: int = 0
    pdu_format_byte: int = 0
    pdu_specific: int = 0
    raw: int = 0
    
    @property
    def is_broadcast(self) -> bool:
        return self.destination_address == BROADCAST_ADDRESS
    
    def to_dict(self) -> dict[str, int | str]:
        return {
            "priority": self.priority,
            "pgn": self.pgn,
            "source_address": self.source_address,
            "destination_address": self.destination_address,
            "pdu_format": self.pdu_format.value,
        }
    
    def __repr__(self) -> str:
        return (
            f"CanIdentifier(id={self.raw:#010x}, prio={self.priority}, pgn={self.pgn}, "
            f"{self.pdu_format.value}, src={self.source_address}, dst={self.destination_address})"
        )


def decode_identifier(hex_str: str) -> CanIdentifier:
    """Decode an 8-character hex identifier.
    
    The top 3 bits of the 32-bit value are not part of the extended
    identifier and are ignored.
    
    Raises:
        InvalidLength: if the input is not exactly 8 characters.
        InvalidHexDigit: if any character is not a hex digit.
    """
    if len(hex_str) != IDENTIFIER_HEX_LEN:
        raise InvalidLength(len(hex_str), IDENTIFIER_HEX_LEN)
    check_hex(hex_str)
    
    can_id = int(hex_str, 16) & CAN_EXT_ID_MASK
    
    priority = (can_id >> 26) & 0x7
    data_page = (can_id >> 24) & 0x3
    pf = (can_id >> 16) & 0xFF
    ps = (can_id >> 8) & 0xFF
    source = can_id & 0xFF
    
    if pf >= PDU2_THRESHOLD:
        pdu_format = PduFormat.PDU2
        pgn = (data_page << 16) | (pf << 8) | ps
        destination = BROADCAST_ADDRESS
    else:
        # PS carries the destination; the PGN keeps the data-page bits
        pdu_format = PduFormat.PDU1
        pgn = (data_page << 16) | (pf << 8)
        destination = ps
    
    return CanIdentifier(
        priority=priority,
        pdu_format=pdu_format,
        pgn=pgn,
        source_address=source,
        destination_address=destination,
        data_page=data_page,
        pdu_format_byte=pf,
        pdu_specific=ps,
        raw=can_id,
    )
