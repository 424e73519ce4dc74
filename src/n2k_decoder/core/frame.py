"""Frame-level decode: identifier first, then payload."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from n2k_decoder.core.errors import DecodeError, UnknownPgn
from n2k_decoder.core.identifier import CanIdentifier, decode_identifier
from n2k_decoder.core.payload import DecodedField, DecodedPayload, decode_fields
from n2k_decoder.schema.schema import PgnSchema

logger = logging.getLogger(__name__)


class FrameStatus(Enum):
    """Outcome of a frame decode."""
    
    OK = "OK"
    UNKNOWN_PGN = "UNKNOWN_PGN"
    DECODE_ERROR = "DECODE_ERROR"


@dataclass(frozen=True)
class FrameDecode:
    """Result of decoding an identifier/payload pair.
    
    Never carries a partial payload: `fields` is either the complete
    decode or empty. When the identifier fails, `identifier` is None
    and the payload is not looked at.
    """
    
    status: FrameStatus
    identifier: Optional[CanIdentifier] = None
    schema: Optional[PgnSchema] = None
    fields: tuple[DecodedField, ...] = field(default_factory=tuple)
    error: Optional[DecodeError] = None
    
    @property
    def ok(self) -> bool:
        return self.status is FrameStatus.OK
    
    @property
    def payload(self) -> DecodedPayload:
        return {f.name: f.text for f in self.fields}
    
    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None
    
    def to_dict(self) -> dict[str, Any]:
        # JSON-friendly
        return {
            "status": self.status.value,
            "identifier": self.identifier.to_dict() if self.identifier else None,
            "pgn_name": self.schema.name if self.schema else None,
            "payload": self.payload,
            "error": self.error_message,
            "error_type": type(self.error).__name__ if self.error is not None else None,
        }


def decode_frame(
    id_hex: str,
    data_hex: Optional[str],
    registry: Mapping[int, PgnSchema],
) -> FrameDecode:
    """Decode a frame without raising on malformed input.
    
    `data_hex` may be None to decode the identifier alone.
    """
    try:
        identifier = decode_identifier(id_hex)
    except DecodeError as exc:
        logger.debug("Identifier %r rejected: %s", id_hex, exc)
        return FrameDecode(status=FrameStatus.DECODE_ERROR, error=exc)
    
    if data_hex is None:
        return FrameDecode(
            status=FrameStatus.OK,
            identifier=identifier,
            schema=registry.get(identifier.pgn),
        )
    
    try:
        fields = decode_fields(identifier.pgn, data_hex, registry)
    except UnknownPgn as exc:
        logger.debug("No schema for PGN %d", identifier.pgn)
        return FrameDecode(status=FrameStatus.UNKNOWN_PGN, identifier=identifier, error=exc)
    except DecodeError as exc:
        logger.debug("Payload %r for PGN %d rejected: %s", data_hex, identifier.pgn, exc)
        return FrameDecode(
            status=FrameStatus.DECODE_ERROR,
            identifier=identifier,
            schema=registry.get(identifier.pgn),
            error=exc,
        )
    
    return FrameDecode(
        status=FrameStatus.OK,
        identifier=identifier,
        schema=registry[identifier.pgn],
        fields=tuple(fields),
    )
