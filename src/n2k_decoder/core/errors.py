"""Decode error taxonomy."""


class DecodeError(ValueError):
    """Base class for recoverable, user-facing decode failures."""


class InvalidLength(DecodeError):
    """Identifier string is not exactly 8 characters."""
    
    def __init__(self, length: int, expected: int = 8) -> None:
        self.length = length
        self.expected = expected
        super().__init__(
            f"Input hex string must be exactly {expected} characters long, got {length}"
        )


class InvalidHexDigit(DecodeError):
    """Input contains a character outside 0-9a-fA-F."""
    
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Invalid hex digit {char!r} at position {position}")


class InvalidPayloadLength(DecodeError):
    """Payload string is not exactly 16 hex characters (8 bytes)."""
    
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Data must be 8 bytes (16 hex characters), got {length} characters"
        )


class UnknownPgn(DecodeError):
    """No schema is registered for the PGN.

    This is an expected outcome for unregistered message types; the
    identifier that produced the PGN is still valid.
    """
    
    def __init__(self, pgn: int) -> None:
        self.pgn = pgn
        super().__init__(f"Unknown PGN {pgn}")


class SchemaRangeError(DecodeError):
    """A field's byte range reaches past the end of the payload."""
    
    def __init__(self, field_name: str, start_byte: int, length_bytes: int, payload_len: int) -> None:
        self.field_name = field_name
        self.start_byte = start_byte
        self.length_bytes = length_bytes
        self.payload_len = payload_len
        super().__init__(
            f"Field {field_name!r} spans bytes {start_byte}-{start_byte + length_bytes - 1}, "
            f"payload has {payload_len} bytes"
        )


class SchemaError(ValueError):
    """Invalid schema definition or schema file."""


class CatalogError(ValueError):
    """Invalid PGN name catalog file."""
