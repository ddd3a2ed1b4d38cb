from __future__ import annotations

from .constants import MAX_B32_LENGTH
from .encoding import decode
from .errors import InvalidArgument, MalformedInput, MalformedCause

def validate_bytes_length(data: bytes, name: str, min_len: int, max_len: int = None):
    if len(data) < min_len:
        raise MalformedInput(MalformedCause.LENGTH_OUT_OF_RANGE, f"{name} too short: {len(data)} < {min_len}")
    if max_len and len(data) > max_len:
        raise MalformedInput(MalformedCause.LENGTH_OUT_OF_RANGE, f"{name} too long: {len(data)} > {max_len}")

def validate_base32(text: str, name: str, min_bytes: int, max_bytes: int = None,
                    strict_padding: bool = True) -> bytes:
    """Decode a base32 field and bound its decoded size."""
    if text is None:
        raise InvalidArgument(f"{name} is required")
    if len(text) > MAX_B32_LENGTH:
        raise MalformedInput(MalformedCause.TOO_LONG, f"{name}: base32 too long: {len(text)} > {MAX_B32_LENGTH}")
    try:
        data = decode(text, strict_padding=strict_padding)
    except MalformedInput as e:
        raise MalformedInput(e.cause, f"Invalid base32 for {name}: {e}", position=e.position) from e
    validate_bytes_length(data, name, min_bytes, max_bytes)
    return data
