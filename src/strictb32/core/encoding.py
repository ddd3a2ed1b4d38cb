"""Strict RFC 4648 Base32.

Unlike ``base64.b32decode`` the decoder only accepts the canonical form:
upper-case symbols, zero slack bits in the final symbol, and no symbol that
contributes nothing but slack. Padding is optional unless ``strict_padding``
is requested, in which case it must be exactly what ``encode`` would emit.
"""
from __future__ import annotations
from typing import Union

from .constants import (
    ALPHABET, PADDING_SYMBOL,
    BITS_PER_BYTE, BITS_PER_SYMBOL, SYMBOLS_PER_GROUP, BYTES_PER_GROUP,
    PADDING_BY_MISSING_BYTES, SYMBOL_MASK, BYTE_MASK,
)
from .errors import InvalidArgument, MalformedInput, MalformedCause

BytesLike = Union[bytes, bytearray, memoryview]

def _build_reverse_table():
    table = [-1] * 256
    for value, symbol in enumerate(ALPHABET):
        table[ord(symbol)] = value
    return tuple(table)

_REVERSE = _build_reverse_table()

def symbol_value(ch: str) -> int:
    """Return the 5-bit value of ``ch`` or -1 if it is not an alphabet symbol."""
    code = ord(ch)
    return _REVERSE[code] if code < 256 else -1

def _missing_bytes(n: int) -> int:
    groups = (n + BYTES_PER_GROUP - 1) // BYTES_PER_GROUP
    return groups * BYTES_PER_GROUP - n

def padding_length(n: int) -> int:
    """Padding symbols appended when encoding ``n`` bytes with padding."""
    return PADDING_BY_MISSING_BYTES[_missing_bytes(n)]

def encoded_length(n: int, padding: bool = False) -> int:
    groups = (n + BYTES_PER_GROUP - 1) // BYTES_PER_GROUP
    full = groups * SYMBOLS_PER_GROUP
    return full if padding else full - padding_length(n)

def encode(data: BytesLike, padding: bool = False) -> str:
    """Encode bytes to upper-case Base32, optionally padded to 8-symbol groups."""
    if data is None:
        raise InvalidArgument("data must not be None")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidArgument(f"expected bytes-like data, not {type(data).__name__}")

    out = []
    accum = 0
    bits = 0

    data = bytes(data)
    for byte in data:
        accum = (accum << BITS_PER_BYTE) | byte
        bits += BITS_PER_BYTE
        while bits >= BITS_PER_SYMBOL:
            bits -= BITS_PER_SYMBOL
            out.append(ALPHABET[(accum >> bits) & SYMBOL_MASK])
        accum &= (1 << bits) - 1

    if bits:
        out.append(ALPHABET[(accum << (BITS_PER_SYMBOL - bits)) & SYMBOL_MASK])

    if padding:
        out.append(PADDING_SYMBOL * padding_length(len(data)))

    return "".join(out)

def decode(text: str, strict_padding: bool = False) -> bytes:
    """Decode canonical Base32 text.

    Raises ``MalformedInput`` with a ``cause`` for every rejected string and
    ``InvalidArgument`` when ``text`` is missing or not a ``str``.
    """
    if text is None:
        raise InvalidArgument("text must not be None")
    if not isinstance(text, str):
        raise InvalidArgument(f"expected str, not {type(text).__name__}")
    if not text:
        return b""

    padding_index = len(text)
    while padding_index > 0 and text[padding_index - 1] == PADDING_SYMBOL:
        padding_index -= 1

    total_bits = padding_index * BITS_PER_SYMBOL
    output_length = total_bits // BITS_PER_BYTE
    if output_length == 0:
        raise MalformedInput(MalformedCause.TOO_SHORT, "Too short base32 string")
    tail_bits = total_bits % BITS_PER_BYTE
    if tail_bits >= BITS_PER_SYMBOL:
        raise MalformedInput(MalformedCause.REDUNDANT_SYMBOL, "Redundant number of chars in base32 string")

    last = padding_index - 1
    last_value = symbol_value(text[last])
    if last_value == -1:
        raise MalformedInput(
            MalformedCause.INVALID_CHARACTER,
            f"Invalid char in base32 string: {text[last]!r} at {last}",
            position=last,
        )
    if last_value & ((1 << tail_bits) - 1):
        raise MalformedInput(MalformedCause.NONZERO_TAIL_BITS, "Non-zero decoded tail bits in trailing char")

    if strict_padding and len(text) - padding_length(output_length) != padding_index:
        raise MalformedInput(MalformedCause.INVALID_PADDING, "Invalid base32 string padding length")

    out = bytearray(output_length)
    accum = 0
    bits = 0
    pos = 0

    for i in range(output_length):
        while bits < BITS_PER_BYTE:
            value = symbol_value(text[pos])
            if value == -1:
                raise MalformedInput(
                    MalformedCause.INVALID_CHARACTER,
                    f"Invalid char in base32 string: {text[pos]!r} at {pos}",
                    position=pos,
                )
            accum = (accum << BITS_PER_SYMBOL) | value
            bits += BITS_PER_SYMBOL
            pos += 1
        bits -= BITS_PER_BYTE
        out[i] = (accum >> bits) & BYTE_MASK
        accum &= (1 << bits) - 1

    # Leftover bits in accum are the final symbol's slack, already checked above.
    return bytes(out)
