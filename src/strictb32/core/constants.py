from __future__ import annotations

# RFC 4648 section 6, upper-case only
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PADDING_SYMBOL = "="

BITS_PER_BYTE = 8
BITS_PER_SYMBOL = 5
SYMBOLS_PER_GROUP = 8
BYTES_PER_GROUP = 5

# Indexed by bytes missing from the final 5-byte group.
PADDING_BY_MISSING_BYTES = (0, 1, 3, 4, 6)

SYMBOL_MASK = (1 << BITS_PER_SYMBOL) - 1
BYTE_MASK = (1 << BITS_PER_BYTE) - 1

MAX_B32_LENGTH = 64 * 1024  # Max base32 encoded length

SECRET_BYTES = 20  # 160-bit shared secret
