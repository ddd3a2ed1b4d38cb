from __future__ import annotations
import base64
import secrets
import sys

from .core.constants import ALPHABET, PADDING_SYMBOL
from .core.encoding import encode, decode
from .core.errors import MalformedInput

RFC4648_VECTORS = [
    (b"", ""),
    (b"f", "MY======"),
    (b"fo", "MZXQ===="),
    (b"foo", "MZXW6==="),
    (b"foob", "MZXW6YQ="),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI======"),
]

MUST_REJECT = [
    ("A", False),
    ("MY=====", True),
    ("MZ======", False),
    ("1ABCDEFG", False),
    ("my", False),
]

def codec_self_check(logger):
    checks = []

    checks.append(("Python >= 3.9", sys.version_info >= (3, 9), "Python 3.9+ required"))

    bijective = len(ALPHABET) == 32 and len(set(ALPHABET)) == 32 and PADDING_SYMBOL not in ALPHABET
    checks.append(("Alphabet bijection", bijective, "Alphabet must hold 32 distinct symbols"))

    try:
        ok = all(encode(raw, padding=True) == text for raw, text in RFC4648_VECTORS)
        checks.append(("RFC 4648 encode vectors", ok, "Encoder output differs from RFC 4648"))
    except Exception:
        checks.append(("RFC 4648 encode vectors", False, "Encoder raised on a test vector"))

    try:
        ok = all(decode(text, strict_padding=True) == raw for raw, text in RFC4648_VECTORS)
        checks.append(("RFC 4648 decode vectors", ok, "Decoder output differs from RFC 4648"))
    except MalformedInput:
        checks.append(("RFC 4648 decode vectors", False, "Valid base32 rejected"))

    for text, strict in MUST_REJECT:
        name = f"Reject {text!r}"
        try:
            decode(text, strict_padding=strict)
            checks.append((name, False, "Malformed base32 accepted"))
        except MalformedInput:
            checks.append((name, True, ""))

    sample = secrets.token_bytes(37)
    expected = base64.b32encode(sample).decode("ascii")
    checks.append(("Matches stdlib b32encode", encode(sample, padding=True) == expected,
                   "Padded output differs from base64.b32encode"))

    all_ok = True
    for name, ok, reason in checks:
        all_ok = all_ok and ok
        if ok:
            logger.info("codec_check", check=name, status="OK")
        else:
            logger.error("codec_check", check=name, status="FAILED", reason=reason)

    if not all_ok:
        raise RuntimeError("Codec self-check failed")

    logger.info("codec_self_check_passed")
    return True
