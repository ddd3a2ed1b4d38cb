from __future__ import annotations

import argparse
import secrets
import sys

import structlog

from .core.constants import SECRET_BYTES
from .core.encoding import encode, decode
from .core.errors import InvalidArgument, MalformedInput
from .selfcheck import codec_self_check

def _configure_logger():
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    return structlog.get_logger()

def _read_input(args) -> bytes:
    if args.hex is not None:
        try:
            return bytes.fromhex(args.hex)
        except ValueError as e:
            raise InvalidArgument(f"--hex: {e}") from e
    if args.text is not None:
        return args.text.encode("utf-8")
    return sys.stdin.buffer.read()

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strict RFC 4648 Base32 codec")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc_parser = subparsers.add_parser("encode", help="Encode bytes to base32")
    enc_parser.add_argument("--pad", action="store_true", help="Pad output to 8-symbol groups")
    src_group = enc_parser.add_mutually_exclusive_group()
    src_group.add_argument("--hex", help="Input bytes as hex (default: read stdin)")
    src_group.add_argument("--text", help="Input as UTF-8 text")

    dec_parser = subparsers.add_parser("decode", help="Decode base32 to bytes")
    dec_parser.add_argument("value")
    dec_parser.add_argument("--strict-padding", action="store_true")
    dec_parser.add_argument("--hex", action="store_true", help="Print decoded bytes as hex")

    gen_parser = subparsers.add_parser("gen-secret", help="Generate a base32 shared secret")
    gen_parser.add_argument("--bytes", type=int, default=SECRET_BYTES, dest="nbytes")
    gen_parser.add_argument("--pad", action="store_true")

    subparsers.add_parser("check", help="Run codec self-check")
    return parser

def main(argv=None):
    logger = _configure_logger()
    args = build_parser().parse_args(argv)

    if args.command == "check":
        codec_self_check(logger)
        print("✓ Codec self-check passed")
        return 0

    try:
        if args.command == "gen-secret":
            if args.nbytes < 1:
                raise InvalidArgument("--bytes must be positive")
            print(encode(secrets.token_bytes(args.nbytes), padding=args.pad))
            return 0

        if args.command == "encode":
            print(encode(_read_input(args), padding=args.pad))
            return 0

        if args.command == "decode":
            data = decode(args.value.strip(), strict_padding=args.strict_padding)
            if args.hex:
                print(data.hex())
            else:
                sys.stdout.buffer.write(data)
                sys.stdout.buffer.flush()
            return 0
    except InvalidArgument as e:
        logger.error("invalid_argument", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except MalformedInput as e:
        logger.error("malformed_input", command=args.command, cause=e.cause.value, error=str(e))
        print(f"Malformed base32: {e}", file=sys.stderr)
        return 3

    return 0
