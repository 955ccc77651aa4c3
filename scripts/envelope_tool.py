"""
Command-line helper for KingUtils envelopes.

    python scripts/envelope_tool.py encrypt "some text" --iterations 200000
    echo "<envelope>" | python scripts/envelope_tool.py decrypt
    python scripts/envelope_tool.py inspect "<envelope>"

The password comes from ``--password``, then ``KINGUTILS_PASSWORD``, then
an interactive prompt. Encrypt defaults come from the same environment
variables the TUI reads (see :func:`kingutils.frontend.cli.context.build_context`).
"""

from __future__ import annotations

import argparse
import getpass
import logging
import os
import sys
from typing import List, Optional

from kingutils.core.exceptions import KingUtilsError
from kingutils.frontend.cli.context import build_context
from kingutils.frontend.cli.logging_config import configure_logging
from kingutils.security.envelope import EnvelopeFields, decrypt_string, encrypt_string

ENV_PASSWORD = "KINGUTILS_PASSWORD"

logger = logging.getLogger(__name__)


def _read_value(value: Optional[str]) -> str:
    if value is not None and value != "-":
        return value
    return sys.stdin.read().rstrip("\r\n")


def _read_password(args: argparse.Namespace) -> str:
    if args.password:
        return args.password
    env_password = os.getenv(ENV_PASSWORD)
    if env_password:
        return env_password
    return getpass.getpass("Password: ")


def describe_envelope(value: str) -> str:
    """Return a human-readable summary of an envelope's fields (no decryption)."""
    fields = EnvelopeFields.parse(value)
    return "\n".join(
        [
            f"salt:        {fields.salt.hex()} ({len(fields.salt)} bytes)",
            f"iterations:  {fields.iterations}",
            f"hash:        {fields.hash_algorithm.name} (tag {fields.hash_algorithm.tag})",
            f"ciphertext:  {len(fields.ciphertext)} bytes",
        ]
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encrypt, decrypt or inspect KingUtils password envelopes."
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: KINGUTILS_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt text into an envelope")
    enc.add_argument("text", nargs="?", default=None, help="Text to encrypt (default: stdin)")
    enc.add_argument("--password", default=None, help=f"Password (default: {ENV_PASSWORD} or prompt)")
    enc.add_argument("--salt-length", type=int, default=None, help="Salt size in bytes")
    enc.add_argument("--iterations", type=int, default=None, help="PBKDF2 iteration count")
    enc.add_argument("--hash", dest="hash_algorithm", default=None, help="PBKDF2 hash, e.g. SHA256")

    dec = sub.add_parser("decrypt", help="Decrypt an envelope")
    dec.add_argument("envelope", nargs="?", default=None, help="Envelope (default: stdin)")
    dec.add_argument("--password", default=None, help=f"Password (default: {ENV_PASSWORD} or prompt)")

    ins = sub.add_parser("inspect", help="Show envelope fields without decrypting")
    ins.add_argument("envelope", nargs="?", default=None, help="Envelope (default: stdin)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    try:
        ctx = build_context()
        # stdout carries only the command result
        configure_logging(args.log_level or ctx.log_level, stream=sys.stderr)

        if args.command == "encrypt":
            s = ctx.settings
            text = _read_value(args.text)
            envelope = encrypt_string(
                text,
                _read_password(args),
                salt_length=args.salt_length if args.salt_length is not None else s.salt_length,
                iterations=args.iterations if args.iterations is not None else s.iterations,
                hash_algorithm=args.hash_algorithm or s.hash_algorithm,
            )
            print(envelope)
        elif args.command == "decrypt":
            envelope = _read_value(args.envelope).strip()
            print(decrypt_string(envelope, _read_password(args)))
        else:
            print(describe_envelope(_read_value(args.envelope).strip()))
    except (KingUtilsError, ValueError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
