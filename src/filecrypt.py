#!/usr/bin/env python3
"""
filecrypt: password-based symmetric file encryption.

Container layout (binary, no header, magic or version):
    iv        : 16 bytes  (fresh from os.urandom per encryption)
    ciphertext: N bytes   (N == plaintext length)

Key and cipher:
  - K = SHA-256(password), used directly as the AES-256 key (no salt)
  - AES-256 in CFB mode (128-bit feedback) via cryptography.hazmat

Commands:
  encrypt <in> <out> [password]   Encrypt a file
  decrypt <in> <out> [password]   Decrypt a file
  checksum <file>                 Print SHA-256 of a file

Known weaknesses, kept for format compatibility:
  - Unsalted single-pass key derivation (dictionary attacks are cheap).
  - No authentication tag: a wrong password or a tampered file decrypts to
    garbage of the same length instead of failing.
"""
from __future__ import annotations

import logging

from ui.cli import build_parser
from utils.logger import init_logger, level_from_env

def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = level_from_env()
    init_logger("", level, args.log_file)
    args.func(args)


if __name__ == "__main__":
    main()
