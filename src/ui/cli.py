import argparse

from utils.core import cmd_checksum, cmd_decrypt, cmd_encrypt
from utils.dataModels import DEFAULT_OUTPUT_MODE
from utils.helper import check_mode


def octal_mode(value: str) -> int:
    try:
        return check_mode(int(value, 8))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_crypt_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("input", help="Source file")
    p.add_argument("output", help="Destination file")
    p.add_argument("password", nargs="?", help="Password (prompted for if omitted)")
    p.add_argument("--mode", type=octal_mode, default=DEFAULT_OUTPUT_MODE,
                   help=f"Output file permissions, octal (default: {DEFAULT_OUTPUT_MODE:o}; never world-writable)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Password-based file encryption (AES-256-CFB, IV || ciphertext)")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")
    p.add_argument("--log-file", help="Also write a rotating debug log to this file")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_enc = sub.add_parser("encrypt", help="Encrypt a file with a password")
    _add_crypt_args(p_enc)
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a file with a password")
    _add_crypt_args(p_dec)
    p_dec.set_defaults(func=cmd_decrypt)

    p_sum = sub.add_parser("checksum", help="SHA-256 of a file")
    p_sum.add_argument("path", help="File to hash")
    p_sum.set_defaults(func=cmd_checksum)

    return p
