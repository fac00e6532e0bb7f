import argparse
import getpass
import logging
import sys

from pathlib import Path

from crypto.hash import derive_key, file_checksum
from crypto.nonce import generate_iv
from crypto.stream import cfb_decrypt, cfb_encrypt
from storage.container import load_container, read_input, save_container, write_output
from utils.dataModels import DEFAULT_OUTPUT_MODE, decode, encode
from utils.errors import FileCryptError, InputUnreadable
from utils.helper import Password, check_mode, wipe

log = logging.getLogger(__name__)


def encrypt_bytes(plaintext: bytes, password: Password) -> bytes:
    """Return IV || AES-256-CFB(SHA-256(password), IV, plaintext)."""
    key = derive_key(password)
    try:
        iv = generate_iv()
        return encode(iv, cfb_encrypt(key, iv, plaintext))
    finally:
        wipe(key)


def decrypt_bytes(container: bytes, password: Password) -> bytes:
    # A wrong password is not detected: the result is same-length garbage.
    iv, ct = decode(container)
    key = derive_key(password)
    try:
        return cfb_decrypt(key, iv, ct)
    finally:
        wipe(key)


def encrypt_file(in_path: Path, out_path: Path, password: Password, *, mode: int = DEFAULT_OUTPUT_MODE) -> None:
    check_mode(mode)
    plaintext = read_input(in_path)
    key = derive_key(password)
    try:
        iv = generate_iv()
        ct = cfb_encrypt(key, iv, plaintext)
    finally:
        wipe(key)
    save_container(out_path, iv, ct, mode)
    log.info("encrypted %s -> %s (%d bytes)", in_path, out_path, len(ct))


def decrypt_file(in_path: Path, out_path: Path, password: Password, *, mode: int = DEFAULT_OUTPUT_MODE) -> None:
    check_mode(mode)
    iv, ct = load_container(in_path)
    key = derive_key(password)
    try:
        plaintext = cfb_decrypt(key, iv, ct)
    finally:
        wipe(key)
    write_output(out_path, plaintext, mode)
    log.info("decrypted %s -> %s (%d bytes)", in_path, out_path, len(plaintext))


def _password(args: argparse.Namespace) -> str:
    if args.password is not None:
        return args.password
    return getpass.getpass("Password: ")


def cmd_encrypt(args: argparse.Namespace) -> None:
    src, dst = Path(args.input), Path(args.output)
    try:
        encrypt_file(src, dst, _password(args), mode=args.mode)
    except FileCryptError as exc:
        print(f"[!] encrypt error: {exc}")
        sys.exit(1)
    print(f"[+] Encrypted {src} -> {dst}")


def cmd_decrypt(args: argparse.Namespace) -> None:
    src, dst = Path(args.input), Path(args.output)
    try:
        decrypt_file(src, dst, _password(args), mode=args.mode)
    except FileCryptError as exc:
        print(f"[!] decrypt error: {exc}")
        sys.exit(1)
    print(f"[+] Decrypted {src} -> {dst}")


def cmd_checksum(args: argparse.Namespace) -> None:
    path = Path(args.path)
    try:
        digest = file_checksum(path)
    except OSError as exc:
        err = InputUnreadable(f"cannot read {path}: {exc.strerror or exc}")
        print(f"[!] checksum error: {err}")
        sys.exit(1)
    print(f"{digest}  {path}")
