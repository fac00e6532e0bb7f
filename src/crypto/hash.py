from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from pathlib import Path

from utils.dataModels import CHECKSUM_CHUNK_SIZE
from utils.helper import Password, password_bytes

def sha256_bytes(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    digest.update(data)
    return digest.finalize()


def derive_key(password: Password) -> bytearray:
    """K = SHA-256(password) -> 32 bytes. No salt, no iterations."""
    key = bytearray(sha256_bytes(password_bytes(password)))
    return key


def file_checksum(path: Path) -> str:
    digest = hashes.Hash(hashes.SHA256(), backend=default_backend())
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(CHECKSUM_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.finalize().hex()
