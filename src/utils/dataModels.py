from dataclasses import dataclass
from typing import Tuple

from utils.errors import ContainerTooShort

IV_SIZE = 16   # one AES block
KEY_SIZE = 32  # AES-256

DEFAULT_OUTPUT_MODE = 0o644
CHECKSUM_CHUNK_SIZE = 64 * 1024
TMP_SUFFIX = ".tmp"

LOG_LEVEL_ENV = "FILECRYPT_LOG_LEVEL"


@dataclass
class Container:
    iv: bytes
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        if len(self.iv) != IV_SIZE:
            raise ValueError(f"IV must be {IV_SIZE} bytes, got {len(self.iv)}")
        return bytes(self.iv) + bytes(self.ciphertext)

    @staticmethod
    def from_bytes(b: bytes) -> "Container":
        if len(b) < IV_SIZE:
            raise ContainerTooShort(f"container is {len(b)} bytes, need at least {IV_SIZE}")
        return Container(iv=bytes(b[:IV_SIZE]), ciphertext=bytes(b[IV_SIZE:]))

    def __len__(self) -> int:
        return IV_SIZE + len(self.ciphertext)


def encode(iv: bytes, ciphertext: bytes) -> bytes:
    return Container(iv=iv, ciphertext=ciphertext).to_bytes()


def decode(container: bytes) -> Tuple[bytes, bytes]:
    c = Container.from_bytes(container)
    return c.iv, c.ciphertext
