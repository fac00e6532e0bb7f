import logging

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

try:
    # cryptography >= 45 keeps CFB under the decrepit namespace
    from cryptography.hazmat.decrepit.ciphers.modes import CFB
except ImportError:
    from cryptography.hazmat.primitives.ciphers.modes import CFB

from utils.dataModels import IV_SIZE, KEY_SIZE
from utils.errors import KeySizeInvalid

log = logging.getLogger(__name__)


def _cipher(key: bytearray | bytes, iv: bytes) -> Cipher:
    if len(key) != KEY_SIZE:
        raise KeySizeInvalid(f"AES-256 needs a {KEY_SIZE}-byte key, got {len(key)}")
    if len(iv) != IV_SIZE:
        raise ValueError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")
    return Cipher(algorithms.AES(key), CFB(iv), backend=default_backend())


def transform(key: bytearray | bytes, iv: bytes, data: bytes, *, decrypt: bool = False) -> bytes:
    """AES-256-CFB128 over `data`. Same length out as in; no padding, no tag.

    Decryption must go through the decryptor so ciphertext (not plaintext)
    is fed back into the chain.
    """
    cipher = _cipher(key, iv)
    ctx = cipher.decryptor() if decrypt else cipher.encryptor()
    out = ctx.update(data) + ctx.finalize()
    log.debug("cfb %s: %d bytes", "decrypt" if decrypt else "encrypt", len(out))
    return out


def cfb_encrypt(key: bytearray | bytes, iv: bytes, plaintext: bytes) -> bytes:
    return transform(key, iv, plaintext)


def cfb_decrypt(key: bytearray | bytes, iv: bytes, ciphertext: bytes) -> bytes:
    return transform(key, iv, ciphertext, decrypt=True)
