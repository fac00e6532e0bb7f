import os

from utils.dataModels import IV_SIZE
from utils.errors import RandomnessUnavailable

def generate_iv() -> bytes:
    try:
        iv = os.urandom(IV_SIZE)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailable(f"cannot read system entropy source: {exc}") from exc
    if len(iv) != IV_SIZE:
        raise RandomnessUnavailable(f"entropy source returned {len(iv)} bytes")
    return iv
