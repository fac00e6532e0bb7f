import os

from pathlib import Path
from typing import Union

from utils.dataModels import TMP_SUFFIX

Password = Union[str, bytes, bytearray]


def password_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


def wipe(buf: bytearray) -> None:
    """Overwrite a mutable buffer with zeros (best effort, Python may hold copies)."""
    for i in range(len(buf)):
        buf[i] = 0


def tmp_path_for(path: Path) -> Path:
    return path.with_name(f"{path.name}.{os.getpid()}{TMP_SUFFIX}")


def check_mode(mode: int) -> int:
    if mode & 0o002:
        raise ValueError(f"refusing world-writable output mode {mode:#o}")
    if mode < 0 or mode > 0o7777:
        raise ValueError(f"invalid file mode {mode:#o}")
    return mode
