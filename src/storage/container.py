import logging
import os

from pathlib import Path
from typing import Tuple

from utils.dataModels import Container, DEFAULT_OUTPUT_MODE
from utils.errors import InputUnreadable, OutputUnwritable
from utils.helper import check_mode, tmp_path_for

log = logging.getLogger(__name__)


def read_input(path: Path) -> bytes:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise InputUnreadable(f"cannot read {path}: {exc.strerror or exc}") from exc
    log.debug("read %d bytes from %s", len(data), path)
    return data


def write_output(path: Path, data: bytes, mode: int = DEFAULT_OUTPUT_MODE) -> None:
    """Write to a temporary sibling, then move it over `path` in one step."""
    path = Path(path)
    check_mode(mode)
    tmp = tmp_path_for(path)
    try:
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except OSError as exc:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
        raise OutputUnwritable(f"cannot write {path}: {exc.strerror or exc}") from exc
    log.debug("wrote %d bytes to %s (mode %o)", len(data), path, mode)


def save_container(path: Path, iv: bytes, ct: bytes, mode: int = DEFAULT_OUTPUT_MODE) -> None:
    write_output(path, Container(iv=iv, ciphertext=ct).to_bytes(), mode)


def load_container(path: Path) -> Tuple[bytes, bytes]:
    c = Container.from_bytes(read_input(path))
    return c.iv, c.ciphertext
