class FileCryptError(Exception):
    """Base class for every failure surfaced by encrypt/decrypt."""

    label = "error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.label)


class InputUnreadable(FileCryptError):
    label = "input unreadable"


class OutputUnwritable(FileCryptError):
    label = "output unwritable"


class RandomnessUnavailable(FileCryptError):
    label = "randomness unavailable"


class ContainerTooShort(FileCryptError, ValueError):
    label = "container too short"


class KeySizeInvalid(FileCryptError):
    """Derived key has the wrong length. Should never happen; indicates a bug."""

    label = "key size invalid"
