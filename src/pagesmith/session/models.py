"""Session gate data types."""

from enum import StrEnum

DEFAULT_CREDENTIAL = "admin"
MIN_CREDENTIAL_LENGTH = 3


class GateState(StrEnum):
    """Edit-mode gate states."""

    LOCKED = "locked"
    PROMPT_OPEN = "prompt_open"
    UNLOCKED = "unlocked"
