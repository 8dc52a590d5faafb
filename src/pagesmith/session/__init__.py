"""Session domain — the edit-mode gate."""

from pagesmith.session.gate import SessionGate
from pagesmith.session.models import DEFAULT_CREDENTIAL, MIN_CREDENTIAL_LENGTH, GateState

__all__ = [
    "DEFAULT_CREDENTIAL",
    "MIN_CREDENTIAL_LENGTH",
    "GateState",
    "SessionGate",
]
