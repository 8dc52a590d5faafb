"""Edit-mode gate backed by the local store.

The gate is a deterrent against casual visitors, not an access control
boundary.  Once the owner has unlocked it on a machine, the persisted
elevated flag lets every later entry into edit mode skip the prompt,
even after the credential is rotated.  Only clearing the store resets it.
"""

from __future__ import annotations

import logging

from pagesmith.errors import CredentialTooShort, InvalidCredential, InvalidTransition
from pagesmith.session.models import DEFAULT_CREDENTIAL, MIN_CREDENTIAL_LENGTH, GateState
from pagesmith.storage.store import CREDENTIAL_KEY, ELEVATED_KEY, LocalStore

logger = logging.getLogger(__name__)


class SessionGate:
    """State machine controlling whether edit affordances are active.

    Transitions::

        LOCKED      --open_prompt-->        PROMPT_OPEN
        LOCKED      --enter_edit_mode-->    UNLOCKED (elevated) | PROMPT_OPEN
        PROMPT_OPEN --submit (match)-->     UNLOCKED, elevated flag set
        PROMPT_OPEN --submit (mismatch)-->  PROMPT_OPEN, InvalidCredential
        PROMPT_OPEN --cancel_prompt-->      LOCKED
        UNLOCKED    --exit_edit_mode-->     LOCKED
    """

    def __init__(self, store: LocalStore, *, default_credential: str = DEFAULT_CREDENTIAL) -> None:
        self._store = store
        self._default_credential = default_credential
        self._state = GateState.LOCKED

    # ── Read-only views ──────────────────────────────────────────

    @property
    def state(self) -> GateState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return self._state is GateState.UNLOCKED

    @property
    def is_elevated(self) -> bool:
        return self._store.get(ELEVATED_KEY) == "true"

    @property
    def credential(self) -> str:
        return self._store.get(CREDENTIAL_KEY) or self._default_credential

    # ── Transitions ──────────────────────────────────────────────

    def _require(self, *states: GateState) -> None:
        if self._state not in states:
            allowed = ", ".join(s.value for s in states)
            raise InvalidTransition(f"gate is {self._state.value}; expected {allowed}")

    def open_prompt(self) -> None:
        self._require(GateState.LOCKED)
        self._state = GateState.PROMPT_OPEN

    def enter_edit_mode(self) -> GateState:
        """Unlock directly if elevated, otherwise open the prompt."""
        self._require(GateState.LOCKED)
        if self.is_elevated:
            logger.debug("Elevated flag set, entering edit mode without prompt")
            self._state = GateState.UNLOCKED
        else:
            self._state = GateState.PROMPT_OPEN
        return self._state

    def submit(self, credential: str) -> None:
        """Check a submitted credential against the stored one.

        Raises:
            InvalidCredential: On mismatch while not elevated; the prompt
                stays open.
        """
        self._require(GateState.PROMPT_OPEN)
        if credential != self.credential and not self.is_elevated:
            logger.info("Rejected edit-mode credential")
            raise InvalidCredential("incorrect password")
        # Flag first: a failed write leaves the gate in PROMPT_OPEN
        self._store.set(ELEVATED_KEY, "true")
        self._state = GateState.UNLOCKED
        logger.info("Edit mode unlocked")

    def cancel_prompt(self) -> None:
        self._require(GateState.PROMPT_OPEN)
        self._state = GateState.LOCKED

    def exit_edit_mode(self) -> None:
        """Lock the gate; the elevated flag is kept."""
        self._require(GateState.UNLOCKED)
        self._state = GateState.LOCKED

    def rotate_credential(self, new_credential: str) -> None:
        """Replace the stored credential.

        Only available while unlocked.  Does not touch the elevated flag.

        Raises:
            CredentialTooShort: If shorter than the minimum length.
        """
        self._require(GateState.UNLOCKED)
        if len(new_credential) < MIN_CREDENTIAL_LENGTH:
            raise CredentialTooShort(
                f"password must be at least {MIN_CREDENTIAL_LENGTH} characters"
            )
        self._store.set(CREDENTIAL_KEY, new_credential)
        logger.info("Edit-mode password updated")
