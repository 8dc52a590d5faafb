"""Tests for the edit-mode session gate."""

from pathlib import Path

import pytest
from pagesmith.errors import CredentialTooShort, InvalidCredential, InvalidTransition
from pagesmith.session.gate import SessionGate
from pagesmith.session.models import GateState
from pagesmith.storage.store import CREDENTIAL_KEY, ELEVATED_KEY, LocalStore


@pytest.fixture
def gate(store) -> SessionGate:
    return SessionGate(store)


def _unlock(gate: SessionGate, credential: str = "admin") -> None:
    gate.open_prompt()
    gate.submit(credential)


class TestUnlock:
    def test_starts_locked(self, gate):
        assert gate.state is GateState.LOCKED
        assert not gate.is_editing
        assert not gate.is_elevated

    def test_correct_credential_unlocks_and_elevates(self, gate, store):
        gate.open_prompt()
        assert gate.state is GateState.PROMPT_OPEN
        gate.submit("admin")
        assert gate.state is GateState.UNLOCKED
        assert store.get(ELEVATED_KEY) == "true"

    def test_wrong_credential_keeps_prompt_open(self, gate, store):
        gate.open_prompt()
        with pytest.raises(InvalidCredential):
            gate.submit("guess")
        assert gate.state is GateState.PROMPT_OPEN
        assert store.get(ELEVATED_KEY) is None

    def test_retry_after_failure(self, gate):
        gate.open_prompt()
        with pytest.raises(InvalidCredential):
            gate.submit("guess")
        gate.submit("admin")
        assert gate.is_editing

    def test_configured_default_credential(self, store):
        gate = SessionGate(store, default_credential="letmein")
        gate.open_prompt()
        with pytest.raises(InvalidCredential):
            gate.submit("admin")
        gate.submit("letmein")
        assert gate.is_editing

    def test_stored_credential_overrides_default(self, store):
        store.set(CREDENTIAL_KEY, "s3cret")
        gate = SessionGate(store)
        gate.open_prompt()
        with pytest.raises(InvalidCredential):
            gate.submit("admin")

    def test_cancel_prompt(self, gate):
        gate.open_prompt()
        gate.cancel_prompt()
        assert gate.state is GateState.LOCKED


class TestElevation:
    def test_exit_keeps_elevated_flag(self, gate):
        _unlock(gate)
        gate.exit_edit_mode()
        assert gate.state is GateState.LOCKED
        assert gate.is_elevated

    def test_elevated_enters_without_prompt(self, gate):
        _unlock(gate)
        gate.exit_edit_mode()
        assert gate.enter_edit_mode() is GateState.UNLOCKED

    def test_not_elevated_enter_opens_prompt(self, gate):
        assert gate.enter_edit_mode() is GateState.PROMPT_OPEN

    def test_elevated_accepts_any_submission(self, store):
        store.set(ELEVATED_KEY, "true")
        gate = SessionGate(store)
        gate.open_prompt()
        gate.submit("anything")
        assert gate.is_editing

    def test_elevation_survives_new_session(self, tmp_path: Path):
        path = tmp_path / "store.json"
        _unlock(SessionGate(LocalStore(path)))
        fresh = SessionGate(LocalStore(path))
        assert fresh.enter_edit_mode() is GateState.UNLOCKED

    def test_elevation_survives_rotation(self, gate):
        _unlock(gate)
        gate.rotate_credential("brand-new")
        gate.exit_edit_mode()
        assert gate.enter_edit_mode() is GateState.UNLOCKED


class TestRotateCredential:
    def test_rotates(self, gate, store):
        _unlock(gate)
        gate.rotate_credential("abc")
        assert store.get(CREDENTIAL_KEY) == "abc"
        assert gate.credential == "abc"

    @pytest.mark.parametrize("value", ["", "a", "ab"])
    def test_too_short_rejected(self, gate, store, value):
        _unlock(gate)
        with pytest.raises(CredentialTooShort):
            gate.rotate_credential(value)
        assert store.get(CREDENTIAL_KEY) is None
        assert gate.credential == "admin"

    def test_requires_unlocked(self, gate):
        with pytest.raises(InvalidTransition):
            gate.rotate_credential("whatever")


class TestInvalidTransitions:
    def test_submit_while_locked(self, gate):
        with pytest.raises(InvalidTransition):
            gate.submit("admin")

    def test_exit_while_locked(self, gate):
        with pytest.raises(InvalidTransition):
            gate.exit_edit_mode()

    def test_open_prompt_twice(self, gate):
        gate.open_prompt()
        with pytest.raises(InvalidTransition):
            gate.open_prompt()
