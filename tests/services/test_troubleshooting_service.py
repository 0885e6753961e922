"""
Tests for services.troubleshooting (TroubleshootingService)

Test Coverage:
- Session lifecycle: create, get, delete
- Turns are saved and report transition + view
- Machine selection by machine id
- Unknown session / machine errors
"""
import pytest

from coffee_helper.execution.schemas.state_machine import (
    WalkthroughStatus,
    WalkthroughTransition,
)
from coffee_helper.execution.walkthrough import WalkthroughEngine
from coffee_helper.repositories.machine import StaticMachineRepository
from coffee_helper.repositories.session import InMemorySessionRepository
from coffee_helper.services.exceptions import MachineNotFoundError, SessionNotFoundError
from coffee_helper.services.troubleshooting import TroubleshootingService


@pytest.fixture
def sessions():
    return InMemorySessionRepository()


@pytest.fixture
def service(sessions, sample_store, sample_catalog):
    return TroubleshootingService(
        sessions, WalkthroughEngine(sample_store, sample_catalog), StaticMachineRepository()
    )


def test_create_session_starts_at_entry_point(service):
    session = service.create_session()

    turn = service.view(session.session_id)
    assert turn.transition == WalkthroughTransition.HOLD
    assert turn.view.step_id == "symptom-start"
    assert turn.view.status == WalkthroughStatus.AT_QUESTION


def test_answer_is_persisted(service, sessions):
    session_id = service.create_session().session_id

    turn = service.answer(session_id, 1)

    assert turn.transition == WalkthroughTransition.ADVANCE
    assert turn.view.step_id == "q-no-coffee-water"
    stored = sessions.get(session_id)
    assert stored.current_step_id == "q-no-coffee-water"
    assert stored.history == ["symptom-start"]


def test_back_and_restart(service):
    session_id = service.create_session().session_id
    service.answer(session_id, 1)
    service.answer(session_id, 0)

    back = service.back(session_id)
    restart = service.restart(session_id)

    assert back.transition == WalkthroughTransition.BACK
    assert back.view.step_id == "q-no-coffee-water"
    assert restart.transition == WalkthroughTransition.RESTART
    assert restart.session.history == []


def test_select_machine_by_id(service):
    session_id = service.create_session().session_id
    service.answer(session_id, 0)
    service.answer(session_id, 0)

    turn = service.select_machine(session_id, "machine-003")

    assert turn.session.selected_machine.label == "Gaggia Classic Pro"
    assert turn.view.guide.id == "guide-003"
    assert turn.transition == WalkthroughTransition.HOLD


def test_clear_machine_selection(service):
    session_id = service.create_session().session_id
    service.select_machine(session_id, "machine-001")

    turn = service.select_machine(session_id, None)

    assert turn.session.selected_machine is None


def test_unknown_machine(service):
    session_id = service.create_session().session_id

    with pytest.raises(MachineNotFoundError):
        service.select_machine(session_id, "machine-999")


@pytest.mark.parametrize("action", ["view", "back", "restart"])
def test_unknown_session(service, action):
    with pytest.raises(SessionNotFoundError):
        getattr(service, action)("no-such-session")


def test_delete_session(service):
    session_id = service.create_session().session_id

    assert service.delete_session(session_id) is True
    assert service.get_session(session_id) is None
    assert service.delete_session(session_id) is False
