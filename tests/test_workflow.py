import pytest

from app.config import settings
from app.services.workflow import TRANSITIONS, WorkflowError, apply_transition, plan


class _Record:
    def __init__(self, status, chassi=None):
        self.id = "r-1"
        self.status = status
        self.chassi = chassi


def test_authorize_entry_moves_collect_and_vehicle():
    assert plan("collect", "authorize_entry", "em_transito") == ("aguardando_checkout", "em_estoque")


@pytest.mark.parametrize("status", ["aguardando_checkout", "finalizada"])
def test_authorize_entry_rejects_other_collect_statuses(status):
    with pytest.raises(WorkflowError) as exc:
        plan("collect", "authorize_entry", status)
    assert exc.value.status_code == 400


def test_authorize_exit_requires_vehicle_in_stock():
    assert plan("transport", "authorize_exit", "pendente", "em_estoque") == ("em_transito", "despachado")
    with pytest.raises(WorkflowError):
        plan("transport", "authorize_exit", "pendente", "pre_estoque")
    with pytest.raises(WorkflowError):
        plan("transport", "authorize_exit", "em_transito", "em_estoque")


def test_checkpoints_accept_any_transport_status():
    assert plan("transport", "checkin", "pendente") == ("aguardando_saida", "despachado")
    assert plan("transport", "checkout", "aguardando_saida") == ("entregue", "entregue")


def test_clear_targets_follow_settings(monkeypatch):
    assert plan("transport", "clear_checkin", "aguardando_saida") == ("pendente", "em_estoque")
    assert plan("transport", "clear_checkout", "entregue") == ("em_transito", "despachado")

    monkeypatch.setattr(settings, "clear_checkin_transport_status", "em_transito")
    monkeypatch.setattr(settings, "clear_checkout_vehicle_status", "em_estoque")
    assert plan("transport", "clear_checkin", "aguardando_saida") == ("em_transito", "em_estoque")
    assert plan("transport", "clear_checkout", "entregue") == ("em_transito", "em_estoque")


def test_settlement_transitions():
    assert plan("settlement", "submit", "pendente") == ("enviado", None)
    assert plan("settlement", "submit", "devolvido") == ("enviado", None)
    assert plan("settlement", "return", "enviado") == ("devolvido", None)
    assert plan("settlement", "approve", "enviado") == ("aprovado", None)
    with pytest.raises(WorkflowError):
        plan("settlement", "approve", "pendente")


def test_rejected_transition_leaves_records_untouched():
    collect = _Record("finalizada")
    vehicle = _Record("pre_estoque", chassi="9BWZZZ377VT004251")

    with pytest.raises(WorkflowError):
        apply_transition("collect", "authorize_entry", collect, vehicle)

    assert collect.status == "finalizada"
    assert vehicle.status == "pre_estoque"


def test_apply_transition_updates_record_and_vehicle():
    transport = _Record("pendente")
    vehicle = _Record("em_estoque", chassi="9BWZZZ377VT004251")

    assert apply_transition("transport", "authorize_exit", transport, vehicle) == "em_transito"
    assert vehicle.status == "despachado"


def test_unknown_event():
    assert ("transport", "teleport") not in TRANSITIONS
    with pytest.raises(ValueError):
        plan("transport", "teleport", "pendente")
