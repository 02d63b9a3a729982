"""Vehicle lifecycle transitions.

Every status change of a collect, transport or expense settlement goes
through ``TRANSITIONS``. An entry names the statuses the record may be in,
the status it moves to and, for collects and transports, the status the
linked vehicle moves to. Targets may be callables so that the admin undo
statuses follow the current settings.

``apply_transition`` validates the record and the vehicle before touching
either of them, so a rejected event leaves both unchanged. Callers commit
once after applying, which makes the record and vehicle writes atomic.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable

from app.config import settings
from app.models.status import (
    CollectStatus,
    SettlementStatus,
    TransportStatus,
    VehicleStatus,
)
from app.utils.exceptions import AppException

logger = logging.getLogger(__name__)

StatusTarget = str | Callable[[], str]


class WorkflowError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


@dataclass(frozen=True)
class Transition:
    entity: str
    event: str
    target: StatusTarget
    sources: frozenset[str] | None = None
    vehicle_target: StatusTarget | None = None
    vehicle_sources: frozenset[str] | None = None
    rejection: str = "Transição de status não permitida"
    vehicle_rejection: str = "Status do veículo não permite esta operação"

    def resolve_target(self) -> str:
        return _resolve(self.target)

    def resolve_vehicle_target(self) -> str | None:
        if self.vehicle_target is None:
            return None
        return _resolve(self.vehicle_target)


def _resolve(target: StatusTarget) -> str:
    return target() if callable(target) else target


def _statuses(*values: Any) -> frozenset[str]:
    return frozenset(v.value for v in values)


TRANSITIONS: dict[tuple[str, str], Transition] = {
    (t.entity, t.event): t
    for t in [
        Transition(
            "collect", "create",
            target=CollectStatus.EM_TRANSITO.value,
        ),
        Transition(
            "collect", "authorize_entry",
            sources=_statuses(CollectStatus.EM_TRANSITO),
            target=CollectStatus.AGUARDANDO_CHECKOUT.value,
            vehicle_target=VehicleStatus.EM_ESTOQUE.value,
            rejection="Coleta precisa estar em trânsito para autorizar a entrada",
        ),
        Transition(
            "collect", "checkout",
            target=CollectStatus.FINALIZADA.value,
            vehicle_target=VehicleStatus.EM_ESTOQUE.value,
        ),
        Transition(
            "collect", "yard_entry",
            sources=_statuses(CollectStatus.EM_TRANSITO),
            target=CollectStatus.FINALIZADA.value,
        ),
        Transition(
            "transport", "authorize_exit",
            sources=_statuses(TransportStatus.PENDENTE),
            target=TransportStatus.EM_TRANSITO.value,
            vehicle_sources=_statuses(VehicleStatus.EM_ESTOQUE),
            vehicle_target=VehicleStatus.DESPACHADO.value,
            rejection="Transporte precisa estar pendente para autorizar a saída",
            vehicle_rejection="Veículo precisa estar em estoque para autorizar a saída",
        ),
        Transition(
            "transport", "checkin",
            target=TransportStatus.AGUARDANDO_SAIDA.value,
            vehicle_target=VehicleStatus.DESPACHADO.value,
        ),
        Transition(
            "transport", "checkout",
            target=TransportStatus.ENTREGUE.value,
            vehicle_target=VehicleStatus.ENTREGUE.value,
        ),
        Transition(
            "transport", "clear_checkin",
            target=lambda: settings.clear_checkin_transport_status,
            vehicle_target=VehicleStatus.EM_ESTOQUE.value,
        ),
        Transition(
            "transport", "clear_checkout",
            target=TransportStatus.EM_TRANSITO.value,
            vehicle_target=lambda: settings.clear_checkout_vehicle_status,
        ),
        Transition(
            "settlement", "submit",
            sources=_statuses(SettlementStatus.PENDENTE, SettlementStatus.DEVOLVIDO),
            target=SettlementStatus.ENVIADO.value,
            rejection="Prestação de contas só pode ser enviada quando pendente ou devolvida",
        ),
        Transition(
            "settlement", "return",
            sources=_statuses(SettlementStatus.ENVIADO),
            target=SettlementStatus.DEVOLVIDO.value,
            rejection="Prestação de contas só pode ser devolvida quando enviada",
        ),
        Transition(
            "settlement", "approve",
            sources=_statuses(SettlementStatus.ENVIADO),
            target=SettlementStatus.APROVADO.value,
            rejection="Prestação de contas só pode ser aprovada quando enviada",
        ),
    ]
}


def get_transition(entity: str, event: str) -> Transition:
    try:
        return TRANSITIONS[(entity, event)]
    except KeyError:
        raise ValueError(f"Unknown workflow event {entity}.{event}") from None


def plan(entity: str, event: str, current: str | None, vehicle_current: str | None = None) -> tuple[str, str | None]:
    """Return ``(new_status, new_vehicle_status)`` for an event, or raise WorkflowError.

    ``vehicle_current`` is only checked when the transition constrains the
    vehicle status.
    """
    transition = get_transition(entity, event)
    if transition.sources is not None and current not in transition.sources:
        raise WorkflowError(transition.rejection)
    if transition.vehicle_sources is not None and vehicle_current not in transition.vehicle_sources:
        raise WorkflowError(transition.vehicle_rejection)
    return transition.resolve_target(), transition.resolve_vehicle_target()


def apply_transition(entity: str, event: str, record, vehicle=None) -> str:
    """Move ``record`` (and ``vehicle`` when given) to the event's target statuses.

    Nothing is assigned unless every check passes. Returns the new record status.
    """
    vehicle_current = vehicle.status if vehicle is not None else None
    new_status, new_vehicle_status = plan(entity, event, record.status, vehicle_current)

    previous = record.status
    record.status = new_status
    if vehicle is not None and new_vehicle_status is not None:
        vehicle.status = new_vehicle_status

    logger.info(
        "%s %s: %s %s -> %s%s",
        entity, getattr(record, "id", "?"), event, previous, new_status,
        f" (vehicle {vehicle.chassi} {vehicle_current} -> {new_vehicle_status})"
        if vehicle is not None and new_vehicle_status is not None else "",
    )
    return new_status
