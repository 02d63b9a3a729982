import logging

from fastapi import APIRouter
from sqlalchemy import func, select

from app.database import async_session
from app.models.client import DeliveryLocation
from app.models.driver import Driver
from app.models.driver_evaluation import DriverEvaluation
from app.models.status import TransportStatus
from app.models.transport import Transport
from app.schemas.driver_evaluation import (
    DriverEvaluationCreate,
    DriverEvaluationResponse,
    DriverRankingEntry,
)
from app.schemas.transport import TransportResponse
from app.services.entity_store import get_or_404, names_by_id, new_row
from app.services.evaluation_scoring import CRITERIA, compute_score
from app.utils.exceptions import AppException
from app.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/driver-evaluations", tags=["driver-evaluations"])


async def _transports_with_relations(session, transports) -> list[dict]:
    drivers = await names_by_id(session, Driver, {t.driver_id for t in transports})
    locations = await names_by_id(session, DeliveryLocation, {t.delivery_location_id for t in transports})

    data = []
    for t in transports:
        item = TransportResponse.model_validate(t).model_dump()
        item["driver"] = drivers.get(t.driver_id)
        item["delivery_location"] = locations.get(t.delivery_location_id)
        data.append(item)
    return data


async def _evaluations_with_relations(session, evaluations) -> list[dict]:
    transport_ids = {e.transport_id for e in evaluations}
    transports = {}
    if transport_ids:
        result = await session.execute(select(Transport).where(Transport.id.in_(transport_ids)))
        transports = {t.id: t for t in result.scalars().all()}
    drivers = await names_by_id(session, Driver, {e.driver_id for e in evaluations})
    locations = await names_by_id(session, DeliveryLocation, {t.delivery_location_id for t in transports.values()})

    data = []
    for e in evaluations:
        item = DriverEvaluationResponse.model_validate(e).model_dump()
        transport = transports.get(e.transport_id)
        item["transport"] = (
            {"id": transport.id, "request_number": transport.request_number, "vehicle_chassi": transport.vehicle_chassi}
            if transport else None
        )
        item["driver"] = drivers.get(e.driver_id)
        item["delivery_location"] = locations.get(transport.delivery_location_id) if transport else None
        data.append(item)
    return data


@router.get("")
async def list_evaluations(driver_id: str | None = None):
    async with async_session() as session:
        stmt = select(DriverEvaluation).order_by(DriverEvaluation.created_at.desc())
        if driver_id:
            stmt = stmt.where(DriverEvaluation.driver_id == driver_id)
        result = await session.execute(stmt)
        data = await _evaluations_with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/pending-transports")
async def pending_transports():
    """Delivered transports with a driver that nobody has evaluated yet."""
    async with async_session() as session:
        evaluated = select(DriverEvaluation.transport_id)
        result = await session.execute(
            select(Transport)
            .where(
                Transport.status == TransportStatus.ENTREGUE.value,
                Transport.driver_id.is_not(None),
                Transport.id.not_in(evaluated),
            )
            .order_by(Transport.created_at.desc())
        )
        data = await _transports_with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/ranking")
async def driver_ranking():
    async with async_session() as session:
        result = await session.execute(
            select(
                DriverEvaluation.driver_id,
                Driver.name,
                func.avg(DriverEvaluation.average_score).label("average_score"),
                func.count(DriverEvaluation.id).label("evaluations"),
            )
            .join(Driver, Driver.id == DriverEvaluation.driver_id)
            .group_by(DriverEvaluation.driver_id, Driver.name)
            .order_by(func.avg(DriverEvaluation.average_score).desc(), Driver.name)
        )
        data = [
            DriverRankingEntry(
                driver_id=row.driver_id,
                driver_name=row.name,
                average_score=round(float(row.average_score), 1),
                evaluations=row.evaluations,
            ).model_dump()
            for row in result
        ]
    return success_response(data=data)


@router.post("", status_code=201)
async def create_evaluation(payload: DriverEvaluationCreate):
    score = compute_score(
        {c: getattr(payload, c) for c in CRITERIA},
        had_incident=payload.had_incident,
        manual_score=payload.manual_score,
        incident_description=payload.incident_description,
    )

    async with async_session() as session:
        transport = await get_or_404(session, Transport, payload.transport_id, "Transporte não encontrado")
        if transport.status != TransportStatus.ENTREGUE.value:
            raise AppException("Somente transportes entregues podem ser avaliados")
        if not transport.driver_id:
            raise AppException("Transporte sem motorista não pode ser avaliado")
        existing = await session.execute(
            select(DriverEvaluation.id).where(DriverEvaluation.transport_id == transport.id)
        )
        if existing.first() is not None:
            raise AppException("Este transporte já foi avaliado")

        data = payload.model_dump(exclude={"manual_score"})
        if not payload.had_incident:
            data["incident_description"] = None
        evaluation = new_row(DriverEvaluation, {
            **data,
            "driver_id": transport.driver_id,
            "average_score": score,
        })
        session.add(evaluation)
        await session.commit()
        await session.refresh(evaluation)
        result = DriverEvaluationResponse.model_validate(evaluation).model_dump()

    logger.info("Driver %s evaluated %.1f on transport %s", transport.driver_id, score, transport.id)
    return success_response(data=result)
