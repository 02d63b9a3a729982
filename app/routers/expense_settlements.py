from fastapi import APIRouter, Response
from sqlalchemy import delete

from app.database import async_session
from app.models.driver import Driver
from app.models.expense_settlement import ExpenseSettlement, ExpenseSettlementItem
from app.models.status import SettlementStatus
from app.models.transport import Transport
from app.schemas.expense_settlement import (
    ExpenseItemCreate,
    ExpenseItemResponse,
    ExpenseItemUpdate,
    ExpenseSettlementCreate,
    ExpenseSettlementResponse,
    ExpenseSettlementUpdate,
    ReturnSettlementRequest,
)
from app.services.entity_store import create_row, delete_row, get_or_404, list_rows, update_row
from app.services.workflow import apply_transition
from app.utils.response import success_response
from app.utils.timestamps import now_iso

router = APIRouter(prefix="/expense-settlements", tags=["expense-settlements"])
items_router = APIRouter(prefix="/expense-settlement-items", tags=["expense-settlements"])

NOT_FOUND = "Prestação de contas não encontrada"


def _dump(settlement: ExpenseSettlement) -> dict:
    return ExpenseSettlementResponse.model_validate(settlement).model_dump()


async def _detail(session, settlement: ExpenseSettlement) -> dict:
    transport = await session.get(Transport, settlement.transport_id)
    driver = await session.get(Driver, settlement.driver_id)
    items = await list_rows(
        session, ExpenseSettlementItem,
        ExpenseSettlementItem.settlement_id == settlement.id,
        order_by=ExpenseSettlementItem.created_at,
    )

    data = _dump(settlement)
    data["transport"] = (
        {"id": transport.id, "request_number": transport.request_number, "vehicle_chassi": transport.vehicle_chassi}
        if transport else None
    )
    data["driver"] = {"id": driver.id, "name": driver.name} if driver else None
    data["items"] = [ExpenseItemResponse.model_validate(i).model_dump() for i in items]
    data["total_amount"] = round(sum(i.amount for i in items), 2)
    return data


@router.get("")
async def list_settlements(status: str | None = None, driver_id: str | None = None):
    async with async_session() as session:
        criteria = []
        if status:
            criteria.append(ExpenseSettlement.status == status)
        if driver_id:
            criteria.append(ExpenseSettlement.driver_id == driver_id)
        rows = await list_rows(session, ExpenseSettlement, *criteria)
        data = [_dump(s) for s in rows]
    return success_response(data=data)


@router.get("/{settlement_id}")
async def get_settlement(settlement_id: str):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        data = await _detail(session, settlement)
    return success_response(data=data)


@router.post("", status_code=201)
async def create_settlement(payload: ExpenseSettlementCreate):
    async with async_session() as session:
        await get_or_404(session, Transport, payload.transport_id, "Transporte não encontrado")
        await get_or_404(session, Driver, payload.driver_id, "Motorista não encontrado")
        settlement = await create_row(session, ExpenseSettlement, {
            **payload.model_dump(),
            "status": SettlementStatus.PENDENTE.value,
        })
        data = _dump(settlement)
    return success_response(data=data)


@router.patch("/{settlement_id}")
async def update_settlement(settlement_id: str, payload: ExpenseSettlementUpdate):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        settlement = await update_row(session, settlement, payload.model_dump(exclude_unset=True))
        data = _dump(settlement)
    return success_response(data=data)


@router.delete("/{settlement_id}", status_code=204)
async def delete_settlement(settlement_id: str):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        await session.execute(
            delete(ExpenseSettlementItem).where(ExpenseSettlementItem.settlement_id == settlement_id)
        )
        await delete_row(session, settlement)
    return Response(status_code=204)


@router.post("/{settlement_id}/submit")
async def submit_settlement(settlement_id: str):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        apply_transition("settlement", "submit", settlement)
        settlement.submitted_at = now_iso()
        settlement.return_reason = None
        await session.commit()
        data = _dump(settlement)
    return success_response(data=data, message="Prestação de contas enviada")


@router.post("/{settlement_id}/return")
async def return_settlement(settlement_id: str, payload: ReturnSettlementRequest):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        apply_transition("settlement", "return", settlement)
        settlement.return_reason = payload.return_reason
        settlement.reviewed_at = now_iso()
        await session.commit()
        data = _dump(settlement)
    return success_response(data=data, message="Prestação de contas devolvida")


@router.post("/{settlement_id}/approve")
async def approve_settlement(settlement_id: str):
    async with async_session() as session:
        settlement = await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        apply_transition("settlement", "approve", settlement)
        now = now_iso()
        settlement.reviewed_at = now
        settlement.approved_at = now
        await session.commit()
        data = _dump(settlement)
    return success_response(data=data, message="Prestação de contas aprovada")


@router.get("/{settlement_id}/items")
async def list_items(settlement_id: str):
    async with async_session() as session:
        await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        rows = await list_rows(
            session, ExpenseSettlementItem,
            ExpenseSettlementItem.settlement_id == settlement_id,
            order_by=ExpenseSettlementItem.created_at,
        )
        data = [ExpenseItemResponse.model_validate(i).model_dump() for i in rows]
    return success_response(data=data)


@router.post("/{settlement_id}/items", status_code=201)
async def create_item(settlement_id: str, payload: ExpenseItemCreate):
    async with async_session() as session:
        await get_or_404(session, ExpenseSettlement, settlement_id, NOT_FOUND)
        item = await create_row(session, ExpenseSettlementItem, {"settlement_id": settlement_id, **payload.model_dump()})
        data = ExpenseItemResponse.model_validate(item).model_dump()
    return success_response(data=data)


@items_router.patch("/{item_id}")
async def update_item(item_id: str, payload: ExpenseItemUpdate):
    async with async_session() as session:
        item = await get_or_404(session, ExpenseSettlementItem, item_id, "Item não encontrado")
        item = await update_row(session, item, payload.model_dump(exclude_unset=True))
        data = ExpenseItemResponse.model_validate(item).model_dump()
    return success_response(data=data)


@items_router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: str):
    async with async_session() as session:
        item = await get_or_404(session, ExpenseSettlementItem, item_id, "Item não encontrado")
        await delete_row(session, item)
    return Response(status_code=204)
