from fastapi import APIRouter, Response
from sqlalchemy import select

from app.database import async_session
from app.models.collect import Collect
from app.models.driver import Driver
from app.models.manufacturer import Manufacturer
from app.models.user import User
from app.models.yard import Yard
from app.schemas.collect import CollectCreate, CollectResponse, CollectUpdate
from app.services import collect_service
from app.services.entity_store import delete_row, names_by_id
from app.utils.response import success_response

router = APIRouter(prefix="/collects", tags=["collects"])

RECENT_LIMIT = 5


async def _approvers_by_id(session, ids: set) -> dict:
    ids = {i for i in ids if i is not None}
    if not ids:
        return {}
    result = await session.execute(
        select(User.id, User.username, User.first_name, User.last_name).where(User.id.in_(ids))
    )
    return {
        row.id: {"id": row.id, "username": row.username, "first_name": row.first_name, "last_name": row.last_name}
        for row in result
    }


async def _with_relations(session, collects) -> list[dict]:
    manufacturers = await names_by_id(session, Manufacturer, {c.manufacturer_id for c in collects})
    yards = await names_by_id(session, Yard, {c.yard_id for c in collects})
    drivers = await names_by_id(session, Driver, {c.driver_id for c in collects})
    approvers = await _approvers_by_id(session, {c.checkout_approved_by_id for c in collects})

    data = []
    for c in collects:
        item = CollectResponse.model_validate(c).model_dump()
        item["manufacturer"] = manufacturers.get(c.manufacturer_id)
        item["yard"] = yards.get(c.yard_id)
        item["driver"] = drivers.get(c.driver_id)
        item["checkout_approved_by"] = approvers.get(c.checkout_approved_by_id)
        data.append(item)
    return data


@router.get("")
async def list_collects():
    async with async_session() as session:
        result = await session.execute(select(Collect).order_by(Collect.created_at.desc()))
        data = await _with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/recent")
async def recent_collects():
    async with async_session() as session:
        result = await session.execute(
            select(Collect).order_by(Collect.created_at.desc()).limit(RECENT_LIMIT)
        )
        data = await _with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/by-chassi/{chassi}")
async def collects_by_chassi(chassi: str):
    async with async_session() as session:
        result = await session.execute(
            select(Collect).where(Collect.vehicle_chassi == chassi).order_by(Collect.created_at.desc())
        )
        data = await _with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/{collect_id}")
async def get_collect(collect_id: str):
    async with async_session() as session:
        collect = await collect_service.get_collect(session, collect_id)
        data = (await _with_relations(session, [collect]))[0]
    return success_response(data=data)


@router.post("", status_code=201)
async def create_collect(payload: CollectCreate):
    async with async_session() as session:
        collect = await collect_service.create_collect(session, payload)
        data = CollectResponse.model_validate(collect).model_dump()
    return success_response(data=data)


@router.patch("/{collect_id}")
async def update_collect(collect_id: str, payload: CollectUpdate):
    async with async_session() as session:
        collect = await collect_service.update_collect(session, collect_id, payload)
        data = CollectResponse.model_validate(collect).model_dump()
    return success_response(data=data)


@router.delete("/{collect_id}", status_code=204)
async def delete_collect(collect_id: str):
    async with async_session() as session:
        collect = await collect_service.get_collect(session, collect_id)
        await delete_row(session, collect)
    return Response(status_code=204)
