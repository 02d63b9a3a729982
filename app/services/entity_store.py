"""Plain persistence helpers shared by the CRUD routers."""
import uuid

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.timestamps import now_iso


async def list_rows(session: AsyncSession, model, *criteria, order_by=None) -> list:
    stmt = select(model).where(*criteria)
    stmt = stmt.order_by(order_by if order_by is not None else model.created_at.desc())
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_or_404(session: AsyncSession, model, key: str, not_found: str):
    row = await session.get(model, key)
    if row is None:
        raise HTTPException(status_code=404, detail=not_found)
    return row


def new_row(model, data: dict):
    """Build a row with a fresh UUID and creation timestamp."""
    return model(id=str(uuid.uuid4()), created_at=now_iso(), **data)


async def create_row(session: AsyncSession, model, data: dict):
    row = new_row(model, data)
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row


def assign(row, data: dict) -> None:
    for key, value in data.items():
        setattr(row, key, value)


async def update_row(session: AsyncSession, row, data: dict):
    assign(row, data)
    await session.commit()
    await session.refresh(row)
    return row


async def delete_row(session: AsyncSession, row) -> None:
    await session.delete(row)
    await session.commit()


async def names_by_id(session: AsyncSession, model, ids) -> dict[str, dict]:
    """``{id: {"id", "name"}}`` for the given ids, used to embed related records."""
    ids = {i for i in ids if i is not None}
    if not ids:
        return {}
    result = await session.execute(select(model.id, model.name).where(model.id.in_(ids)))
    return {row.id: {"id": row.id, "name": row.name} for row in result}
