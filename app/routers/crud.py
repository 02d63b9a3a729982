from fastapi import APIRouter, Response

from app.database import async_session
from app.services.entity_store import create_row, delete_row, get_or_404, list_rows, update_row
from app.utils.response import success_response


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    model,
    create_schema,
    update_schema,
    response_schema,
    not_found: str,
    with_create: bool = True,
) -> APIRouter:
    """List / get / create / patch / delete routes for a record with no workflow."""
    router = APIRouter(prefix=prefix, tags=[tag])

    def dump(row) -> dict:
        return response_schema.model_validate(row).model_dump()

    @router.get("")
    async def list_items():
        async with async_session() as session:
            rows = await list_rows(session, model)
            data = [dump(r) for r in rows]
        return success_response(data=data)

    @router.get("/{item_id}")
    async def get_item(item_id: str):
        async with async_session() as session:
            row = await get_or_404(session, model, item_id, not_found)
            data = dump(row)
        return success_response(data=data)

    if with_create:
        @router.post("", status_code=201)
        async def create_item(payload: create_schema):
            async with async_session() as session:
                row = await create_row(session, model, payload.model_dump())
                data = dump(row)
            return success_response(data=data)

    @router.patch("/{item_id}")
    async def update_item(item_id: str, payload: update_schema):
        async with async_session() as session:
            row = await get_or_404(session, model, item_id, not_found)
            row = await update_row(session, row, payload.model_dump(exclude_unset=True))
            data = dump(row)
        return success_response(data=data)

    @router.delete("/{item_id}", status_code=204)
    async def delete_item(item_id: str):
        async with async_session() as session:
            row = await get_or_404(session, model, item_id, not_found)
            await delete_row(session, row)
        return Response(status_code=204)

    return router
