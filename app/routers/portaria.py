from fastapi import APIRouter

from app.database import async_session
from app.schemas.collect import CollectResponse
from app.schemas.transport import TransportResponse
from app.services import collect_service, transport_service
from app.utils.response import success_response

router = APIRouter(prefix="/portaria", tags=["portaria"])


@router.post("/authorize/{collect_id}")
async def authorize_entry(collect_id: str):
    async with async_session() as session:
        collect = await collect_service.authorize_entry(session, collect_id)
        data = CollectResponse.model_validate(collect).model_dump()
    return success_response(data=data, message="Entrada autorizada")


@router.post("/authorize-exit/{transport_id}")
async def authorize_exit(transport_id: str):
    async with async_session() as session:
        transport = await transport_service.authorize_exit(session, transport_id)
        data = TransportResponse.model_validate(transport).model_dump()
    return success_response(data=data, message="Saída autorizada")
