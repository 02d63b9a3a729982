from app.models.yard import Yard
from app.routers.crud import build_crud_router
from app.schemas.yard import YardCreate, YardResponse, YardUpdate

router = build_crud_router(
    prefix="/yards",
    tag="yards",
    model=Yard,
    create_schema=YardCreate,
    update_schema=YardUpdate,
    response_schema=YardResponse,
    not_found="Pátio não encontrado",
)
