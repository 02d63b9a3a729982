from app.models.driver import Driver
from app.routers.crud import build_crud_router
from app.schemas.driver import DriverCreate, DriverResponse, DriverUpdate

router = build_crud_router(
    prefix="/drivers",
    tag="drivers",
    model=Driver,
    create_schema=DriverCreate,
    update_schema=DriverUpdate,
    response_schema=DriverResponse,
    not_found="Motorista não encontrado",
)
