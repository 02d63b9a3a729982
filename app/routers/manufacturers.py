from app.models.manufacturer import Manufacturer
from app.routers.crud import build_crud_router
from app.schemas.manufacturer import ManufacturerCreate, ManufacturerResponse, ManufacturerUpdate

router = build_crud_router(
    prefix="/manufacturers",
    tag="manufacturers",
    model=Manufacturer,
    create_schema=ManufacturerCreate,
    update_schema=ManufacturerUpdate,
    response_schema=ManufacturerResponse,
    not_found="Montadora não encontrada",
)
