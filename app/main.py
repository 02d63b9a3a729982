import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables, async_session
from app.dependencies import verify_api_key
from app.seed import seed_data
from app.routers.auth import router as auth_router
from app.routers.clients import (
    router as clients_router,
    client_locations_router,
    locations_router,
)
from app.routers.collects import router as collects_router
from app.routers.dashboard import router as dashboard_router
from app.routers.driver_evaluations import router as driver_evaluations_router
from app.routers.driver_notifications import router as driver_notifications_router
from app.routers.drivers import router as drivers_router
from app.routers.expense_settlements import (
    router as expense_settlements_router,
    items_router as expense_items_router,
)
from app.routers.manufacturers import router as manufacturers_router
from app.routers.portaria import router as portaria_router
from app.routers.role_permissions import router as role_permissions_router
from app.routers.transports import router as transports_router
from app.routers.users import router as users_router
from app.routers.vehicles import router as vehicles_router
from app.routers.yards import router as yards_router
from app.utils.exceptions import register_exception_handlers

VERSION = "0.1.0"

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    async with async_session() as session:
        await seed_data(session)
    yield


app = FastAPI(
    title="OTD Logistics API",
    description="Backend de logística para coleta, pátio, portaria e transporte de veículos novos",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

_api_key_dep = [Depends(verify_api_key)]

for _router in (
    auth_router,
    users_router,
    role_permissions_router,
    drivers_router,
    manufacturers_router,
    yards_router,
    clients_router,
    client_locations_router,
    locations_router,
    vehicles_router,
    collects_router,
    portaria_router,
    transports_router,
    driver_notifications_router,
    driver_evaluations_router,
    expense_settlements_router,
    expense_items_router,
    dashboard_router,
):
    app.include_router(_router, prefix="/api", dependencies=_api_key_dep)


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": "otd-logistics-api", "version": VERSION}, "message": None}
