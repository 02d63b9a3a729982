from sqlalchemy import Column, String, ForeignKey, JSON

from app.database import Base
from app.models.checkpoint import CheckinMixin, CheckoutMixin


class Transport(CheckinMixin, CheckoutMixin, Base):
    __tablename__ = "transports"

    id = Column(String, primary_key=True)
    request_number = Column(String(20), nullable=False, unique=True)
    vehicle_chassi = Column(String(50), ForeignKey("vehicles.chassi"), nullable=False, index=True)
    client_id = Column(String, ForeignKey("clients.id"), nullable=False)
    origin_yard_id = Column(String, ForeignKey("yards.id"), nullable=False)
    delivery_location_id = Column(String, ForeignKey("delivery_locations.id"), nullable=False)
    driver_id = Column(String, ForeignKey("drivers.id"), nullable=True)
    status = Column(String, nullable=False, default="pendente")
    delivery_date = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    documents = Column(JSON, nullable=True)
    driver_assigned_at = Column(String, nullable=True)
    transit_started_at = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
