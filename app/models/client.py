from sqlalchemy import Column, String, Boolean, ForeignKey, JSON

from app.database import Base
from app.models.address import AddressMixin


class Client(AddressMixin, Base):
    __tablename__ = "clients"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    cnpj = Column(String(20), nullable=True)
    latitude = Column(String, nullable=True)
    longitude = Column(String, nullable=True)
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    contact_name = Column(String, nullable=True)
    daily_cost = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)


class DeliveryLocation(AddressMixin, Base):
    __tablename__ = "delivery_locations"

    id = Column(String, primary_key=True)
    client_id = Column(String, ForeignKey("clients.id"), nullable=False)
    name = Column(String, nullable=False)
    cnpj = Column(String(20), nullable=True)
    responsible_name = Column(String, nullable=True)
    responsible_phone = Column(String(20), nullable=True)
    emails = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)
