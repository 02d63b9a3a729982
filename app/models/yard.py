from sqlalchemy import Column, String, Integer, Boolean

from app.database import Base
from app.models.address import AddressMixin


class Yard(AddressMixin, Base):
    __tablename__ = "yards"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    latitude = Column(String, nullable=True)
    longitude = Column(String, nullable=True)
    phone = Column(String(20), nullable=True)
    max_vehicles = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)
