from sqlalchemy import Column, String, Boolean

from app.database import Base
from app.models.address import AddressMixin


class Driver(AddressMixin, Base):
    __tablename__ = "drivers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    cpf = Column(String(14), nullable=False, unique=True)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    birth_date = Column(String, nullable=True)
    modality = Column(String, nullable=False)
    cnh_type = Column(String(5), nullable=False)
    cnh_front_photo = Column(String, nullable=True)
    cnh_back_photo = Column(String, nullable=True)
    is_apto = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)
