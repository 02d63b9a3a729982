from sqlalchemy import Column, String, Boolean

from app.database import Base
from app.models.address import AddressMixin


class Manufacturer(AddressMixin, Base):
    __tablename__ = "manufacturers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    contact_name = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(String, nullable=False)
