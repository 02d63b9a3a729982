from sqlalchemy import Column, String, ForeignKey

from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    chassi = Column(String(50), primary_key=True)
    client_id = Column(String, ForeignKey("clients.id"), nullable=True)
    yard_id = Column(String, ForeignKey("yards.id"), nullable=True)
    manufacturer_id = Column(String, ForeignKey("manufacturers.id"), nullable=True)
    color = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pre_estoque")
    collect_date_time = Column(String, nullable=True)
    yard_entry_date_time = Column(String, nullable=True)
    dispatch_date_time = Column(String, nullable=True)
    delivery_date_time = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
