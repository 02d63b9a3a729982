from sqlalchemy import Column, String, ForeignKey

from app.database import Base
from app.models.checkpoint import CheckinMixin, CheckoutMixin


class Collect(CheckinMixin, CheckoutMixin, Base):
    __tablename__ = "collects"

    id = Column(String, primary_key=True)
    vehicle_chassi = Column(String(50), nullable=False, index=True)
    manufacturer_id = Column(String, ForeignKey("manufacturers.id"), nullable=False)
    yard_id = Column(String, ForeignKey("yards.id"), nullable=False)
    driver_id = Column(String, ForeignKey("drivers.id"), nullable=True)
    status = Column(String, nullable=False, default="em_transito")
    collect_date = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    checkout_approved_by_id = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
