from sqlalchemy import Column, String, ForeignKey

from app.database import Base


class DriverNotification(Base):
    __tablename__ = "driver_notifications"

    id = Column(String, primary_key=True)
    yard_id = Column(String, ForeignKey("yards.id"), nullable=False)
    delivery_location_id = Column(String, ForeignKey("delivery_locations.id"), nullable=False)
    departure_date = Column(String, nullable=False)
    driver_id = Column(String, ForeignKey("drivers.id"), nullable=False)
    status = Column(String, nullable=False, default="pendente")
    responded_at = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
