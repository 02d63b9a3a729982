from sqlalchemy import Column, String, Integer

from app.database import Base

TRANSPORT_COUNTER_ID = "transport_counter"


class RequestCounter(Base):
    __tablename__ = "request_counter"

    id = Column(String, primary_key=True, default=TRANSPORT_COUNTER_ID)
    last_number = Column(Integer, nullable=False, default=0)
