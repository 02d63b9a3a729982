from sqlalchemy import Column, String, Float, Boolean, ForeignKey

from app.database import Base


class DriverEvaluation(Base):
    __tablename__ = "driver_evaluations"

    id = Column(String, primary_key=True)
    transport_id = Column(String, ForeignKey("transports.id"), nullable=False, unique=True)
    driver_id = Column(String, ForeignKey("drivers.id"), nullable=False)
    evaluator_name = Column(String, nullable=True)
    postura_profissional = Column(String, nullable=False)
    pontualidade = Column(String, nullable=False)
    apresentacao_pessoal = Column(String, nullable=False)
    cordialidade = Column(String, nullable=False)
    cumpriu_processo = Column(String, nullable=False)
    average_score = Column(Float, nullable=False)
    had_incident = Column(Boolean, nullable=False, default=False)
    incident_description = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
