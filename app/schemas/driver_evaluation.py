from typing import Literal

from pydantic import BaseModel, Field

RatingLevel = Literal["pessimo", "ruim", "regular", "bom", "excelente"]


class DriverEvaluationCreate(BaseModel):
    transport_id: str = Field(min_length=1)
    evaluator_name: str | None = None
    postura_profissional: RatingLevel
    pontualidade: RatingLevel
    apresentacao_pessoal: RatingLevel
    cordialidade: RatingLevel
    cumpriu_processo: RatingLevel
    had_incident: bool = False
    incident_description: str | None = None
    manual_score: float | None = None


class DriverEvaluationResponse(BaseModel):
    id: str
    transport_id: str
    driver_id: str
    evaluator_name: str | None = None
    postura_profissional: str
    pontualidade: str
    apresentacao_pessoal: str
    cordialidade: str
    cumpriu_processo: str
    average_score: float
    had_incident: bool
    incident_description: str | None = None
    created_at: str

    model_config = {"from_attributes": True}


class DriverRankingEntry(BaseModel):
    driver_id: str
    driver_name: str | None = None
    average_score: float
    evaluations: int
