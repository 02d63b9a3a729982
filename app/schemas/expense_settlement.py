from typing import Literal

from pydantic import BaseModel, Field

ExpenseType = Literal[
    "pedagio", "combustivel", "alimentacao", "hospedagem", "manutencao",
    "multa", "estacionamento", "lavagem", "outros",
]


class ExpenseSettlementCreate(BaseModel):
    transport_id: str = Field(min_length=1)
    driver_id: str = Field(min_length=1)
    notes: str | None = None


class ExpenseSettlementUpdate(BaseModel):
    notes: str | None = None


class ReturnSettlementRequest(BaseModel):
    return_reason: str = Field(min_length=3)


class ExpenseSettlementResponse(BaseModel):
    id: str
    transport_id: str
    driver_id: str
    status: str
    notes: str | None = None
    return_reason: str | None = None
    submitted_at: str | None = None
    reviewed_at: str | None = None
    approved_at: str | None = None
    created_at: str

    model_config = {"from_attributes": True}


class ExpenseItemCreate(BaseModel):
    expense_type: ExpenseType
    amount: float = Field(gt=0)
    description: str | None = None
    receipt_photo: str | None = None
    expense_date: str | None = None


class ExpenseItemUpdate(BaseModel):
    expense_type: ExpenseType | None = None
    amount: float | None = Field(default=None, gt=0)
    description: str | None = None
    receipt_photo: str | None = None
    expense_date: str | None = None


class ExpenseItemResponse(BaseModel):
    id: str
    settlement_id: str
    expense_type: str
    amount: float
    description: str | None = None
    receipt_photo: str | None = None
    expense_date: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
