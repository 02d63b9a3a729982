from sqlalchemy import Column, String, Float, ForeignKey

from app.database import Base


class ExpenseSettlement(Base):
    __tablename__ = "expense_settlements"

    id = Column(String, primary_key=True)
    transport_id = Column(String, ForeignKey("transports.id"), nullable=False)
    driver_id = Column(String, ForeignKey("drivers.id"), nullable=False)
    status = Column(String, nullable=False, default="pendente")
    notes = Column(String, nullable=True)
    return_reason = Column(String, nullable=True)
    submitted_at = Column(String, nullable=True)
    reviewed_at = Column(String, nullable=True)
    approved_at = Column(String, nullable=True)
    created_at = Column(String, nullable=False)


class ExpenseSettlementItem(Base):
    __tablename__ = "expense_settlement_items"

    id = Column(String, primary_key=True)
    settlement_id = Column(String, ForeignKey("expense_settlements.id"), nullable=False)
    expense_type = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    description = Column(String, nullable=True)
    receipt_photo = Column(String, nullable=True)
    expense_date = Column(String, nullable=True)
    created_at = Column(String, nullable=False)
