from datetime import date
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_expense_amount_positive"),
        CheckConstraint(
            "(payer_person_id IS NULL) <> (payer_subgroup_id IS NULL)",
            name="ck_expense_single_payer",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    occasion_id = Column(Integer, ForeignKey("occasions.id", ondelete="CASCADE"), nullable=False, index=True)
    payer_person_id = Column(Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=True)
    payer_subgroup_id = Column(Integer, ForeignKey("subgroups.id", ondelete="CASCADE"), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False, default="general")
    note = Column(String, nullable=True)
    date = Column(Date, nullable=False, default=date.today)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    splits = relationship(
        "ExpenseSplit",
        back_populates="expense",
        cascade="all, delete-orphan",
        lazy="selectin"
    )
