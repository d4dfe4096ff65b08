from datetime import date
from sqlalchemy import Column, Integer, Numeric, Date, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.sql import func
from app.db.session import Base

class Settlement(Base):
    __tablename__ = "settlements"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_settlement_amount_positive"),
    )

    id = Column(Integer, primary_key=True)
    occasion_id = Column(Integer, ForeignKey("occasions.id", ondelete="CASCADE"), nullable=False, index=True)
    from_person_id = Column(Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=True)
    from_subgroup_id = Column(Integer, ForeignKey("subgroups.id", ondelete="CASCADE"), nullable=True)
    to_person_id = Column(Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=True)
    to_subgroup_id = Column(Integer, ForeignKey("subgroups.id", ondelete="CASCADE"), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False, default=date.today)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
