from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.session import Base

class Subgroup(Base):
    __tablename__ = "subgroups"

    id = Column(Integer, primary_key=True, index=True)
    occasion_id = Column(Integer, ForeignKey("occasions.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    members = relationship(
        "SubgroupMember",
        back_populates="subgroup",
        cascade="all, delete-orphan",
        lazy="selectin"
    )


class SubgroupMember(Base):
    __tablename__ = "subgroup_members"
    __table_args__ = (
        UniqueConstraint("subgroup_id", "person_id", name="uq_subgroup_member"),
    )

    id = Column(Integer, primary_key=True, index=True)
    subgroup_id = Column(Integer, ForeignKey("subgroups.id", ondelete="CASCADE"), nullable=False)
    person_id = Column(Integer, ForeignKey("people.id", ondelete="CASCADE"), nullable=False)

    subgroup = relationship("Subgroup", back_populates="members")
