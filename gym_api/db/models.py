"""SQLAlchemy models, one table per record collection."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, String, Text, JSON

from .session import Base


class MemberRow(Base):
    __tablename__ = "members"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    join_date = Column(Text, nullable=False)
    membership_type = Column(Text, nullable=False)
    created_at = Column(BigInteger, nullable=False, index=True)
    updated_at = Column(BigInteger, nullable=True)


class GymClassRow(Base):
    __tablename__ = "gym_classes"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    start_time = Column(Text, nullable=False, index=True)
    end_time = Column(Text, nullable=False)
    # plain string on purpose: classes may point at trainers that do not exist
    trainer_id = Column(String(64), nullable=False, index=True)
    capacity = Column(Integer, nullable=False)
    created_at = Column(BigInteger, nullable=False, index=True)
    updated_at = Column(BigInteger, nullable=True)


class TrainerRow(Base):
    __tablename__ = "trainers"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    specializations = Column(JSON, nullable=False, default=list)
    created_at = Column(BigInteger, nullable=False, index=True)
    updated_at = Column(BigInteger, nullable=True)
