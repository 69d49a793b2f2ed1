# app/system_models/sequence_model/sequence_model.py
from sqlalchemy import Column, Integer, String

from app.database.connection import Base


class SequenceCounter(Base):
    """Named monotonic counters, bumped with UPDATE ... RETURNING."""

    __tablename__ = "sequence_counters"

    name = Column(String, primary_key=True)
    value = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<SequenceCounter {self.name}={self.value}>"
