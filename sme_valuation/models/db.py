from sqlalchemy import Column, String, Text, DateTime, Float, Integer
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone
import uuid

Base = declarative_base()


class ValuationRecord(Base):
    __tablename__ = "valuation_records"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    sector = Column(String, nullable=False)
    enterprise_value = Column(Float, nullable=True)
    score = Column(Integer, nullable=True)
    valuation_json = Column(Text, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
