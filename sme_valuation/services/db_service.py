import json
import os
import logging
import uuid
from datetime import datetime, timezone
from sqlalchemy import create_engine, desc
from sqlalchemy.orm import sessionmaker
from pydantic import TypeAdapter, ValidationError

from sme_valuation.models.db import Base, ValuationRecord
from sme_valuation.models.report import (
    ComparisonRow, MethodValues, SavedValuation, ValuationComparison, ValuationSummary,
)
from sme_valuation.models.request import CompanyFinancialProfile
from sme_valuation.models.valuations import ValuationResult
from sme_valuation.valuation.formatting import format_abbreviated, format_currency
from sme_valuation.valuation.reference_data import get_sector

logger = logging.getLogger(__name__)

_saved_list = TypeAdapter(list[SavedValuation])


class InvalidImportError(ValueError):
    """Raised when an import payload is not a JSON array of saved valuations."""


def _as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def summarize_result(result: ValuationResult) -> ValuationSummary:
    return ValuationSummary(
        enterprise_value=result.enterprise_value,
        equity_value=result.equity_value,
        range=result.range,
        methodologies=MethodValues(
            multiples=result.methodologies.multiples.value,
            dcf=result.methodologies.dcf.value,
            asset=result.methodologies.asset.value,
        ),
        score=result.investment_score.score,
        rating=result.investment_score.rating,
        wacc=result.wacc,
    )


class HistoryService:
    def __init__(self, database_url: str | None = None, limit: int | None = None):
        url = database_url or os.getenv("DATABASE_URL", "sqlite:///./valuations.db")
        self.limit = limit if limit is not None else int(os.getenv("HISTORY_LIMIT", "20"))
        self.engine = create_engine(url, echo=False)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def save_valuation(
        self,
        profile: CompanyFinancialProfile,
        result: ValuationResult,
        name: str | None = None,
    ) -> SavedValuation:
        saved = SavedValuation(
            id=str(uuid.uuid4()),
            name=name or profile.company_name or f"Valuation {result.computed_at:%Y-%m-%d}",
            sector=profile.sector,
            inputs=profile,
            results_summary=summarize_result(result),
            created_at=_as_utc(result.computed_at),
        )
        session = self.Session()
        try:
            session.add(self._to_record(saved))
            session.flush()
            self._trim(session)
            session.commit()
        finally:
            session.close()
        logger.info(f"Saved valuation '{saved.name}' (id={saved.id})")
        return saved

    def get_valuation(self, valuation_id: str) -> SavedValuation | None:
        session = self.Session()
        try:
            record = session.query(ValuationRecord).filter_by(id=valuation_id).first()
            if not record:
                return None
            return SavedValuation.model_validate_json(record.valuation_json)
        finally:
            session.close()

    def list_valuations(self) -> list[dict]:
        session = self.Session()
        try:
            records = session.query(ValuationRecord).order_by(desc(ValuationRecord.created_at)).all()
            return [
                {
                    "id": r.id,
                    "name": r.name,
                    "sector": r.sector,
                    "enterprise_value": r.enterprise_value,
                    "score": r.score,
                    "created_at": _as_utc(r.created_at).isoformat() if r.created_at else None,
                }
                for r in records
            ]
        finally:
            session.close()

    def delete_valuation(self, valuation_id: str) -> bool:
        session = self.Session()
        try:
            record = session.query(ValuationRecord).filter_by(id=valuation_id).first()
            if not record:
                return False
            session.delete(record)
            session.commit()
            logger.info(f"Deleted valuation {valuation_id}")
            return True
        finally:
            session.close()

    def compare_valuations(self, valuation_ids: list[str]) -> ValuationComparison | None:
        """Side-by-side view of saved valuations. Returns None if any id is unknown."""
        if len(valuation_ids) < 2:
            raise ValueError("At least two valuations are required for a comparison")

        saved: list[SavedValuation] = []
        for valuation_id in valuation_ids:
            item = self.get_valuation(valuation_id)
            if item is None:
                return None
            saved.append(item)

        rows = []
        for item in saved:
            summary = item.results_summary
            sector = get_sector(item.sector)
            rows.append(ComparisonRow(
                id=item.id,
                name=item.name,
                sector_name=sector.name if sector else item.sector,
                enterprise_value=format_currency(summary.enterprise_value),
                score=summary.score,
                rating=summary.rating,
                multiples=format_abbreviated(summary.methodologies.multiples),
                dcf=format_abbreviated(summary.methodologies.dcf),
                asset=format_abbreviated(summary.methodologies.asset),
                created_at=item.created_at,
            ))

        return ValuationComparison(
            rows=rows,
            highest_value_id=max(saved, key=lambda s: s.results_summary.enterprise_value).id,
            highest_score_id=max(saved, key=lambda s: s.results_summary.score).id,
        )

    def export_json(self) -> str:
        session = self.Session()
        try:
            records = session.query(ValuationRecord).order_by(desc(ValuationRecord.created_at)).all()
            items = [json.loads(r.valuation_json) for r in records]
        finally:
            session.close()
        return json.dumps(items, indent=2)

    def import_json(self, payload: str) -> int:
        """Merge exported valuations into the store, keeping the most recent up to the limit."""
        try:
            imported = _saved_list.validate_json(payload)
        except ValidationError as e:
            raise InvalidImportError(f"Invalid import payload: {e.error_count()} validation error(s)") from e

        session = self.Session()
        try:
            for item in imported:
                if item.id is None:
                    item.id = str(uuid.uuid4())
                item.created_at = _as_utc(item.created_at)
                session.merge(self._to_record(item))
            session.flush()
            self._trim(session)
            session.commit()
        finally:
            session.close()
        logger.info(f"Imported {len(imported)} valuation(s)")
        return len(imported)

    def _to_record(self, saved: SavedValuation) -> ValuationRecord:
        return ValuationRecord(
            id=saved.id,
            name=saved.name,
            sector=saved.sector,
            enterprise_value=saved.results_summary.enterprise_value,
            score=saved.results_summary.score,
            valuation_json=saved.model_dump_json(),
            created_at=_as_utc(saved.created_at),
        )

    def _trim(self, session) -> None:
        stale = (
            session.query(ValuationRecord)
            .order_by(desc(ValuationRecord.created_at))
            .offset(self.limit)
            .all()
        )
        for record in stale:
            session.delete(record)
        if stale:
            logger.info(f"Trimmed {len(stale)} valuation(s) beyond the history limit of {self.limit}")
