from functools import lru_cache
from sme_valuation.services.db_service import HistoryService


@lru_cache
def get_history_service() -> HistoryService:
    return HistoryService()
