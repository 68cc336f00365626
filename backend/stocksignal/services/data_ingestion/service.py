"""
Data Ingestion Service Implementation

Fetches and normalizes market data from Yahoo Finance.
"""

import logging
from typing import Optional

from stocksignal.core.config import settings
from stocksignal.schemas.market import ChartData, ChartRequest, SymbolSearchResult
from stocksignal.services.base import ValidationError
from stocksignal.services.data_ingestion.interface import DataIngestionServiceInterface
from stocksignal.services.data_ingestion.yahoo_adapter import (
    fetch_chart,
    search_symbols,
    validate_symbol,
)

logger = logging.getLogger(__name__)

# Liquid ticker used to probe provider connectivity
HEALTH_CHECK_SYMBOL = "SPY"


class DataIngestionService(DataIngestionServiceInterface):
    """Data Ingestion Service backed by Yahoo Finance."""

    @property
    def name(self) -> str:
        return "DataIngestionService"

    async def execute(self, input_data: ChartRequest) -> ChartData:
        """Fetch price history for a symbol and period."""
        symbol = input_data.symbol.strip().upper()
        chart = await fetch_chart(symbol, input_data.period)
        logger.info(
            f"Got {len(chart.quotes)} bars for {symbol} "
            f"({chart.period.value}, {chart.interval.value})"
        )
        return chart

    async def search(
        self, query: str, limit: Optional[int] = None
    ) -> list[SymbolSearchResult]:
        """Search for equity/ETF symbols matching a free-text query."""
        query = (query or "").strip()
        if not query:
            raise ValidationError(self.name, "Search query is required")

        return await search_symbols(query, limit or settings.search_result_limit)

    async def health_check(self) -> bool:
        """Check Yahoo Finance connectivity."""
        return await validate_symbol(HEALTH_CHECK_SYMBOL)


# Singleton instance
_service_instance: Optional[DataIngestionService] = None


def get_data_ingestion_service() -> DataIngestionService:
    """Get or create data ingestion service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DataIngestionService()
    return _service_instance
