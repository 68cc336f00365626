"""
Data Ingestion Service Interface

Defines the contract for the data ingestion layer.
"""

from abc import abstractmethod

from stocksignal.services.base import BaseService
from stocksignal.schemas.market import ChartData, ChartRequest, SymbolSearchResult


class DataIngestionServiceInterface(BaseService[ChartRequest, ChartData]):
    """
    Data Ingestion Service Contract.

    INPUT: ChartRequest
        - symbol: Yahoo ticker
        - period: Chart period (decides start date and interval)

    OUTPUT: ChartData
        - name/currency from provider metadata
        - quotes: PriceBars, oldest first
    """

    @property
    def name(self) -> str:
        return "DataIngestionService"

    @abstractmethod
    async def execute(self, input_data: ChartRequest) -> ChartData:
        """Fetch and normalize price history."""
        pass

    @abstractmethod
    async def search(self, query: str, limit: int = 10) -> list[SymbolSearchResult]:
        """Search for equity/ETF symbols."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the data provider."""
        pass
