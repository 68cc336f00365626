"""
Data Ingestion Service

CONTRACT:
    Input:  ChartRequest
    Output: ChartData

RESPONSIBILITIES:
    - Search Yahoo Finance for equity/ETF symbols
    - Map chart periods to start date and sampling interval
    - Fetch historical bars and normalize them to PriceBars

NO SIGNAL LOGIC - Pure data fetching and transformation.
"""

from stocksignal.services.data_ingestion.interface import DataIngestionServiceInterface
from stocksignal.services.data_ingestion.service import (
    DataIngestionService,
    get_data_ingestion_service,
)

__all__ = [
    "DataIngestionServiceInterface",
    "DataIngestionService",
    "get_data_ingestion_service",
]
