"""
Base Service Interface

StockSignal has two services: data ingestion (Yahoo Finance) and signal
derivation. Both are async so the API layer can await them uniformly,
even though signal derivation never does I/O.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseService(ABC, Generic[InputT, OutputT]):
    """
    Base class for StockSignal services.

    Subclasses name themselves (used as the `service_name` of any
    ServiceError they raise), implement `execute`, and report health.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging and error attribution."""
        pass

    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """
        Run the service.

        Raises:
            ServiceError: If the provider fails or the input is rejected
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """True when the service can currently answer requests."""
        pass


class ServiceError(Exception):
    """
    Error raised by a service or data source.

    `details` carries provider context (e.g. the upstream error text)
    that the API layer may pass through to the client.
    """

    def __init__(
        self,
        service_name: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.service_name = service_name
        self.message = message
        self.details: dict[str, Any] = details or {}
        super().__init__(f"[{service_name}] {message}")


class ValidationError(ServiceError):
    """Request rejected before reaching the provider (e.g. blank search query)."""
    pass


class ExternalAPIError(ServiceError):
    """Yahoo Finance request failed."""
    pass


class DataNotFoundError(ServiceError):
    """Yahoo answered but returned no price history for the symbol."""
    pass
