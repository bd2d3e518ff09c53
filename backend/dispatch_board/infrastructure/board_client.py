"""Composition root for the dispatch board client.

Builds one shared httpx client, every REST service and both state stores, and
tears them down together:

    async with DispatchBoardClient.from_settings() as board:
        drivers = await board.drivers.get_all(DriverFilter(is_active=True))
        await board.dispatch_sync.load_records()
"""

import logging
from types import TracebackType

import httpx

from dispatch_board.application.services import (
    DispatchService,
    DispatchSyncService,
    DriverService,
    LocationService,
    OperatorService,
    RouteService,
    ScheduleService,
    ServiceFormulaService,
    ServiceService,
    ShiftService,
    VehicleService,
    VehicleTypeService,
)
from dispatch_board.application.state import DispatchStore, UiStore
from dispatch_board.config import Settings, get_settings
from dispatch_board.infrastructure.api import ApiClient

logger = logging.getLogger(__name__)


class DispatchBoardClient:
    """Owns the HTTP connection pool, the services and the client-side stores."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self.api = ApiClient(
            base_url=base_url,
            token=token,
            timeout=timeout,
            http_client=self._http_client,
        )

        self.drivers = DriverService(self.api)
        self.locations = LocationService(self.api)
        self.operators = OperatorService(self.api)
        self.services = ServiceService(self.api)
        self.service_formulas = ServiceFormulaService(self.api)
        self.vehicle_types = VehicleTypeService(self.api)
        self.vehicles = VehicleService(self.api)
        self.routes = RouteService(self.api)
        self.schedules = ScheduleService(self.api)
        self.shifts = ShiftService(self.api)
        self.dispatch = DispatchService(self.api)

        self.dispatch_store = DispatchStore()
        self.ui_store = UiStore()
        self.dispatch_sync = DispatchSyncService(self.dispatch, self.dispatch_store)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "DispatchBoardClient":
        settings = settings or get_settings()
        return cls(
            base_url=settings.api_base_url,
            token=settings.api_token,
            timeout=settings.api_timeout_seconds,
            http_client=http_client,
        )

    async def aclose(self) -> None:
        """Unsubscribe all store listeners and close the connection pool."""
        self.dispatch_store.close()
        self.ui_store.close()
        if self._owns_http_client:
            await self._http_client.aclose()
        logger.debug("Dispatch board client closed")

    async def __aenter__(self) -> "DispatchBoardClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
