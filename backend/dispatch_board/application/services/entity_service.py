"""Generic CRUD client for one REST resource collection.

Each concrete service only names its collection path, its response schema and
(for filterable collections) its filter type; the request shapes are shared:

    GET    /<collection>?<filters>
    GET    /<collection>/<id>
    POST   /<collection>
    PUT    /<collection>/<id>
    DELETE /<collection>/<id>
"""

import logging
from typing import Any, ClassVar, Generic, TypeVar

from dispatch_board.application.interfaces import HttpClient
from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
CreateT = TypeVar("CreateT", bound=CamelModel)
UpdateT = TypeVar("UpdateT", bound=CamelModel)
FilterT = TypeVar("FilterT", bound=EntityFilter)


class EntityService(Generic[EntityT, CreateT, UpdateT]):
    """Read/create/update/delete against ``collection_path``.

    Failures from the HTTP client propagate unchanged; the only local
    handling is that deleting an already-deleted record is not an error.
    """

    collection_path: ClassVar[str]
    response_schema: ClassVar[type[EntityResponse]]

    def __init__(self, client: HttpClient):
        self._client = client

    def _item_path(self, entity_id: str) -> str:
        return f"{self.collection_path}/{entity_id}"

    def _to_entity(self, payload: Any) -> EntityT:
        return self.response_schema.model_validate(payload).to_entity()

    async def _fetch_all(self, params: dict[str, str] | None = None) -> list[EntityT]:
        data = await self._client.get(self.collection_path, params=params or None)
        items = [self._to_entity(item) for item in data or []]
        logger.debug("Fetched %d record(s) from %s", len(items), self.collection_path)
        return items

    async def get_by_id(self, entity_id: str) -> EntityT:
        data = await self._client.get(self._item_path(entity_id))
        return self._to_entity(data)

    async def create(self, data: CreateT) -> EntityT:
        created = await self._client.post(self.collection_path, json=data.to_payload())
        return self._to_entity(created)

    async def update(self, entity_id: str, data: UpdateT) -> EntityT:
        """Send only the fields set on ``data``; the server merges them."""
        updated = await self._client.put(
            self._item_path(entity_id), json=data.to_payload(partial=True)
        )
        return self._to_entity(updated)

    async def delete(self, entity_id: str) -> None:
        try:
            await self._client.delete(self._item_path(entity_id))
        except EntityNotFoundError:
            logger.debug("%s already absent", self._item_path(entity_id))


class FilterableEntityService(
    EntityService[EntityT, CreateT, UpdateT],
    Generic[EntityT, CreateT, UpdateT, FilterT],
):
    """Entity service whose collection accepts typed query filters."""

    async def get_all(self, filters: FilterT | None = None) -> list[EntityT]:
        params = filters.to_query_params() if filters is not None else None
        return await self._fetch_all(params)
