"""Remote resource client for the party API.

Reads return DTOs parsed from the `{"data": ...}` envelope. Every failure is
raised as TransportError; callers decide whether to log and carry on.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Protocol

import httpx
from pydantic import BaseModel

from party_planner.api import urls
from party_planner.api.schemas import Envelope, EventSchema, GuestSchema, RsvpSchema
from party_planner.dtos import (
    EventDTO,
    GuestDTO,
    Identifier,
    NewEventDTO,
    Resource,
    RsvpDTO,
    TransportError,
)

logger = logging.getLogger(__name__)


class PartyApi(ABC):
    """Abstract client over the events, rsvps and guests collections."""

    @abstractmethod
    async def list_events(self) -> list[EventDTO]:
        raise NotImplementedError

    @abstractmethod
    async def get_event(self, event_id: Identifier) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def create_event(self, new_event: NewEventDTO) -> None:
        """Create a party. The response body is ignored; callers re-fetch the list."""
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: Identifier) -> None:
        raise NotImplementedError

    @abstractmethod
    async def list_rsvps(self) -> list[RsvpDTO]:
        raise NotImplementedError

    @abstractmethod
    async def list_guests(self) -> list[GuestDTO]:
        raise NotImplementedError


class ApiConfig(Protocol):
    api_url: str


class HttpPartyApi(PartyApi):
    """httpx implementation of PartyApi."""

    def __init__(
        self,
        config: ApiConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ) -> None:
        self._config = config
        self._http_client_class = http_client_class

    def _url(self, path: str) -> str:
        return f"{self._config.api_url}{path}"

    async def _read(self, resource: Resource, operation: str, path: str, model: type[BaseModel]):
        url = self._url(path)
        try:
            async with self._http_client_class() as client:
                response = await client.get(url)
                response.raise_for_status()
                envelope = model.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers malformed JSON and pydantic ValidationError
            raise TransportError(resource, operation, str(e)) from e
        logger.debug(f"GET {url} -> {response.status_code}")
        return envelope.data

    async def list_events(self) -> list[EventDTO]:
        items = await self._read(
            Resource.EVENTS, "list", urls.EVENTS_URL, Envelope[list[EventSchema]]
        )
        return [item.to_dto() for item in items]

    async def get_event(self, event_id: Identifier) -> EventDTO:
        item = await self._read(
            Resource.EVENTS,
            "get",
            urls.EVENT_URL.format(event_id=event_id),
            Envelope[EventSchema],
        )
        return item.to_dto()

    async def list_rsvps(self) -> list[RsvpDTO]:
        items = await self._read(Resource.RSVPS, "list", urls.RSVPS_URL, Envelope[list[RsvpSchema]])
        return [item.to_dto() for item in items]

    async def list_guests(self) -> list[GuestDTO]:
        items = await self._read(
            Resource.GUESTS, "list", urls.GUESTS_URL, Envelope[list[GuestSchema]]
        )
        return [item.to_dto() for item in items]

    async def create_event(self, new_event: NewEventDTO) -> None:
        url = self._url(urls.EVENTS_URL)
        try:
            async with self._http_client_class() as client:
                response = await client.post(
                    url,
                    headers={"Content-Type": "application/json"},
                    json=asdict(new_event),
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(Resource.EVENTS, "create", str(e)) from e
        logger.info(f"Created party '{new_event.name}'")

    async def delete_event(self, event_id: Identifier) -> None:
        url = self._url(urls.EVENT_URL.format(event_id=event_id))
        try:
            async with self._http_client_class() as client:
                response = await client.delete(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(Resource.EVENTS, "delete", str(e)) from e
        logger.info(f"Deleted party {event_id}")
