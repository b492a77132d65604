"""User-facing operations: call the api, store the result, re-render.

Every operation swallows TransportError after logging it and reports
success as a bool. On failure the state keeps its last value and nothing
is re-rendered.
"""

import logging

from party_planner.api.client import HttpPartyApi, PartyApi
from party_planner.config.settings import Settings
from party_planner.dtos import (
    Identifier,
    InvalidActionError,
    InvalidEventDateError,
    NewEventDTO,
    TransportError,
)
from party_planner.pages.urls import ACTIONS_URL
from party_planner.render import RenderDriver
from party_planner.state.store import AppStateStore, Slot
from party_planner.view.document import HostDocument
from party_planner.view.forms import SubmitEvent, read_new_event
from party_planner.view.nodes import Action
from party_planner.view.regions import DELETE_EVENT, SELECT_EVENT, SUBMIT_ADD_EVENT

logger = logging.getLogger(__name__)


class PartyPlanner:
    def __init__(self, api: PartyApi, store: AppStateStore, driver: RenderDriver) -> None:
        self.api = api
        self.store = store
        self.driver = driver

    def render(self) -> None:
        self.driver.render()

    async def refresh_events(self, render: bool = True) -> bool:
        ticket = self.store.issue_ticket(Slot.EVENTS)
        try:
            events = await self.api.list_events()
        except TransportError as e:
            logger.error(f"Failed to load parties: {e}")
            return False
        if self.store.set_events(events, ticket=ticket) and render:
            self.render()
        return True

    async def refresh_rsvps(self, render: bool = True) -> bool:
        ticket = self.store.issue_ticket(Slot.RSVPS)
        try:
            rsvps = await self.api.list_rsvps()
        except TransportError as e:
            logger.error(f"Failed to load RSVPs: {e}")
            return False
        if self.store.set_rsvps(rsvps, ticket=ticket) and render:
            self.render()
        return True

    async def refresh_guests(self, render: bool = True) -> bool:
        ticket = self.store.issue_ticket(Slot.GUESTS)
        try:
            guests = await self.api.list_guests()
        except TransportError as e:
            logger.error(f"Failed to load guests: {e}")
            return False
        if self.store.set_guests(guests, ticket=ticket) and render:
            self.render()
        return True

    async def select_event(self, event_id: Identifier) -> bool:
        ticket = self.store.issue_ticket(Slot.SELECTED)
        try:
            event = await self.api.get_event(event_id)
        except TransportError as e:
            logger.error(f"Failed to load party {event_id}: {e}")
            return False
        if self.store.set_selected(event, ticket=ticket):
            self.render()
        return True

    async def create_event(self, new_event: NewEventDTO) -> bool:
        """Create a party, then re-fetch the list instead of inserting locally."""
        try:
            await self.api.create_event(new_event)
        except TransportError as e:
            logger.error(f"Failed to add party: {e}")
            return False
        await self.refresh_events()
        return True

    async def submit_add_event(self, submit_event: SubmitEvent) -> bool:
        submit_event.prevent_default()
        try:
            new_event = read_new_event(submit_event)
        except InvalidEventDateError as e:
            logger.error(f"Failed to add party: {e}")
            return False
        return await self.create_event(new_event)

    async def delete_event(self, event_id: Identifier) -> bool:
        try:
            await self.api.delete_event(event_id)
        except TransportError as e:
            logger.error(f"Failed to delete party: {e}")
            return False
        self.store.set_selected(None, ticket=self.store.issue_ticket(Slot.SELECTED))
        await self.refresh_events(render=False)
        self.render()
        return True

    async def dispatch(self, action: Action, submit_event: SubmitEvent | None = None) -> bool:
        """Run the operation a view action names, with the ids it captured."""
        if action.name == SUBMIT_ADD_EVENT:
            return await self.submit_add_event(submit_event or SubmitEvent())

        handlers = {SELECT_EVENT: self.select_event, DELETE_EVENT: self.delete_event}
        handler = handlers.get(action.name)
        if handler is None:
            raise InvalidActionError(action.name)
        if len(action.args) != 1:
            raise InvalidActionError(action.name, f"expected 1 argument, got {len(action.args)}")
        return await handler(action.args[0])


def build_planner(
    config: Settings,
    api: PartyApi | None = None,
    document: HostDocument | None = None,
) -> PartyPlanner:
    """Wire the store, document and render driver around an api client."""
    store = AppStateStore(reject_stale_responses=config.reject_stale_responses)
    document = document or HostDocument(
        title=config.page_title,
        container_ids=(config.mount_id,),
        actions_url=ACTIONS_URL,
    )
    driver = RenderDriver(store, document, mount_id=config.mount_id)
    return PartyPlanner(api=api or HttpPartyApi(config=config), store=store, driver=driver)
