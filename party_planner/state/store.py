"""Application state store.

Four slots, each replaced wholesale. Readers take a StateSnapshot; there is
no subscription mechanism, so whoever mutates must render afterwards.

Each slot also tracks sequence tickets. With `reject_stale_responses`
enabled, a write carrying a ticket older than the last applied one for that
slot is dropped; otherwise the last response to arrive wins.
"""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum

from party_planner.dtos import EventDTO, GuestDTO, RsvpDTO

logger = logging.getLogger(__name__)


class Slot(str, Enum):
    EVENTS = "events"
    SELECTED = "selected"
    RSVPS = "rsvps"
    GUESTS = "guests"


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the store at one instant."""

    events: tuple[EventDTO, ...] = ()
    selected: EventDTO | None = None
    rsvps: tuple[RsvpDTO, ...] = ()
    guests: tuple[GuestDTO, ...] = ()


class AppStateStore:
    def __init__(self, reject_stale_responses: bool = False) -> None:
        self.reject_stale_responses = reject_stale_responses
        self._events: list[EventDTO] = []
        self._selected: EventDTO | None = None
        self._rsvps: list[RsvpDTO] = []
        self._guests: list[GuestDTO] = []
        self._tickets = itertools.count(1)
        self._applied: dict[Slot, int] = {slot: 0 for slot in Slot}

    @property
    def events(self) -> list[EventDTO]:
        return self._events

    @property
    def selected(self) -> EventDTO | None:
        return self._selected

    @property
    def rsvps(self) -> list[RsvpDTO]:
        return self._rsvps

    @property
    def guests(self) -> list[GuestDTO]:
        return self._guests

    def issue_ticket(self, slot: Slot) -> int:
        """Hand out the sequence number for a request that will write `slot`."""
        ticket = next(self._tickets)
        logger.debug(f"Issued ticket {ticket} for {slot.value}")
        return ticket

    def _accept(self, slot: Slot, ticket: int | None) -> bool:
        if ticket is None:
            return True
        if self.reject_stale_responses and ticket < self._applied[slot]:
            logger.debug(
                f"Dropped stale {slot.value} response "
                f"(ticket {ticket} < applied {self._applied[slot]})"
            )
            return False
        self._applied[slot] = max(self._applied[slot], ticket)
        return True

    def set_events(self, events: list[EventDTO], ticket: int | None = None) -> bool:
        if not self._accept(Slot.EVENTS, ticket):
            return False
        self._events = list(events)
        return True

    def set_selected(self, event: EventDTO | None, ticket: int | None = None) -> bool:
        if not self._accept(Slot.SELECTED, ticket):
            return False
        self._selected = event
        return True

    def set_rsvps(self, rsvps: list[RsvpDTO], ticket: int | None = None) -> bool:
        if not self._accept(Slot.RSVPS, ticket):
            return False
        self._rsvps = list(rsvps)
        return True

    def set_guests(self, guests: list[GuestDTO], ticket: int | None = None) -> bool:
        if not self._accept(Slot.GUESTS, ticket):
            return False
        self._guests = list(guests)
        return True

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            events=tuple(self._events),
            selected=self._selected,
            rsvps=tuple(self._rsvps),
            guests=tuple(self._guests),
        )
