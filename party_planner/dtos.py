from dataclasses import dataclass
from enum import Enum

Identifier = int | str


class Resource(str, Enum):
    EVENTS = "events"
    RSVPS = "rsvps"
    GUESTS = "guests"


class TransportError(Exception):
    """Raised when a remote resource call fails (network, non-2xx or malformed payload)."""

    def __init__(self, resource: Resource, operation: str, reason: str) -> None:
        self.resource = resource
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} {resource.value} failed: {reason}")


class InvalidEventDateError(ValueError):
    """Raised when the add-party form carries a date that cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid event date: {value!r}")


class InvalidActionError(Exception):
    """Raised when a view action names no handler or carries the wrong arguments."""

    def __init__(self, name: str, reason: str = "unknown action") -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid action '{name}': {reason}")


def same_id(left: Identifier | None, right: Identifier | None) -> bool:
    """Loose identifier equality: 3 and "3" name the same record."""
    if left is None or right is None:
        return False
    return left == right or str(left) == str(right)


@dataclass(frozen=True)
class EventDTO:
    """A party as returned by the remote events collection."""

    id: Identifier
    name: str
    date: str
    location: str = ""
    description: str = ""

    @property
    def calendar_date(self) -> str:
        return self.date[:10]


@dataclass(frozen=True)
class GuestDTO:
    id: Identifier
    name: str


@dataclass(frozen=True)
class RsvpDTO:
    """Attendance link between one guest and one event."""

    id: Identifier
    guest_id: Identifier
    event_id: Identifier


@dataclass(frozen=True)
class NewEventDTO:
    """Payload for creating a party. `date` is a full ISO-8601 timestamp."""

    name: str
    description: str
    date: str
    location: str
