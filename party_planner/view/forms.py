from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Mapping

from party_planner.dtos import InvalidEventDateError, NewEventDTO

ADD_EVENT_FIELDS = ("name", "description", "date", "location")


@dataclass
class SubmitEvent:
    """A form submission as delivered to the submit handler."""

    form_data: Mapping[str, str] = field(default_factory=dict)
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def get(self, name: str) -> str:
        return self.form_data.get(name) or ""


def normalize_event_date(value: str) -> str:
    """Turn a date input value into a UTC ISO-8601 timestamp.

    "2025-09-14" -> "2025-09-14T00:00:00.000Z". Naive datetimes are read as UTC.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidEventDateError(value) from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    else:
        parsed = parsed.astimezone(UTC)

    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def read_new_event(submit_event: SubmitEvent) -> NewEventDTO:
    return NewEventDTO(
        name=submit_event.get("name"),
        description=submit_event.get("description"),
        date=normalize_event_date(submit_event.get("date")),
        location=submit_event.get("location"),
    )
