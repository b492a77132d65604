from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from party_planner.dtos import EventDTO, GuestDTO, Identifier, RsvpDTO

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Every list/get response is wrapped as `{"data": <payload>}`."""

    data: T


class EventSchema(BaseModel):
    id: Identifier
    name: str
    date: str
    location: str = ""
    description: str = ""

    def to_dto(self) -> EventDTO:
        return EventDTO(
            id=self.id,
            name=self.name,
            date=self.date,
            location=self.location,
            description=self.description,
        )


class GuestSchema(BaseModel):
    id: Identifier
    name: str

    def to_dto(self) -> GuestDTO:
        return GuestDTO(id=self.id, name=self.name)


class RsvpSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Identifier
    guest_id: Identifier = Field(alias="guestId")
    event_id: Identifier = Field(alias="eventId")

    def to_dto(self) -> RsvpDTO:
        return RsvpDTO(id=self.id, guest_id=self.guest_id, event_id=self.event_id)
