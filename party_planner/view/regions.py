"""View builders, one per region of the page.

Each builder reads a StateSnapshot and returns fresh nodes; nothing is
cached between renders.
"""

from party_planner.dtos import EventDTO, GuestDTO, Identifier, RsvpDTO, same_id
from party_planner.state.store import StateSnapshot
from party_planner.view.nodes import Action, ViewNode, h

SELECT_EVENT = "select_event"
DELETE_EVENT = "delete_event"
SUBMIT_ADD_EVENT = "submit_add_event"

NO_SELECTION_PROMPT = "Please select a party to learn more."


def guests_at_event(
    guests: tuple[GuestDTO, ...],
    rsvps: tuple[RsvpDTO, ...],
    event_id: Identifier,
) -> list[GuestDTO]:
    """Guests with an RSVP for `event_id`, in guest-list order."""
    return [
        guest
        for guest in guests
        if any(
            same_id(rsvp.guest_id, guest.id) and same_id(rsvp.event_id, event_id)
            for rsvp in rsvps
        )
    ]


def event_list_item(event: EventDTO, selected: EventDTO | None) -> ViewNode:
    is_selected = selected is not None and same_id(event.id, selected.id)
    return h(
        "li",
        h("a", event.name, attrs={"href": "#selected"}),
        classes=("selected",) if is_selected else (),
        on={"click": Action(SELECT_EVENT, (event.id,))},
    )


def event_list(snapshot: StateSnapshot) -> ViewNode:
    items = [event_list_item(event, snapshot.selected) for event in snapshot.events]
    return h("ul", *items, classes=("parties",))


def guest_list(snapshot: StateSnapshot) -> ViewNode:
    if snapshot.selected is None:
        return h("ul")
    attending = guests_at_event(snapshot.guests, snapshot.rsvps, snapshot.selected.id)
    return h("ul", *(h("li", guest.name) for guest in attending))


def selected_event(snapshot: StateSnapshot) -> ViewNode:
    event = snapshot.selected
    if event is None:
        return h("p", NO_SELECTION_PROMPT)

    return h(
        "section",
        h("h3", f"{event.name} #{event.id}"),
        h("time", event.calendar_date, attrs={"datetime": event.date}),
        h("address", event.location),
        h("p", event.description),
        guest_list(snapshot),
        h("button", "Delete party", on={"click": Action(DELETE_EVENT, (event.id,))}),
    )


def add_event_form() -> ViewNode:
    return h(
        "form",
        h("input", attrs={"name": "name", "placeholder": "Name", "required": ""}),
        h("input", attrs={"name": "description", "placeholder": "Description", "required": ""}),
        h("input", attrs={"name": "date", "type": "date", "required": ""}),
        h("input", attrs={"name": "location", "placeholder": "Location", "required": ""}),
        h("button", "Add party"),
        on={"submit": Action(SUBMIT_ADD_EVENT)},
    )


def build_app(snapshot: StateSnapshot, title: str = "Party Planner") -> tuple[ViewNode, ...]:
    """The full tree mounted into the app container."""
    return (
        h("h1", title),
        h(
            "main",
            h("section", h("h2", "Upcoming Parties"), event_list(snapshot)),
            h("section", h("h2", "Add a new party"), add_event_form()),
            h(
                "section",
                h("h2", "Party Details"),
                selected_event(snapshot),
                attrs={"id": "selected"},
            ),
        ),
    )
