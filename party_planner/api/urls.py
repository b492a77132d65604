EVENTS_URL = "/events"
EVENT_URL = "/events/{event_id}"
RSVPS_URL = "/rsvps"
GUESTS_URL = "/guests"
