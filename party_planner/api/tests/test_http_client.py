"""Unit tests for HttpPartyApi, mocking the HTTP client."""

import httpx
import pytest

from party_planner.api.client import HttpPartyApi
from party_planner.dtos import EventDTO, GuestDTO, NewEventDTO, Resource, RsvpDTO, TransportError

# =============================================================================
# Mock HTTP infrastructure
# =============================================================================

API_URL = "http://party-api.test/api/test-cohort"

EVENTS_JSON = {
    "data": [
        {
            "id": 1,
            "name": "Garden Party",
            "description": "Lemonade and croquet",
            "date": "2025-09-14T00:00:00.000Z",
            "location": "Rose Garden",
            "cohortId": 7,
        },
        {
            "id": 2,
            "name": "Rooftop Mixer",
            "description": "Sunset drinks",
            "date": "2025-10-01T18:30:00.000Z",
            "location": "Pier 9",
            "cohortId": 7,
        },
    ]
}

RSVPS_JSON = {"data": [{"id": 100, "guestId": 12, "eventId": 1}]}

GUESTS_JSON = {"data": [{"id": 12, "name": "Grace", "email": "grace@example.com"}]}


class MockResponse:
    def __init__(self, *, json_data=None, status_code=200, invalid_json=False):
        self._json_data = json_data
        self._invalid_json = invalid_json
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("GET", "https://example.com"),
                response=httpx.Response(self.status_code),
            )

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json_data


class MockHttpClient:
    """
    Replaces httpx.AsyncClient as the http_client_class.

    HttpPartyApi calls self._http_client_class() and uses the result as an
    async context manager, so __call__ returns self.
    """

    def __init__(self):
        self.calls: list[dict] = []
        self._responses: dict[tuple[str, str], MockResponse | Exception] = {}

    def add(self, method: str, url: str, response: MockResponse | Exception) -> "MockHttpClient":
        self._responses[(method, url)] = response
        return self

    async def _request(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if (method, url) not in self._responses:
            raise KeyError(f"No mock response configured for {method} {url}")
        response = self._responses[(method, url)]
        if isinstance(response, Exception):
            raise response
        return response

    async def get(self, url: str, **kwargs):
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs):
        return await self._request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs):
        return await self._request("DELETE", url, **kwargs)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass

    def __call__(self):
        return self


class MockConfig:
    api_url = API_URL


@pytest.fixture
def http_client():
    return MockHttpClient()


@pytest.fixture
def api(http_client):
    return HttpPartyApi(config=MockConfig(), http_client_class=http_client)


# =============================================================================
# Reads
# =============================================================================


@pytest.mark.asyncio
async def test_list_events_unwraps_envelope(api, http_client):
    http_client.add("GET", f"{API_URL}/events", MockResponse(json_data=EVENTS_JSON))

    events = await api.list_events()

    assert events == [
        EventDTO(
            id=1,
            name="Garden Party",
            date="2025-09-14T00:00:00.000Z",
            location="Rose Garden",
            description="Lemonade and croquet",
        ),
        EventDTO(
            id=2,
            name="Rooftop Mixer",
            date="2025-10-01T18:30:00.000Z",
            location="Pier 9",
            description="Sunset drinks",
        ),
    ]


@pytest.mark.asyncio
async def test_get_event_uses_id_in_path(api, http_client):
    http_client.add(
        "GET", f"{API_URL}/events/2", MockResponse(json_data={"data": EVENTS_JSON["data"][1]})
    )

    event = await api.get_event(2)

    assert event.name == "Rooftop Mixer"
    assert http_client.calls[0]["url"] == f"{API_URL}/events/2"


@pytest.mark.asyncio
async def test_list_rsvps_maps_camel_case_keys(api, http_client):
    http_client.add("GET", f"{API_URL}/rsvps", MockResponse(json_data=RSVPS_JSON))

    rsvps = await api.list_rsvps()

    assert rsvps == [RsvpDTO(id=100, guest_id=12, event_id=1)]


@pytest.mark.asyncio
async def test_list_guests_ignores_extra_fields(api, http_client):
    http_client.add("GET", f"{API_URL}/guests", MockResponse(json_data=GUESTS_JSON))

    guests = await api.list_guests()

    assert guests == [GuestDTO(id=12, name="Grace")]


@pytest.mark.asyncio
async def test_string_identifiers_are_kept(api, http_client):
    http_client.add(
        "GET",
        f"{API_URL}/guests",
        MockResponse(json_data={"data": [{"id": "g-1", "name": "Grace"}]}),
    )

    guests = await api.list_guests()

    assert guests[0].id == "g-1"


# =============================================================================
# Writes
# =============================================================================


@pytest.mark.asyncio
async def test_create_event_posts_json_body(api, http_client):
    http_client.add(
        "POST",
        f"{API_URL}/events",
        MockResponse(status_code=201, json_data={"data": {"id": 99}}),
    )
    new_event = NewEventDTO(
        name="Picnic",
        description="Blankets",
        date="2025-09-14T00:00:00.000Z",
        location="Park",
    )

    result = await api.create_event(new_event)

    assert result is None
    call = http_client.calls[0]
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["json"] == {
        "name": "Picnic",
        "description": "Blankets",
        "date": "2025-09-14T00:00:00.000Z",
        "location": "Park",
    }


@pytest.mark.asyncio
async def test_create_event_ignores_unparseable_response_body(api, http_client):
    http_client.add("POST", f"{API_URL}/events", MockResponse(status_code=201, invalid_json=True))

    await api.create_event(
        NewEventDTO(name="Picnic", description="", date="2025-09-14T00:00:00.000Z", location="")
    )

    assert len(http_client.calls) == 1


@pytest.mark.asyncio
async def test_delete_event_uses_delete_method(api, http_client):
    http_client.add("DELETE", f"{API_URL}/events/3", MockResponse(status_code=204))

    await api.delete_event(3)

    assert http_client.calls == [{"method": "DELETE", "url": f"{API_URL}/events/3"}]


# =============================================================================
# Failures
# =============================================================================


@pytest.mark.asyncio
async def test_non_2xx_raises_transport_error(api, http_client):
    http_client.add("GET", f"{API_URL}/events", MockResponse(status_code=500))

    with pytest.raises(TransportError) as exc_info:
        await api.list_events()

    assert exc_info.value.resource == Resource.EVENTS
    assert exc_info.value.operation == "list"
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_network_error_raises_transport_error(api, http_client):
    http_client.add(
        "GET",
        f"{API_URL}/guests",
        httpx.ConnectError("connection refused", request=httpx.Request("GET", API_URL)),
    )

    with pytest.raises(TransportError) as exc_info:
        await api.list_guests()

    assert exc_info.value.resource == Resource.GUESTS


@pytest.mark.asyncio
async def test_malformed_json_raises_transport_error(api, http_client):
    http_client.add("GET", f"{API_URL}/rsvps", MockResponse(invalid_json=True))

    with pytest.raises(TransportError):
        await api.list_rsvps()


@pytest.mark.asyncio
async def test_missing_envelope_raises_transport_error(api, http_client):
    http_client.add("GET", f"{API_URL}/events", MockResponse(json_data=EVENTS_JSON["data"]))

    with pytest.raises(TransportError):
        await api.list_events()


@pytest.mark.asyncio
async def test_delete_not_found_raises_transport_error(api, http_client):
    http_client.add("DELETE", f"{API_URL}/events/404", MockResponse(status_code=404))

    with pytest.raises(TransportError) as exc_info:
        await api.delete_event(404)

    assert exc_info.value.operation == "delete"
