import pytest
import httpx
from app.clients.pokeapi_client import PokeAPIClient
from app.exceptions import UpstreamUnavailable


MOCK_LIST_PAGE = {
    "count": 1302,
    "next": "https://pokeapi.co/api/v2/pokemon?offset=2&limit=2",
    "previous": None,
    "results": [
        {"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon/1/"},
        {"name": "ivysaur", "url": "https://pokeapi.co/api/v2/pokemon/2/"},
    ]
}

MOCK_DITTO = {"id": 132, "name": "ditto"}

@pytest.fixture
def poke_client():
    """Provides a PokeAPIClient pointed at the public PokeAPI base URL."""
    return PokeAPIClient(base_url="https://pokeapi.co/api/v2")

@pytest.mark.asyncio
async def test_get_pokemon_list_passes_offset_and_limit(httpx_mock, poke_client):
    """Verifies the list call hits /pokemon with the pagination query and returns the raw JSON."""
    # ARRANGE
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon?offset=0&limit=2",
        json=MOCK_LIST_PAGE,
        status_code=200
    )

    # ACT
    result = await poke_client.get_pokemon_list(offset=0, limit=2)

    # ASSERT
    assert result == MOCK_LIST_PAGE

@pytest.mark.asyncio
async def test_fetch_json_accepts_absolute_urls(httpx_mock, poke_client):
    """List stubs carry absolute URLs; they must be fetched as-is."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/132/",
        json=MOCK_DITTO,
        status_code=200
    )

    result = await poke_client.fetch_json("https://pokeapi.co/api/v2/pokemon/132/")

    assert result["name"] == "ditto"

@pytest.mark.asyncio
async def test_not_found_carries_404_status(httpx_mock, poke_client):
    """A 404 from PokeAPI surfaces as UpstreamUnavailable with the original status code."""
    # ARRANGE: Mock the external API to return a 404 Not Found
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/99999",
        status_code=404
    )

    # ACT & ASSERT
    with pytest.raises(UpstreamUnavailable) as excinfo:
        await poke_client.get_pokemon(99999)

    assert excinfo.value.status_code == 404

@pytest.mark.asyncio
async def test_pokeapi_internal_error_carries_status(httpx_mock, poke_client):
    """A 500 from PokeAPI surfaces as UpstreamUnavailable with status 500."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/1",
        status_code=500
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await poke_client.get_pokemon(1)

    assert excinfo.value.status_code == 500
    assert "500" in excinfo.value.detail

@pytest.mark.asyncio
async def test_network_error_has_no_status(httpx_mock, poke_client):
    """Transport failures (timeouts, DNS errors) raise UpstreamUnavailable without a status."""
    # ARRANGE: Mock a network failure (RequestError)
    httpx_mock.add_exception(
        httpx.ConnectError("Connection refused."),
        url="https://pokeapi.co/api/v2/pokemon/1"
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        await poke_client.get_pokemon(1)

    assert excinfo.value.status_code is None
    assert "network error" in excinfo.value.detail.lower()

@pytest.mark.asyncio
async def test_non_json_body_raises(httpx_mock, poke_client):
    """A success status with an undecodable body is still an upstream failure."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/1",
        text="<html>maintenance</html>",
        status_code=200
    )

    with pytest.raises(UpstreamUnavailable):
        await poke_client.get_pokemon(1)

@pytest.mark.asyncio
async def test_failures_are_not_retried(httpx_mock, poke_client):
    """Exactly one request is made per call, even when it fails."""
    call_count = [0]

    def count_and_fail(request):
        call_count[0] += 1
        return httpx.Response(status_code=503)

    httpx_mock.add_callback(
        url="https://pokeapi.co/api/v2/pokemon/1",
        callback=count_and_fail,
    )

    with pytest.raises(UpstreamUnavailable):
        await poke_client.get_pokemon(1)

    assert call_count[0] == 1

@pytest.mark.asyncio
async def test_get_pokemon_normalizes_names(httpx_mock, poke_client):
    """Names are lowercased and quoted into a single path segment."""
    httpx_mock.add_response(
        url="https://pokeapi.co/api/v2/pokemon/mr-mime",
        json={"id": 122, "name": "mr-mime"},
        status_code=200
    )

    result = await poke_client.get_pokemon(" Mr-Mime ")

    assert result["id"] == 122
