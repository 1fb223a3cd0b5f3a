import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from medalboard.api import create_app
from medalboard.config import Settings
from medalboard.ingest import SchemaError, validate_feed
from tests.feeds import country_payload, feed_payload


POPULATIONS = {"AAA": 3_000_000}


def _table():
    return validate_feed(
        feed_payload(
            country_payload(1, "Alphaland", "AAA", gold=1),
            country_payload(2, "Betaland & Co", "BBB", silver=3, bronze=3),
            n_EventsFinished=120,
        )
    )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    app = create_app(_table, Settings(), populations=POPULATIONS)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_standings_default_weights(client: AsyncClient):
    resp = await client.get("/standings")
    assert resp.status_code == 200
    body = resp.json()

    assert body["query"] == ""
    assert body["config"]["gold"] == 3
    assert body["config"]["bronze_label"] == "1 point"
    assert [row["code"] for row in body["standings"]] == ["BBB", "AAA"]
    assert [row["points"] for row in body["standings"]] == [9, 3]
    assert body["standings"][0]["points_text"] == "9"
    assert body["info"]["events_finished"] == 120


@pytest.mark.anyio
async def test_standings_custom_weights(client: AsyncClient):
    resp = await client.get("/standings", params={"gold": "10", "silver": "0", "bronze": "0"})
    body = resp.json()

    assert body["query"] == "gold=10&silver=0&bronze=0"
    assert body["config"]["silver_label"] == "Tiebreaker"
    assert [row["code"] for row in body["standings"]] == ["AAA", "BBB"]


@pytest.mark.anyio
async def test_standings_population_mode(client: AsyncClient):
    resp = await client.get("/standings?population")
    body = resp.json()

    assert body["config"]["normalize_by_population"] is True
    rows = body["standings"]
    assert [row["code"] for row in rows] == ["AAA", "BBB"]
    assert rows[0]["points_text"] == "1 in 1M"
    assert rows[1]["score"] is None
    assert rows[1]["points_text"] == "N/A"


@pytest.mark.anyio
async def test_standings_malformed_weight_uses_default(client: AsyncClient):
    resp = await client.get("/standings", params={"gold": "lots"})
    body = resp.json()

    assert body["config"]["gold"] == 3
    assert body["query"] == ""


@pytest.mark.anyio
async def test_ui_renders_table(client: AsyncClient):
    resp = await client.get("/ui")
    assert resp.status_code == 200
    assert "Build your own Olympic medal standings" in resp.text
    assert "120 of 329 events finished" in resp.text
    assert "Betaland &amp; Co" in resp.text
    assert resp.text.index("Betaland") < resp.text.index("Alphaland")


@pytest.mark.anyio
async def test_ui_redirects_to_canonical_query(client: AsyncClient):
    resp = await client.get("/ui", params={"gold": "3", "silver": "4", "bronze": "1", "population": "on"})

    assert resp.status_code == 303
    assert resp.headers["location"] == "/ui?silver=4&population=true"


@pytest.mark.anyio
async def test_invalid_feed_returns_502():
    def broken_loader():
        raise SchemaError("MedalTableNOC.0.n_Gold", "Input should be a valid integer")

    app = create_app(broken_loader, Settings())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/standings")

    assert resp.status_code == 502
    assert "MedalTableNOC.0.n_Gold" in resp.json()["detail"]


@pytest.mark.anyio
async def test_unreachable_feed_returns_502():
    def offline_loader():
        raise httpx.ConnectError("connection refused")

    app = create_app(offline_loader, Settings())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        resp = await client.get("/ui")

    assert resp.status_code == 502
