import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Ticket


async def open_ticket(client, userid=1, title="Printer on fire", data="Please help"):
    return await client.post(
        "/AddTicket", json={"userid": userid, "title": title, "data": data}
    )


@pytest.mark.asyncio
async def test_add_ticket_defaults_to_open(client):
    response = await open_ticket(client)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "open"
    assert body["title"] == "Printer on fire"
    assert body["userid"] == 1
    assert body["date_time"]


@pytest.mark.asyncio
async def test_client_cannot_choose_status(client):
    response = await client.post(
        "/AddTicket",
        json={"userid": 1, "title": "Sneaky", "data": "x", "status": "closed"},
    )

    assert response.status_code == 201
    assert response.json()["status"] == "open"


@pytest.mark.asyncio
async def test_duplicate_title_is_rejected_across_users(client, db_session: AsyncSession):
    assert (await open_ticket(client, userid=1)).status_code == 201

    response = await open_ticket(client, userid=2)

    assert response.status_code == 400
    assert response.json()["error"] == "Ticket with the same title already exists"
    assert await db_session.scalar(select(func.count()).select_from(Ticket)) == 1


@pytest.mark.asyncio
async def test_distinct_titles_both_succeed(client):
    first = await open_ticket(client, title="VPN down")
    second = await open_ticket(client, title="Email bouncing")

    assert first.status_code == 201
    assert second.status_code == 201
    assert {first.json()["status"], second.json()["status"]} == {"open"}

    listing = await client.get("/GetAllTickets")
    assert listing.status_code == 200
    assert [t["title"] for t in listing.json()] == ["VPN down", "Email bouncing"]


@pytest.mark.asyncio
async def test_add_ticket_requires_title_and_data(client):
    response = await client.post("/AddTicket", json={"userid": 1, "title": ""})

    assert response.status_code == 400
    errors = {e["field"]: e["msg"] for e in response.json()["errors"]}
    assert errors == {
        "title": "Ticket must have a title",
        "data": "Ticket must have data",
    }


@pytest.mark.asyncio
async def test_tickets_by_user(client):
    await open_ticket(client, userid=7, title="A")
    await open_ticket(client, userid=8, title="B")
    await open_ticket(client, userid=7, title="C")

    response = await client.get("/GetTicketUserId/7")

    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["A", "C"]


@pytest.mark.asyncio
async def test_tickets_by_user_without_tickets_is_404(client):
    response = await client.get("/GetTicketUserId/42")

    assert response.status_code == 404
    assert response.json()["error"] == "No tickets found"


@pytest.mark.asyncio
async def test_get_all_tickets_empty(client):
    response = await client.get("/GetAllTickets")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_unique_constraint_rejects_ticket_that_passed_the_check(
    stale_check_client, db_session: AsyncSession
):
    assert (await open_ticket(stale_check_client, userid=1)).status_code == 201

    response = await open_ticket(stale_check_client, userid=2)

    assert response.status_code == 400
    assert response.json()["error"] == "Ticket with the same title already exists"
    assert await db_session.scalar(select(func.count()).select_from(Ticket)) == 1
