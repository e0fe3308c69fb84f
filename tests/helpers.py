"""Form-posting helpers shared by the route tests."""

from typing import Optional

from httpx import AsyncClient


async def register(
    client: AsyncClient,
    username: str = "alice",
    email: Optional[str] = None,
    password: str = "secret",
):
    """Register an account; the client is signed in afterwards."""
    return await client.post(
        "/register",
        data={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )


async def switch_account(client: AsyncClient, username: str):
    """Log out and register a second account on the same client."""
    await client.get("/logout")
    return await register(client, username)


async def create_hotel(client: AsyncClient, data: dict) -> int:
    """Submit the new-listing form and return the new listing's id."""
    response = await client.post("/hotels", data=data)
    assert response.status_code == 303
    return int(response.headers["location"].rsplit("/", 1)[-1])


async def add_review(client: AsyncClient, hotel_id: int, rating="4", body="Lovely stay"):
    return await client.post(
        f"/hotels/{hotel_id}/reviews",
        data={"rating": rating, "body": body},
    )
