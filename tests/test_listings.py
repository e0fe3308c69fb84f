"""Tests for hotel listing routes."""

import pytest
from httpx import AsyncClient

from hotelbook.crud.listing import listing_crud
from hotelbook.crud.review import review_crud
from helpers import add_review, create_hotel, switch_account


@pytest.mark.asyncio
async def test_index_lists_hotels(alice_client: AsyncClient, mock_hotel_data):
    await create_hotel(alice_client, mock_hotel_data)
    await create_hotel(alice_client, {**mock_hotel_data, "title": "Seaside Lodge"})

    response = await alice_client.get("/hotels")

    assert response.status_code == 200
    assert "Grand Inn" in response.text
    assert "Seaside Lodge" in response.text


@pytest.mark.asyncio
async def test_create_and_show_round_trip(alice_client: AsyncClient, db_session, mock_hotel_data):
    """Fields submitted on creation come back unchanged on the detail page."""
    hotel_id = await create_hotel(alice_client, mock_hotel_data)

    hotel = await listing_crud.get(db_session, id=hotel_id)
    assert hotel.title == "Grand Inn"
    assert hotel.price == 42
    assert hotel.image == "http://x/y.jpg"
    assert hotel.location == "Paris, FR"
    assert hotel.description == "nice"

    response = await alice_client.get(f"/hotels/{hotel_id}")
    assert response.status_code == 200
    assert "Grand Inn" in response.text
    assert "$42/night" in response.text
    assert 'src="http://x/y.jpg"' in response.text
    assert "Paris, FR" in response.text
    assert "nice" in response.text
    assert "Submitted by alice" in response.text
    assert "New hotel added successfully" in response.text


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["title", "price", "image", "location", "description"])
async def test_create_missing_field_rejected(
    alice_client: AsyncClient, db_session, mock_hotel_data, missing
):
    """A listing missing a required field is rejected with 400 and not stored."""
    data = {k: v for k, v in mock_hotel_data.items() if k != missing}

    response = await alice_client.post("/hotels", data=data)

    assert response.status_code == 400
    assert f'&#34;{missing}&#34; is required' in response.text
    assert await listing_crud.count(db_session) == 0


@pytest.mark.asyncio
async def test_create_negative_price_rejected(alice_client: AsyncClient, db_session, mock_hotel_data):
    response = await alice_client.post("/hotels", data={**mock_hotel_data, "price": "-1"})

    assert response.status_code == 400
    assert "must be greater than or equal to 0" in response.text
    assert await listing_crud.count(db_session) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("price", ["inf", "Infinity", "1e999", "nan"])
async def test_create_non_finite_price_rejected(
    alice_client: AsyncClient, db_session, mock_hotel_data, price
):
    response = await alice_client.post("/hotels", data={**mock_hotel_data, "price": price})

    assert response.status_code == 400
    assert "must be a finite number" in response.text
    assert await listing_crud.count(db_session) == 0


@pytest.mark.asyncio
async def test_flashes_from_consecutive_requests_all_shown(alice_client: AsyncClient, mock_hotel_data):
    """A message queued while another is still pending is shown alongside it."""
    hotel_id = await create_hotel(alice_client, mock_hotel_data)

    response = await alice_client.get(f"/hotels/{hotel_id}")

    assert "Welcome to HotelBook!" in response.text
    assert "New hotel added successfully" in response.text

    response = await alice_client.get(f"/hotels/{hotel_id}")
    assert "New hotel added successfully" not in response.text


@pytest.mark.asyncio
async def test_create_requires_login(client: AsyncClient, db_session, mock_hotel_data):
    response = await client.post("/hotels", data=mock_hotel_data)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert await listing_crud.count(db_session) == 0
    page = await client.get("/login")
    assert "You must be signed in first" in page.text


@pytest.mark.asyncio
async def test_show_missing_hotel_redirects(client: AsyncClient):
    response = await client.get("/hotels/999")

    assert response.status_code == 303
    assert response.headers["location"] == "/hotels"
    page = await client.get("/hotels")
    assert "Hotel not found" in page.text


@pytest.mark.asyncio
async def test_edit_form_for_owner(alice_client: AsyncClient, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)

    response = await alice_client.get(f"/hotels/{hotel_id}/edit")

    assert response.status_code == 200
    assert f'action="/hotels/{hotel_id}?_method=PUT"' in response.text
    assert 'value="Grand Inn"' in response.text


@pytest.mark.asyncio
async def test_edit_form_refused_for_other_account(alice_client: AsyncClient, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)
    await switch_account(alice_client, "bob")

    response = await alice_client.get(f"/hotels/{hotel_id}/edit")

    assert response.status_code == 303
    assert response.headers["location"] == f"/hotels/{hotel_id}"
    page = await alice_client.get(f"/hotels/{hotel_id}")
    assert "You do not have permission to do that" in page.text


@pytest.mark.asyncio
async def test_update_via_method_override(alice_client: AsyncClient, db_session, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)

    response = await alice_client.post(
        f"/hotels/{hotel_id}?_method=PUT",
        data={**mock_hotel_data, "title": "Grander Inn", "price": "55.5"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/hotels/{hotel_id}"
    hotel = await listing_crud.get(db_session, id=hotel_id)
    assert hotel.title == "Grander Inn"
    assert hotel.price == 55.5

    page = await alice_client.get(f"/hotels/{hotel_id}")
    assert "Grander Inn" in page.text
    assert "$55.50/night" in page.text


@pytest.mark.asyncio
async def test_update_invalid_form_keeps_listing(alice_client: AsyncClient, db_session, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)

    response = await alice_client.put(
        f"/hotels/{hotel_id}",
        data={**mock_hotel_data, "title": ""},
    )

    assert response.status_code == 400
    hotel = await listing_crud.get(db_session, id=hotel_id)
    assert hotel.title == "Grand Inn"


@pytest.mark.asyncio
async def test_update_refused_for_other_account(alice_client: AsyncClient, db_session, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)
    await switch_account(alice_client, "bob")

    response = await alice_client.put(
        f"/hotels/{hotel_id}",
        data={**mock_hotel_data, "title": "Hijacked"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/hotels/{hotel_id}"
    hotel = await listing_crud.get(db_session, id=hotel_id)
    assert hotel.title == "Grand Inn"


@pytest.mark.asyncio
async def test_unauthenticated_edit_update_delete_redirect_to_login(
    alice_client: AsyncClient, db_session, mock_hotel_data
):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)
    await alice_client.get("/logout")

    edit = await alice_client.get(f"/hotels/{hotel_id}/edit")
    update = await alice_client.put(f"/hotels/{hotel_id}", data=mock_hotel_data)
    delete = await alice_client.delete(f"/hotels/{hotel_id}")

    for response in (edit, update, delete):
        assert response.status_code == 303
        assert response.headers["location"] == "/login"
    assert await listing_crud.count(db_session) == 1


@pytest.mark.asyncio
async def test_delete_refused_for_other_account(alice_client: AsyncClient, db_session, mock_hotel_data):
    hotel_id = await create_hotel(alice_client, mock_hotel_data)
    await switch_account(alice_client, "bob")

    response = await alice_client.post(f"/hotels/{hotel_id}?_method=DELETE")

    assert response.status_code == 303
    assert response.headers["location"] == f"/hotels/{hotel_id}"
    assert await listing_crud.count(db_session) == 1


@pytest.mark.asyncio
async def test_delete_cascades_reviews(alice_client: AsyncClient, db_session, mock_hotel_data):
    """Deleting a listing removes the reviews attached to it."""
    hotel_id = await create_hotel(alice_client, mock_hotel_data)
    other_id = await create_hotel(alice_client, {**mock_hotel_data, "title": "Other"})
    await add_review(alice_client, hotel_id, rating="5", body="Great")
    await add_review(alice_client, hotel_id, rating="2", body="Noisy")
    await add_review(alice_client, other_id, rating="3", body="Fine")
    assert await review_crud.count(db_session) == 3

    response = await alice_client.post(f"/hotels/{hotel_id}?_method=DELETE")

    assert response.status_code == 303
    assert response.headers["location"] == "/hotels"
    assert await listing_crud.get(db_session, id=hotel_id) is None
    remaining = await review_crud.get_multi(db_session)
    assert [review.body for review in remaining] == ["Fine"]
