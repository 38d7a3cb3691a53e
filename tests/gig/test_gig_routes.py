"""
tests/gig/test_gig_routes.py

Test cases for gig API endpoints.
Covers public browsing, detail retrieval, view tracking and freelancer-only management.
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from gighub.core.exceptions import NotFoundError
from gighub.database.models import User
from gighub.gig import schemas as gig_schemas
from gighub.gig import services as gig_services

# Public Endpoints


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "list_active_gigs", new_callable=AsyncMock)
async def test_list_gigs(
    mock_list: AsyncMock,
    fake_gig_read: gig_schemas.GigRead,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_list.return_value = [fake_gig_read]

    response = await async_client.get("/gigs?category=Design")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == str(fake_gig_read.id)
    assert data[0]["deliveryTime"] == 3
    assert data[0]["isActive"] is True
    assert data[0]["averageRating"] == 0.0
    assert data[0]["freelancer"]["name"] == fake_gig_read.freelancer.name  # type: ignore[union-attr]
    mock_list.assert_awaited_once_with(category="Design", search=None)


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "get_public_gig", new_callable=AsyncMock)
async def test_get_gig_not_found(
    mock_get: AsyncMock, async_client: AsyncClient, override_get_db: None
) -> None:
    gig_id = uuid4()
    mock_get.side_effect = NotFoundError("Gig not found")

    response = await async_client.get(f"/gigs/{gig_id}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Gig not found"}
    mock_get.assert_awaited_once_with(gig_id)


@pytest.mark.asyncio
async def test_get_gig_malformed_id(async_client: AsyncClient, override_get_db: None) -> None:
    response = await async_client.get("/gigs/not-a-uuid")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "message" in response.json()


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "record_view", new_callable=AsyncMock)
async def test_track_view(
    mock_view: AsyncMock, async_client: AsyncClient, override_get_db: None
) -> None:
    gig_id = uuid4()
    mock_view.return_value = 7

    response = await async_client.post(f"/gigs/{gig_id}/view")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "View tracked successfully", "views": 7}


# Authenticated Endpoints (Freelancer)


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "create_gig", new_callable=AsyncMock)
async def test_create_gig_as_freelancer(
    mock_create: AsyncMock,
    fake_gig_read: gig_schemas.GigRead,
    valid_gig_payload: dict,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_create.return_value = fake_gig_read

    response = await async_client.post("/gigs", json=valid_gig_payload)

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["id"] == str(fake_gig_read.id)
    owner, sent = mock_create.call_args.args
    assert owner.id == mock_current_freelancer_user.id
    assert sent.delivery_time == 3
    assert sent.price == 50


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "create_gig", new_callable=AsyncMock)
async def test_create_gig_as_client_forbidden(
    mock_create: AsyncMock,
    valid_gig_payload: dict,
    mock_current_client_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    response = await async_client.post("/gigs", json=valid_gig_payload)

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json() == {"message": "Forbidden: insufficient rights"}
    mock_create.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_gig_unauthenticated(
    valid_gig_payload: dict, async_client: AsyncClient, override_get_db: None
) -> None:
    response = await async_client.post("/gigs", json=valid_gig_payload)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("field", "value", "message"),
    [
        ("title", "Too short", "Title must be between 10 and 100 characters"),
        ("title", "x" * 101, "Title must be between 10 and 100 characters"),
        ("description", "A" * 49, "Description must be between 50 and 2000 characters"),
        ("price", 0, "Price must be greater than $0 and at most $10,000"),
        ("price", 10000.01, "Price must be greater than $0 and at most $10,000"),
        ("deliveryTime", 0, "Delivery time must be between 1 and 365 days"),
        ("deliveryTime", 366, "Delivery time must be between 1 and 365 days"),
    ],
)
@patch.object(gig_services.GigService, "create_gig", new_callable=AsyncMock)
async def test_create_gig_out_of_bounds(
    mock_create: AsyncMock,
    field: str,
    value: object,
    message: str,
    valid_gig_payload: dict,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    payload = {**valid_gig_payload, field: value}

    response = await async_client.post("/gigs", json=payload)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == message
    mock_create.assert_not_awaited()


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "create_gig", new_callable=AsyncMock)
async def test_create_gig_bounds_are_inclusive(
    mock_create: AsyncMock,
    fake_gig_read: gig_schemas.GigRead,
    valid_gig_payload: dict,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_create.return_value = fake_gig_read
    payload = {
        **valid_gig_payload,
        "title": "x" * 10,
        "description": "d" * 2000,
        "price": 10000,
        "deliveryTime": 365,
    }

    response = await async_client.post("/gigs", json=payload)

    assert response.status_code == status.HTTP_201_CREATED


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "list_my_gigs", new_callable=AsyncMock)
async def test_list_my_gigs(
    mock_list_mine: AsyncMock,
    fake_gig_read: gig_schemas.GigRead,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    fake_gig_read.is_active = False
    mock_list_mine.return_value = [fake_gig_read]

    response = await async_client.get("/gigs/freelancer")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()[0]["isActive"] is False
    mock_list_mine.assert_awaited_once()


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "update_gig", new_callable=AsyncMock)
async def test_update_gig_not_owned(
    mock_update: AsyncMock,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_update.side_effect = NotFoundError(gig_services.NOT_FOUND_OR_UNAUTHORIZED)

    response = await async_client.put(f"/gigs/{uuid4()}", json={"price": 75})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Gig not found or not authorized"}


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "update_gig", new_callable=AsyncMock)
async def test_update_gig_partial_revalidates(
    mock_update: AsyncMock,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    response = await async_client.put(f"/gigs/{uuid4()}", json={"description": "too short"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Description must be between 50 and 2000 characters"
    mock_update.assert_not_awaited()


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "delete_gig", new_callable=AsyncMock)
async def test_delete_gig(
    mock_delete: AsyncMock,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    gig_id = uuid4()
    mock_delete.return_value = None

    response = await async_client.delete(f"/gigs/{gig_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Gig deleted successfully"}
    assert mock_delete.call_args.args[1] == gig_id


@pytest.mark.asyncio
@patch.object(gig_services.GigService, "toggle_gig_status", new_callable=AsyncMock)
async def test_toggle_gig_status(
    mock_toggle: AsyncMock,
    fake_gig_read: gig_schemas.GigRead,
    mock_current_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    fake_gig_read.is_active = False
    mock_toggle.return_value = gig_schemas.GigToggleResponse(
        message="Gig deactivated successfully", gig=fake_gig_read
    )

    response = await async_client.patch(f"/gigs/{fake_gig_read.id}/toggle-status")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["message"] == "Gig deactivated successfully"
    assert data["gig"]["isActive"] is False
