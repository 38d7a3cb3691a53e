"""
tests/profile/test_profile_routes.py

Test cases for profile endpoints.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from gighub.auth.schemas import UserRead
from gighub.core.exceptions import NotFoundError
from gighub.database.enums import UserRole
from gighub.database.models import User
from gighub.profile import services as profile_services
from gighub.profile.schemas import PublicProfileRead


@pytest.mark.asyncio
async def test_get_my_profile(
    mock_current_client_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    response = await async_client.get("/profile")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["email"] == "client.test@example.com"
    assert data["profile"]["skills"] == ["testing"]
    assert data["wishlist"] == []


@pytest.mark.asyncio
async def test_get_my_profile_requires_token(async_client: AsyncClient, override_get_db: None) -> None:
    response = await async_client.get("/profile")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
@patch.object(profile_services.ProfileService, "update_my_profile", new_callable=AsyncMock)
async def test_update_my_profile_passes_whitelist(
    mock_update: AsyncMock,
    mock_current_client_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_update.return_value = UserRead.model_validate(mock_current_client_user)

    response = await async_client.put(
        "/profile", json={"bio": "New bio", "role": "freelancer", "password": "x"}
    )

    assert response.status_code == status.HTTP_200_OK
    _, payload = mock_update.call_args.args
    assert payload.model_dump(exclude_unset=True) == {"bio": "New bio"}


@pytest.mark.asyncio
@patch.object(profile_services.ProfileService, "get_public_profile", new_callable=AsyncMock)
async def test_get_public_profile(
    mock_public: AsyncMock,
    fake_freelancer_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_public.return_value = PublicProfileRead(
        id=fake_freelancer_user.id,
        name=fake_freelancer_user.name,
        role=UserRole.FREELANCER,
        created_at=datetime.now(timezone.utc),
        total_gigs=2,
        completed_orders=1,
        average_rating=4.3,
        total_ratings=4,
    )

    response = await async_client.get(f"/profile/{fake_freelancer_user.id}")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["totalGigs"] == 2
    assert data["completedOrders"] == 1
    assert data["averageRating"] == 4.3
    assert "email" not in data


@pytest.mark.asyncio
@patch.object(profile_services.ProfileService, "get_public_profile", new_callable=AsyncMock)
async def test_get_public_profile_not_found(
    mock_public: AsyncMock,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    mock_public.side_effect = NotFoundError("User not found")

    response = await async_client.get(f"/profile/{uuid4()}")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "User not found"}


@pytest.mark.asyncio
@patch.object(profile_services.ProfileService, "update_my_profile", new_callable=AsyncMock)
async def test_update_my_profile_rejects_blank_name(
    mock_update: AsyncMock,
    mock_current_client_user: User,
    async_client: AsyncClient,
    override_get_db: None,
) -> None:
    response = await async_client.put("/profile", json={"name": "   "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Name cannot be blank"
    mock_update.assert_not_awaited()
