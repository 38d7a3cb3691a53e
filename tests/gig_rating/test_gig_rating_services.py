"""
tests/gig_rating/test_gig_rating_services.py

Service-level tests for gig ratings: one rating per client per gig and an
aggregate that always matches the stored ratings.
"""

import asyncio
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gighub.core.exceptions import ConflictError, NotFoundError
from gighub.database.base import Base
from gighub.database.enums import UserRole
from gighub.database.models import User
from gighub.database.session import enable_sqlite_foreign_keys
from gighub.gig.models import Gig
from gighub.gig_rating.schemas import RatingWrite
from gighub.gig_rating.services import GigRatingService, round_average


@pytest.mark.parametrize(
    ("ratings", "expected"),
    [
        ([], 0.0),
        ([4], 4.0),
        ([5, 5, 4], 4.7),
        ([4, 4, 5, 4], 4.3),  # 4.25 rounds half up
        ([1, 2], 1.5),
        ([4.5, 4], 4.3),
        ([4.1, 4.2], 4.2),  # 4.15 exactly, not 4.1499...
    ],
)
def test_round_average(ratings: list[float], expected: float) -> None:
    assert round_average(ratings) == expected


@pytest.mark.asyncio
async def test_add_rating_sets_aggregate(
    db_session: AsyncSession, client_user: User, freelancer: User, gig: Gig
) -> None:
    result = await GigRatingService(db_session).add_rating(client_user, gig.id, RatingWrite(rating=4))

    assert result.message == "Rating added successfully"
    assert result.average_rating == 4.0
    assert result.total_ratings == 1
    assert result.rating.client.name == client_user.name
    assert result.rating.freelancer_id == freelancer.id
    assert result.rating.comment is None

    await db_session.refresh(gig)
    assert gig.average_rating == 4.0
    assert gig.total_ratings == 1


@pytest.mark.asyncio
async def test_second_rating_by_same_client_conflicts(
    db_session: AsyncSession, client_user: User, gig: Gig
) -> None:
    service = GigRatingService(db_session)
    await service.add_rating(client_user, gig.id, RatingWrite(rating=4))

    with pytest.raises(ConflictError) as exc:
        await service.add_rating(client_user, gig.id, RatingWrite(rating=5))
    assert exc.value.message == "You have already rated this gig"

    ratings = await service.list_for_gig(gig.id)
    assert [r.rating for r in ratings] == [4]


@pytest.mark.asyncio
async def test_update_mutates_same_record_and_keeps_count(
    db_session: AsyncSession, client_user: User, gig: Gig
) -> None:
    service = GigRatingService(db_session)
    created = await service.add_rating(client_user, gig.id, RatingWrite(rating=4, comment="ok"))

    updated = await service.update_rating(client_user, gig.id, RatingWrite(rating=2))

    assert updated.message == "Rating updated successfully"
    assert updated.rating.id == created.rating.id
    assert updated.rating.rating == 2
    assert updated.rating.comment is None
    assert updated.average_rating == 2.0
    assert updated.total_ratings == 1


@pytest.mark.asyncio
async def test_update_without_existing_rating(
    db_session: AsyncSession, client_user: User, gig: Gig
) -> None:
    with pytest.raises(NotFoundError) as exc:
        await GigRatingService(db_session).update_rating(client_user, gig.id, RatingWrite(rating=3))
    assert exc.value.message == "Rating not found"


@pytest.mark.asyncio
async def test_rating_missing_gig(db_session: AsyncSession, client_user: User) -> None:
    with pytest.raises(NotFoundError) as exc:
        await GigRatingService(db_session).add_rating(client_user, uuid4(), RatingWrite(rating=3))
    assert exc.value.message == "Gig not found"


@pytest.mark.asyncio
async def test_aggregate_matches_mean_after_mixed_writes(
    db_session: AsyncSession,
    client_user: User,
    second_client: User,
    gig: Gig,
    make_user,
) -> None:
    service = GigRatingService(db_session)
    third = await make_user(UserRole.CLIENT, "Tia Third", "tia@example.com")

    await service.add_rating(client_user, gig.id, RatingWrite(rating=5))
    await service.add_rating(second_client, gig.id, RatingWrite(rating=4))
    await service.add_rating(third, gig.id, RatingWrite(rating=4))
    result = await service.update_rating(second_client, gig.id, RatingWrite(rating=5))

    # 5, 5, 4 -> 4.666...
    assert result.average_rating == 4.7
    assert result.total_ratings == 3
    await db_session.refresh(gig)
    assert (gig.average_rating, gig.total_ratings) == (4.7, 3)



@pytest.mark.asyncio
async def test_list_newest_first_and_my_rating(
    db_session: AsyncSession, client_user: User, second_client: User, gig: Gig
) -> None:
    service = GigRatingService(db_session)
    await service.add_rating(client_user, gig.id, RatingWrite(rating=3))
    await service.add_rating(second_client, gig.id, RatingWrite(rating=5))

    listed = await service.list_for_gig(gig.id)
    mine = await service.get_my_rating(client_user, gig.id)

    assert [r.client.name for r in listed] == [second_client.name, client_user.name]
    assert mine is not None and mine.rating == 3


@pytest.mark.asyncio
async def test_my_rating_absent_is_none(
    db_session: AsyncSession, second_client: User, gig: Gig
) -> None:
    assert await GigRatingService(db_session).get_my_rating(second_client, gig.id) is None


@pytest.mark.asyncio
async def test_fractional_ratings_are_stored_and_averaged(
    db_session: AsyncSession, client_user: User, second_client: User, gig: Gig
) -> None:
    service = GigRatingService(db_session)

    first = await service.add_rating(client_user, gig.id, RatingWrite(rating=4.5))
    second = await service.add_rating(second_client, gig.id, RatingWrite(rating=4))

    assert first.rating.rating == 4.5
    assert first.average_rating == 4.5
    assert (second.average_rating, second.total_ratings) == (4.3, 2)
    await db_session.refresh(gig)
    assert (gig.average_rating, gig.total_ratings) == (4.3, 2)


@pytest.mark.asyncio
async def test_concurrent_ratings_leave_a_consistent_aggregate(tmp_path: Path) -> None:
    """Each rating runs in its own session against a shared file database."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ratings.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    stars = [1, 2, 3, 4, 5, 5]
    async with factory() as session:
        owner = User(
            name="Fran Freelancer", email="fran@example.com", role=UserRole.FREELANCER,
            hashed_password="x", wishlist_items=[],
        )
        clients = [
            User(
                name=f"Client {i}", email=f"client{i}@example.com", role=UserRole.CLIENT,
                hashed_password="x", wishlist_items=[],
            )
            for i in range(len(stars))
        ]
        gig = Gig(
            freelancer=owner, title="Logo design!", description="A" * 60, category="Design",
            price=50.0, delivery_time=3, tags=[], images=[],
        )
        session.add_all([gig, *clients])
        await session.commit()
        gig_id = gig.id
        client_ids = [c.id for c in clients]

    async def rate(client_id: UUID, value: int) -> None:
        async with factory() as session:
            client = await session.get(User, client_id)
            assert client is not None
            await GigRatingService(session).add_rating(client, gig_id, RatingWrite(rating=value))

    try:
        await asyncio.gather(*(rate(cid, value) for cid, value in zip(client_ids, stars)))

        async with factory() as session:
            stored = await session.get(Gig, gig_id)
            assert stored is not None
            assert (stored.average_rating, stored.total_ratings) == (3.3, 6)
    finally:
        await engine.dispose()
