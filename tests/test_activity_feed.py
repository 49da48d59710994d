import pytest

from app.core.exceptions import PropertyNotFoundError, UserNotFoundError
from app.repositories.activity_repository import ActivityRepository
from app.schemas.common import ActivityType
from app.services.activity_feed import ActivityFeedService


class TestRecord:
    @pytest.mark.asyncio
    async def test_record_stamps_id_and_time(self, activity_feed, alice, clock):
        expected_time = clock.now

        activity = await activity_feed.record(
            alice.id, ActivityType.view, property_id=3, details={"source": "search"}
        )

        assert activity.id == 1
        assert activity.created_at == expected_time
        assert activity.type is ActivityType.view
        assert activity.details == {"source": "search"}

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, activity_feed, seeded_store):
        with pytest.raises(UserNotFoundError):
            await activity_feed.record(77, ActivityType.search)

    @pytest.mark.asyncio
    async def test_unknown_property_rejected(self, activity_feed, alice):
        with pytest.raises(PropertyNotFoundError):
            await activity_feed.record(alice.id, ActivityType.view, property_id=999)


class TestRecent:
    @pytest.mark.asyncio
    async def test_limit_two_returns_latest_two_newest_first(self, activity_feed, alice):
        t1 = await activity_feed.record(alice.id, ActivityType.view, property_id=1)
        t2 = await activity_feed.record(alice.id, ActivityType.view, property_id=2)
        t3 = await activity_feed.record(alice.id, ActivityType.view, property_id=3)
        assert t1.created_at < t2.created_at < t3.created_at

        recent = await activity_feed.recent(alice.id, limit=2)

        assert [a.id for a in recent] == [t3.id, t2.id]

    @pytest.mark.asyncio
    async def test_default_limit(self, seeded_store, alice):
        feed = ActivityFeedService(ActivityRepository(seeded_store), default_limit=3)
        for _ in range(5):
            await feed.record(alice.id, ActivityType.search)

        assert len(await feed.recent(alice.id)) == 3

    @pytest.mark.asyncio
    async def test_only_own_activities(self, activity_feed, alice, bob):
        await activity_feed.record(alice.id, ActivityType.search)
        mine = await activity_feed.record(bob.id, ActivityType.search)

        assert [a.id for a in await activity_feed.recent(bob.id)] == [mine.id]

    @pytest.mark.asyncio
    async def test_same_instant_newer_insert_first(self, seeded_store, alice):
        stamp = seeded_store.clock()
        seeded_store.activities._clock = lambda: stamp
        feed = ActivityFeedService(ActivityRepository(seeded_store))

        first = await feed.record(alice.id, ActivityType.view)
        second = await feed.record(alice.id, ActivityType.view)

        assert [a.id for a in await feed.recent(alice.id)] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_zero_limit_is_empty(self, activity_feed, alice):
        await activity_feed.record(alice.id, ActivityType.search)
        assert await activity_feed.recent(alice.id, limit=0) == []
