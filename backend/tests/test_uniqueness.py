"""
Tests for one-application-per-job-offer enforcement
"""
import asyncio

import pytest
from uuid import uuid4

from application.services.uniqueness import UniquenessEnforcer
from core.exceptions import DuplicateResourceException
from domain.entities import Application
from domain.value_objects import ReservationStatus


class ConstrainedApplicationStore:
    """Application store whose insert behaves like a unique-constrained table"""

    def __init__(self):
        self.rows = {}
        self._lock = asyncio.Lock()

    async def add_unique(self, application: Application) -> Application:
        key = (application.job_offer_id, application.applicant_user_id)
        # Yield first so concurrent callers interleave before the insert
        await asyncio.sleep(0)
        async with self._lock:
            if key in self.rows:
                raise DuplicateResourceException("Application", "pair", str(key))
            self.rows[key] = application
        return application

    async def exists_for_job(self, job_offer_id, applicant_user_id) -> bool:
        return (job_offer_id, applicant_user_id) in self.rows


class TestUniquenessEnforcer:

    @pytest.mark.asyncio
    async def test_first_reservation_creates_pending_application(self):
        store = ConstrainedApplicationStore()
        job_offer_id, applicant_id = uuid4(), uuid4()

        reservation = await UniquenessEnforcer(store).try_reserve(
            job_offer_id, applicant_id, cover_letter="Hello"
        )

        assert reservation.status == ReservationStatus.RESERVED
        assert reservation.application.job_offer_id == job_offer_id
        assert reservation.application.is_pending()
        assert reservation.application.cover_letter == "Hello"

    @pytest.mark.asyncio
    async def test_second_reservation_already_exists(self):
        store = ConstrainedApplicationStore()
        enforcer = UniquenessEnforcer(store)
        job_offer_id, applicant_id = uuid4(), uuid4()

        await enforcer.try_reserve(job_offer_id, applicant_id)
        again = await enforcer.try_reserve(job_offer_id, applicant_id)

        assert again.status == ReservationStatus.ALREADY_EXISTS
        assert again.application is None

    @pytest.mark.asyncio
    async def test_concurrent_reservations_yield_exactly_one(self):
        store = ConstrainedApplicationStore()
        enforcer = UniquenessEnforcer(store)
        job_offer_id, applicant_id = uuid4(), uuid4()

        results = await asyncio.gather(*[
            enforcer.try_reserve(job_offer_id, applicant_id) for _ in range(25)
        ])

        statuses = [r.status for r in results]
        assert statuses.count(ReservationStatus.RESERVED) == 1
        assert statuses.count(ReservationStatus.ALREADY_EXISTS) == 24
        assert len(store.rows) == 1

    @pytest.mark.asyncio
    async def test_can_apply_is_advisory_read(self):
        store = ConstrainedApplicationStore()
        enforcer = UniquenessEnforcer(store)
        job_offer_id, applicant_id = uuid4(), uuid4()

        assert await enforcer.can_apply(job_offer_id, applicant_id) is True
        await enforcer.try_reserve(job_offer_id, applicant_id)
        assert await enforcer.can_apply(job_offer_id, applicant_id) is False
        # Another applicant is unaffected
        assert await enforcer.can_apply(job_offer_id, uuid4()) is True


class TestApplicationRepositoryConstraint:
    """The database constraint is the source of truth"""

    @pytest.mark.asyncio
    async def test_duplicate_insert_raises_conflict_and_keeps_session_usable(self, uow_factory, world):
        def draft():
            return Application(
                id=uuid4(),
                job_offer_id=world.ids.job_a,
                applicant_user_id=world.ids.applicant,
            )

        async with uow_factory() as uow:
            first = await uow.applications.add_unique(draft())

            with pytest.raises(DuplicateResourceException):
                await uow.applications.add_unique(draft())

            # Savepoint rollback leaves the first insert in place
            assert await uow.applications.exists_for_job(world.ids.job_a, world.ids.applicant)

        async with uow_factory() as uow:
            stored = await uow.applications.list_for_job_offer(world.ids.job_a)

        assert [a.id for a in stored] == [first.id]

    @pytest.mark.asyncio
    async def test_enforcer_over_database(self, uow_factory, world):
        async with uow_factory() as uow:
            reservation = await UniquenessEnforcer(uow.applications).try_reserve(
                world.ids.job_b, world.ids.applicant
            )
        async with uow_factory() as uow:
            duplicate = await UniquenessEnforcer(uow.applications).try_reserve(
                world.ids.job_b, world.ids.applicant
            )

        assert reservation.reserved
        assert duplicate.status == ReservationStatus.ALREADY_EXISTS
