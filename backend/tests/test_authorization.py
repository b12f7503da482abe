"""
Tests for the authorization guard and ownership resolver
"""
import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock
from uuid import uuid4

from application.services.authorization import AuthorizationGuard, OwnershipResolver
from core.exceptions import AuthorizationException, ResourceNotFoundException
from domain.entities import Application
from domain.enums import AuthorizationAction, UserRole
from domain.value_objects import Actor, OwnershipChain


def make_chain(owner_user_id=None, applicant_user_id=None):
    return OwnershipChain(
        job_offer_id=uuid4(),
        company_id=uuid4(),
        owner_user_id=owner_user_id or uuid4(),
        application_id=uuid4(),
        applicant_user_id=applicant_user_id or uuid4(),
    )


class TestAuthorizationGuard:
    """Rule precedence of the guard"""

    @pytest.fixture
    def guard(self):
        return AuthorizationGuard()

    @pytest.mark.parametrize("action", list(AuthorizationAction))
    def test_admin_is_allowed_everything(self, guard, action):
        admin = Actor(id=uuid4(), role=UserRole.ADMIN)
        assert guard.authorize(admin, action, make_chain()).allowed

    def test_only_applicants_create_applications(self, guard):
        assert guard.authorize(Actor(uuid4(), UserRole.APPLICANT), AuthorizationAction.CREATE_APPLICATION).allowed
        decision = guard.authorize(Actor(uuid4(), UserRole.COMPANY_REP), AuthorizationAction.CREATE_APPLICATION)
        assert not decision.allowed
        assert "company_rep" in decision.reason

    def test_read_own_application_requires_applicant_identity(self, guard):
        applicant = Actor(uuid4(), UserRole.APPLICANT)
        chain = make_chain(applicant_user_id=applicant.id)

        assert guard.authorize(applicant, AuthorizationAction.READ_OWN_APPLICATION, chain).allowed
        assert not guard.authorize(
            Actor(uuid4(), UserRole.APPLICANT), AuthorizationAction.READ_OWN_APPLICATION, chain
        ).allowed

    def test_company_owner_may_update_status(self, guard):
        rep = Actor(uuid4(), UserRole.COMPANY_REP)
        chain = make_chain(owner_user_id=rep.id)

        assert guard.authorize(rep, AuthorizationAction.UPDATE_APPLICATION_STATUS, chain).allowed
        assert guard.authorize(rep, AuthorizationAction.READ_JOB_APPLICATIONS, chain).allowed

    def test_company_owner_may_read_company_applications(self, guard):
        rep = Actor(uuid4(), UserRole.COMPANY_REP)
        company_chain = OwnershipChain(company_id=uuid4(), owner_user_id=rep.id)

        assert guard.authorize(rep, AuthorizationAction.READ_COMPANY_APPLICATIONS, company_chain).allowed
        assert not guard.authorize(
            Actor(uuid4(), UserRole.COMPANY_REP),
            AuthorizationAction.READ_COMPANY_APPLICATIONS,
            company_chain,
        ).allowed

    def test_rep_of_another_company_is_denied(self, guard):
        rep = Actor(uuid4(), UserRole.COMPANY_REP)
        chain = make_chain()  # owned by somebody else

        decision = guard.authorize(rep, AuthorizationAction.UPDATE_APPLICATION_STATUS, chain)

        assert not decision.allowed
        assert str(chain.company_id) in decision.reason

    def test_owner_id_match_without_rep_role_is_denied(self, guard):
        applicant = Actor(uuid4(), UserRole.APPLICANT)
        chain = make_chain(owner_user_id=applicant.id)

        assert not guard.authorize(applicant, AuthorizationAction.UPDATE_APPLICATION_STATUS, chain).allowed

    @pytest.mark.parametrize("action", [
        AuthorizationAction.UPDATE_APPLICATION_CONTENT,
        AuthorizationAction.DELETE_APPLICATION,
    ])
    def test_content_changes_belong_to_the_applicant(self, guard, action):
        applicant = Actor(uuid4(), UserRole.APPLICANT)
        chain = make_chain(applicant_user_id=applicant.id)

        assert guard.authorize(applicant, action, chain).allowed
        assert not guard.authorize(Actor(uuid4(), UserRole.APPLICANT), action, chain).allowed
        # Company owner cannot edit or delete a candidate's application
        owner = Actor(chain.owner_user_id, UserRole.COMPANY_REP)
        assert not guard.authorize(owner, action, chain).allowed

    def test_missing_resource_is_denied(self, guard):
        rep = Actor(uuid4(), UserRole.COMPANY_REP)
        assert not guard.authorize(rep, AuthorizationAction.UPDATE_APPLICATION_STATUS, None).allowed

    def test_ensure_raises_with_reason(self, guard):
        rep = Actor(uuid4(), UserRole.COMPANY_REP)
        with pytest.raises(AuthorizationException) as exc_info:
            guard.ensure(rep, AuthorizationAction.DELETE_APPLICATION, make_chain())

        assert exc_info.value.reason == "not the applicant of this application"
        assert str(exc_info.value) == "Access denied"


class TestOwnershipResolver:
    """Resolver delegates to the single-lookup repository"""

    @pytest.mark.asyncio
    async def test_resolves_application_chain(self):
        chain = make_chain()
        repo = Mock()
        repo.resolve_application_chain = AsyncMock(return_value=chain)

        result = await OwnershipResolver(repo).resolve_application(chain.application_id)

        assert result == chain
        repo.resolve_application_chain.assert_awaited_once_with(chain.application_id)

    @pytest.mark.asyncio
    async def test_missing_application_raises_not_found(self):
        repo = Mock()
        repo.resolve_application_chain = AsyncMock(return_value=None)

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await OwnershipResolver(repo).resolve_application(uuid4())

        assert exc_info.value.resource_type == "Application"

    @pytest.mark.asyncio
    async def test_missing_job_offer_raises_not_found(self):
        repo = Mock()
        repo.resolve_job_offer_chain = AsyncMock(return_value=None)

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await OwnershipResolver(repo).resolve_job_offer(uuid4())

        assert exc_info.value.resource_type == "JobOffer"

    @pytest.mark.asyncio
    async def test_resolves_company_chain(self):
        owner_id, company_id = uuid4(), uuid4()
        repo = Mock()
        repo.resolve_company_chain = AsyncMock(
            return_value=OwnershipChain(company_id=company_id, owner_user_id=owner_id)
        )

        chain = await OwnershipResolver(repo).resolve_company(company_id)

        assert chain.is_owned_by(owner_id)
        assert chain.job_offer_id is None
        repo.resolve_company_chain.assert_awaited_once_with(company_id)

    @pytest.mark.asyncio
    async def test_missing_company_raises_not_found(self):
        repo = Mock()
        repo.resolve_company_chain = AsyncMock(return_value=None)

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await OwnershipResolver(repo).resolve_company(uuid4())

        assert exc_info.value.resource_type == "Company"


class TestOwnershipRepository:
    """Chain is read from the database, never from the request"""

    @pytest.mark.asyncio
    async def test_resolves_chain_from_storage(self, uow_factory, world):
        async with uow_factory() as uow:
            created = await uow.applications.add_unique(
                Application(
                    id=uuid4(), job_offer_id=world.ids.job_a, applicant_user_id=world.ids.applicant
                )
            )

        async with uow_factory() as uow:
            chain = await uow.ownership.resolve_application_chain(created.id)
            offer_chain = await uow.ownership.resolve_job_offer_chain(world.ids.job_b)
            missing = await uow.ownership.resolve_application_chain(uuid4())

        assert chain.company_id == world.ids.company_a
        assert chain.owner_user_id == world.ids.rep_a
        assert chain.applicant_user_id == world.ids.applicant
        assert chain.job_offer_is_active is True
        assert offer_chain.owner_user_id == world.ids.rep_b
        assert offer_chain.application_id is None
        assert missing is None

    @pytest.mark.asyncio
    async def test_resolves_company_chain_from_storage(self, uow_factory, world):
        async with uow_factory() as uow:
            chain = await uow.ownership.resolve_company_chain(world.ids.company_b)
            missing = await uow.ownership.resolve_company_chain(uuid4())

        assert chain.company_id == world.ids.company_b
        assert chain.owner_user_id == world.ids.rep_b
        assert missing is None

    @pytest.mark.asyncio
    async def test_deleted_application_has_no_chain(self, uow_factory, world):
        async with uow_factory() as uow:
            created = await uow.applications.add_unique(
                Application(
                    id=uuid4(), job_offer_id=world.ids.job_a, applicant_user_id=world.ids.applicant
                )
            )

        async with uow_factory() as uow:
            assert await uow.applications.delete(created.id, datetime.now(timezone.utc)) is True

        async with uow_factory() as uow:
            assert await uow.ownership.resolve_application_chain(created.id) is None
            assert await uow.applications.exists_for_job(world.ids.job_a, world.ids.applicant)
