"""
Shared fixtures: SQLite-backed database, seeded ownership graph, actors
"""
import os

# Keep test runs off the log directory
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from types import SimpleNamespace
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.database import Base
from domain.enums import UserRole
from domain.value_objects import Actor
from infrastructure.persistence.models import CompanyModel, JobOfferModel, UserModel
from infrastructure.persistence.unit_of_work import SQLAlchemyUnitOfWork


@pytest_asyncio.fixture
async def engine(tmp_path):
    """File-based SQLite engine with working SAVEPOINT support"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    # Let SQLAlchemy emit BEGIN itself so nested transactions behave
    @event.listens_for(engine.sync_engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def uow_factory(session_factory):
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest_asyncio.fixture
async def world(session_factory):
    """
    Two companies with their reps, two applicants and an admin:

        rep_a  -> company_a -> job_a (active), job_closed (inactive)
        rep_b  -> company_b -> job_b (active)
    """
    ids = SimpleNamespace(
        applicant=uuid4(),
        other_applicant=uuid4(),
        rep_a=uuid4(),
        rep_b=uuid4(),
        admin=uuid4(),
        company_a=uuid4(),
        company_b=uuid4(),
        job_a=uuid4(),
        job_closed=uuid4(),
        job_b=uuid4(),
    )

    async with session_factory() as session:
        session.add_all([
            UserModel(id=ids.applicant, role=UserRole.APPLICANT.value, email="applicant@example.com"),
            UserModel(id=ids.other_applicant, role=UserRole.APPLICANT.value, email="other@example.com"),
            UserModel(id=ids.rep_a, role=UserRole.COMPANY_REP.value, email="rep.a@example.com"),
            UserModel(id=ids.rep_b, role=UserRole.COMPANY_REP.value, email="rep.b@example.com"),
            UserModel(id=ids.admin, role=UserRole.ADMIN.value, email="admin@example.com"),
        ])
        await session.flush()
        session.add_all([
            CompanyModel(id=ids.company_a, owner_user_id=ids.rep_a, name="Acme"),
            CompanyModel(id=ids.company_b, owner_user_id=ids.rep_b, name="Globex"),
        ])
        await session.flush()
        session.add_all([
            JobOfferModel(id=ids.job_a, company_id=ids.company_a, title="Backend Engineer", is_active=True),
            JobOfferModel(id=ids.job_closed, company_id=ids.company_a, title="Closed Role", is_active=False),
            JobOfferModel(id=ids.job_b, company_id=ids.company_b, title="Data Analyst", is_active=True),
        ])
        await session.commit()

    return SimpleNamespace(
        ids=ids,
        applicant=Actor(id=ids.applicant, role=UserRole.APPLICANT),
        other_applicant=Actor(id=ids.other_applicant, role=UserRole.APPLICANT),
        rep_a=Actor(id=ids.rep_a, role=UserRole.COMPANY_REP),
        rep_b=Actor(id=ids.rep_b, role=UserRole.COMPANY_REP),
        admin=Actor(id=ids.admin, role=UserRole.ADMIN),
    )
