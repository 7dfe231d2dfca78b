"""Shared fixtures: in-memory database, users, gatherings and an HTTP client."""
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from jammit.entities.user_entity import User
from jammit.exceptions.user_exceptions import UserNotAuthenticatedException
from jammit.models.gathering_models import (
    BandSession,
    GatheringModel,
    GatheringParticipant,
    GatheringSession,
    GatheringStatus)
from jammit.models.user_models import UserModel
from jammit.services import database_services as database
from jammit.services.auth_services import auth_check
from jammit.services.logging_services import logger_service
from main import create_app


@pytest.fixture
async def db():
    """Fresh in-memory database bound to all documents."""
    client = AsyncMongoMockClient()
    database_ = client[f"jammit_{uuid4().hex}"]
    await database.setup(database_)
    yield database_


@pytest.fixture
def make_user(db):
    async def _make_user(nickname: str) -> User:
        usr = await UserModel(
            nickname=nickname, email=f"{nickname}@jammit.dev").insert()
        return User(usr)
    return _make_user


@pytest.fixture
def make_gathering(db):
    async def _make_gathering(creator: User, members=(),
                              status=GatheringStatus.COMPLETED) -> GatheringModel:
        participants = [GatheringParticipant(user_id=creator.doc.id)]
        participants += [GatheringParticipant(user_id=member.doc.id,
                                              band_session=BandSession.DRUM)
                         for member in members]
        return await GatheringModel(
            name="Friday jam",
            creator_id=creator.doc.id,
            status=status,
            sessions=[GatheringSession(band_session=BandSession.DRUM,
                                       recruit_count=max(len(members), 1),
                                       current_count=len(members))],
            participants=participants).insert()
    return _make_gathering


@pytest.fixture
def app(db):
    return create_app(lifespan=None)


@pytest.fixture
def login(app):
    """Make every following request act as the given user, or anonymous for None."""
    def _login(user: User = None):
        async def _current_user():
            if user is None:
                raise UserNotAuthenticatedException()
            return user
        app.dependency_overrides[auth_check] = _current_user
    return _login


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app),
                           base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def error_logs():
    """Collect messages logged at error level."""
    messages = []
    handler_id = logger_service.logger.add(
        messages.append, level="ERROR", format="{message}")
    yield messages
    logger_service.logger.remove(handler_id)
