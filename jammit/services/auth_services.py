"""
Jammit.auth_services
-------------------------
This module provides authentication of incoming requests and
interfaces to the fief authentication service

Key Features:
    - Initializes the fief client
    - Provides the current user resolution (auth_check)

Dependencies:
    - fastapi
    - fief_client
"""
# Basics
from typing import Optional
from uuid import UUID
# FastAPI
from fastapi import Depends, Request
from fastapi.security import OAuth2AuthorizationCodeBearer
# Fief
from fief_client import FiefAccessTokenInfo, FiefAsync
from fief_client.integrations.fastapi import FiefAuth
# Entities
from jammit.entities.user_entity import User
# Exceptions
from jammit.exceptions.user_exceptions import UserNotAuthenticatedException
# Models
from jammit.models.user_models import UserModel
# Services
from jammit.services.config_services import cfg
from jammit.services.logging_services import logger_service as logger

DEV_KEY_HEADER = "X-Jammit-Key"
DEV_USER_HEADER = "X-Jammit-User"


def init_fief() -> FiefAuth:
    """Initialize the Fief client."""
    base_url = cfg.get('FIEF', 'BASE_URL', fallback='https://jammit.fief.dev')
    fiefinst = FiefAsync(
        base_url,
        cfg.get('FIEF', 'CLIENT_ID', fallback='jammit-backend'),
        cfg.get('FIEF', 'CLIENT_SECRET', fallback=None)
    )

    scheme = OAuth2AuthorizationCodeBearer(
        base_url + "/authorize",
        base_url + "/api/token",
        scopes={"openid": "openid", "offline_access": "offline_access"},
        auto_error=False,
    )

    return FiefAuth(fiefinst, scheme)


fief = init_fief()


def _dev_identity(request: Request) -> Optional[UUID]:
    """Return the identity passed by development headers, if enabled."""
    dev_key = cfg.get('AUTH', 'DEV_KEY', fallback='')
    if not dev_key or request.headers.get(DEV_KEY_HEADER) != dev_key:
        return None
    provided_id = request.headers.get(DEV_USER_HEADER)
    try:
        return UUID(provided_id) if provided_id else None
    except ValueError:
        return None


async def auth_check(
        request: Request,
        token_info: Optional[FiefAccessTokenInfo] = Depends(
            fief.authenticated(optional=True))
) -> User:
    """Middlepoint that resolves the identity of the calling user."""
    provided_id: Optional[UUID] = None
    if token_info:
        provided_id = UUID(str(token_info['id']))
    else:
        provided_id = _dev_identity(request)

    if provided_id is None:
        raise UserNotAuthenticatedException()

    usr = await UserModel.find_one(UserModel.fief_id == provided_id)
    if usr is None:
        # First request of this account, register it
        usr = await UserModel(fief_id=provided_id).insert()
        logger.info(f"Registered new user '#{usr.id}' for '{provided_id}'.")

    return User(usr)
