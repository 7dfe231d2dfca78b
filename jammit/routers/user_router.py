"""
Jammit.user_router
-------------------------
This module provides endpoint routing for user functionalities

Key Features:
    - Provides various user endpoints

Dependencies:
    - fastapi
    - beanie
"""
# Types
from typing import Annotated
from bson.objectid import ObjectId
from beanie import PydanticObjectId as ObjId
# FastAPI
from fastapi import APIRouter, Depends, Path, status
# Entities
from jammit.entities.user_entity import User
# Models
from jammit.models.common_models import CommonResponse
from jammit.models.user_models import UpdateUserRequest, UserResponse
# Services
from jammit.services import user_services
from jammit.services.auth_services import auth_check
from jammit.services.exception_services import handle_exceptions
from jammit.services.logging_services import logger_service as logger

# Create the router
user_router = APIRouter()


@user_router.get(
    '/me',
    response_model=CommonResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    description='Get the details of the calling user.'
)
@handle_exceptions(logger)
async def get_my_details(
    user: User = Depends(auth_check),
):
    """Get the details of the calling user."""
    response = await user_services.get_details(user=user)
    return CommonResponse[UserResponse].success(response)


@user_router.put(
    '/me',
    response_model=CommonResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    description='Update the profile of the calling user.'
)
@handle_exceptions(logger)
async def update_my_details(
    request: UpdateUserRequest,
    user: User = Depends(auth_check),
):
    """Update the profile of the calling user."""
    response = await user_services.update_details(user=user, request=request)
    return CommonResponse[UserResponse].success(response)


@user_router.get(
    '/{user_id}',
    response_model=CommonResponse[UserResponse],
    status_code=status.HTTP_200_OK,
    description='Get the public details of a user.'
)
@handle_exceptions(logger)
async def get_user_details(
    user_id: Annotated[str, Path(
        pattern='^[a-fA-F0-9]{24}$', examples=[str(ObjectId())],
        description='Unique identifier of the user.')],
    _user: User = Depends(auth_check),
):
    """Get the public details of a user."""
    response = await user_services.get_user(ObjId(user_id))
    return CommonResponse[UserResponse].success(response)
