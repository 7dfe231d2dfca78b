"""
Jammit.user_services
-------------------------
This module provides user management utilities

Key Features:
    - Provides various user endpoint handlers

Dependencies:
    - beanie
"""
# Beanie
from beanie import PydanticObjectId as ObjId
# Entities
from jammit.entities.user_entity import User
# Exceptions
from jammit.exceptions.user_exceptions import UserNotFoundException
# Models
from jammit.models.user_models import UpdateUserRequest, UserModel, UserResponse


async def _summary(user: User) -> UserResponse:
    return UserResponse.from_document(
        user.doc,
        written_review_count=await user.written_review_count,
        received_review_count=await user.received_review_count)


async def get_details(user: User) -> UserResponse:
    """Get the details of the calling user."""
    return await _summary(user)


async def update_details(user: User, request: UpdateUserRequest) -> UserResponse:
    """Apply profile changes of the calling user."""
    user.doc.nickname = request.nickname
    await user.save()
    return await _summary(user)


async def get_user(user_id: ObjId) -> UserResponse:
    """Get the public details of any user."""
    user = User(await UserModel.get(user_id))
    if not user.exists:
        raise UserNotFoundException(user_id=user_id)
    return await _summary(user)
