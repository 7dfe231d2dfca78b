"""
Jammit.gathering_router
-------------------------
This module provides endpoint routing for gathering functionalities

Key Features:
    - Create gatherings and look them up
    - Join a band session of a gathering
    - Complete or cancel a gathering

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
from jammit.models.gathering_models import (
    CreateGatheringRequest,
    GatheringResponse,
    JoinGatheringRequest)
# Services
from jammit.services import gathering_services
from jammit.services.auth_services import auth_check
from jammit.services.exception_services import handle_exceptions
from jammit.services.logging_services import logger_service as logger

# Create the router
gathering_router = APIRouter()

GatheringIdPath = Annotated[str, Path(
    pattern='^[a-fA-F0-9]{24}$', examples=[str(ObjectId())],
    description='Unique identifier of the gathering.')]


@gathering_router.post(
    '',
    response_model=CommonResponse[GatheringResponse],
    status_code=status.HTTP_201_CREATED,
    description='Create a gathering recruiting for the given band sessions.')
@handle_exceptions(logger)
async def create_gathering(
    request: CreateGatheringRequest,
    user: User = Depends(auth_check)
):
    """Handle request to create a gathering"""
    response = await gathering_services.create_gathering(user=user, request=request)
    return CommonResponse[GatheringResponse].success(
        response, code=status.HTTP_201_CREATED)


@gathering_router.get(
    '/{gathering_id}',
    response_model=CommonResponse[GatheringResponse],
    status_code=status.HTTP_200_OK,
    description='Get the details of a gathering.')
@handle_exceptions(logger)
async def get_gathering(
    gathering_id: GatheringIdPath,
    _user: User = Depends(auth_check)
):
    """Handle request to get the details of a gathering"""
    response = await gathering_services.get_gathering(ObjId(gathering_id))
    return CommonResponse[GatheringResponse].success(response)


@gathering_router.post(
    '/{gathering_id}/participants',
    response_model=CommonResponse[GatheringResponse],
    status_code=status.HTTP_200_OK,
    description='Join a band session of a recruiting gathering.')
@handle_exceptions(logger)
async def join_gathering(
    gathering_id: GatheringIdPath,
    request: JoinGatheringRequest,
    user: User = Depends(auth_check)
):
    """Handle request to join a gathering"""
    response = await gathering_services.join_gathering(
        user=user,
        gathering_id=ObjId(gathering_id),
        band_session=request.band_session)
    return CommonResponse[GatheringResponse].success(response)


@gathering_router.put(
    '/{gathering_id}/complete',
    response_model=CommonResponse[GatheringResponse],
    status_code=status.HTTP_200_OK,
    description='Mark a gathering as completed. Only allowed for its creator.')
@handle_exceptions(logger)
async def complete_gathering(
    gathering_id: GatheringIdPath,
    user: User = Depends(auth_check)
):
    """Handle request to complete a gathering"""
    response = await gathering_services.complete_gathering(
        user=user, gathering_id=ObjId(gathering_id))
    return CommonResponse[GatheringResponse].success(response)


@gathering_router.put(
    '/{gathering_id}/cancel',
    response_model=CommonResponse[GatheringResponse],
    status_code=status.HTTP_200_OK,
    description='Cancel a recruiting gathering. Only allowed for its creator.')
@handle_exceptions(logger)
async def cancel_gathering(
    gathering_id: GatheringIdPath,
    user: User = Depends(auth_check)
):
    """Handle request to cancel a gathering"""
    response = await gathering_services.cancel_gathering(
        user=user, gathering_id=ObjId(gathering_id))
    return CommonResponse[GatheringResponse].success(response)
