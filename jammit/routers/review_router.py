"""
Jammit.review_router
-------------------------
This module provides endpoint routing for review functionalities

Key Features:
    - Create and delete reviews
    - List written, received and gathering reviews
    - Provide statistics of received reviews

Dependencies:
    - fastapi
    - beanie
"""
# Types
from typing import Annotated, List
from bson.objectid import ObjectId
from beanie import PydanticObjectId as ObjId
# FastAPI
from fastapi import APIRouter, Depends, Path, Query, status
# Entities
from jammit.entities.user_entity import User
# Models
from jammit.models.common_models import CommonResponse, PageResponse
from jammit.models.review_models import (
    CreateReviewRequest,
    ReviewResponse,
    ReviewStatisticsResponse)
# Services
from jammit.services import review_services
from jammit.services.auth_services import auth_check
from jammit.services.exception_services import handle_exceptions
from jammit.services.logging_services import logger_service as logger

# Create the router
review_router = APIRouter()

UNAUTHORIZED = {status.HTTP_401_UNAUTHORIZED: {
    "model": CommonResponse, "description": "Not authenticated."}}


@review_router.post(
    '',
    response_model=CommonResponse[ReviewResponse],
    status_code=status.HTTP_200_OK,
    summary='Create a review',
    description=('Review another participant of a gathering. '
                 'Only one review per reviewee and gathering is allowed.'),
    responses={
        **UNAUTHORIZED,
        status.HTTP_400_BAD_REQUEST: {
            "model": CommonResponse, "description": "Invalid request data."},
        status.HTTP_403_FORBIDDEN: {
            "model": CommonResponse,
            "description": "Reviewer or reviewee did not join the gathering."},
        status.HTTP_404_NOT_FOUND: {
            "model": CommonResponse, "description": "User or gathering not found."},
        status.HTTP_409_CONFLICT: {
            "model": CommonResponse,
            "description": "The user was already reviewed for this gathering."}})
@handle_exceptions(logger)
async def create_review(
    request: CreateReviewRequest,
    user: User = Depends(auth_check)
):
    """Handle request to review a participant of a gathering"""
    response = await review_services.create_review(user=user, request=request)
    return CommonResponse[ReviewResponse].success(response)


@review_router.delete(
    '/{review_id}',
    response_model=CommonResponse[None],
    status_code=status.HTTP_200_OK,
    summary='Delete a review',
    description='Delete a review. Only the author of a review may delete it.',
    responses={
        **UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN: {
            "model": CommonResponse, "description": "Not the author of the review."},
        status.HTTP_404_NOT_FOUND: {
            "model": CommonResponse, "description": "Review not found."}})
@handle_exceptions(logger)
async def delete_review(
    review_id: Annotated[str, Path(
        pattern='^[a-fA-F0-9]{24}$', examples=[str(ObjectId())],
        description='Unique identifier of the review.')],
    user: User = Depends(auth_check)
):
    """Handle request to delete an own review"""
    await review_services.delete_review(user=user, review_id=ObjId(review_id))
    return CommonResponse.ok()


@review_router.get(
    '/written',
    response_model=CommonResponse[List[ReviewResponse]],
    status_code=status.HTTP_200_OK,
    summary='List written reviews',
    description='Get all reviews written by the calling user.',
    responses=UNAUTHORIZED)
@handle_exceptions(logger)
async def get_written_reviews(
    user: User = Depends(auth_check)
):
    """Handle request to list the reviews of the calling user"""
    response = await review_services.get_reviews_by_reviewer(user=user)
    return CommonResponse[List[ReviewResponse]].success(response)


@review_router.get(
    '/received',
    response_model=CommonResponse[PageResponse[ReviewResponse]],
    status_code=status.HTTP_200_OK,
    summary='List received reviews',
    description='Get the reviews the calling user received, page by page.',
    responses=UNAUTHORIZED)
@handle_exceptions(logger)
async def get_received_reviews(
    page: Annotated[int, Query(
        ge=0, description='Index of the page, starting at 0.')] = 0,
    page_size: Annotated[int, Query(
        alias='pageSize', ge=1, le=100, description='Size of a page.')] = 8,
    user: User = Depends(auth_check)
):
    """Handle request to list the received reviews of the calling user"""
    response = await review_services.get_reviews_by_reviewee_with_pagination(
        user=user, page=page, page_size=page_size)
    return CommonResponse[PageResponse[ReviewResponse]].success(response)


@review_router.get(
    '/received/statistics',
    response_model=CommonResponse[ReviewStatisticsResponse],
    status_code=status.HTTP_200_OK,
    summary='Statistics of received reviews',
    description='Get per rating flag counts and percentages of received reviews.',
    responses=UNAUTHORIZED)
@handle_exceptions(logger)
async def get_review_statistics(
    user: User = Depends(auth_check)
):
    """Handle request to aggregate the received reviews of the calling user"""
    response = await review_services.get_review_statistics(user=user)
    return CommonResponse[ReviewStatisticsResponse].success(response)


@review_router.get(
    '/gathering/{gathering_id}',
    response_model=CommonResponse[List[ReviewResponse]],
    status_code=status.HTTP_200_OK,
    summary='List gathering reviews',
    description='Get all reviews written for a gathering.',
    responses={
        **UNAUTHORIZED,
        status.HTTP_404_NOT_FOUND: {
            "model": CommonResponse, "description": "Gathering not found."}})
@handle_exceptions(logger)
async def get_gathering_reviews(
    gathering_id: Annotated[str, Path(
        pattern='^[a-fA-F0-9]{24}$', examples=[str(ObjectId())],
        description='Unique identifier of the gathering.')],
    _user: User = Depends(auth_check)
):
    """Handle request to list the reviews of a gathering"""
    response = await review_services.get_reviews_by_gathering(
        gathering_id=ObjId(gathering_id))
    return CommonResponse[List[ReviewResponse]].success(response)
