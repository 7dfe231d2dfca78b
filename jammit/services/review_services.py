"""
Jammit.review_services
-------------------------
This module provides handlers for review endpoints

Key Features:
    - Handle review submission and deletion
    - Provide written, received and gathering review lists
    - Aggregate the rating flags of received reviews

Dependencies:
    - beanie
"""

# Basics
from typing import List
# Beanie
from beanie import PydanticObjectId as ObjId
from pymongo.errors import DuplicateKeyError
# Entities
from jammit.entities.gathering_entity import Gathering
from jammit.entities.user_entity import User
# Models
from jammit.models.common_models import PageResponse
from jammit.models.review_models import (
    RATING_FLAGS,
    CreateReviewRequest,
    ReviewModel,
    ReviewResponse,
    ReviewStatisticsResponse)
from jammit.models.user_models import UserModel
# Exceptions
from jammit.exceptions.gathering_exceptions import (
    GatheringNotFoundException,
    NotParticipatingException)
from jammit.exceptions.review_exceptions import (
    DuplicateReviewException,
    ReviewNotFoundException,
    ReviewNotOwnedException,
    SelfReviewException)
from jammit.exceptions.user_exceptions import UserNotFoundException
# Services
from jammit.services.logging_services import logger_service as logger


async def create_review(user: User, request: CreateReviewRequest) -> ReviewResponse:
    """Submit a review of another participant of a gathering."""
    # 1: A user cannot review themselves
    if request.reviewee_id == user.doc.id:
        raise SelfReviewException(user_id=user.doc.id)

    # 2: Both the reviewee and the gathering have to exist
    reviewee: UserModel = await UserModel.get(request.reviewee_id)
    if reviewee is None:
        raise UserNotFoundException(user_id=request.reviewee_id)

    gathering = await Gathering.find(request.gathering_id)
    if not gathering.exists:
        raise GatheringNotFoundException(gathering_id=request.gathering_id)

    # 3: Both users must have taken part in the gathering
    for participant_id in (user.doc.id, reviewee.id):
        if not gathering.is_participant(participant_id):
            raise NotParticipatingException(
                gathering_id=gathering.doc.id, user_id=participant_id)

    # 4: Only one review per reviewer, reviewee and gathering
    existing = await ReviewModel.find_one(
        ReviewModel.reviewer_id == user.doc.id,
        ReviewModel.reviewee_id == reviewee.id,
        ReviewModel.gathering_id == gathering.doc.id)
    if existing is not None:
        raise DuplicateReviewException(
            reviewer_id=user.doc.id,
            reviewee_id=reviewee.id,
            gathering_id=gathering.doc.id)

    # 5: Then insert the review into the database
    try:
        review = await ReviewModel(
            reviewer_id=user.doc.id,
            reviewer_nickname=user.doc.nickname,
            reviewee_id=reviewee.id,
            reviewee_nickname=reviewee.nickname,
            gathering_id=gathering.doc.id,
            gathering_name=gathering.doc.name,
            content=request.content,
            **{flag: getattr(request, flag) for flag in RATING_FLAGS}
        ).insert()
    except DuplicateKeyError as e:
        # A concurrent request inserted the same review first
        raise DuplicateReviewException(
            reviewer_id=user.doc.id,
            reviewee_id=reviewee.id,
            gathering_id=gathering.doc.id) from e
    logger.info(
        f"User '#{user.doc.id}' reviewed user '#{reviewee.id}'.",
        gathering_id=str(gathering.doc.id))
    return ReviewResponse.from_document(review)


async def delete_review(user: User, review_id: ObjId) -> None:
    """Delete a review written by the user."""
    review: ReviewModel = await ReviewModel.get(review_id)
    if review is None:
        raise ReviewNotFoundException(review_id=review_id)

    if review.reviewer_id != user.doc.id:
        raise ReviewNotOwnedException(review_id=review_id, user_id=user.doc.id)

    await review.delete()
    logger.info(f"User '#{user.doc.id}' deleted review '#{review_id}'.")


async def get_reviews_by_reviewer(user: User) -> List[ReviewResponse]:
    """Return all reviews written by the user, newest first."""
    reviews = await ReviewModel.find(
        ReviewModel.reviewer_id == user.doc.id
    ).sort("-created_at", "-_id").to_list()
    return [ReviewResponse.from_document(review) for review in reviews]


async def get_reviews_by_reviewee_with_pagination(
        user: User, page: int, page_size: int) -> PageResponse[ReviewResponse]:
    """Return one page of the reviews the user received, newest first."""
    total = await ReviewModel.find(
        ReviewModel.reviewee_id == user.doc.id).count()
    offset = page * page_size
    reviews = []
    # Offsets past the end would overflow the driver for huge page indices
    if offset < total:
        reviews = await ReviewModel.find(
            ReviewModel.reviewee_id == user.doc.id
        ).sort("-created_at", "-_id").skip(offset).limit(page_size).to_list()
    return PageResponse[ReviewResponse].of(
        content=[ReviewResponse.from_document(review) for review in reviews],
        page=page,
        size=page_size,
        total_elements=total)


def summarize_reviews(reviews: List[ReviewModel]) -> ReviewStatisticsResponse:
    """Count how often every rating flag was set over the given reviews."""
    total = len(reviews)
    stats = {"total_reviews": total}
    for flag in RATING_FLAGS:
        name = flag.removeprefix("is_")
        count = sum(1 for review in reviews if getattr(review, flag))
        stats[f"{name}_count"] = count
        stats[f"{name}_percentage"] = round(count / total * 100, 1) if total else 0.0
    return ReviewStatisticsResponse(**stats)


async def get_review_statistics(user: User) -> ReviewStatisticsResponse:
    """Return the rating flag statistics of the reviews the user received."""
    reviews = await ReviewModel.find(
        ReviewModel.reviewee_id == user.doc.id).to_list()
    return summarize_reviews(reviews)


async def get_reviews_by_gathering(gathering_id: ObjId) -> List[ReviewResponse]:
    """Return all reviews tied to a gathering, newest first."""
    gathering = await Gathering.find(gathering_id)
    if not gathering.exists:
        raise GatheringNotFoundException(gathering_id=gathering_id)

    reviews = await ReviewModel.find(
        ReviewModel.gathering_id == gathering_id
    ).sort("-created_at", "-_id").to_list()
    return [ReviewResponse.from_document(review) for review in reviews]
