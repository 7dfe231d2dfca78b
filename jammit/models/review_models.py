"""This module provides the Models for review management."""
# Types
from dataclasses import dataclass
# Basics
from datetime import datetime, timezone
# Beanie
from beanie import Document
from beanie import PydanticObjectId as ObjId
from pydantic import BaseModel, Field
from pymongo import ASCENDING, IndexModel
# Models
from jammit.models.common_models import camel_config

# Boolean rating flags a reviewer can set, in display order
RATING_FLAGS = [
    "is_practice_helped",
    "is_good_with_music",
    "is_good_with_others",
    "is_shares_practice_resources",
    "is_managing_well",
    "is_helpful",
    "is_good_learner",
    "is_keeping_promises",
]


class ReviewModel(Document):  # pylint: disable=too-many-ancestors
    """Representation of a review in the database"""
    # Identification
    id: ObjId = Field(None, alias="_id")

    reviewer_id: ObjId = Field(description="Author of the review.")
    reviewer_nickname: str = Field("", description="Nickname of the author.")
    reviewee_id: ObjId = Field(description="Subject of the review.")
    reviewee_nickname: str = Field("", description="Nickname of the subject.")
    gathering_id: ObjId = Field(
        description="The gathering to which the review refers to.")
    gathering_name: str = Field("", description="Name of the gathering.")

    content: str = Field("", description="Written feedback on the reviewee.")

    is_practice_helped: bool = False
    is_good_with_music: bool = False
    is_good_with_others: bool = False
    is_shares_practice_resources: bool = False
    is_managing_well: bool = False
    is_helpful: bool = False
    is_good_learner: bool = False
    is_keeping_promises: bool = False

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of review submission.")

    @dataclass
    class Settings:
        name = "reviews"
        indexes = [
            IndexModel(
                [("reviewer_id", ASCENDING),
                 ("reviewee_id", ASCENDING),
                 ("gathering_id", ASCENDING)],
                name="unique_review_per_gathering",
                unique=True),
        ]


class CreateReviewRequest(BaseModel):
    """Request to review another participant of a gathering."""
    model_config = camel_config | {
        "json_schema_extra": {
            "examples": [{
                "revieweeId": "6650c2b1f1d2b2a5d8f8b8b8",
                "gatheringId": "6650c2b1f1d2b2a5d8f8b8b9",
                "content": "Great to play with, would jam again.",
                "isPracticeHelped": True,
                "isGoodWithMusic": True,
                "isGoodWithOthers": True,
                "isSharesPracticeResources": False,
                "isManagingWell": True,
                "isHelpful": True,
                "isGoodLearner": False,
                "isKeepingPromises": True
            }]
        }
    }

    reviewee_id: ObjId = Field(description="User being reviewed.")
    gathering_id: ObjId = Field(description="Gathering both users attended.")
    content: str = Field("", max_length=500,
                         description="Written feedback on the reviewee.")

    is_practice_helped: bool = False
    is_good_with_music: bool = False
    is_good_with_others: bool = False
    is_shares_practice_resources: bool = False
    is_managing_well: bool = False
    is_helpful: bool = False
    is_good_learner: bool = False
    is_keeping_promises: bool = False


class ReviewResponse(BaseModel):
    """Public view of a review."""
    model_config = camel_config

    id: str
    reviewer_id: str
    reviewer_nickname: str
    reviewee_id: str
    reviewee_nickname: str
    gathering_id: str
    gathering_name: str
    content: str

    is_practice_helped: bool
    is_good_with_music: bool
    is_good_with_others: bool
    is_shares_practice_resources: bool
    is_managing_well: bool
    is_helpful: bool
    is_good_learner: bool
    is_keeping_promises: bool

    created_at: datetime

    @classmethod
    def from_document(cls, review: ReviewModel) -> "ReviewResponse":
        return cls(
            id=str(review.id),
            reviewer_id=str(review.reviewer_id),
            reviewer_nickname=review.reviewer_nickname,
            reviewee_id=str(review.reviewee_id),
            reviewee_nickname=review.reviewee_nickname,
            gathering_id=str(review.gathering_id),
            gathering_name=review.gathering_name,
            content=review.content,
            created_at=review.created_at,
            **{flag: getattr(review, flag) for flag in RATING_FLAGS})


class ReviewStatisticsResponse(BaseModel):
    """Aggregated rating flags over all reviews a user received."""
    model_config = camel_config

    total_reviews: int = 0

    practice_helped_count: int = 0
    good_with_music_count: int = 0
    good_with_others_count: int = 0
    shares_practice_resources_count: int = 0
    managing_well_count: int = 0
    helpful_count: int = 0
    good_learner_count: int = 0
    keeping_promises_count: int = 0

    practice_helped_percentage: float = 0.0
    good_with_music_percentage: float = 0.0
    good_with_others_percentage: float = 0.0
    shares_practice_resources_percentage: float = 0.0
    managing_well_percentage: float = 0.0
    helpful_percentage: float = 0.0
    good_learner_percentage: float = 0.0
    keeping_promises_percentage: float = 0.0
