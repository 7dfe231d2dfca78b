"""This module provides exception classes for review management."""
# Log level
from logging import INFO, WARNING
# Beanie
from beanie import PydanticObjectId as ObjId
# Exceptions
from fastapi import HTTPException, status


class ReviewNotFoundException(HTTPException):
    """Exception raised when a review cannot be found by a given query."""

    def __init__(self, review_id: ObjId = None):
        self.review_id = review_id
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_404_NOT_FOUND,
                         detail=self.__str__())

    def __str__(self):
        return f"Review '#{self.review_id}' not found in database."


class SelfReviewException(HTTPException):
    """Exception raised when a user tries to review themselves."""

    def __init__(self, user_id: ObjId = None):
        self.user_id = user_id
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST,
                         detail=self.__str__())

    def __str__(self):
        return f"User '#{self.user_id}' cannot review themselves."


class DuplicateReviewException(HTTPException):
    """Exception raised when a reviewer already reviewed a user for a gathering."""

    def __init__(self, reviewer_id: ObjId, reviewee_id: ObjId, gathering_id: ObjId):
        self.reviewer_id = reviewer_id
        self.reviewee_id = reviewee_id
        self.gathering_id = gathering_id
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_409_CONFLICT,
                         detail=self.__str__())

    def __str__(self):
        return (f"User '#{self.reviewer_id}' already reviewed user "
                f"'#{self.reviewee_id}' for gathering '#{self.gathering_id}'.")


class ReviewNotOwnedException(HTTPException):
    """Exception raised when a user acts on a review written by someone else."""

    def __init__(self, review_id: ObjId, user_id: ObjId):
        self.review_id = review_id
        self.user_id = user_id
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_403_FORBIDDEN,
                         detail=self.__str__())

    def __str__(self):
        return (f"User '#{self.user_id}' is not the author "
                f"of review '#{self.review_id}'.")
