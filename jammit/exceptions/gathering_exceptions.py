"""This module provides exception classes for gathering management."""
# Types
from logging import INFO, WARNING
from typing import List
# Beanie
from beanie import PydanticObjectId as ObjId
# Exceptions
from fastapi import HTTPException, status
# Models
from jammit.models.gathering_models import BandSession, GatheringStatus


class GatheringNotFoundException(HTTPException):
    """Exception raised when a gathering cannot be found by a given query."""

    def __init__(self, gathering_id: ObjId = None):
        self.gathering_id = gathering_id
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_404_NOT_FOUND,
                         detail=self.__str__())

    def __str__(self):
        return f"Gathering '#{self.gathering_id}' not found in database."


class InvalidGatheringSessionException(HTTPException):
    """Exception raised when the sessions of a gathering are malformed."""

    def __init__(self, reason: str):
        self.reason = reason
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST,
                         detail=self.__str__())

    def __str__(self):
        return f"Invalid gathering sessions: {self.reason}"


class InvalidGatheringStatusException(HTTPException):
    """Exception raised when a gathering is not matching the expected status."""

    def __init__(self, gathering_id: ObjId,
                 expected_status: List[GatheringStatus],
                 actual_status: GatheringStatus):
        self.gathering_id = gathering_id
        self.expected_status = expected_status
        self.actual_status = actual_status
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST,
                         detail=self.__str__())

    def __str__(self):
        return (f"Invalid status of gathering '#{self.gathering_id}': "
                f"Expected {[state.value for state in self.expected_status]}, "
                f"got {self.actual_status.value}")


class SessionNotAvailableException(HTTPException):
    """Exception raised when a band session of a gathering cannot be joined."""

    def __init__(self, gathering_id: ObjId, band_session: BandSession):
        self.gathering_id = gathering_id
        self.band_session = band_session
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST,
                         detail=self.__str__())

    def __str__(self):
        return (f"Session '{self.band_session.value}' of gathering "
                f"'#{self.gathering_id}' is not available.")


class AlreadyParticipatingException(HTTPException):
    """Exception raised when a user joins a gathering twice."""

    def __init__(self, gathering_id: ObjId, user_id: ObjId):
        self.gathering_id = gathering_id
        self.user_id = user_id
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_409_CONFLICT,
                         detail=self.__str__())

    def __str__(self):
        return (f"User '#{self.user_id}' already participates "
                f"in gathering '#{self.gathering_id}'.")


class NotParticipatingException(HTTPException):
    """Exception raised when a user did not take part in a gathering."""

    def __init__(self, gathering_id: ObjId, user_id: ObjId):
        self.gathering_id = gathering_id
        self.user_id = user_id
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_403_FORBIDDEN,
                         detail=self.__str__())

    def __str__(self):
        return (f"User '#{self.user_id}' did not participate "
                f"in gathering '#{self.gathering_id}'.")
