"""This module provides the Models for gathering management."""
# Types
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
# Beanie
from beanie import Document
from beanie import PydanticObjectId as ObjId
from pydantic import BaseModel, Field
# Models
from jammit.models.common_models import camel_config
# Services
from jammit.services.logging_services import logger_service as logger


class BandSession(str, Enum):
    """Musical roles a gathering can recruit for"""
    VOCAL = "VOCAL"
    ELECTRIC_GUITAR = "ELECTRIC_GUITAR"
    DRUM = "DRUM"
    ACOUSTIC_GUITAR = "ACOUSTIC_GUITAR"
    BASS = "BASS"
    STRING_INSTRUMENT = "STRING_INSTRUMENT"
    PERCUSSION = "PERCUSSION"
    KEYBOARD = "KEYBOARD"


class GatheringStatus(str, Enum):
    """Lifecycle states of a gathering"""
    RECRUITING = "RECRUITING"
    COMPLETED = "COMPLETED"
    CANCELED = "CANCELED"


class GatheringSession(BaseModel):
    """A band session slot of a gathering."""
    band_session: Optional[BandSession] = Field(
        None, description="Musical role of the slot.")
    recruit_count: int = Field(
        0, ge=0, description="Amount of players wanted for the slot.")
    current_count: int = Field(
        0, ge=0, description="Amount of players that joined the slot.")

    @classmethod
    def create(cls, band_session: Optional[BandSession],
               recruit_count: int) -> "GatheringSession":
        return cls(band_session=band_session, recruit_count=recruit_count)

    @property
    def is_full(self) -> bool:
        return self.current_count >= self.recruit_count


class GatheringParticipant(BaseModel):
    """A user that joined one band session of a gathering."""
    user_id: ObjId
    band_session: Optional[BandSession] = None
    joined_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc))


class GatheringModel(Document):  # pylint: disable=too-many-ancestors
    """Representation of a gathering in the database"""
    # Identification
    id: ObjId = Field(None, alias="_id")
    name: str = Field(description="Title of the gathering.")
    place: Optional[str] = Field(None, description="Where the band meets.")
    description: Optional[str] = Field(
        None, description="Free text introduction of the gathering.")
    gathering_date: Optional[datetime] = Field(
        None, description="Scheduled date of the gathering.")

    creator_id: ObjId = Field(description="User that created the gathering.")
    status: GatheringStatus = Field(
        GatheringStatus.RECRUITING, description="Current gathering status.")

    sessions: List[GatheringSession] = Field(
        default_factory=list, description="Band sessions to be filled.")
    participants: List[GatheringParticipant] = Field(
        default_factory=list, description="Users that joined a session.")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp of gathering creation.")

    @dataclass
    class Settings:
        name = "gatherings"


class GatheringSessionRequest(BaseModel):
    """Wire representation of a band session slot."""
    model_config = camel_config

    band_session: Optional[BandSession] = Field(
        None, description="Musical role of the slot.")
    recruit_count: int = Field(
        0, ge=0, description="Amount of players wanted for the slot.")

    def to_entity(self) -> GatheringSession:
        if self.band_session is None:
            logger.error("bandSession is null!")
        return GatheringSession.create(self.band_session, self.recruit_count)


class CreateGatheringRequest(BaseModel):
    """Request to create a new gathering."""
    model_config = camel_config

    name: str = Field(min_length=1, max_length=30)
    place: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    gathering_date: Optional[datetime] = None
    gathering_sessions: List[GatheringSessionRequest] = Field(
        default_factory=list,
        description="Band sessions the gathering recruits for.")


class JoinGatheringRequest(BaseModel):
    """Request to join one band session of a gathering."""
    model_config = camel_config

    band_session: BandSession


class GatheringSessionResponse(BaseModel):
    model_config = camel_config

    band_session: Optional[BandSession] = None
    recruit_count: int
    current_count: int


class GatheringParticipantResponse(BaseModel):
    model_config = camel_config

    user_id: str
    band_session: Optional[BandSession] = None
    joined_at: datetime


class GatheringResponse(BaseModel):
    """Public view of a gathering."""
    model_config = camel_config

    id: str
    name: str
    place: Optional[str] = None
    description: Optional[str] = None
    gathering_date: Optional[datetime] = None
    creator_id: str
    status: GatheringStatus
    sessions: List[GatheringSessionResponse]
    participants: List[GatheringParticipantResponse]
    created_at: datetime

    @classmethod
    def from_document(cls, gathering: GatheringModel) -> "GatheringResponse":
        return cls(
            id=str(gathering.id),
            name=gathering.name,
            place=gathering.place,
            description=gathering.description,
            gathering_date=gathering.gathering_date,
            creator_id=str(gathering.creator_id),
            status=gathering.status,
            sessions=[GatheringSessionResponse(**session.model_dump())
                      for session in gathering.sessions],
            participants=[GatheringParticipantResponse(
                user_id=str(participant.user_id),
                band_session=participant.band_session,
                joined_at=participant.joined_at)
                for participant in gathering.participants],
            created_at=gathering.created_at)
