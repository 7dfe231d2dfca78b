"""
Jammit.gathering_entity
-------------------------
This module provides the Gathering Entity class

Key Features:
    - Provides a functionality wrapper for Beanie Documents

Dependencies:
    - beanie
"""
# Basics
from typing import Optional, Union
# Beanie
from beanie import PydanticObjectId as ObjId
# Entities
from jammit.entities.entity import Entity
# Exceptions
from jammit.exceptions.gathering_exceptions import (
    AlreadyParticipatingException,
    InvalidGatheringStatusException,
    SessionNotAvailableException)
# Models
from jammit.models.gathering_models import (
    BandSession,
    GatheringModel,
    GatheringParticipant,
    GatheringSession,
    GatheringStatus)
# Services
from jammit.services.logging_services import logger_service as logger


class Gathering(Entity):
    """
    Jammit.Gathering
    -------
    A class representing a gathering. A gathering recruits players
    for a set of band sessions and is reviewed once it took place.

    Key Features:
    - `__init__`: Initializes a gathering object
    - 'find': Loads a gathering by its identifier
    - 'session_for': Returns the slot of a band session
    - 'is_participant': Checks whether a user joined the gathering
    - 'add_participant': Assigns a user to a free band session slot
    - 'complete': Marks the gathering as completed
    - 'cancel': Marks the gathering as canceled
    """
    doc: Union[GatheringModel]

    def __init__(self, document=None):
        super().__init__(document)

    @classmethod
    async def find(cls, gathering_id: ObjId) -> "Gathering":
        return cls(await GatheringModel.get(gathering_id))

    def session_for(self, band_session: BandSession) -> Optional[GatheringSession]:
        """Returns the slot recruiting for the given band session, if any."""
        for session in self.doc.sessions:
            if session.band_session == band_session:
                return session
        return None

    def is_participant(self, user_id: ObjId) -> bool:
        """Checks whether the user joined any session of this gathering."""
        return any(participant.user_id == user_id
                   for participant in self.doc.participants)

    def add_participant(self, user_id: ObjId, band_session: BandSession):
        """Assigns the user to the given band session.

        Raises:
            InvalidGatheringStatusException: The gathering is no longer recruiting
            AlreadyParticipatingException: The user already joined
            SessionNotAvailableException: No such slot or the slot is full
        """
        if self.doc.status != GatheringStatus.RECRUITING:
            raise InvalidGatheringStatusException(
                gathering_id=self.doc.id,
                expected_status=[GatheringStatus.RECRUITING],
                actual_status=self.doc.status)
        if self.is_participant(user_id):
            raise AlreadyParticipatingException(
                gathering_id=self.doc.id, user_id=user_id)

        session = self.session_for(band_session)
        if session is None or session.is_full:
            raise SessionNotAvailableException(
                gathering_id=self.doc.id, band_session=band_session)

        session.current_count += 1
        self.doc.participants.append(GatheringParticipant(
            user_id=user_id, band_session=band_session))
        logger.debug(
            f"User '#{user_id}' joined as {band_session.value}.",
            gathering_id=str(self.doc.id))

    def complete(self):
        """Marks the gathering as completed so it can be reviewed."""
        if self.doc.status != GatheringStatus.RECRUITING:
            raise InvalidGatheringStatusException(
                gathering_id=self.doc.id,
                expected_status=[GatheringStatus.RECRUITING],
                actual_status=self.doc.status)
        self.doc.status = GatheringStatus.COMPLETED

    def cancel(self):
        """Calls the gathering off while it is still recruiting."""
        if self.doc.status != GatheringStatus.RECRUITING:
            raise InvalidGatheringStatusException(
                gathering_id=self.doc.id,
                expected_status=[GatheringStatus.RECRUITING],
                actual_status=self.doc.status)
        self.doc.status = GatheringStatus.CANCELED
