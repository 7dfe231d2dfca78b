"""
Jammit.gathering_services
-------------------------
This module provides handlers for gathering endpoints

Key Features:
    - Create gatherings from their band session requests
    - Let users join a band session of a gathering
    - Complete gatherings once they took place, or cancel them

Dependencies:
    - beanie
"""

# Beanie
from beanie import PydanticObjectId as ObjId
# Entities
from jammit.entities.gathering_entity import Gathering
from jammit.entities.user_entity import User
# Exceptions
from jammit.exceptions.gathering_exceptions import (
    GatheringNotFoundException,
    InvalidGatheringSessionException)
from jammit.exceptions.user_exceptions import UserNotAuthorizedException
# Models
from jammit.models.gathering_models import (
    BandSession,
    CreateGatheringRequest,
    GatheringModel,
    GatheringParticipant,
    GatheringResponse)
# Services
from jammit.services.logging_services import logger_service as logger


async def create_gathering(user: User, request: CreateGatheringRequest) -> GatheringResponse:
    """Create a gathering hosted by the user."""
    # 1: Convert and check the requested band sessions
    sessions = [session.to_entity() for session in request.gathering_sessions]
    if not sessions:
        raise InvalidGatheringSessionException(
            "a gathering needs at least one band session.")
    if any(session.band_session is None for session in sessions):
        raise InvalidGatheringSessionException("bandSession must be set.")
    band_sessions = [session.band_session for session in sessions]
    if len(set(band_sessions)) != len(band_sessions):
        raise InvalidGatheringSessionException(
            "every band session may only be listed once.")

    # 2: Insert the gathering with the host as first participant
    gathering = await GatheringModel(
        name=request.name,
        place=request.place,
        description=request.description,
        gathering_date=request.gathering_date,
        creator_id=user.doc.id,
        sessions=sessions,
        participants=[GatheringParticipant(user_id=user.doc.id)]
    ).insert()
    logger.info(f"User '#{user.doc.id}' created a gathering.",
                gathering_id=str(gathering.id))
    return GatheringResponse.from_document(gathering)


async def _find_gathering(gathering_id: ObjId) -> Gathering:
    gathering = await Gathering.find(gathering_id)
    if not gathering.exists:
        raise GatheringNotFoundException(gathering_id=gathering_id)
    return gathering


async def get_gathering(gathering_id: ObjId) -> GatheringResponse:
    """Return the details of a gathering."""
    gathering = await _find_gathering(gathering_id)
    return GatheringResponse.from_document(gathering.doc)


async def join_gathering(user: User, gathering_id: ObjId,
                         band_session: BandSession) -> GatheringResponse:
    """Let the user join a band session of a gathering."""
    gathering = await _find_gathering(gathering_id)
    gathering.add_participant(user.doc.id, band_session)
    await gathering.save()
    return GatheringResponse.from_document(gathering.doc)


async def complete_gathering(user: User, gathering_id: ObjId) -> GatheringResponse:
    """Mark a gathering as completed, only allowed for its creator."""
    gathering = await _find_gathering(gathering_id)
    if gathering.doc.creator_id != user.doc.id:
        raise UserNotAuthorizedException(user_id=user.doc.id)
    gathering.complete()
    await gathering.save()
    logger.info("Gathering completed.", gathering_id=str(gathering_id))
    return GatheringResponse.from_document(gathering.doc)


async def cancel_gathering(user: User, gathering_id: ObjId) -> GatheringResponse:
    """Call off a recruiting gathering, only allowed for its creator."""
    gathering = await _find_gathering(gathering_id)
    if gathering.doc.creator_id != user.doc.id:
        raise UserNotAuthorizedException(user_id=user.doc.id)
    gathering.cancel()
    await gathering.save()
    logger.info("Gathering canceled.", gathering_id=str(gathering_id))
    return GatheringResponse.from_document(gathering.doc)
