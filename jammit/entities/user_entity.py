"""
Jammit.user_entity
-------------------------
This module provides the User Entity class

Key Features:
    - Provides a functionality wrapper for Beanie Documents

Dependencies:
    - beanie
"""
# Basics
from typing import Union
# Entities
from jammit.entities.entity import Entity
# Models
from jammit.models.user_models import UserModel
from jammit.models.review_models import ReviewModel


class User(Entity):
    """
    Jammit.User
    -------
    A class representing a user. Users create and join gatherings
    and review the people they played with.

    Key Features:
    - `__init__`: Initializes a user object
    - 'written_review_count': Returns the amount of reviews the user wrote
    - 'received_review_count': Returns the amount of reviews the user received
    """
    doc: Union[UserModel]

    def __init__(self, document=None):
        super().__init__(document)

    @property
    async def written_review_count(self) -> int:
        """Returns the amount of reviews authored by this user

        Example:
            >>> await user.written_review_count
            3
        """
        return await ReviewModel.find(
            ReviewModel.reviewer_id == self.doc.id).count()

    @property
    async def received_review_count(self) -> int:
        """Returns the amount of reviews this user received

        Example:
            >>> await user.received_review_count
            5
        """
        return await ReviewModel.find(
            ReviewModel.reviewee_id == self.doc.id).count()
