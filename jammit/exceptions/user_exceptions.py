"""This module provides exception classes for user management."""
# Log level
from logging import INFO, WARNING
# Beanie
from beanie import PydanticObjectId as ObjId
# Exceptions
from fastapi import HTTPException, status


class UserNotFoundException(HTTPException):
    """Exception raised when a user cannot be found by a given query."""

    def __init__(self, user_id: ObjId = None):
        self.user_id = user_id
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_404_NOT_FOUND,
                         detail=self.__str__())

    def __str__(self):
        return f"Could not find user '#{self.user_id}' in database."


class UserNotAuthenticatedException(HTTPException):
    """Exception raised when a request carries no valid identity."""

    def __init__(self):
        self.log_level = INFO
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED,
                         detail=self.__str__())

    def __str__(self):
        return "Authentication required."


class UserNotAuthorizedException(HTTPException):
    """Exception raised when a user is not authorized to perform an action."""

    def __init__(self, user_id: ObjId = None):
        self.user_id = user_id
        self.log_level = WARNING
        super().__init__(status_code=status.HTTP_403_FORBIDDEN,
                         detail=self.__str__())

    def __str__(self):
        return f"User '#{self.user_id}' is not authorized to perform this action."
