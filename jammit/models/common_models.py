"""This module provides the response envelope shared by all endpoints."""
# Types
from enum import Enum
from math import ceil
from typing import Generic, List, Optional, TypeVar
# Pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Wire models use camelCase keys but accept snake_case on input as well
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResultCode(str, Enum):
    """Outcome marker of an API call"""
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class CommonResponse(BaseModel, Generic[T]):
    """Uniform envelope wrapping the payload of every response."""
    result: ResultCode = Field(description="Whether the call succeeded.")
    code: int = Field(200, description="HTTP status code of the response.")
    message: Optional[str] = Field(
        None, description="Human readable message, set on failures.")
    data: Optional[T] = Field(None, description="Payload of the response.")

    @classmethod
    def success(cls, data: T = None, code: int = 200) -> "CommonResponse[T]":
        return cls(result=ResultCode.SUCCESS, code=code, data=data)

    @classmethod
    def ok(cls) -> "CommonResponse[T]":
        return cls(result=ResultCode.SUCCESS, code=200)

    @classmethod
    def failure(cls, code: int, message: str) -> "CommonResponse[T]":
        return cls(result=ResultCode.FAILURE, code=code, message=message)


class PageResponse(BaseModel, Generic[T]):
    """A single page of a larger result list."""
    model_config = camel_config

    content: List[T] = Field(description="Items of the requested page.")
    current_page: int = Field(description="Zero based index of the page.")
    size: int = Field(description="Requested page size.")
    total_page: int = Field(description="Amount of pages available.")
    total_elements: int = Field(description="Amount of items in all pages.")

    @classmethod
    def of(cls, content: List[T], page: int, size: int,
           total_elements: int) -> "PageResponse[T]":
        return cls(
            content=content,
            current_page=page,
            size=size,
            total_page=ceil(total_elements / size) if size else 0,
            total_elements=total_elements)
