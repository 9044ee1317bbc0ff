"""Base use case and shared response types."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sonic.domain.error import NotAuthenticatedError, NotFoundError
from sonic.domain.value import PageRequest, UserId

T = TypeVar("T")
IdT = TypeVar("IdT")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ResponseModel(BaseModel):
    """Base for use case responses.

    Serialized with camelCase keys (``likeCount``); constructed in Python
    with snake_case names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PagedResponse(ResponseModel, Generic[T]):
    """One page of results."""

    items: list[T]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @classmethod
    def build(
        cls, items: list[T], page: PageRequest, total_items: int
    ) -> "PagedResponse[T]":
        """Assemble a page from items, the page window and the total count."""
        return cls(
            items=items,
            page=page.page,
            page_size=page.page_size,
            total_items=total_items,
            total_pages=page.total_pages(total_items),
        )


def parse_id(
    value: str, factory: Callable[[UUID], IdT], resource: str, code: str | None = None
) -> IdT:
    """Parse a path identifier.

    Identifiers that are not UUIDs cannot exist, so they are reported as
    not found rather than as bad input.

    Raises:
        NotFoundError: If value is not a UUID
    """
    try:
        return factory(UUID(str(value)))
    except ValueError:
        raise NotFoundError(resource, str(value), code)


def parse_user_id(value: str | None) -> UserId:
    """Parse the caller's user ID taken from the token subject.

    Raises:
        NotAuthenticatedError: If the subject is missing or malformed
    """
    try:
        return UserId(UUID(str(value)))
    except ValueError:
        raise NotAuthenticatedError("Missing user identity.", "auth.missing_sub")


def first_error_message(error: ValueError) -> str:
    """First human-readable message of a ValueError.

    For pydantic validation errors only the first failure is reported,
    without pydantic's ``Value error,`` prefix.
    """
    errors = getattr(error, "errors", None)
    if callable(errors):
        details = errors()
        if details:
            ctx_error = details[0].get("ctx", {}).get("error")
            return str(ctx_error) if ctx_error else details[0]["msg"]
    return str(error)
