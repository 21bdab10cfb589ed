"""
Tagged result types shared by API clients, repositories and the facade.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class ApiError:
    """Error descriptor carried by a failed call."""

    message: str
    status: int
    details: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, leaving out empty details."""
        result: dict[str, Any] = {"message": self.message, "status": self.status}
        if self.details is not None:
            result["details"] = self.details
        return result


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful API call holding its payload."""

    data: T


@dataclass(frozen=True)
class Failure:
    """Failed API call holding its error."""

    error: ApiError


ApiResult = Union[Success[T], Failure]


@dataclass(frozen=True)
class ErrorResponse:
    """Error returned by repositories in place of a payload."""

    error: ApiError

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error.to_dict()}


def format_failure(failure: object) -> str:
    """
    Build the message for an unexpected failure.

    Uses the failure's ``message`` attribute when it has a textual one,
    otherwise the string form of the value.
    """
    text = getattr(failure, "message", None)
    if not isinstance(text, str):
        text = str(failure)
    return f"Error: {text}"
