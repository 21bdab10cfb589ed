# Models - result types and portfolio owner data
from .profile import ContactChannel, Profile
from .results import ApiError, ApiResult, ErrorResponse, Failure, Success, format_failure

__all__ = [
    "ApiError",
    "ApiResult",
    "ContactChannel",
    "ErrorResponse",
    "Failure",
    "Profile",
    "Success",
    "format_failure",
]
