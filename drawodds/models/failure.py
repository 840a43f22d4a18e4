"""
Failure Explanation Envelope: unified response classification.

This module defines the response envelope that every API endpoint uses
to communicate outcomes to the calculator front end. Every user-visible
failure must be classified and explained.

INVARIANT: No raw 500 errors may reach the front end.

Response types:
- Success: Calculation or lookup completed
- KnownFailure: System knows why it failed (bad input, unknown card)
- UnknownFailure: System does not know why it failed

AUTHORITY BOUNDARY:
All user-visible responses MUST pass through `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    VALIDATION_FAILED = "validation_failed"

    # Resource failures
    NOT_FOUND = "not_found"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )
    field_errors: dict[str, str] | None = Field(
        default=None,
        description="Per-field validation messages, keyed by form field",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope for the calculator API.

    Every response is classified into one of three outcome types,
    ensuring no failure reaches the user unexplained.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    # Set only by finalize_response
    _finalized: bool = PrivateAttr(default=False)

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        field_errors: dict[str, str] | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: Unknown card name, out-of-range form field.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
                field_errors=field_errors,
            ),
        )


# Standard exception types that map to known failures


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized ApiResponse."""
        return finalize_response(
            ApiResponse.known_failure(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            )
        )


class CardNotFoundError(KnownError):
    """Raised when a card name is not in the catalog."""

    def __init__(self, card_name: str):
        self.card_name = card_name
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card '{card_name}' is not supported.",
            suggestion="Choose one of the cards listed by /cards.",
            status_code=404,
        )


class InputValidationError(KnownError):
    """
    Raised when calculator form input fails validation.

    Carries every field-level message so the front end can show them
    next to the offending fields in one pass.
    """

    def __init__(self, field_errors: dict[str, str]):
        self.field_errors = dict(field_errors)
        super().__init__(
            kind=FailureKind.VALIDATION_FAILED,
            message="Please fix the validation errors before calculating.",
            detail=", ".join(sorted(self.field_errors)),
            suggestion="Correct the highlighted fields and try again.",
            status_code=422,
        )

    def to_response(self) -> ApiResponse[Any]:
        return finalize_response(
            ApiResponse.known_failure(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
                field_errors=self.field_errors,
            )
        )


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================
#
# All user-visible responses MUST pass through this boundary.
#
# =============================================================================


# Standard messages: fixed and predictable

STANDARD_MESSAGES: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: (
        "I failed and I don't know why. Try simplifying the request or retrying."
    ),
}

STANDARD_SUGGESTIONS: dict[OutcomeType, str] = {
    OutcomeType.UNKNOWN_FAILURE: "If this persists, please report the issue.",
}


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Every response that passes through this function is guaranteed to:
    1. Have a valid outcome classification
    2. Have appropriate failure details if not successful

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    response._finalized = True

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through the authority boundary."""
    return response._finalized


def create_unknown_failure(
    exception: Exception,
    include_type: bool = True,
) -> ApiResponse[Any]:
    """
    Create an unknown failure response from an exception.

    The message is fixed and cannot be customized.

    Args:
        exception: The exception that caused the failure
        include_type: Whether to include exception type in detail

    Returns:
        A finalized unknown failure response
    """
    detail = None
    if include_type:
        detail = f"{type(exception).__name__}"

    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=STANDARD_MESSAGES[OutcomeType.UNKNOWN_FAILURE],
            detail=detail,
            suggestion=STANDARD_SUGGESTIONS[OutcomeType.UNKNOWN_FAILURE],
        ),
    )

    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    return finalize_response(response)
