from drawodds.models.calculation import (
    CalculationDetails,
    CalculationInput,
    CalculationResult,
    CardOdds,
    format_percent,
)
from drawodds.models.card import Affects, CalculationPolicy, CardDefinition
from drawodds.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    CardNotFoundError,
    FailureDetail,
    FailureKind,
    InputValidationError,
    KnownError,
    OutcomeType,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)

__all__ = [
    "Affects",
    "ApiResponse",
    "CalculationDetails",
    "CalculationInput",
    "CalculationPolicy",
    "CalculationResult",
    "CardDefinition",
    "CardNotFoundError",
    "CardOdds",
    "FailureDetail",
    "FailureKind",
    "InputValidationError",
    "KnownError",
    "OutcomeType",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "create_success",
    "create_unknown_failure",
    "finalize_response",
    "format_percent",
    "is_finalized",
]
