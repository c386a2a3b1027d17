from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for tracebuilder operations.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has a specific number range for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        VALIDATION_*: Input validation errors (2xxx)
        EXECUTION_*: Runtime errors while applying defaults (4xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_003"

    # Validation errors (2xxx)
    VALIDATION_ERROR = "VALIDATION_001"
    INVALID_ACTION = "VALIDATION_005"

    # Execution errors (4xxx)
    EXECUTION_ERROR = "EXECUTION_001"
    UPDATE_LOOP = "EXECUTION_006"


class BuilderError(Exception):
    """Base exception for all tracebuilder-related errors.

    This exception class uses error codes for categorization
    instead of creating numerous specific exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXECUTION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        """Initialize tracebuilder error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from tracebuilder.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause,
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


# Helper functions for common error scenarios
def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> BuilderError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        BuilderError with CONFIG_INVALID code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return BuilderError(
        message=message,
        error_code=ErrorCode.CONFIG_INVALID,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def invalid_action_error(action: Any, **kwargs) -> BuilderError:
    """Create an error for an action the store does not understand.

    Args:
        action: The rejected action
        **kwargs: Additional error details

    Returns:
        BuilderError with INVALID_ACTION code
    """
    details = kwargs.get('details', {})
    details["action_type"] = type(action).__name__

    return BuilderError(
        message=f"Unsupported builder options action: {type(action).__name__}",
        error_code=ErrorCode.INVALID_ACTION,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def update_loop_error(passes: int, reactions: Optional[list] = None, **kwargs) -> BuilderError:
    """Create an error for reactions that keep re-triggering each other.

    Args:
        passes: Number of passes run before giving up
        reactions: Names of reactions that dispatched in the last pass
        **kwargs: Additional error details

    Returns:
        BuilderError with UPDATE_LOOP code
    """
    details = kwargs.get('details', {})
    details["passes"] = passes
    if reactions:
        details["reactions"] = list(reactions)

    return BuilderError(
        message=f"Defaulting reactions did not settle after {passes} passes",
        error_code=ErrorCode.UPDATE_LOOP,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )
