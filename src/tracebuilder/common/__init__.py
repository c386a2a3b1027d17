"""Common utilities and exceptions for tracebuilder.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions inherit from
    BuilderError and include structured error information.

    Defaulting rules never raise: a missing default, an unresolved
    convention or a schema miss degrades to a no-op. Errors are reserved
    for invalid configuration, unknown store actions and reactions that
    never settle.
"""

from tracebuilder.common.exceptions import (
    BuilderError,
    ErrorCode,
    # Helper functions
    configuration_error,
    invalid_action_error,
    update_loop_error,
)

__all__ = [
    # Base Exception and Error Codes
    "BuilderError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "invalid_action_error",
    "update_loop_error",
]
