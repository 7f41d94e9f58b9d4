"""
Custom Exceptions for the Smack rule library

Provides a unified exception hierarchy for the rule store,
the rule file codec and label validation.
"""

from typing import Optional, Dict, Any

from .constants import ErrorCodes, SMACK_LABEL_LEN


class SmackRulesError(Exception):
    """
    Base exception for all rule library errors.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCodes.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured reporting"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# RULE STORE ERRORS
# =============================================================================

class LabelRangeError(SmackRulesError):
    """Raised when rule labels exceed the maximum label length"""

    def __init__(
        self,
        subject: str,
        object: str,
        max_length: int = SMACK_LABEL_LEN
    ):
        super().__init__(
            message=f"Labels exceed {max_length} bytes: {subject!r}, {object!r}",
            error_code=ErrorCodes.LABEL_RANGE,
            details={
                "subject": subject,
                "object": object,
                "max_length": max_length,
            }
        )


class RuleStoreClosedError(SmackRulesError):
    """Raised when a destroyed rule store is used"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"Rule store used after destroy: {operation}",
            error_code=ErrorCodes.STORE_CLOSED,
            details={"operation": operation}
        )


# =============================================================================
# RULE FILE ERRORS
# =============================================================================

class RuleFormatError(SmackRulesError):
    """Raised when a rule file line does not hold exactly three tokens"""

    def __init__(
        self,
        line_number: int,
        token_count: int,
        path: Optional[str] = None
    ):
        details: Dict[str, Any] = {
            "line_number": line_number,
            "token_count": token_count,
        }
        if path:
            details["path"] = path
        super().__init__(
            message=f"Malformed rule at line {line_number}: expected 3 tokens, got {token_count}",
            error_code=ErrorCodes.RULE_FORMAT,
            details=details
        )
        self.line_number = line_number
        self.token_count = token_count
        self.path = path


class RuleFileError(SmackRulesError):
    """Raised when a rule file cannot be opened, read or written"""

    def __init__(
        self,
        path: str,
        operation: str,
        errno: Optional[int] = None,
        reason: Optional[str] = None
    ):
        details: Dict[str, Any] = {"path": path, "operation": operation}
        if errno is not None:
            details["errno"] = errno
        if reason:
            details["reason"] = reason
        super().__init__(
            message=f"Cannot {operation} rule file: {path}",
            error_code=ErrorCodes.RULE_FILE,
            details=details
        )
        self.path = path
        self.errno = errno


# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class ValidationError(SmackRulesError):
    """Raised when input validation fails"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, ErrorCodes.VALIDATION_ERROR, details)
