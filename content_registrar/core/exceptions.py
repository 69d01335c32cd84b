"""
┌──────────────────────────────────────────────────────────────┐
│                 Registration Error Handling                  │
│                                                              │
│  [register()] → [Validate] → [Duplicate?] → [Raise] → [Abort]│
│                                                              │
│  Setup time:    DuplicateRegistration → InvalidRegistration  │
│  Dispatch time: missing type → warning → empty render        │
└──────────────────────────────────────────────────────────────┘

Exception classes for the content registrar
Flow: Setup error → Classification → Logging → Setup aborted
"""

from typing import Any, Dict, Optional
import structlog

logger = structlog.get_logger()


class ContentRegistrarException(Exception):
    """
    Base exception class for the content registrar.
    
    Exception Handling Flow:
    1. error_occurred() → Capture error details and context
    2. log_error() → Record error with structured logging
    3. propagate() → Abort the setup phase that raised it
    
    Features:
    - Structured error context
    - Detailed error messages
    - Optional error codes
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize base exception."""
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        
        # Log the exception
        logger.error(
            "Content registrar exception occurred",
            error_type=self.__class__.__name__,
            message=message,
            error_code=error_code,
            details=details
        )


class DuplicateRegistrationError(ContentRegistrarException):
    """
    Raised when a component type is registered twice.
    
    The registration already held by the registry is kept untouched.
    """
    
    def __init__(
        self,
        component_type: str,
        error_code: str = "DUPLICATE_REGISTRATION"
    ):
        """Initialize duplicate registration error."""
        super().__init__(
            message=f"{component_type} has already been registered",
            error_code=error_code,
            details={"component_type": component_type},
        )
        self.component_type = component_type


class InvalidRegistrationError(ContentRegistrarException):
    """
    Raised when a registration or middleware cannot be accepted.
    
    Invalid Registration Flow:
    1. Registration shape check fails
    2. Capture offending field
    3. Abort setup
    """
    
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        error_code: str = "INVALID_REGISTRATION"
    ):
        """Initialize invalid registration error."""
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["invalid_value"] = repr(value)
            
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
        self.field = field
        self.value = value


class Errors:
    """Messages for conditions that are reported but not raised."""
    
    @staticmethod
    def missing(component_type: str) -> str:
        return f"Component '{component_type}' has not been registered"
