"""
FeedSig Custom Exceptions
=========================

Exception hierarchy for FeedSig with error codes, context information
and user-facing messages.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for categorizing exceptions."""

    # Configuration errors (C001-C099)
    CONFIG_INVALID = "C001"

    # Content processing errors (P001-P099)
    CONTENT_UNREADABLE = "P001"

    # Resource errors (R001-R099)
    RESOURCE_NOT_FOUND = "R002"
    RESOURCE_UNREADABLE = "R003"
    STOPWORDS_UNAVAILABLE = "R004"

    # System errors (S001-S099)
    SYSTEM_PERMISSION_DENIED = "S002"
    SYSTEM_MEMORY_ERROR = "S004"


class FeedSigError(Exception):
    """Base exception for all FeedSig errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[ErrorCode] = None,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        recoverable: bool = False,
    ):
        """Initialize FeedSig error.

        Args:
            message: Technical error message for logging
            error_code: Categorized error code
            context: Additional context information
            user_message: Message safe to show on the command line
            recoverable: Whether retrying with other input can succeed
        """
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.user_message = user_message or message
        self.recoverable = recoverable

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for structured log records."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code.value if self.error_code else None,
            "error_message": str(self),
            "user_message": self.user_message,
            "context": self.context,
            "recoverable": self.recoverable,
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code.value}] {super().__str__()}"
        return super().__str__()


class ConfigurationError(FeedSigError):
    """Settings could not be loaded or validated."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        context = kwargs.pop("context", {})
        if config_key:
            context["config_key"] = config_key

        super().__init__(
            message=message,
            error_code=kwargs.pop("error_code", ErrorCode.CONFIG_INVALID),
            context=context,
            user_message=kwargs.pop("user_message", f"Configuration error: {message}"),
            **kwargs,
        )


class ResourceError(FeedSigError):
    """Bundled resource loading errors. Never recoverable."""

    def __init__(self, message: str, resource: Optional[str] = None, **kwargs):
        context = kwargs.get("context", {})
        if resource:
            context["resource"] = resource

        super().__init__(
            message=message,
            error_code=kwargs.get("error_code", ErrorCode.RESOURCE_NOT_FOUND),
            context=context,
            user_message=kwargs.get(
                "user_message", f"Required resource unavailable: {resource or message}"
            ),
            recoverable=False,
        )


class StopwordLoadError(ResourceError):
    """The low-value word list could not be loaded."""

    def __init__(self, message: str, resource: Optional[str] = None, **kwargs):
        kwargs.setdefault("error_code", ErrorCode.STOPWORDS_UNAVAILABLE)
        kwargs.setdefault("user_message", "Stopword list could not be loaded")
        super().__init__(message, resource=resource, **kwargs)


class ProcessingError(FeedSigError):
    """Article input that cannot be turned into text."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        """Initialize processing error.

        Args:
            message: Error message
            source: File or URL the article text came from
            **kwargs: Additional arguments for FeedSigError
        """
        context = kwargs.pop("context", {})
        if source:
            context["source"] = source

        super().__init__(
            message=message,
            error_code=kwargs.pop("error_code", ErrorCode.CONTENT_UNREADABLE),
            context=context,
            user_message=kwargs.pop("user_message", f"Cannot process article: {message}"),
            recoverable=kwargs.pop("recoverable", True),
            **kwargs,
        )


def handle_exception(
    exception: Exception,
    logger,
    operation: str,
    context: Optional[Dict[str, Any]] = None,
) -> FeedSigError:
    """Convert arbitrary exceptions to FeedSig exceptions and log them.

    Args:
        exception: Original exception
        logger: Logger instance for error logging
        operation: Operation that was being performed
        context: Additional context information

    Returns:
        The FeedSig exception describing the failure
    """
    context = context or {}
    context["operation"] = operation
    context["original_exception_type"] = type(exception).__name__

    if isinstance(exception, FeedSigError):
        error = exception
    elif isinstance(exception, PermissionError):
        error = FeedSigError(
            message=f"Permission denied during {operation}: {exception}",
            error_code=ErrorCode.SYSTEM_PERMISSION_DENIED,
            context=context,
            user_message="Access denied",
        )
    elif isinstance(exception, FileNotFoundError):
        error = ResourceError(
            message=f"Required file not found during {operation}: {exception}",
            context=context,
            user_message="Required file missing",
        )
    elif isinstance(exception, MemoryError):
        error = FeedSigError(
            message=f"Memory exhausted during {operation}: {exception}",
            error_code=ErrorCode.SYSTEM_MEMORY_ERROR,
            context=context,
            user_message="System resources exhausted",
            recoverable=True,
        )
    else:
        error = FeedSigError(
            message=f"Unexpected error during {operation}: {exception}",
            context=context,
            user_message="An unexpected error occurred",
            recoverable=True,
        )

    logger.error(f"Operation '{operation}' failed", extra=error.to_dict())
    return error


def get_user_friendly_message(exception: Exception) -> str:
    """Get a message for any exception that is safe to print."""
    if isinstance(exception, FeedSigError):
        return exception.user_message

    return "An unexpected error occurred. Please try again later."
