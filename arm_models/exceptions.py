"""
Exception hierarchy for arm-models

The open-enum codec never raises. These exceptions cover the layers around
it: reading OpenAPI documents, building enum classes from their schemas,
and loading configuration.
"""

from typing import Any, Dict, Optional


class ArmModelsError(Exception):
    """
    Base exception class for all arm-models errors.

    Carries an error code, a context dictionary and an optional recovery
    suggestion alongside the message.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recovery_suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with error context
            cause: Optional underlying exception that caused this error
            recovery_suggestion: Optional suggestion for error recovery
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.recovery_suggestion = recovery_suggestion

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        result = self.message
        if self.error_code:
            result = f"[{self.error_code}] {result}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            result += f" (context: {context_str})"
        if self.cause:
            result += f" (caused by: {self.cause})"
        if self.recovery_suggestion:
            result += f" (suggestion: {self.recovery_suggestion})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
            "recovery_suggestion": self.recovery_suggestion,
        }


class SchemaError(ArmModelsError):
    """Raised when an enum schema in an OpenAPI document is unusable."""

    def __init__(
        self,
        message: str,
        schema_name: Optional[str] = None,
        location: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = dict(kwargs.get("context") or {})
        if schema_name:
            context["schema_name"] = schema_name
        if location:
            context["location"] = location
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SCHEMA_INVALID")
        super().__init__(message, **kwargs)


class SchemaLoadError(SchemaError):
    """Raised when an OpenAPI document cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs: Any) -> None:
        context = dict(kwargs.get("context") or {})
        if path:
            context["path"] = path
        kwargs["context"] = context
        kwargs.setdefault("error_code", "SCHEMA_LOAD_FAILED")
        kwargs.setdefault(
            "recovery_suggestion",
            "Check that the file exists and is valid JSON or YAML",
        )
        super().__init__(message, **kwargs)


class ConfigError(ArmModelsError):
    """Configuration loading or validation error."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("error_code", "CONFIG_INVALID")
        super().__init__(message, **kwargs)


def wrap_parse_exception(
    exc: Exception, path: str, context: Optional[Dict[str, Any]] = None
) -> SchemaLoadError:
    """
    Wrap a JSON/YAML/IO failure raised while reading a document.

    Args:
        exc: The original exception
        path: Path of the document being read
        context: Optional context information

    Returns:
        SchemaLoadError: Wrapped exception with the path in its context
    """
    if isinstance(exc, OSError):
        return SchemaLoadError(
            f"Cannot read document: {exc}", path=path, context=context, cause=exc
        )
    return SchemaLoadError(
        f"Cannot parse document: {exc}", path=path, context=context, cause=exc
    )
