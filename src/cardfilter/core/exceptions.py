"""
Core Exception Hierarchy for CardFilter

Provides error classification with error codes, recovery suggestions and
context information. Degenerate filter configurations are never errors;
these exceptions cover malformed configuration and misuse of the filter
definition API.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(Enum):
    """Standard error codes for different error categories."""

    # Configuration errors (3000-3999)
    CONFIG_INVALID_FORMAT = 3001
    CONFIG_INVALID_VALUE = 3003
    CONFIG_FILE_NOT_FOUND = 3004
    CONFIG_SCHEMA_VALIDATION = 3006

    # Validation errors (5000-5999)
    VALIDATION_INVALID_INPUT = 5001

    # Filter errors (6000-6999)
    FILTER_DEFINITION_INVALID = 6001
    FILTER_BUILDER_COLLISION = 6002
    FILTER_FROZEN = 6003
    FILTER_UNKNOWN_TYPE = 6004

    # Generic/unknown errors (9000-9999)
    UNKNOWN_ERROR = 9000


@dataclass
class ErrorContext:
    """Contextual information about an error occurrence."""

    operation: str = ""
    filter_name: Optional[str] = None
    file_path: Optional[str] = None
    correlation_id: Optional[str] = None
    user_context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            'operation': self.operation,
            'filter_name': self.filter_name,
            'file_path': self.file_path,
            'correlation_id': self.correlation_id,
            'user_context': self.user_context,
        }


@dataclass
class RecoverySuggestion:
    """Structured recovery suggestion for error resolution."""

    action: str
    description: str
    command: Optional[str] = None
    priority: int = 1  # 1 = highest

    def to_dict(self) -> Dict[str, Any]:
        return {
            'action': self.action,
            'description': self.description,
            'command': self.command,
            'priority': self.priority,
        }


class CardFilterError(Exception):
    """
    Base exception for all CardFilter errors.

    Carries an error code, context and recovery suggestions so the CLI can
    render a helpful message instead of a bare traceback.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        suggestions: Optional[List[RecoverySuggestion]] = None
    ):
        """
        Initialize CardFilter error.

        Args:
            message: Human-readable error description
            error_code: Standardized error code
            context: Contextual information about the error
            cause: Original exception that caused this error
            suggestions: List of recovery suggestions
        """
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.suggestions = suggestions or []

        if not self.context.correlation_id:
            self.context.correlation_id = str(uuid.uuid4())[:8]

    def add_suggestion(self, suggestion: RecoverySuggestion) -> None:
        """Add a recovery suggestion to the error."""
        self.suggestions.append(suggestion)
        self.suggestions.sort(key=lambda s: s.priority)

    def get_user_message(self) -> str:
        """Get user-friendly error message with suggestions."""
        lines = [f"Error: {self.message}"]

        if self.error_code != ErrorCode.UNKNOWN_ERROR:
            lines.append(f"Error Code: {self.error_code.value}")

        if self.suggestions:
            lines.append("\nSuggested solutions:")
            for i, suggestion in enumerate(self.suggestions[:3], 1):
                lines.append(f"  {i}. {suggestion.action}")
                lines.append(f"     {suggestion.description}")
                if suggestion.command:
                    lines.append(f"     Command: {suggestion.command}")

        return "\n".join(lines)

    def get_debug_info(self) -> Dict[str, Any]:
        """Get comprehensive debug information."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code.value,
            'context': self.context.to_dict(),
            'cause': {
                'type': type(self.cause).__name__ if self.cause else None,
                'message': str(self.cause) if self.cause else None
            },
            'suggestions': [s.to_dict() for s in self.suggestions],
        }


class ConfigurationError(CardFilterError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_INVALID_FORMAT,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext()
        if config_key:
            context.user_context['config_key'] = config_key
            context.user_context['config_value'] = config_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)

        if error_code == ErrorCode.CONFIG_FILE_NOT_FOUND:
            self.add_suggestion(RecoverySuggestion(
                action="Check the configuration path",
                description="Pass an existing YAML or JSON file with --config, or omit it to use defaults.",
                command="cardfilter filter --help",
                priority=1
            ))
        elif error_code in (ErrorCode.CONFIG_INVALID_VALUE, ErrorCode.CONFIG_SCHEMA_VALIDATION):
            self.add_suggestion(RecoverySuggestion(
                action="Check configuration values",
                description="Review the configuration file and environment for invalid values.",
                priority=1
            ))


class ValidationError(CardFilterError):
    """Exception for input validation errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_INVALID_INPUT,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext()
        if field_name:
            context.user_context['field_name'] = field_name
            context.user_context['field_value'] = field_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code

        super().__init__(message, **kwargs)


class FilterDefinitionError(CardFilterError):
    """Raised when a composed filter class cannot be defined."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.FILTER_DEFINITION_INVALID,
        **kwargs
    ):
        kwargs['error_code'] = error_code
        super().__init__(message, **kwargs)


class FilterFrozenError(CardFilterError):
    """Raised when a builder method is called on a frozen filter."""

    def __init__(self, message: str, filter_name: Optional[str] = None, **kwargs):
        context = kwargs.get('context') or ErrorContext()
        if filter_name:
            context.filter_name = filter_name

        kwargs['context'] = context
        kwargs['error_code'] = ErrorCode.FILTER_FROZEN

        super().__init__(message, **kwargs)


class UnknownFilterError(CardFilterError):
    """Raised when a filter type name is not registered."""

    def __init__(self, filter_type: str, available: List[str], **kwargs):
        kwargs['error_code'] = ErrorCode.FILTER_UNKNOWN_TYPE
        super().__init__(
            f"Unknown filter type '{filter_type}'. Available types: {', '.join(sorted(available))}",
            **kwargs
        )
        self.filter_type = filter_type
        self.add_suggestion(RecoverySuggestion(
            action="List available filters",
            description="Use one of the registered filter types.",
            command="cardfilter filters",
            priority=1
        ))


# Convenience functions for creating common errors
def config_error(message: str, key: Optional[str] = None, **kwargs) -> ConfigurationError:
    """Create a configuration error."""
    return ConfigurationError(message, config_key=key, **kwargs)


def definition_error(message: str, **kwargs) -> FilterDefinitionError:
    """Create a filter definition error."""
    return FilterDefinitionError(message, **kwargs)
