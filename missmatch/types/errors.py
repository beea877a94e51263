"""
Structured error handling for MissMatch.

Every failure surfaced by the library derives from MissMatchError, which
carries an internal error code, a severity, a user-facing message and an
ErrorContext describing where in a pattern things went wrong.

Structural mismatches (wrong type, missing member, short list) are never
errors: they are ordinary failed MatchOutcomes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from missmatch.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Pattern Errors (1000-1999)
    PARSE_FAILED = 1001
    COMPILE_FAILED = 1002

    # Dispatch Errors (2000-2999)
    NON_EXHAUSTIVE = 2001

    # Input Errors (3000-3999)
    DECODE_FAILED = 3001

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    pattern: str | None = None
    position: int | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class MissMatchError(Exception):
    """Base error class for MissMatch."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.pattern is not None:
            parts.append(f"   Pattern: {self.context.pattern!r}")
            if self.context.position is not None:
                # caret under the offending character
                parts.append(f"            {' ' * (self.context.position + 1)}^")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "pattern": self.context.pattern,
                "position": self.context.position,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ParseError(MissMatchError):
    """Malformed pattern text.

    Attributes:
        position: Index into the pattern where parsing stopped.
        reason: What was expected or what was found instead.
    """

    def __init__(
        self,
        position: int,
        reason: str,
        pattern: str | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PARSE_FAILED,
            message=f"{reason} at position {position}",
            user_message=f"Invalid pattern: {reason}.",
            severity=ErrorSeverity.HIGH,
            context=ErrorContext(
                operation="parse",
                pattern=pattern,
                position=position,
                component="parser",
            ),
        )
        self.position = position
        self.reason = reason


class CompileError(MissMatchError):
    """An AST node of unknown kind reached the compiler.

    Only a parser/compiler mismatch can produce this.
    """

    def __init__(self, node_kind: object) -> None:
        super().__init__(
            code=ErrorCode.COMPILE_FAILED,
            message=f"Unknown AST node kind: {node_kind!r}",
            user_message="Internal error while compiling a pattern.",
            severity=ErrorSeverity.CRITICAL,
            context=ErrorContext(operation="compile", component="compiler"),
        )
        self.node_kind = node_kind


class NonExhaustiveMatchError(MissMatchError):
    """No case matched the candidate.

    Supply ``_`` as the last pattern to get a catch-all case instead.
    """

    def __init__(self, candidate: Any, patterns: list[str]) -> None:
        super().__init__(
            code=ErrorCode.NON_EXHAUSTIVE,
            message=f"Non-exhaustive patterns: none of {patterns!r} matched {candidate!r}",
            user_message="No pattern matched the value.",
            severity=ErrorSeverity.MEDIUM,
            context=ErrorContext(
                operation="match",
                component="dispatcher",
                additional_info={"patterns": list(patterns)},
            ),
        )
        self.candidate = candidate
        self.patterns = list(patterns)


class DecodeError(MissMatchError):
    """A serialized candidate could not be decoded."""

    def __init__(
        self,
        message: str,
        fmt: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.DECODE_FAILED,
            message=message,
            user_message=f"Could not decode {fmt} input.",
            severity=ErrorSeverity.MEDIUM,
            context=ErrorContext(
                operation="decode",
                component="decoding",
                additional_info={"format": fmt},
            ),
            original_error=original_error,
        )
        self.format = fmt


class ConfigurationError(MissMatchError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
        )
