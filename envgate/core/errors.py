"""Error Hierarchy — typed, categorized exceptions for every envgate failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error names the offending variables in `variables` (possibly empty)
    - The three validation failures are CRITICAL: startup must halt
    - to_response() produces the REST envelope used by the FastAPI handler

Design Decisions:
    - Single hierarchy with EnvGateError base: callers catch one type
    - Structured payload (issues / violation) over log parsing: tests and
      callers inspect fields, the message is for humans only
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from datetime import datetime, timezone

from envgate.core.domain_types import EnvScope
from envgate.core.validation_result import ExposureViolation, FieldIssue


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    NAMING_CONVENTION = "naming_convention"
    ACCESS = "access"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    scope: EnvScope | None = None


def _scoped(context: ErrorContext | None, scope: EnvScope) -> ErrorContext:
    """Copy of the caller's context with scope set; the caller's object is untouched."""
    if context is None:
        return ErrorContext(scope=scope)
    return replace(context, scope=scope)


class EnvGateError(Exception):
    """Base exception for all envgate errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        variables: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.variables = variables

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "variables": list(self.variables),
                "context": {
                    "scope": self.context.scope.value if self.context.scope else None,
                },
            }
        }


# ─── Startup Failures (fatal) ───────────────────────────────────

class SchemaValidationFailure(EnvGateError):
    """One or both schemas rejected the environment."""
    def __init__(
        self, message: str, issues: tuple[FieldIssue, ...],
        context: ErrorContext | None = None,
    ):
        # Dedupe: a variable can fail several constraints at once
        variables = tuple(dict.fromkeys(i.variable for i in issues))
        super().__init__(
            message, "SCHEMA_VALIDATION_FAILED", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, context, 500, variables,
        )
        self.issues = issues


class ServerExposureViolation(EnvGateError):
    """Server variables named with the exposure prefix would leak to the client bundle."""
    def __init__(
        self, message: str, violation: ExposureViolation,
        context: ErrorContext | None = None,
    ):
        ctx = _scoped(context, EnvScope.SERVER)
        super().__init__(
            message, "SERVER_EXPOSURE_VIOLATION", ErrorCategory.NAMING_CONVENTION,
            ErrorSeverity.CRITICAL, ctx, 500, violation.variables,
        )
        self.violation = violation


class ClientExposureViolation(EnvGateError):
    """Client variables without the exposure prefix would be empty in the browser."""
    def __init__(
        self, message: str, violation: ExposureViolation,
        context: ErrorContext | None = None,
    ):
        ctx = _scoped(context, EnvScope.CLIENT)
        super().__init__(
            message, "CLIENT_EXPOSURE_VIOLATION", ErrorCategory.NAMING_CONVENTION,
            ErrorSeverity.CRITICAL, ctx, 500, violation.variables,
        )
        self.violation = violation


# ─── Runtime Errors ─────────────────────────────────────────────

class ServerVariableAccessError(EnvGateError, KeyError):
    """A server-only variable was read through a client view."""
    def __init__(self, variable: str, context: ErrorContext | None = None):
        ctx = _scoped(context, EnvScope.CLIENT)
        super().__init__(
            f"Attempted to access server-side environment variable "
            f"'{variable}' on the client",
            "SERVER_VARIABLE_ACCESS", ErrorCategory.ACCESS,
            ErrorSeverity.ERROR, ctx, 403, (variable,),
        )
        self.variable = variable


class EnvironmentNotInitializedError(EnvGateError):
    """The validated environment was requested before startup produced it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Validated environment is not initialized. "
            "Run load_environment() during startup first.",
            "ENV_NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
