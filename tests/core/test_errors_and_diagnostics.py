"""Errors & Diagnostics — tests for the error hierarchy and diagnostic text.

Tests cover:
    - Each failure kind has its code, category, severity and offending names
    - SchemaValidationFailure dedupes variables that fail several constraints
    - Passing an ErrorContext never mutates the caller's object
    - to_response() envelope shape
    - Failure refuses an empty issue list
    - Diagnostics: one context line plus one line per offending variable
"""

from dataclasses import fields

import pytest

from envgate.core.domain_types import EnvScope
from envgate.core.errors import (
    ClientExposureViolation, EnvGateError, EnvironmentNotInitializedError,
    ErrorCategory, ErrorContext, ErrorSeverity, SchemaValidationFailure,
    ServerExposureViolation, ServerVariableAccessError,
)
from envgate.core.format_diagnostics import (
    format_exposure_violation, format_schema_failure,
)
from envgate.core.validation_result import ExposureViolation, Failure, FieldIssue

P = "NEXT_PUBLIC_"


def _issues() -> tuple[FieldIssue, ...]:
    return (
        FieldIssue("NODE_ENV", "Field required", EnvScope.SERVER, "missing"),
        FieldIssue("PORT", "Input should be a valid integer", EnvScope.SERVER, "int_parsing"),
        FieldIssue("PORT", "second constraint", EnvScope.SERVER),
        FieldIssue("NEXT_PUBLIC_URL", "Field required", EnvScope.CLIENT, "missing"),
    )


# ─── Error hierarchy ─────────────────────────────────────────────

def test_schema_validation_failure_fields():
    err = SchemaValidationFailure("bad env", _issues())
    assert isinstance(err, EnvGateError)
    assert err.code == "SCHEMA_VALIDATION_FAILED"
    assert err.category == ErrorCategory.VALIDATION
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.variables == ("NODE_ENV", "PORT", "NEXT_PUBLIC_URL")
    assert len(err.issues) == 4
    assert str(err) == "bad env"


def test_server_exposure_violation_fields():
    violation = ExposureViolation(EnvScope.SERVER, ("NEXT_PUBLIC_SECRET",))
    err = ServerExposureViolation("leak", violation)
    assert err.code == "SERVER_EXPOSURE_VIOLATION"
    assert err.category == ErrorCategory.NAMING_CONVENTION
    assert err.variables == ("NEXT_PUBLIC_SECRET",)
    assert err.context.scope == EnvScope.SERVER
    assert err.violation is violation


def test_client_exposure_violation_fields():
    violation = ExposureViolation(EnvScope.CLIENT, ("API_URL",))
    err = ClientExposureViolation("hidden", violation)
    assert err.code == "CLIENT_EXPOSURE_VIOLATION"
    assert err.variables == ("API_URL",)
    assert err.context.scope == EnvScope.CLIENT


def test_caller_context_is_not_mutated():
    ctx = ErrorContext()
    server = ServerExposureViolation(
        "leak", ExposureViolation(EnvScope.SERVER, ("NEXT_PUBLIC_SECRET",)), ctx,
    )
    client = ClientExposureViolation(
        "hidden", ExposureViolation(EnvScope.CLIENT, ("API_URL",)), ctx,
    )
    assert ctx.scope is None
    assert server.context.scope == EnvScope.SERVER
    assert client.context.scope == EnvScope.CLIENT
    assert server.context.timestamp == ctx.timestamp


def test_access_error_copies_context():
    ctx = ErrorContext(scope=EnvScope.SERVER)
    err = ServerVariableAccessError("DATABASE_URL", ctx)
    assert err.context.scope == EnvScope.CLIENT
    assert ctx.scope == EnvScope.SERVER


def test_to_response_envelope():
    violation = ExposureViolation(EnvScope.CLIENT, ("API_URL",))
    body = ClientExposureViolation("hidden", violation).to_response()
    error = body["error"]
    assert error["code"] == "CLIENT_EXPOSURE_VIOLATION"
    assert error["message"] == "hidden"
    assert error["category"] == "naming_convention"
    assert error["severity"] == "critical"
    assert error["variables"] == ["API_URL"]
    assert error["context"]["scope"] == "client"
    assert "timestamp" in error


def test_not_initialized_has_no_variables():
    err = EnvironmentNotInitializedError()
    assert err.code == "ENV_NOT_INITIALIZED"
    assert err.variables == ()
    assert err.to_response()["error"]["context"]["scope"] is None


def test_failure_requires_issues():
    with pytest.raises(ValueError):
        Failure(())


def test_error_context_and_severity_vocabulary():
    assert [f.name for f in fields(ErrorContext)] == ["timestamp", "scope"]
    assert {s.value for s in ErrorSeverity} == {"error", "critical"}


# ─── Diagnostics ─────────────────────────────────────────────────

def test_format_schema_failure_lists_every_issue():
    text = format_schema_failure(_issues())
    lines = text.splitlines()
    assert lines[0] == "Invalid environment variables:"
    assert len(lines) == 5
    assert "  - NODE_ENV (server): Field required" in lines
    assert "  - NEXT_PUBLIC_URL (client): Field required" in lines


def test_format_server_exposure():
    text = format_exposure_violation(
        ExposureViolation(EnvScope.SERVER, ("NEXT_PUBLIC_SECRET", "NEXT_PUBLIC_KEY")), P,
    )
    lines = text.splitlines()
    assert "exposing" in lines[0]
    assert lines[1].startswith("  - NEXT_PUBLIC_SECRET")
    assert lines[2].startswith("  - NEXT_PUBLIC_KEY")


def test_format_client_exposure():
    text = format_exposure_violation(
        ExposureViolation(EnvScope.CLIENT, ("API_URL",)), P,
    )
    assert "must start with 'NEXT_PUBLIC_'" in text
    assert "  - API_URL: client variable missing 'NEXT_PUBLIC_' prefix" in text
