from __future__ import annotations

from typing import Any, Iterable


class WemError(Exception):
    """Base error for everything the API maps to a JSON error body."""

    status_code: int = 500
    code: str = "internal_error"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(WemError):
    status_code = 400
    code = "validation_error"


class MissingFieldsError(ValidationError):
    code = "missing_fields"

    def __init__(self, fields: Iterable[str], message: str | None = None):
        self.fields = list(fields)
        super().__init__(
            message or f"Missing required fields: {', '.join(self.fields)}",
            details={"fields": self.fields},
        )


class UnknownCategoryError(ValidationError):
    code = "unknown_category"

    def __init__(self, category: str, section: str):
        self.category = category
        self.section = section
        super().__init__(
            f"Unknown {section} category: {category!r}",
            details={"category": category, "section": section},
        )


class InferenceError(WemError):
    """The external model call failed or returned something unusable."""

    code = "inference_error"


class MalformedResponse(InferenceError):
    code = "malformed_response"


class RunTerminated(InferenceError):
    code = "run_terminated"

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Run ended with status: {status}", details={"status": status})


class InferenceTimeout(InferenceError):
    code = "inference_timeout"


class InsightGenerationError(WemError):
    """Generic 500 surfaced by insight routes; the cause is only logged."""

    code = "insight_failed"


class MissingContextError(ValidationError):
    code = "missing_context"
