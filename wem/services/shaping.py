from __future__ import annotations

from typing import Any

from wem.core.errors import MalformedResponse


def as_text(value: Any) -> str:
    """Flatten a model-supplied value into display text."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        lines = [as_text(item) for item in value]
        return "\n".join(f"- {line}" for line in lines if line)
    if isinstance(value, dict):
        parts = []
        for key, item in value.items():
            text = as_text(item)
            if text:
                parts.append(f"{key}: {text}")
        return "\n".join(parts)
    return str(value).strip()


def as_string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [text for text in (as_text(item) for item in value) if text]
    text = as_text(value)
    return [text] if text else []


def require_object(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise MalformedResponse("Expected a JSON object from the model")
    return raw
