from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wem.core.errors import MissingFieldsError


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _is_missing(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(model: BaseModel, names: Iterable[str]) -> list[str]:
    """Wire names of the fields in `names` that are absent or blank."""
    fields = type(model).model_fields
    missing: list[str] = []
    for name in names:
        if _is_missing(getattr(model, name)):
            info = fields[name]
            alias = info.validation_alias if isinstance(info.validation_alias, str) else None
            missing.append(alias or info.alias or name)
    return missing


def require_fields(model: BaseModel, names: Iterable[str], message: str | None = None) -> None:
    missing = missing_fields(model, names)
    if missing:
        raise MissingFieldsError(missing, message)
