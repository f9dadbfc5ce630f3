# Pydantic models for loader options.
from typing import Any, Iterable, List, Tuple

from pydantic import BaseModel, field_validator


# Split a comma-separated string or trim an iterable of key names.
def normalize_required(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        parts: Iterable[Any] = value.split(",")
    else:
        parts = value

    keys: List[str] = []
    for part in parts:
        if not isinstance(part, str):
            raise ValueError("required keys must be strings")
        name = part.strip()
        if name and name not in keys:
            keys.append(name)
    return tuple(keys)


# Options accepted by load(); required keys keep the caller's order.
class LoadOptions(BaseModel):
    overwrite: bool = False
    required: Tuple[str, ...] = ()

    @field_validator("required", mode="before")
    @classmethod
    def _split_required(cls, value: Any) -> Tuple[str, ...]:
        return normalize_required(value)
