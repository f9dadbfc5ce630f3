# Error kinds and the exception raised by parsing and loading.
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    NOT_READABLE = "not_readable"
    INVALID_KEY = "invalid_key"
    MISSING_REQUIRED_KEY = "missing_required_key"
    UNTERMINATED_QUOTE = "unterminated_quote"


# Raised for every parse/load failure; inspect `kind` to tell them apart.
class EnvLoaderError(Exception):
    def __init__(
        self,
        kind: ErrorKind,
        detail: str,
        path: Optional[str] = None,
        key: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.path = path
        self.key = key
        self.line = line

    def __repr__(self) -> str:
        return f"EnvLoaderError(kind={self.kind.name}, detail={self.detail!r})"
