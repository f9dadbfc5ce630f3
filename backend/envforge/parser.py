# Line classification, key validation, and .env file parsing.
import logging
import os
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from envforge.config import strict_quotes_enabled
from envforge.decoder import WHITESPACE, decode_value
from envforge.errors import EnvLoaderError, ErrorKind

logger = logging.getLogger("envforge")

KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

PathLike = Union[str, os.PathLike]


# Split one raw line into (key, value), or None for lines that carry no pair.
def classify_line(line: str, strict: bool = False) -> Optional[Tuple[str, str]]:
    line = line.strip(WHITESPACE)
    if not line or line.startswith("#"):
        return None
    if "=" not in line:
        return None
    key, raw_value = line.split("=", 1)
    key = key.strip(WHITESPACE)
    try:
        value = decode_value(raw_value, strict=strict)
    except EnvLoaderError as exc:
        exc.key = key
        raise
    return key, value


# Reject keys outside the [A-Za-z_][A-Za-z0-9_]* naming grammar.
def validate_key(key: str) -> None:
    if not KEY_PATTERN.fullmatch(key):
        raise EnvLoaderError(ErrorKind.INVALID_KEY, f"Invalid key: {key}", key=key)


# Split file content on "\n" only, dropping one trailing "\r" per line.
def split_lines(content: str) -> List[str]:
    return [
        line[:-1] if line.endswith("\r") else line for line in content.split("\n")
    ]


# Check the path and return its non-empty lines with 1-based line numbers.
def read_lines(path: PathLike) -> List[Tuple[int, str]]:
    source = Path(path)
    if not source.exists():
        raise EnvLoaderError(
            ErrorKind.NOT_FOUND, f"File not found: {source}", path=str(source)
        )
    if not source.is_file():
        raise EnvLoaderError(
            ErrorKind.NOT_FOUND, f"Not a file: {source}", path=str(source)
        )
    if not os.access(source, os.R_OK):
        raise EnvLoaderError(
            ErrorKind.NOT_READABLE, f"File not readable: {source}", path=str(source)
        )

    try:
        content = source.read_text(encoding="utf-8-sig")
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise EnvLoaderError(
            ErrorKind.NOT_FOUND, f"File not found: {source}", path=str(source)
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvLoaderError(
            ErrorKind.NOT_READABLE,
            f"File not readable: {source} ({exc})",
            path=str(source),
        ) from exc

    return [
        (number, line)
        for number, line in enumerate(split_lines(content), start=1)
        if line
    ]


# Parse a .env file into an ordered mapping without touching the environment.
def parse_file(path: PathLike, strict: Optional[bool] = None) -> Dict[str, str]:
    if strict is None:
        strict = strict_quotes_enabled()

    result: Dict[str, str] = {}
    for number, line in read_lines(path):
        try:
            parsed = classify_line(line, strict=strict)
            if parsed is not None:
                validate_key(parsed[0])
        except EnvLoaderError as exc:
            raise EnvLoaderError(
                exc.kind,
                f"{exc.detail} ({path}, line {number})",
                path=str(path),
                key=exc.key,
                line=number,
            ) from exc
        if parsed is None:
            logger.debug("Skipping line %d of %s", number, path)
            continue

        key, value = parsed
        result[key] = value

    logger.debug("Parsed %d keys from %s", len(result), path)
    return result


parse = parse_file
