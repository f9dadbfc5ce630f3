# Value decoder for quotes, escapes, and inline comments.
import re

from envforge.errors import EnvLoaderError, ErrorKind

# Characters removed when trimming keys, values, and lines.
WHITESPACE = " \t\n\r\0\x0b"

DOUBLE_QUOTED = re.compile(r'"(.*?)"\s*(#.*)?', re.ASCII)
SINGLE_QUOTED = re.compile(r"'(.*?)'\s*(#.*)?", re.ASCII)
ESCAPE_SEQUENCE = re.compile(
    r"((?:\\(?:x[0-9A-Fa-f]{1,2}|[0-7]{1,3}))+)|\\(.)", re.DOTALL
)
BYTE_ESCAPE = re.compile(r"\\(?:x([0-9A-Fa-f]{1,2})|([0-7]{1,3}))")
INLINE_COMMENT = " #"

SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}


# Turn a run of \xHH / octal escapes into bytes and decode them as UTF-8.
def _decode_bytes(run: str) -> str:
    data = bytes(
        int(hex_digits, 16) if hex_digits else int(octal, 8) & 0xFF
        for hex_digits, octal in BYTE_ESCAPE.findall(run)
    )
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def _replace_escape(match: re.Match) -> str:
    if match.group(1):
        return _decode_bytes(match.group(1))
    token = match.group(2)
    return SIMPLE_ESCAPES.get(token, token)


# Interpret C-style backslash escapes; a trailing lone backslash is kept.
def unescape(text: str) -> str:
    return ESCAPE_SEQUENCE.sub(_replace_escape, text)


# Drop an inline comment that follows whitespace in an unquoted value.
def strip_inline_comment(value: str) -> str:
    index = value.find(INLINE_COMMENT)
    if index == -1:
        return value
    return value[:index].rstrip(WHITESPACE)


# Decode the raw text after the first "=" of a line into its string value.
def decode_value(raw: str, strict: bool = False) -> str:
    value = raw.strip(WHITESPACE)
    if not value:
        return ""

    if value.startswith('"'):
        match = DOUBLE_QUOTED.fullmatch(value)
        if match:
            return unescape(match.group(1))
        if strict:
            raise EnvLoaderError(
                ErrorKind.UNTERMINATED_QUOTE, f"Unterminated quote: {value}"
            )
    elif value.startswith("'"):
        match = SINGLE_QUOTED.fullmatch(value)
        if match:
            return match.group(1)
        if strict:
            raise EnvLoaderError(
                ErrorKind.UNTERMINATED_QUOTE, f"Unterminated quote: {value}"
            )

    return strip_inline_comment(value)
