# Merge parsed .env values into an environment store.
import logging
import os
from typing import Iterable, MutableMapping, Optional, Union

from envforge.errors import EnvLoaderError, ErrorKind
from envforge.parser import PathLike, parse_file
from envforge.schemas import LoadOptions

logger = logging.getLogger("envforge")

RequiredKeys = Union[str, Iterable[str]]


# Parse the file, apply its values, then enforce required keys.
def load(
    path: PathLike,
    overwrite: bool = False,
    required: RequiredKeys = (),
    environ: Optional[MutableMapping[str, str]] = None,
    strict: Optional[bool] = None,
) -> None:
    values = parse_file(path, strict=strict)
    options = LoadOptions(overwrite=overwrite, required=required)
    store = os.environ if environ is None else environ

    for key, value in values.items():
        if options.overwrite or key not in store:
            store[key] = value
        else:
            logger.debug("Keeping existing value for %s", key)

    for key in options.required:
        if key not in store:
            raise EnvLoaderError(
                ErrorKind.MISSING_REQUIRED_KEY,
                f"Missing required key: {key}",
                path=str(path),
                key=key,
            )
