# Environment loading helpers.
from pathlib import Path
from typing import MutableMapping, Optional

from dotenv import find_dotenv

from envforge.config import get_env_filename
from envforge.errors import EnvLoaderError, ErrorKind
from envforge.loader import RequiredKeys, load
from envforge.parser import PathLike


# Walk up from the working directory to the nearest .env file.
def find_env_file(filename: Optional[str] = None) -> Path:
    name = filename or get_env_filename()
    found = find_dotenv(filename=name, usecwd=True)
    if not found:
        raise EnvLoaderError(ErrorKind.NOT_FOUND, f"File not found: {name}", path=name)
    return Path(found)


# Load an explicit or discovered .env file and return the path used.
def load_environment(
    dotenv_path: Optional[PathLike] = None,
    overwrite: bool = False,
    required: RequiredKeys = (),
    environ: Optional[MutableMapping[str, str]] = None,
) -> Path:
    path = Path(dotenv_path) if dotenv_path is not None else find_env_file()
    load(path, overwrite=overwrite, required=required, environ=environ)
    return path
