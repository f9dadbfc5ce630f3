# FastAPI lifespan hook that loads a .env file on startup.
import logging
from contextlib import asynccontextmanager
from typing import MutableMapping, Optional

from fastapi import FastAPI

from envforge.env import load_environment
from envforge.loader import RequiredKeys
from envforge.parser import PathLike

logger = logging.getLogger("envforge")


# Build a lifespan for FastAPI(lifespan=...) that fails startup on load errors.
def env_lifespan(
    path: Optional[PathLike] = None,
    overwrite: bool = False,
    required: RequiredKeys = (),
    environ: Optional[MutableMapping[str, str]] = None,
):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = load_environment(
            path, overwrite=overwrite, required=required, environ=environ
        )
        app.state.env_file = loaded
        logger.info("Loaded environment from %s", loaded)
        yield

    return lifespan
