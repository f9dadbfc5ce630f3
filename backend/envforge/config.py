# Library settings read from the process environment.
import os

TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_ENV_FILE = ".env"


# Whether malformed quoted values should fail instead of falling back.
def strict_quotes_enabled() -> bool:
    return os.getenv("ENVFORGE_STRICT_QUOTES", "").strip().lower() in TRUTHY


# Filename searched for when no explicit .env path is given.
def get_env_filename() -> str:
    return os.getenv("ENVFORGE_ENV_FILE", "").strip() or DEFAULT_ENV_FILE
