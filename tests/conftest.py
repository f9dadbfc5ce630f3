# Pytest fixtures for writing .env files and isolating the environment.
import pytest


# Write .env content into a temporary directory and return its path.
@pytest.fixture()
def write_env(tmp_path):
    # Create the file under the given name so several can coexist.
    def _write(content: str, name: str = ".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# Provide an isolated in-memory environment store.
@pytest.fixture()
def environ():
    return {}


# Keep library settings from leaking in from the developer's shell.
@pytest.fixture(autouse=True)
def clear_envforge_settings(monkeypatch):
    monkeypatch.delenv("ENVFORGE_STRICT_QUOTES", raising=False)
    monkeypatch.delenv("ENVFORGE_ENV_FILE", raising=False)
