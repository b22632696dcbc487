from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def load_env(env_path: Path | None = None) -> None:
    """
    Load a .env file into the process environment.

    Existing environment variables win over .env values.
    No-op when the file is missing.
    """
    # Prefer repo-root .env
    path = env_path or Path(".env")
    if path.is_file():
        load_dotenv(dotenv_path=path, override=False)
        return

    # Fallback: common pattern ".env/.env"
    alt = path / ".env"
    if alt.is_file():
        load_dotenv(dotenv_path=alt, override=False)
