"""Library settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path.cwd() / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Values read once at import from the process environment (and a ``.env``
    file in the working directory, if one exists).

    Only ``FaceitAPIClient.from_settings`` reads the API key from here; a
    client constructed directly takes its key from the caller.
    """

    FACEIT_API_KEY: str = os.getenv('FACEIT_API_KEY', '')

    # ── HTTP ───────────────────────────────────────────────────────────────
    BASE_URL:        str   = os.getenv('FACEIT_BASE_URL', 'https://open.faceit.com/data/v4')
    REQUEST_TIMEOUT: float = float(os.getenv('FACEIT_REQUEST_TIMEOUT', '30'))
    HTTP2:           bool  = os.getenv('FACEIT_HTTP2', 'false').strip().lower() == 'true'

    # ── Logging ────────────────────────────────────────────────────────────
    LOG_LEVEL: str  = os.getenv('FACEIT_LOG_LEVEL', 'INFO')
    LOG_DIR:   Optional[Path] = Path(os.environ["FACEIT_LOG_DIR"]) if os.getenv("FACEIT_LOG_DIR") else None

    @classmethod
    def validate(cls) -> None:
        if not cls.FACEIT_API_KEY:
            raise ValueError("FACEIT_API_KEY must be set in the environment or .env")


settings = Settings()
